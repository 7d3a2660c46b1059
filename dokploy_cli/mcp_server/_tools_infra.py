"""Infrastructure tools: projects, environments, domains, servers, settings,
SSH keys, ports, basic auth, certificates (9 tools)."""

from __future__ import annotations

from typing import Literal

from dokploy_cli.mcp_server._core import _call, _finalize_tool_result


def dokploy_project(
    action: Literal["list", "get", "create", "update", "remove", "duplicate"],
    project_id: str | None = None,
    name: str | None = None,
    description: str | None = None,
    source_environment_id: str | None = None,
    include_services: bool | None = None,
    duplicate_in_same_project: bool | None = None,
) -> dict:
    """Manage projects. duplicate: source_environment_id+name."""
    return _finalize_tool_result(
        _call(
            "project",
            action,
            project_id=project_id,
            name=name,
            description=description,
            source_environment_id=source_environment_id,
            include_services=include_services,
            duplicate_in_same_project=duplicate_in_same_project,
        )
    )


def dokploy_environment(
    action: Literal["create", "get", "list", "update", "remove", "duplicate"],
    environment_id: str | None = None,
    project_id: str | None = None,
    name: str | None = None,
    description: str | None = None,
) -> dict:
    """Manage project environments. list: project_id."""
    return _finalize_tool_result(
        _call(
            "environment",
            action,
            environment_id=environment_id,
            project_id=project_id,
            name=name,
            description=description,
        )
    )


def dokploy_domain(
    action: Literal[
        "create", "list", "get", "update", "delete", "generate", "canGenerateTraefikMe", "validate"
    ],
    domain_id: str | None = None,
    host: str | None = None,
    application_id: str | None = None,
    compose_id: str | None = None,
    service_name: str | None = None,
    path: str | None = None,
    port: int | None = None,
    https: bool | None = None,
    certificate_type: str | None = None,
    domain_type: str | None = None,
    app_name: str | None = None,
    server_id: str | None = None,
    domain: str | None = None,
    server_ip: str | None = None,
) -> dict:
    """Manage domains. list: application_id or compose_id (application wins)."""
    return _finalize_tool_result(
        _call(
            "domain",
            action,
            domain_id=domain_id,
            host=host,
            application_id=application_id,
            compose_id=compose_id,
            service_name=service_name,
            path=path,
            port=port,
            https=https,
            certificate_type=certificate_type,
            domain_type=domain_type,
            app_name=app_name,
            server_id=server_id,
            domain=domain,
            server_ip=server_ip,
        )
    )


def dokploy_server(
    action: Literal["list", "get", "create", "update", "remove", "count", "publicIp", "getMetrics"],
    server_id: str | None = None,
    name: str | None = None,
    description: str | None = None,
    ip_address: str | None = None,
    port: int | None = None,
    username: str | None = None,
    ssh_key_id: str | None = None,
    server_type: str | None = None,
    url: str | None = None,
    token: str | None = None,
    data_points: str | None = None,
) -> dict:
    """Manage remote servers. getMetrics: url+token."""
    return _finalize_tool_result(
        _call(
            "server",
            action,
            server_id=server_id,
            name=name,
            description=description,
            ip_address=ip_address,
            port=port,
            username=username,
            ssh_key_id=ssh_key_id,
            server_type=server_type,
            url=url,
            token=token,
            data_points=data_points,
        )
    )


def dokploy_settings(
    action: Literal["health", "version", "ip", "clean", "reload"],
    clean_type: Literal["all", "images"] | None = None,
    reload_target: Literal["server", "traefik"] | None = None,
    server_id: str | None = None,
) -> dict:
    """System settings. clean defaults to all; reload defaults to the Dokploy server."""
    return _finalize_tool_result(
        _call(
            "settings",
            action,
            clean_type=clean_type,
            reload_target=reload_target,
            server_id=server_id,
        )
    )


def dokploy_ssh_key(
    action: Literal["create", "list", "remove", "generate"],
    ssh_key_id: str | None = None,
    name: str | None = None,
    description: str | None = None,
    private_key: str | None = None,
    public_key: str | None = None,
    type: Literal["rsa", "ed25519"] | None = None,
) -> dict:
    """Manage SSH keys. generate: type defaults to ed25519."""
    return _finalize_tool_result(
        _call(
            "sshKey",
            action,
            ssh_key_id=ssh_key_id,
            name=name,
            description=description,
            private_key=private_key,
            public_key=public_key,
            type=type,
        )
    )


def dokploy_port(
    action: Literal["create", "delete"],
    port_id: str | None = None,
    application_id: str | None = None,
    published_port: int | None = None,
    target_port: int | None = None,
    protocol: str | None = None,
    publish_mode: str | None = None,
) -> dict:
    """Manage application port mappings."""
    return _finalize_tool_result(
        _call(
            "port",
            action,
            port_id=port_id,
            application_id=application_id,
            published_port=published_port,
            target_port=target_port,
            protocol=protocol,
            publish_mode=publish_mode,
        )
    )


def dokploy_security(
    action: Literal["create", "delete"],
    security_id: str | None = None,
    application_id: str | None = None,
    username: str | None = None,
    password: str | None = None,
) -> dict:
    """Manage basic auth credentials on an application."""
    return _finalize_tool_result(
        _call(
            "security",
            action,
            security_id=security_id,
            application_id=application_id,
            username=username,
            password=password,
        )
    )


def dokploy_certificate(
    action: Literal["list", "get", "create", "remove"],
    certificate_id: str | None = None,
    name: str | None = None,
    certificate_data: str | None = None,
    private_key: str | None = None,
    organization_id: str | None = None,
    auto_renew: bool | None = None,
    server_id: str | None = None,
) -> dict:
    """Manage SSL/TLS certificates."""
    return _finalize_tool_result(
        _call(
            "certificate",
            action,
            certificate_id=certificate_id,
            name=name,
            certificate_data=certificate_data,
            private_key=private_key,
            organization_id=organization_id,
            auto_renew=auto_renew,
            server_id=server_id,
        )
    )


def register(mcp):
    """Register all infrastructure tools with the FastMCP instance."""
    mcp.tool()(dokploy_project)
    mcp.tool()(dokploy_environment)
    mcp.tool()(dokploy_domain)
    mcp.tool()(dokploy_server)
    mcp.tool()(dokploy_settings)
    mcp.tool()(dokploy_ssh_key)
    mcp.tool()(dokploy_port)
    mcp.tool()(dokploy_security)
    mcp.tool()(dokploy_certificate)
