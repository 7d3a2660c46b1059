"""Application tools: applications, compose stacks, deployments, docker (4 tools)."""

from __future__ import annotations

from typing import Literal

from dokploy_cli.mcp_server._core import _call, _finalize_tool_result


def dokploy_application(
    action: Literal[
        "create",
        "get",
        "update",
        "move",
        "deploy",
        "start",
        "stop",
        "delete",
        "markRunning",
        "refreshToken",
        "cleanQueues",
        "killBuild",
        "cancelDeployment",
        "reload",
        "saveEnvironment",
        "saveBuildType",
        "traefikConfig",
        "readMonitoring",
    ],
    application_id: str | None = None,
    name: str | None = None,
    app_name: str | None = None,
    description: str | None = None,
    environment_id: str | None = None,
    target_environment_id: str | None = None,
    server_id: str | None = None,
    redeploy: bool | None = None,
    title: str | None = None,
    deploy_description: str | None = None,
    docker_image: str | None = None,
    command: str | None = None,
    memory_limit: float | None = None,
    cpu_limit: float | None = None,
    replicas: int | None = None,
    auto_deploy: bool | None = None,
    env: str | None = None,
    build_args: str | None = None,
    create_env_file: bool | None = None,
    build_type: str | None = None,
    dockerfile: str | None = None,
    docker_context_path: str | None = None,
    docker_build_stage: str | None = None,
    publish_directory: str | None = None,
    traefik_config: str | None = None,
) -> dict:
    """Manage applications.

    create: name+environment_id. get/start/stop/delete: application_id.
    deploy: application_id, redeploy=True rebuilds instead of deploying.
    reload: application_id+app_name. saveBuildType: application_id+build_type.
    traefikConfig: application_id; pass traefik_config to write it, omit to read.
    readMonitoring: app_name.
    """
    return _finalize_tool_result(
        _call(
            "application",
            action,
            application_id=application_id,
            name=name,
            app_name=app_name,
            description=description,
            environment_id=environment_id,
            target_environment_id=target_environment_id,
            server_id=server_id,
            redeploy=redeploy,
            title=title,
            deploy_description=deploy_description,
            docker_image=docker_image,
            command=command,
            memory_limit=memory_limit,
            cpu_limit=cpu_limit,
            replicas=replicas,
            auto_deploy=auto_deploy,
            env=env,
            build_args=build_args,
            create_env_file=create_env_file,
            build_type=build_type,
            dockerfile=dockerfile,
            docker_context_path=docker_context_path,
            docker_build_stage=docker_build_stage,
            publish_directory=publish_directory,
            traefik_config=traefik_config,
        )
    )


def dokploy_compose(
    action: Literal[
        "create",
        "get",
        "update",
        "delete",
        "deploy",
        "move",
        "loadServices",
        "loadMounts",
        "getDefaultCommand",
        "start",
        "stop",
        "cancelDeployment",
        "cleanQueues",
        "killBuild",
        "refreshToken",
    ],
    compose_id: str | None = None,
    name: str | None = None,
    description: str | None = None,
    environment_id: str | None = None,
    target_environment_id: str | None = None,
    server_id: str | None = None,
    compose_type: str | None = None,
    compose_file: str | None = None,
    env: str | None = None,
    command: str | None = None,
    delete_volumes: bool | None = None,
    redeploy: bool | None = None,
    title: str | None = None,
    deploy_description: str | None = None,
    type: str | None = None,
    service_name: str | None = None,
) -> dict:
    """Manage Docker Compose services.

    create: name+environment_id. delete: compose_id, delete_volumes defaults to False.
    deploy: compose_id, redeploy?. loadMounts: compose_id+service_name.
    """
    return _finalize_tool_result(
        _call(
            "compose",
            action,
            compose_id=compose_id,
            name=name,
            description=description,
            environment_id=environment_id,
            target_environment_id=target_environment_id,
            server_id=server_id,
            compose_type=compose_type,
            compose_file=compose_file,
            env=env,
            command=command,
            delete_volumes=delete_volumes,
            redeploy=redeploy,
            title=title,
            deploy_description=deploy_description,
            type=type,
            service_name=service_name,
        )
    )


def dokploy_deployment(
    action: Literal["list", "killProcess"],
    application_id: str | None = None,
    compose_id: str | None = None,
    server_id: str | None = None,
    type: str | None = None,
    id: str | None = None,
    deployment_id: str | None = None,
) -> dict:
    """List deployments by application_id, compose_id, server_id or type+id (first match wins).

    killProcess: deployment_id.
    """
    return _finalize_tool_result(
        _call(
            "deployment",
            action,
            application_id=application_id,
            compose_id=compose_id,
            server_id=server_id,
            type=type,
            id=id,
            deployment_id=deployment_id,
        )
    )


def dokploy_docker(
    action: Literal["getContainers", "restartContainer", "getConfig", "findContainers"],
    container_id: str | None = None,
    server_id: str | None = None,
    app_name: str | None = None,
    method: Literal["match", "label", "stack", "service"] | None = None,
    app_type: str | None = None,
    type: str | None = None,
) -> dict:
    """Docker containers. findContainers: app_name+method, server_id?."""
    return _finalize_tool_result(
        _call(
            "docker",
            action,
            container_id=container_id,
            server_id=server_id,
            app_name=app_name,
            method=method,
            app_type=app_type,
            type=type,
        )
    )


def register(mcp):
    """Register all application tools with the FastMCP instance."""
    mcp.tool()(dokploy_application)
    mcp.tool()(dokploy_compose)
    mcp.tool()(dokploy_deployment)
    mcp.tool()(dokploy_docker)
