"""Formatters for deployments, containers, domains, servers, SSH keys, certificates."""

from dokploy_cli._utils import format_date, status_label
from dokploy_cli.formatters._table import _clean, _heading_list, _table


def format_deployments_table(deployments):
    if not deployments:
        return "No deployments found."
    cols = [("Status", 11), ("Title", 30), ("Created", 24), ("ID", 0)]
    rows = [
        (
            status_label(d.get("status")),
            d.get("title") or "Deployment",
            format_date(d.get("createdAt")),
            d.get("deploymentId"),
        )
        for d in deployments
    ]
    return _table(cols, rows, f"Total: {len(deployments)} deployments")


def format_containers_table(containers):
    if not containers:
        return "No containers found."
    cols = [("Name", 28), ("State", 10), ("Image", 30), ("Status", 20), ("ID", 0)]
    rows = [
        (
            c.get("name"),
            (c.get("state") or "unknown").upper(),
            c.get("image"),
            c.get("status"),
            c.get("containerId"),
        )
        for c in containers
    ]
    return _table(cols, rows, f"Total: {len(containers)} containers")


def format_domain(domain):
    https = domain.get("https")
    scheme = "https" if https else "http"
    return "\n".join(
        [
            f"- **{scheme}://{_clean(domain.get('host'))}{domain.get('path') or ''}** "
            f"(ID: {_clean(domain.get('domainId'))})",
            f"  Port: {_clean(domain.get('port'), 'default')}",
            f"  HTTPS: {_clean(bool(https))}",
            f"  Certificate: {_clean(domain.get('certificateType'), 'None')}",
            f"  Type: {_clean(domain.get('domainType'))}",
            f"  Service: {_clean(domain.get('serviceName'))}",
        ]
    )


def format_domains_table(domains):
    return _heading_list("Domains", domains, format_domain, "No domains found.")


def format_server(server):
    return "\n".join(
        [
            f"- **{_clean(server.get('name'))}** (ID: {_clean(server.get('serverId'))})",
            f"  Description: {_clean(server.get('description'), 'None')}",
            f"  IP: {_clean(server.get('ipAddress'))}:{_clean(server.get('port'))}",
            f"  User: {_clean(server.get('username'))}",
            f"  Type: {_clean(server.get('serverType'))}",
            f"  Created: {format_date(server.get('createdAt'))}",
        ]
    )


def format_servers_table(servers):
    return _heading_list("Servers", servers, format_server, "No servers found.")


def format_ssh_key(key):
    return "\n".join(
        [
            f"- **{_clean(key.get('name'), 'Generated key')}** (ID: {_clean(key.get('sshKeyId'))})",
            f"  Description: {_clean(key.get('description'), 'None')}",
            f"  Public Key: {_clean(key.get('publicKey'))}",
            f"  Created: {format_date(key.get('createdAt'))}",
        ]
    )


def format_ssh_keys_table(keys):
    return _heading_list("SSH Keys", keys, format_ssh_key, "No SSH keys found.")


def format_certificate(cert):
    return (
        f"- **{_clean(cert.get('name'))}** (ID: {_clean(cert.get('certificateId'))}) | "
        f"Auto-renew: {_clean(cert.get('autoRenew'))}"
    )


def format_certificates_table(certs):
    return _heading_list("Certificates", certs, format_certificate, "No certificates found.")
