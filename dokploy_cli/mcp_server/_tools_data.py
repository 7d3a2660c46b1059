"""Data tools: database services and backups (2 tools)."""

from __future__ import annotations

from typing import Literal

from dokploy_cli.mcp_server._core import _call, _finalize_tool_result


def dokploy_database(
    action: Literal[
        "create",
        "get",
        "deploy",
        "start",
        "stop",
        "remove",
        "rebuild",
        "reload",
        "update",
        "move",
        "changeStatus",
        "saveEnvironment",
        "saveExternalPort",
    ],
    db_type: Literal["postgres", "mysql", "mariadb", "mongo", "redis"],
    database_id: str | None = None,
    name: str | None = None,
    app_name: str | None = None,
    description: str | None = None,
    environment_id: str | None = None,
    target_environment_id: str | None = None,
    server_id: str | None = None,
    docker_image: str | None = None,
    database_name: str | None = None,
    database_user: str | None = None,
    database_password: str | None = None,
    database_root_password: str | None = None,
    command: str | None = None,
    memory_limit: float | None = None,
    cpu_limit: float | None = None,
    application_status: str | None = None,
    env: str | None = None,
    external_port: int | None = None,
) -> dict:
    """Manage database services of any supported engine, selected by db_type.

    database_id is forwarded as the engine's own id field (postgresId, mongoId, ...).
    create: name+environment_id plus database_name/database_user/database_password
    as the engine requires (redis: password only, mongo: user+password).
    database_root_password applies to mysql and mariadb.
    """
    return _finalize_tool_result(
        _call(
            "database",
            action,
            db_type=db_type,
            database_id=database_id,
            name=name,
            app_name=app_name,
            description=description,
            environment_id=environment_id,
            target_environment_id=target_environment_id,
            server_id=server_id,
            docker_image=docker_image,
            database_name=database_name,
            database_user=database_user,
            database_password=database_password,
            database_root_password=database_root_password,
            command=command,
            memory_limit=memory_limit,
            cpu_limit=cpu_limit,
            application_status=application_status,
            env=env,
            external_port=external_port,
        )
    )


def dokploy_backup(
    action: Literal["create", "get", "update", "remove", "listFiles", "manualBackup"],
    backup_id: str | None = None,
    schedule: str | None = None,
    prefix: str | None = None,
    destination_id: str | None = None,
    database: str | None = None,
    database_type: str | None = None,
    enabled: bool | None = None,
    keep_latest_count: int | None = None,
    postgres_id: str | None = None,
    mysql_id: str | None = None,
    mariadb_id: str | None = None,
    mongo_id: str | None = None,
    compose_id: str | None = None,
    service_name: str | None = None,
    search: str | None = None,
    server_id: str | None = None,
    backup_type: Literal["postgres", "mysql", "mariadb", "mongo", "compose"] | None = None,
) -> dict:
    """Manage scheduled backups.

    create: schedule+prefix+destination_id+database+database_type.
    listFiles: destination_id, search?. manualBackup: backup_id+backup_type.
    """
    return _finalize_tool_result(
        _call(
            "backup",
            action,
            backup_id=backup_id,
            schedule=schedule,
            prefix=prefix,
            destination_id=destination_id,
            database=database,
            database_type=database_type,
            enabled=enabled,
            keep_latest_count=keep_latest_count,
            postgres_id=postgres_id,
            mysql_id=mysql_id,
            mariadb_id=mariadb_id,
            mongo_id=mongo_id,
            compose_id=compose_id,
            service_name=service_name,
            search=search,
            server_id=server_id,
            backup_type=backup_type,
        )
    )


def register(mcp):
    """Register all data tools with the FastMCP instance."""
    mcp.tool()(dokploy_database)
    mcp.tool()(dokploy_backup)
