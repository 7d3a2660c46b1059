"""Formatters for projects, environments, applications, compose stacks, databases."""

from dokploy_cli._utils import format_date, status_label
from dokploy_cli.formatters._table import _clean, _heading_list


def format_project(project):
    envs = project.get("environments") or []
    return "\n".join(
        [
            f"- **{_clean(project.get('name'))}** (ID: {_clean(project.get('projectId'))})",
            f"  Description: {_clean(project.get('description'), 'None')}",
            f"  Environments: {len(envs)}",
            f"  Created: {format_date(project.get('createdAt'))}",
        ]
    )


def format_projects_table(projects):
    """Format the ``project.list`` result."""
    return _heading_list("Projects", projects, format_project, "No projects found.")


def format_environment(env):
    return "\n".join(
        [
            f"- **{_clean(env.get('name'))}** (ID: {_clean(env.get('environmentId'))})",
            f"  Description: {_clean(env.get('description'), 'None')}",
            f"  Project: {_clean(env.get('projectId'))}",
            f"  Created: {format_date(env.get('createdAt'))}",
        ]
    )


def format_environments_table(envs):
    return _heading_list("Environments", envs, format_environment, "No environments found.")


def format_application(app):
    return "\n".join(
        [
            f"- **{_clean(app.get('name'))}** {status_label(app.get('applicationStatus'))} "
            f"(ID: {_clean(app.get('applicationId'))})",
            f"  App Name: {_clean(app.get('appName'))}",
            f"  Description: {_clean(app.get('description'), 'None')}",
            f"  Build Type: {_clean(app.get('buildType'))}",
            f"  Source: {_clean(app.get('sourceType'))}",
            f"  Auto Deploy: {_clean(app.get('autoDeploy'))}",
            f"  Created: {format_date(app.get('createdAt'))}",
        ]
    )


def format_compose(compose):
    return "\n".join(
        [
            f"- **{_clean(compose.get('name'))}** {status_label(compose.get('composeStatus'))} "
            f"(ID: {_clean(compose.get('composeId'))})",
            f"  App Name: {_clean(compose.get('appName'))}",
            f"  Description: {_clean(compose.get('description'), 'None')}",
            f"  Type: {_clean(compose.get('composeType'))}",
            f"  Source: {_clean(compose.get('sourceType'))}",
            f"  Created: {format_date(compose.get('createdAt'))}",
        ]
    )


def format_database(db, db_type=None):
    """Format a database record. The variant id field differs per type."""
    db_id = db.get("databaseId")
    if db_id is None and db_type:
        db_id = db.get(f"{db_type}Id")
    return "\n".join(
        [
            f"- **{_clean(db.get('name'))}** {status_label(db.get('applicationStatus'))} "
            f"(ID: {_clean(db_id)})",
            f"  Type: {_clean(db_type)}",
            f"  App Name: {_clean(db.get('appName'))}",
            f"  Description: {_clean(db.get('description'), 'None')}",
            f"  Database Name: {_clean(db.get('databaseName'))}",
            f"  Image: {_clean(db.get('dockerImage'), 'default')}",
            f"  External Port: {_clean(db.get('externalPort'), 'None')}",
            f"  Created: {format_date(db.get('createdAt'))}",
        ]
    )


def format_backup(backup):
    enabled = backup.get("enabled")
    return "\n".join(
        [
            f"- **{_clean(backup.get('prefix'))}** (ID: {_clean(backup.get('backupId'))})",
            f"  Schedule: {_clean(backup.get('schedule'))}",
            f"  Enabled: {_clean(True if enabled is None else enabled)}",
            f"  Database: {_clean(backup.get('database'))}",
            f"  Type: {_clean(backup.get('databaseType'))}",
            f"  Destination: {_clean(backup.get('destinationId'))}",
            f"  Keep Latest: {_clean(backup.get('keepLatestCount'), 'unlimited')}",
        ]
    )
