"""
Resource family tables.

Each family maps its action names to resolvers. The action set a family
accepts is exactly the key set of its table, so every accepted action has a
resolution and every route is reachable from some action.
"""

from types import MappingProxyType

from dokploy_cli.exceptions import ValidationError
from dokploy_cli.routes import POST, Branch, Family, FirstOf, Route, get, post


def _deploy_branch(namespace, id_key):
    opts = ("title", "deployDescription")
    renames = {"deployDescription": "description"}
    return Branch(
        "redeploy",
        {
            False: post(f"{namespace}.deploy", [id_key], opts, renames=renames),
            True: post(f"{namespace}.redeploy", [id_key], opts, renames=renames),
        },
        default=False,
    )


def _simple(namespace, id_key, actions):
    """Actions that pass just the resource id to ``<namespace>.<action>``."""
    return {action: post(f"{namespace}.{action}", [id_key]) for action in actions}


# ---------------------------------------------------------------------------
# Projects and environments
# ---------------------------------------------------------------------------

PROJECT = Family(
    "project",
    {
        "list": get("project.all"),
        "get": get("project.one", ["projectId"]),
        "create": post("project.create", ["name"], ["description"]),
        "update": post("project.update", ["projectId"], ["name", "description"]),
        "remove": post("project.remove", ["projectId"]),
        "duplicate": post(
            "project.duplicate",
            ["sourceEnvironmentId", "name"],
            ["description", "includeServices", "duplicateInSameProject"],
        ),
    },
    description=(
        "Manage projects. list: all. get: projectId. create: name. "
        "update: projectId+fields. remove: projectId. duplicate: sourceEnvironmentId+name."
    ),
)

ENVIRONMENT = Family(
    "environment",
    {
        "create": post("environment.create", ["name", "projectId"], ["description"]),
        "get": get("environment.one", ["environmentId"]),
        "list": get("environment.byProjectId", ["projectId"]),
        "update": post("environment.update", ["environmentId"], ["name", "description"]),
        "remove": post("environment.remove", ["environmentId"]),
        "duplicate": post("environment.duplicate", ["environmentId", "name"], ["description"]),
    },
    description=(
        "Manage project environments. create: projectId+name. get: environmentId. "
        "list: projectId. update: environmentId+fields. remove: environmentId. "
        "duplicate: environmentId+name."
    ),
)

# ---------------------------------------------------------------------------
# Applications, compose stacks, deployments, containers
# ---------------------------------------------------------------------------

APPLICATION = Family(
    "application",
    {
        "create": post(
            "application.create", ["name", "environmentId"], ["description", "serverId"]
        ),
        "get": get("application.one", ["applicationId"]),
        "update": post(
            "application.update",
            ["applicationId"],
            [
                "name",
                "description",
                "dockerImage",
                "command",
                "memoryLimit",
                "cpuLimit",
                "replicas",
                "autoDeploy",
            ],
        ),
        "move": post("application.move", ["applicationId", "targetEnvironmentId"]),
        "deploy": _deploy_branch("application", "applicationId"),
        **_simple(
            "application",
            "applicationId",
            (
                "start",
                "stop",
                "delete",
                "markRunning",
                "refreshToken",
                "cleanQueues",
                "killBuild",
                "cancelDeployment",
            ),
        ),
        "reload": post("application.reload", ["applicationId", "appName"]),
        "saveEnvironment": post(
            "application.saveEnvironment",
            ["applicationId"],
            ["env", "buildArgs"],
            defaults={"createEnvFile": False},
        ),
        "saveBuildType": post(
            "application.saveBuildType",
            ["applicationId", "buildType"],
            ["dockerfile", "publishDirectory"],
            defaults={"dockerContextPath": ".", "dockerBuildStage": ""},
        ),
        "traefikConfig": Branch(
            "traefikConfig",
            {
                True: post(
                    "application.updateTraefikConfig", ["applicationId", "traefikConfig"]
                ),
                False: get("application.readTraefikConfig", ["applicationId"]),
            },
            presence=True,
        ),
        "readMonitoring": get("application.readAppMonitoring", ["appName"]),
    },
    description=(
        "Manage applications. create: name+environmentId. get: applicationId. "
        "update: applicationId+fields. move: applicationId+targetEnvironmentId. "
        "deploy: applicationId, redeploy?. start/stop/delete/markRunning/refreshToken/"
        "cleanQueues/killBuild/cancelDeployment: applicationId. reload: applicationId+appName. "
        "saveEnvironment: applicationId+env. saveBuildType: applicationId+buildType. "
        "traefikConfig: applicationId, traefikConfig? (omit to read). readMonitoring: appName."
    ),
)

COMPOSE = Family(
    "compose",
    {
        "create": post(
            "compose.create",
            ["name", "environmentId"],
            ["description", "composeType", "composeFile", "serverId"],
        ),
        "get": get("compose.one", ["composeId"]),
        "update": post(
            "compose.update",
            ["composeId"],
            ["name", "description", "composeFile", "env", "command"],
        ),
        "delete": post("compose.delete", ["composeId"], defaults={"deleteVolumes": False}),
        "deploy": _deploy_branch("compose", "composeId"),
        "move": post("compose.move", ["composeId", "targetEnvironmentId"]),
        "loadServices": get("compose.loadServices", ["composeId"], ["type"]),
        "loadMounts": get("compose.loadMountsByService", ["composeId", "serviceName"]),
        "getDefaultCommand": get("compose.getDefaultCommand", ["composeId"]),
        **_simple(
            "compose",
            "composeId",
            ("start", "stop", "cancelDeployment", "cleanQueues", "killBuild", "refreshToken"),
        ),
    },
    description=(
        "Manage Docker Compose services. create: name+environmentId. "
        "get/delete/start/stop/getDefaultCommand: composeId. update: composeId+fields. "
        "deploy: composeId, redeploy?. move: composeId+targetEnvironmentId. "
        "loadServices: composeId. loadMounts: composeId+serviceName. "
        "cancelDeployment/cleanQueues/killBuild/refreshToken: composeId."
    ),
)

DEPLOYMENT = Family(
    "deployment",
    {
        "list": FirstOf(
            (
                get("deployment.all", ["applicationId"]),
                get("deployment.allByCompose", ["composeId"]),
                get("deployment.allByServer", ["serverId"]),
                get("deployment.allByType", ["type", "id"]),
            ),
            "Provide applicationId, composeId, serverId, or type+id",
        ),
        "killProcess": post("deployment.killProcess", ["deploymentId"]),
    },
    description=(
        "Manage deployments. list: applicationId|composeId|serverId|type+id. "
        "killProcess: deploymentId."
    ),
)

CONTAINER_LOOKUP_METHODS = ("match", "label", "stack", "service")

DOCKER = Family(
    "docker",
    {
        "getContainers": get("docker.getContainers", optional=["serverId"]),
        "restartContainer": post("docker.restartContainer", ["containerId"]),
        "getConfig": get("docker.getConfig", ["containerId"], ["serverId"]),
        "findContainers": Branch(
            "method",
            {
                "match": get(
                    "docker.getContainersByAppNameMatch", ["appName"], ["serverId", "appType"]
                ),
                "label": get("docker.getContainersByAppLabel", ["appName"], ["serverId", "type"]),
                "stack": get("docker.getStackContainersByAppName", ["appName"], ["serverId"]),
                "service": get("docker.getServiceContainersByAppName", ["appName"], ["serverId"]),
            },
        ),
    },
    description=(
        "Docker management. getContainers: serverId?. restartContainer: containerId. "
        "getConfig: containerId, serverId?. "
        "findContainers: appName+method(match|label|stack|service), serverId?."
    ),
)

# ---------------------------------------------------------------------------
# Domains, servers, settings
# ---------------------------------------------------------------------------

DOMAIN = Family(
    "domain",
    {
        "create": post(
            "domain.create",
            ["host"],
            [
                "applicationId",
                "composeId",
                "serviceName",
                "path",
                "port",
                "https",
                "certificateType",
                "domainType",
            ],
        ),
        "list": FirstOf(
            (
                get("domain.byApplicationId", ["applicationId"]),
                get("domain.byComposeId", ["composeId"]),
            ),
            "Provide applicationId or composeId",
        ),
        "get": get("domain.one", ["domainId"]),
        "update": post(
            "domain.update", ["domainId", "host"], ["path", "port", "https", "certificateType"]
        ),
        "delete": post("domain.delete", ["domainId"]),
        "generate": post("domain.generateDomain", ["appName"], ["serverId"]),
        "canGenerateTraefikMe": get("domain.canGenerateTraefikMeDomains", optional=["serverId"]),
        "validate": post("domain.validateDomain", ["domain"], ["serverIp"]),
    },
    description=(
        "Manage domains. create: host+applicationId|composeId. list: applicationId|composeId. "
        "get: domainId. update: domainId+host. delete: domainId. generate: appName. "
        "canGenerateTraefikMe: serverId?. validate: domain."
    ),
)

_SERVER_FIELDS = ["name", "ipAddress", "port", "username", "sshKeyId", "serverType"]

SERVER = Family(
    "server",
    {
        "list": get("server.all"),
        "get": get("server.one", ["serverId"]),
        "create": post("server.create", _SERVER_FIELDS, ["description"]),
        "update": post("server.update", ["serverId", *_SERVER_FIELDS], ["description"]),
        "remove": post("server.remove", ["serverId"]),
        "count": get("server.count"),
        "publicIp": get("server.publicIp"),
        "getMetrics": get("server.getServerMetrics", ["url", "token"], ["dataPoints"]),
    },
    description=(
        "Manage servers. list/count/publicIp: no params. get: serverId. "
        "create: name+ipAddress+port+username+sshKeyId+serverType. update: serverId+fields. "
        "remove: serverId. getMetrics: url+token."
    ),
)

SETTINGS = Family(
    "settings",
    {
        "health": get("settings.health"),
        "version": get("settings.getDokployVersion"),
        "ip": get("settings.getIp"),
        "clean": Branch(
            "cleanType",
            {
                "all": post("settings.cleanAll", optional=["serverId"]),
                "images": post("settings.cleanUnusedImages", optional=["serverId"]),
            },
            default="all",
        ),
        "reload": Branch(
            "reloadTarget",
            {
                "server": Route(POST, "settings.reloadServer", spec=None),
                "traefik": post("settings.reloadTraefik", optional=["serverId"]),
            },
            default="server",
        ),
    },
    description=(
        "System settings. health: check status. version: get version. ip: get IP. "
        "clean: cleanType (all|images), serverId?. reload: reloadTarget (server|traefik), serverId?."
    ),
)

# ---------------------------------------------------------------------------
# Databases and backups
# ---------------------------------------------------------------------------

_DB = ["databaseId"]

DATABASE = Family(
    "database",
    {
        "create": post(
            "{variant}.create",
            ["name", "environmentId"],
            ["dockerImage", "description", "serverId"],
            variant_create=True,
        ),
        "get": get("{variant}.one", _DB),
        **{
            action: post(f"{{variant}}.{action}", _DB)
            for action in ("deploy", "start", "stop", "remove", "rebuild")
        },
        "reload": post("{variant}.reload", [*_DB, "appName"]),
        "update": post(
            "{variant}.update",
            _DB,
            ["name", "description", "dockerImage", "command", "memoryLimit", "cpuLimit"],
        ),
        "move": post("{variant}.move", [*_DB, "targetEnvironmentId"]),
        "changeStatus": post("{variant}.changeStatus", [*_DB, "applicationStatus"]),
        "saveEnvironment": post("{variant}.saveEnvironment", _DB, ["env"]),
        "saveExternalPort": post("{variant}.saveExternalPort", [*_DB, "externalPort"]),
    },
    variant_arg="dbType",
    description=(
        "Manage database services (postgres, mysql, mariadb, mongo, redis) selected by dbType. "
        "create: name+environmentId (+databaseName/User/Password depending on type). "
        "get/deploy/start/stop/remove/rebuild: databaseId. reload: databaseId+appName. "
        "update: databaseId+fields. move: databaseId+targetEnvironmentId. "
        "changeStatus: databaseId+applicationStatus. saveEnvironment: databaseId, env?. "
        "saveExternalPort: databaseId+externalPort."
    ),
)

MANUAL_BACKUP_ENDPOINTS = MappingProxyType(
    {
        "postgres": "backup.manualBackupPostgres",
        "mysql": "backup.manualBackupMySql",
        "mariadb": "backup.manualBackupMariadb",
        "mongo": "backup.manualBackupMongo",
        "compose": "backup.manualBackupCompose",
    }
)

BACKUP = Family(
    "backup",
    {
        "create": post(
            "backup.create",
            ["schedule", "prefix", "destinationId", "database", "databaseType"],
            [
                "enabled",
                "keepLatestCount",
                "postgresId",
                "mysqlId",
                "mariadbId",
                "mongoId",
                "composeId",
                "serviceName",
            ],
        ),
        "get": get("backup.one", ["backupId"]),
        "update": post(
            "backup.update",
            ["backupId"],
            [
                "schedule",
                "prefix",
                "destinationId",
                "database",
                "serviceName",
                "databaseType",
                "enabled",
                "keepLatestCount",
            ],
        ),
        "remove": post("backup.remove", ["backupId"]),
        "listFiles": get("backup.listBackupFiles", ["destinationId"], ["search", "serverId"]),
        "manualBackup": Branch(
            "backupType",
            {kind: post(endpoint, ["backupId"]) for kind, endpoint in MANUAL_BACKUP_ENDPOINTS.items()},
        ),
    },
    description=(
        "Manage backups. create: schedule+prefix+destinationId+database+databaseType. "
        "get: backupId. update: backupId+fields. remove: backupId. listFiles: destinationId. "
        "manualBackup: backupId+backupType."
    ),
)

# ---------------------------------------------------------------------------
# Infrastructure primitives
# ---------------------------------------------------------------------------

SSH_KEY = Family(
    "sshKey",
    {
        "create": post("sshKey.create", ["name", "privateKey", "publicKey"], ["description"]),
        "list": get("sshKey.all"),
        "remove": post("sshKey.remove", ["sshKeyId"]),
        "generate": post("sshKey.generate", defaults={"type": "ed25519"}),
    },
    description=(
        "Manage SSH keys. create: name+privateKey+publicKey, description?. list: no params. "
        "remove: sshKeyId. generate: type (rsa or ed25519)."
    ),
)

PORT = Family(
    "port",
    {
        "create": post(
            "port.create",
            ["applicationId", "publishedPort", "targetPort"],
            ["protocol", "publishMode"],
        ),
        "delete": post("port.delete", ["portId"]),
    },
    description="Manage application port mappings. create: applicationId+publishedPort+targetPort. delete: portId.",
)

SECURITY = Family(
    "security",
    {
        "create": post("security.create", ["applicationId", "username", "password"]),
        "delete": post("security.delete", ["securityId"]),
    },
    description="Manage basic auth credentials. create: applicationId+username+password. delete: securityId.",
)

CERTIFICATE = Family(
    "certificate",
    {
        "list": get("certificates.all"),
        "get": get("certificates.one", ["certificateId"]),
        "create": post(
            "certificates.create",
            ["name", "certificateData", "privateKey", "organizationId"],
            ["autoRenew", "serverId"],
        ),
        "remove": post("certificates.remove", ["certificateId"]),
    },
    description=(
        "Manage SSL/TLS certificates. list: no params. get/remove: certificateId. "
        "create: name+certificateData+privateKey+organizationId."
    ),
)

FAMILIES = MappingProxyType(
    {
        family.name: family
        for family in (
            PROJECT,
            ENVIRONMENT,
            APPLICATION,
            COMPOSE,
            DEPLOYMENT,
            DOCKER,
            DOMAIN,
            SERVER,
            SETTINGS,
            DATABASE,
            BACKUP,
            SSH_KEY,
            PORT,
            SECURITY,
            CERTIFICATE,
        )
    }
)


def family_names():
    return tuple(FAMILIES)


def get_family(name):
    """Return the Family named *name*. Raises ValidationError if unknown."""
    family = FAMILIES.get(name)
    if family is None:
        raise ValidationError(
            f"[ERROR] Unknown family {name!r}. Valid: {', '.join(FAMILIES)}"
        )
    return family


def action_names(name):
    return get_family(name).action_names
