"""
Database variant registry.

The variant set is closed: every variant maps to exactly one identifier
field, and callers can only pick from this table.
"""

from dataclasses import dataclass
from types import MappingProxyType

from dokploy_cli.exceptions import ValidationError

_RELATIONAL_CREATE = ("databaseName", "databaseUser", "databasePassword")


@dataclass(frozen=True)
class DatabaseVariant:
    name: str
    id_field: str
    create_required: tuple[str, ...]
    supports_root_password: bool = False


_VARIANTS = (
    DatabaseVariant("postgres", "postgresId", _RELATIONAL_CREATE),
    DatabaseVariant("mysql", "mysqlId", _RELATIONAL_CREATE, supports_root_password=True),
    DatabaseVariant("mariadb", "mariadbId", _RELATIONAL_CREATE, supports_root_password=True),
    DatabaseVariant("mongo", "mongoId", ("databaseUser", "databasePassword")),
    DatabaseVariant("redis", "redisId", ("databasePassword",)),
)

VARIANTS = MappingProxyType({v.name: v for v in _VARIANTS})
DB_TYPES = tuple(v.name for v in _VARIANTS)
DB_ID_FIELDS = MappingProxyType({v.name: v.id_field for v in _VARIANTS})


def is_known_db_type(value):
    return isinstance(value, str) and value in VARIANTS


def get_variant(db_type):
    """Return the DatabaseVariant for *db_type*. Raises ValidationError if unknown."""
    if not is_known_db_type(db_type):
        raise ValidationError(
            f"[ERROR] Invalid dbType {db_type!r}. Valid: {', '.join(DB_TYPES)}"
        )
    return VARIANTS[db_type]


def id_field(db_type):
    """Return the backend identifier field for a database variant."""
    return get_variant(db_type).id_field
