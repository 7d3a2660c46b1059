"""Tests for registry.py - the closed database variant table."""

import pytest

from dokploy_cli.exceptions import ValidationError
from dokploy_cli.registry import DB_ID_FIELDS, DB_TYPES, VARIANTS, get_variant, id_field, is_known_db_type


class TestVariants:
    def test_closed_set(self):
        assert DB_TYPES == ("postgres", "mysql", "mariadb", "mongo", "redis")

    @pytest.mark.parametrize(
        "db_type,expected",
        [
            ("postgres", "postgresId"),
            ("mysql", "mysqlId"),
            ("mariadb", "mariadbId"),
            ("mongo", "mongoId"),
            ("redis", "redisId"),
        ],
    )
    def test_id_field(self, db_type, expected):
        assert id_field(db_type) == expected
        assert DB_ID_FIELDS[db_type] == expected

    def test_id_fields_unique(self):
        assert len(set(DB_ID_FIELDS.values())) == len(DB_TYPES)

    def test_tables_immutable(self):
        with pytest.raises(TypeError):
            VARIANTS["sqlite"] = None

    def test_create_requirements(self):
        assert get_variant("redis").create_required == ("databasePassword",)
        assert get_variant("mongo").create_required == ("databaseUser", "databasePassword")
        assert "databaseName" in get_variant("postgres").create_required

    def test_root_password_support(self):
        supported = {name for name, v in VARIANTS.items() if v.supports_root_password}
        assert supported == {"mysql", "mariadb"}


class TestLookup:
    def test_is_known(self):
        assert is_known_db_type("mongo") is True
        assert is_known_db_type("sqlite") is False
        assert is_known_db_type(None) is False

    @pytest.mark.parametrize("bad", ["sqlite", "", "Postgres", None, 3])
    def test_unknown_rejected(self, bad):
        with pytest.raises(ValidationError) as exc_info:
            get_variant(bad)
        assert "Invalid dbType" in str(exc_info.value)
        assert "postgres, mysql, mariadb, mongo, redis" in str(exc_info.value)
