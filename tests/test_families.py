"""Tests for families.py and routes.py - table shape and resolver behavior."""

import pytest

from dokploy_cli.exceptions import ValidationError
from dokploy_cli.families import (
    CONTAINER_LOOKUP_METHODS,
    FAMILIES,
    MANUAL_BACKUP_ENDPOINTS,
    action_names,
    family_names,
    get_family,
)
from dokploy_cli.routes import GET, POST, Branch, FirstOf, Route, get, post


class TestFamilyTables:
    def test_family_names(self):
        assert set(family_names()) == {
            "project",
            "environment",
            "application",
            "compose",
            "deployment",
            "docker",
            "domain",
            "server",
            "settings",
            "database",
            "backup",
            "sshKey",
            "port",
            "security",
            "certificate",
        }

    def test_action_names_are_table_keys(self):
        for name, family in FAMILIES.items():
            assert action_names(name) == tuple(family.actions)

    def test_every_family_described(self):
        for family in FAMILIES.values():
            assert family.description

    def test_only_database_is_variant(self):
        assert [f.name for f in FAMILIES.values() if f.variant_arg] == ["database"]
        assert get_family("database").variant_arg == "dbType"

    def test_methods_are_get_or_post(self):
        for family in FAMILIES.values():
            for _action, _key, route in family.iter_routes():
                assert route.method in (GET, POST)

    def test_reads_use_get(self):
        assert get_family("application").actions["get"].method == GET
        assert get_family("project").actions["list"].method == GET
        assert get_family("application").actions["deploy"].routes[True].method == POST

    def test_tables_immutable(self):
        with pytest.raises(TypeError):
            FAMILIES["x"] = None
        with pytest.raises(TypeError):
            get_family("project").actions["drop"] = None
        with pytest.raises(TypeError):
            MANUAL_BACKUP_ENDPOINTS["redis"] = "backup.manualBackupRedis"

    def test_container_methods_match_branch(self):
        branch = get_family("docker").actions["findContainers"]
        assert tuple(branch.routes) == CONTAINER_LOOKUP_METHODS

    def test_certificate_family_uses_plural_namespace(self):
        endpoints = {r.endpoint for _a, _k, r in get_family("certificate").iter_routes()}
        assert all(e.startswith("certificates.") for e in endpoints)

    def test_unknown_family(self):
        with pytest.raises(ValidationError) as exc_info:
            get_family("kubernetes")
        assert "Valid: project, environment" in str(exc_info.value)


class TestResolvers:
    def test_route_select_is_identity(self):
        route = get("project.all")
        assert route.select({"anything": 1}) is route

    def test_route_without_spec(self):
        route = Route(POST, "settings.reloadServer", spec=None)
        assert route.spec is None

    def test_branch_default(self):
        branch = Branch("kind", {"a": get("x.a"), "b": get("x.b")}, default="b")
        assert branch.select({}).endpoint == "x.b"
        assert branch.select({"kind": "a"}).endpoint == "x.a"

    def test_branch_missing_without_default(self):
        branch = Branch("kind", {"a": get("x.a")})
        with pytest.raises(ValidationError) as exc_info:
            branch.select({"kind": None})
        assert "Missing required field(s): kind" in str(exc_info.value)

    def test_branch_bool_keys_listed_lowercase(self):
        branch = Branch("flag", {False: get("x.off"), True: get("x.on")})
        with pytest.raises(ValidationError) as exc_info:
            branch.select({"flag": "yes"})
        assert "Valid: false, true" in str(exc_info.value)

    def test_presence_branch(self):
        branch = Branch("cfg", {True: post("x.write"), False: get("x.read")}, presence=True)
        assert branch.select({}).endpoint == "x.read"
        assert branch.select({"cfg": ""}).endpoint == "x.write"

    def test_first_of_order(self):
        first = FirstOf((get("x.byA", ["a"]), get("x.byB", ["b"])), "Provide a or b")
        assert first.select({"a": 1, "b": 2}).endpoint == "x.byA"
        assert first.select({"b": 2}).endpoint == "x.byB"
        with pytest.raises(ValidationError) as exc_info:
            first.select({})
        assert str(exc_info.value) == "[ERROR] Provide a or b"

    def test_post_helper_builds_spec(self):
        route = post("x.create", ["name"], ["description"], renames={"a": "b"}, defaults={"c": 1})
        assert route.method == POST
        assert route.spec.required == ("name",)
        assert route.spec.optional == ("description",)
        assert dict(route.spec.renames) == {"a": "b"}
        assert dict(route.spec.defaults) == {"c": 1}
