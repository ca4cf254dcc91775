import pytest

from use_cases.route_table import (
    DEFAULT_ROUTES,
    RouteDefinition,
    RouteTable,
    RouteTableError,
    load_route_table,
)


def test_resolve_known_routes() -> None:
    table = RouteTable()
    assert table.resolve("loginLink") == RouteDefinition("loginLink", is_secure=False)
    assert table.resolve("homeLink").is_secure is True
    assert table.resolve("authorPolicyLink").is_secure is False


def test_unknown_and_default_resolve_to_secure_wildcard() -> None:
    table = RouteTable()
    assert table.resolve("default") == RouteDefinition("default", is_secure=True)
    assert table.resolve("no-such-page") == RouteDefinition("default", is_secure=True)


def test_default_entry_is_always_secure() -> None:
    table = RouteTable([
        RouteDefinition("default", is_secure=False),
        RouteDefinition("loginLink", is_secure=False),
    ])
    assert table.resolve("default").is_secure is True


def test_login_route_required_and_public() -> None:
    with pytest.raises(RouteTableError):
        RouteTable([RouteDefinition("homeLink", is_secure=True)])
    with pytest.raises(RouteTableError):
        RouteTable([RouteDefinition("loginLink", is_secure=True)])


def test_route_ids_and_contains() -> None:
    table = RouteTable()
    assert table.route_ids() == ("default", "loginLink", "homeLink", "authorPolicyLink")
    assert "homeLink" in table
    assert "missing" not in table
    assert len(DEFAULT_ROUTES) == 4


def test_load_route_table_from_toml(tmp_path) -> None:
    routes_file = tmp_path / "routes.toml"
    routes_file.write_text(
        "[routes.loginLink]\nis_secure = false\n\n"
        "[routes.homeLink]\nis_secure = true\n\n"
        "[routes.aboutLink]\nis_secure = false\n"
    )
    table = load_route_table(str(routes_file))
    assert table.resolve("aboutLink").is_secure is False
    assert table.resolve("homeLink").is_secure is True


def test_load_route_table_rejects_bad_files(tmp_path) -> None:
    with pytest.raises(RouteTableError):
        load_route_table(str(tmp_path / "missing.toml"))

    no_section = tmp_path / "empty.toml"
    no_section.write_text("title = 'x'\n")
    with pytest.raises(RouteTableError):
        load_route_table(str(no_section))

    bad_flag = tmp_path / "bad.toml"
    bad_flag.write_text("[routes.loginLink]\nis_secure = 'no'\n")
    with pytest.raises(RouteTableError):
        load_route_table(str(bad_flag))
