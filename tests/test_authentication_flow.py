import asyncio
from unittest.mock import AsyncMock

from tests.conftest import successful_login_stub
from use_cases import bootstrap


def test_login_unlocks_home_after_redirect(app, data_gateway, router_gateway) -> None:
    data_gateway.post = AsyncMock(return_value=successful_login_stub())

    app.router.go_to_id("homeLink")
    assert app.router_repository.current_route.route_id == "loginLink"
    router_gateway.go_to_id.assert_called_with("loginLink")

    app.presenter.email = "a@b.com"
    app.presenter.password = "123"
    asyncio.run(app.presenter.login())

    assert app.router_repository.current_route.route_id == "homeLink"
    assert app.router_repository.current_route.route_def.is_secure is True
    router_gateway.go_to_id.assert_called_with("homeLink")


def test_full_session_lifecycle(app, data_gateway, router_gateway) -> None:
    data_gateway.post = AsyncMock(return_value=successful_login_stub())
    startup = bootstrap.run_startup(app)
    assert startup.route_id == "loginLink"

    asyncio.run(app.presenter.login())
    asyncio.run(app.presenter.log_out())
    app.router.go_to_id("homeLink")

    assert app.router_repository.current_route.route_id == "loginLink"
    assert [c.args[0] for c in router_gateway.go_to_id.call_args_list] == [
        "loginLink",
        "homeLink",
        "loginLink",
        "loginLink",
    ]
