"""Startup orchestration: component wiring and first navigation."""

from dataclasses import dataclass
from typing import Literal, Optional, Tuple

import logging

from use_cases.gateways import DataGateway, RouterGateway
from use_cases.login_register_presenter import LoginRegisterPresenter
from use_cases.messages_repository import MessagesRepository
from use_cases.route_table import WILDCARD_ROUTE_ID, RouteTable
from use_cases.router import Router
from use_cases.router_repository import RouterRepository
from use_cases.user_model import UserModel

log = logging.getLogger(__name__)

StartupStatus = Literal["CONTINUE", "STOP"]


@dataclass(frozen=True)
class AppContainer:
    """Explicitly wired application components."""

    route_table: RouteTable
    router_repository: RouterRepository
    user_model: UserModel
    messages_repository: MessagesRepository
    router: Router
    presenter: LoginRegisterPresenter
    data_gateway: DataGateway
    router_gateway: RouterGateway


@dataclass(frozen=True)
class StartupResult:
    """Result contract for startup/bootstrap orchestration."""

    status: StartupStatus
    planned_steps: Tuple[str, ...]
    route_id: Optional[str] = None


def build_app(
    data_gateway: DataGateway,
    router_gateway: RouterGateway,
    route_table: Optional[RouteTable] = None,
) -> AppContainer:
    """Wire components together. No navigation happens here."""
    route_table = route_table or RouteTable()
    router_repository = RouterRepository()
    user_model = UserModel()
    messages_repository = MessagesRepository()
    router = Router(route_table, router_repository, user_model, router_gateway)
    presenter = LoginRegisterPresenter(data_gateway, user_model, messages_repository, router)

    # Every completed navigation clears the visible messages.
    router_repository.subscribe(lambda _route: messages_repository.reset())
    presenter.init()

    return AppContainer(
        route_table=route_table,
        router_repository=router_repository,
        user_model=user_model,
        messages_repository=messages_repository,
        router=router,
        presenter=presenter,
        data_gateway=data_gateway,
        router_gateway=router_gateway,
    )


def run_startup(container: AppContainer, initial_route: str = WILDCARD_ROUTE_ID) -> StartupResult:
    """Run the first navigation through the guard."""
    executed_steps = []

    if container.router_repository.current_route.route_id is None:
        container.router.go_to_id(initial_route)
        executed_steps.append(f"go_to_id:{initial_route}")
    else:
        executed_steps.append("skip_initial_navigation")

    route_id = container.router_repository.current_route.route_id
    log.info(f"Startup finished at route '{route_id}'")
    return StartupResult(status="CONTINUE", planned_steps=tuple(executed_steps), route_id=route_id)
