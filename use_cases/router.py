"""Navigation guard: resolves requested routes against the session state."""

import logging

from use_cases.gateways import RouterGateway
from use_cases.route_table import LOGIN_ROUTE_ID, RouteTable
from use_cases.router_repository import RouterRepository
from use_cases.user_model import UserModel

log = logging.getLogger(__name__)


class Router:
    def __init__(
        self,
        route_table: RouteTable,
        router_repository: RouterRepository,
        user_model: UserModel,
        router_gateway: RouterGateway,
    ):
        self.route_table = route_table
        self.router_repository = router_repository
        self.user_model = user_model
        self.router_gateway = router_gateway

    def go_to_id(self, requested_id: str) -> None:
        """
        Navigate to requested_id, redirecting to the login route when the
        target is secure and there is no session. The repository is updated
        before the gateway is called, with the same resolved id.
        """
        requested_def = self.route_table.resolve(requested_id)

        if requested_def.is_secure and not self.user_model.is_authenticated:
            log.info(f"Guard redirected '{requested_id}' to '{LOGIN_ROUTE_ID}' (no session)")
            effective_def = self.route_table.resolve(LOGIN_ROUTE_ID)
        else:
            effective_def = requested_def

        self.router_repository.set_current_route(effective_def)
        self.router_gateway.go_to_id(effective_def.route_id)
        log.debug(f"Navigated to '{effective_def.route_id}'")
