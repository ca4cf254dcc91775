"""Static route table used by the navigation guard."""

from dataclasses import dataclass
from typing import Dict, Iterable, Tuple

import logging

import toml

log = logging.getLogger(__name__)

WILDCARD_ROUTE_ID = "default"
LOGIN_ROUTE_ID = "loginLink"
HOME_ROUTE_ID = "homeLink"


class RouteTableError(Exception):
    pass


@dataclass(frozen=True)
class RouteDefinition:
    route_id: str
    is_secure: bool


WILDCARD_ROUTE = RouteDefinition(route_id=WILDCARD_ROUTE_ID, is_secure=True)

DEFAULT_ROUTES: Tuple[RouteDefinition, ...] = (
    WILDCARD_ROUTE,
    RouteDefinition(route_id=LOGIN_ROUTE_ID, is_secure=False),
    RouteDefinition(route_id=HOME_ROUTE_ID, is_secure=True),
    RouteDefinition(route_id="authorPolicyLink", is_secure=False),
)


class RouteTable:
    """
    Immutable mapping route_id -> RouteDefinition.
    Unknown ids fall through to the wildcard, which always requires a session.
    """

    def __init__(self, routes: Iterable[RouteDefinition] = DEFAULT_ROUTES):
        table: Dict[str, RouteDefinition] = {}
        for route in routes:
            if route.route_id == WILDCARD_ROUTE_ID:
                continue
            table[route.route_id] = route

        login_route = table.get(LOGIN_ROUTE_ID)
        if login_route is None:
            raise RouteTableError(f"Route table must define '{LOGIN_ROUTE_ID}'")
        if login_route.is_secure:
            raise RouteTableError(f"'{LOGIN_ROUTE_ID}' must be a public route")

        self._routes = table

    def resolve(self, route_id: str) -> RouteDefinition:
        return self._routes.get(route_id, WILDCARD_ROUTE)

    def __contains__(self, route_id: object) -> bool:
        return route_id in self._routes

    def route_ids(self) -> Tuple[str, ...]:
        return (WILDCARD_ROUTE_ID,) + tuple(self._routes)


def load_route_table(path: str) -> RouteTable:
    """
    Load routes from a TOML file of the form:

        [routes.homeLink]
        is_secure = true
    """
    try:
        data = toml.load(path)
    except (OSError, toml.TomlDecodeError) as e:
        raise RouteTableError(f"Cannot read route table {path}: {e}") from e

    raw_routes = data.get("routes")
    if not isinstance(raw_routes, dict) or not raw_routes:
        raise RouteTableError(f"No [routes] section in {path}")

    routes = []
    for route_id, options in raw_routes.items():
        is_secure = options.get("is_secure") if isinstance(options, dict) else None
        if not isinstance(is_secure, bool):
            raise RouteTableError(f"Route '{route_id}' needs a boolean is_secure")
        routes.append(RouteDefinition(route_id=route_id, is_secure=is_secure))

    log.info(f"Loaded {len(routes)} routes from {path}")
    return RouteTable(routes)
