"""Holder for the single current-route value."""

from dataclasses import dataclass
from typing import Callable, List, Optional

from use_cases.route_table import RouteDefinition

RouteListener = Callable[["CurrentRoute"], None]


@dataclass(frozen=True)
class CurrentRoute:
    route_id: Optional[str] = None
    route_def: Optional[RouteDefinition] = None


class RouterRepository:
    def __init__(self):
        self._current_route = CurrentRoute()
        self._listeners: List[RouteListener] = []

    @property
    def current_route(self) -> CurrentRoute:
        return self._current_route

    def set_current_route(self, route_def: RouteDefinition) -> None:
        self._current_route = CurrentRoute(route_id=route_def.route_id, route_def=route_def)
        for listener in list(self._listeners):
            listener(self._current_route)

    def subscribe(self, listener: RouteListener) -> Callable[[], None]:
        """Register a change listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe
