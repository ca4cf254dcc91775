"""Application layer contracts for route guarding and session flows."""

from .bootstrap import AppContainer, StartupResult, StartupStatus, build_app, run_startup
from .gateways import Credentials, DataGateway, ResponsePayload, RouterGateway
from .login_register_presenter import LoginRegisterPresenter
from .messages_repository import MessagesRepository
from .route_table import (
    DEFAULT_ROUTES,
    HOME_ROUTE_ID,
    LOGIN_ROUTE_ID,
    WILDCARD_ROUTE_ID,
    RouteDefinition,
    RouteTable,
    RouteTableError,
    load_route_table,
)
from .router import Router
from .router_repository import CurrentRoute, RouterRepository
from .user_model import Session, UserModel, is_authenticated

__all__ = [
    "AppContainer",
    "Credentials",
    "CurrentRoute",
    "DEFAULT_ROUTES",
    "DataGateway",
    "HOME_ROUTE_ID",
    "LOGIN_ROUTE_ID",
    "LoginRegisterPresenter",
    "MessagesRepository",
    "ResponsePayload",
    "RouteDefinition",
    "RouteTable",
    "RouteTableError",
    "Router",
    "RouterGateway",
    "RouterRepository",
    "Session",
    "StartupResult",
    "StartupStatus",
    "UserModel",
    "WILDCARD_ROUTE_ID",
    "build_app",
    "is_authenticated",
    "load_route_table",
    "run_startup",
]
