import streamlit as st

from config import AppConfig, load_config
from infrastructure.http_data_gateway import HttpDataGateway
from infrastructure.streamlit_router_gateway import StreamlitRouterGateway
from use_cases.bootstrap import AppContainer, build_app, run_startup
from use_cases.route_table import RouteTable, load_route_table

"""
SESSION STATE CONTRACT

Keys in st.session_state:

app_container: AppContainer | None
    wired components for this browser session
    default: None
    owner: session_manager

route_id: str | None
    id the router gateway last navigated to
    default: None
    owner: infrastructure.streamlit_router_gateway
"""


def init_session_state():
    if 'app_container' not in st.session_state:
        st.session_state.app_container = None
    if 'route_id' not in st.session_state:
        st.session_state.route_id = None


def _build_route_table(config: AppConfig) -> RouteTable:
    if config.routes_file:
        return load_route_table(config.routes_file)
    return RouteTable()


def get_container(config: AppConfig = None) -> AppContainer:
    """Return the per-session container, creating and starting it on first use."""
    init_session_state()
    if st.session_state.app_container is None:
        config = config or load_config()
        router_gateway = StreamlitRouterGateway()
        container = build_app(
            HttpDataGateway(config.api_url, timeout=config.api_timeout),
            router_gateway,
            route_table=_build_route_table(config),
        )
        run_startup(container, initial_route=router_gateway.requested_route() or "default")
        st.session_state.app_container = container
    return st.session_state.app_container
