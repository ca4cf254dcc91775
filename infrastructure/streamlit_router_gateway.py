import logging

import streamlit as st

log = logging.getLogger(__name__)

ROUTE_STATE_KEY = "route_id"
ROUTE_QUERY_PARAM = "route"


class StreamlitRouterGateway:
    """RouterGateway that records the active page in Streamlit state and the URL."""

    def go_to_id(self, route_id: str) -> None:
        st.session_state[ROUTE_STATE_KEY] = route_id
        st.query_params[ROUTE_QUERY_PARAM] = route_id
        log.debug(f"Browser route set to '{route_id}'")

    def requested_route(self):
        """Route id found in the URL, if any (used on first render)."""
        return st.query_params.get(ROUTE_QUERY_PARAM)
