import streamlit as st

from config import load_config
from infrastructure.observability import setup_observability

config = load_config()
setup_observability(config.log_level)

from utils import session_manager
from views import home_view, login_view

st.set_page_config(page_title="Route Guard", layout="centered")

container = session_manager.get_container(config)
route = container.router_repository.current_route

# --- ROUTE DISPATCH ---
if route.route_id in ("homeLink", "default"):
    home_view.render_home(container)
elif route.route_id == "authorPolicyLink":
    home_view.render_author_policy(container)
else:
    login_view.render_auth_screen(container.presenter)
    if st.button("Author policy"):
        container.router.go_to_id("authorPolicyLink")
        st.rerun()
