import asyncio

import streamlit as st

from use_cases.bootstrap import AppContainer


def render_home(container: AppContainer):
    st.title("🏠 Home")
    st.write(f"Signed in as **{container.user_model.email}**")

    if st.button("Log out", type="secondary"):
        asyncio.run(container.presenter.log_out())
        st.rerun()


def render_author_policy(container: AppContainer):
    st.title("📄 Author policy")
    st.write("This page is public and does not require a session.")
    if st.button("← Back"):
        container.router.go_to_id("homeLink")
        st.rerun()
