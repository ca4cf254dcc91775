import asyncio

import streamlit as st

from use_cases.login_register_presenter import LoginRegisterPresenter


def render_messages(presenter: LoginRegisterPresenter):
    # A failure payload may arrive without a serverMessage.
    for message in presenter.messages:
        if message is None:
            continue
        if presenter.show_validation_warning:
            st.error(message)
        else:
            st.success(message)


def _submit(presenter: LoginRegisterPresenter, email: str, password: str, action):
    presenter.email = email
    presenter.password = password
    try:
        asyncio.run(action())
    finally:
        presenter.password = ""


def render_auth_screen(presenter: LoginRegisterPresenter):
    st.title("🔐 Sign in")
    render_messages(presenter)

    tab_login, tab_register = st.tabs(["Login", "Register"])

    with tab_login:
        with st.form("login_form", clear_on_submit=False):
            email = st.text_input("Email")
            password = st.text_input("Password", type="password")
            submitted = st.form_submit_button("Login")
            if submitted:
                _submit(presenter, email, password, presenter.login)
                st.rerun()

    with tab_register:
        with st.form("register_form", clear_on_submit=True):
            email = st.text_input("Email")
            password = st.text_input("Password", type="password")
            submitted = st.form_submit_button("Register")
            if submitted:
                _submit(presenter, email, password, presenter.register)
                st.rerun()
