"""Application configuration read from Streamlit secrets and the environment."""

import os
from dataclasses import dataclass
from typing import Optional

import streamlit as st

DEFAULT_API_URL = "http://localhost:8000"
DEFAULT_API_TIMEOUT = 10


def get_secret(key):
    try:
        value = st.secrets.get(key)
    except FileNotFoundError:
        value = None
    return value if value is not None else os.getenv(key)


@dataclass(frozen=True)
class AppConfig:
    api_url: str = DEFAULT_API_URL
    api_timeout: int = DEFAULT_API_TIMEOUT
    routes_file: Optional[str] = None
    log_level: str = "INFO"


def load_config() -> AppConfig:
    timeout_raw = get_secret("API_TIMEOUT")
    try:
        api_timeout = int(timeout_raw) if timeout_raw else DEFAULT_API_TIMEOUT
    except ValueError:
        api_timeout = DEFAULT_API_TIMEOUT

    return AppConfig(
        api_url=(get_secret("API_URL") or DEFAULT_API_URL).rstrip("/"),
        api_timeout=api_timeout,
        routes_file=get_secret("ROUTES_FILE") or None,
        log_level=(get_secret("LOG_LEVEL") or "INFO").upper(),
    )
