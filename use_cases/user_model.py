"""Session identity shared across application layers."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Session:
    email: Optional[str] = None
    token: Optional[str] = None


def is_authenticated(session: Session) -> bool:
    # None (never logged in) and "" (logged out) both block secure routes
    return session.token is not None and session.token != ""


class UserModel:
    def __init__(self):
        self._session = Session()

    @property
    def email(self) -> Optional[str]:
        return self._session.email

    @property
    def token(self) -> Optional[str]:
        return self._session.token

    @property
    def session(self) -> Session:
        return self._session

    @property
    def is_authenticated(self) -> bool:
        return is_authenticated(self._session)

    def set_session(self, email: Optional[str], token: Optional[str]) -> None:
        self._session = Session(email=email, token=token)

    def clear_session(self) -> None:
        # Logout value is "", not the startup None.
        self._session = Session(email="", token="")
