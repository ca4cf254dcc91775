"""Boundary contracts for network and navigation side-effects."""

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Protocol

LOGIN_PATH = "/login"
REGISTER_PATH = "/register"


@dataclass(frozen=True)
class Credentials:
    email: str
    password: str

    def to_body(self) -> Dict[str, str]:
        return {"email": self.email, "password": self.password}


@dataclass(frozen=True)
class ResponsePayload:
    """Response contract shared by /login and /register."""

    success: bool
    server_message: Optional[str] = None
    token: Optional[str] = None
    email: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ResponsePayload":
        server_message = data.get("serverMessage", data.get("server_message"))
        return cls(
            success=data.get("success") is True,
            server_message=server_message,
            token=data.get("token"),
            email=data.get("email"),
        )


class DataGateway(Protocol):
    async def post(self, path: str, body: Dict[str, str]) -> ResponsePayload:
        ...


class RouterGateway(Protocol):
    def go_to_id(self, route_id: str) -> None:
        ...
