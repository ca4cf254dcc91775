"""Login / registration / logout orchestration (application layer)."""

import logging
from typing import List, Optional

from use_cases.gateways import LOGIN_PATH, REGISTER_PATH, Credentials, DataGateway, ResponsePayload
from use_cases.messages_repository import MessagesRepository
from use_cases.route_table import HOME_ROUTE_ID, LOGIN_ROUTE_ID
from use_cases.router import Router
from use_cases.user_model import UserModel

log = logging.getLogger(__name__)

REGISTER_SUCCESS_MESSAGE = "User registered"
LOGIN_SUCCESS_MESSAGE = "User logged in"


class LoginRegisterPresenter:
    """
    Holds the editable credential fields and drives the session flows.

    There is no de-duplication of in-flight requests: if login() is awaited
    twice concurrently, both responses are applied and the last one to
    resolve wins. The view is expected to disable the submit control while
    a request is pending.
    """

    def __init__(
        self,
        data_gateway: DataGateway,
        user_model: UserModel,
        messages_repository: MessagesRepository,
        router: Router,
    ):
        self.data_gateway = data_gateway
        self.user_model = user_model
        self.messages_repository = messages_repository
        self.router = router
        self.email = ""
        self.password = ""

    @property
    def messages(self) -> List[Optional[str]]:
        return self.messages_repository.app_messages

    @property
    def show_validation_warning(self) -> bool:
        return self.messages_repository.show_validation_warning

    def init(self) -> None:
        self.messages_repository.show_validation_warning = False
        self.messages_repository.reset()

    def _credentials(self) -> Credentials:
        return Credentials(email=self.email, password=self.password)

    async def register(self) -> None:
        payload = await self.data_gateway.post(REGISTER_PATH, self._credentials().to_body())
        if not payload.success:
            log.warning(f"Registration rejected: {payload.server_message}")
        self.messages_repository.unpack_response(payload, REGISTER_SUCCESS_MESSAGE)

    async def login(self) -> None:
        payload = await self.data_gateway.post(LOGIN_PATH, self._credentials().to_body())
        self.messages_repository.unpack_response(payload, LOGIN_SUCCESS_MESSAGE)

        if not payload.success:
            log.warning(f"Login rejected: {payload.server_message}")
            return

        self._start_session(payload)
        self.router.go_to_id(HOME_ROUTE_ID)

    async def log_out(self) -> None:
        self.user_model.clear_session()
        log.info("Session cleared")
        self.router.go_to_id(LOGIN_ROUTE_ID)

    def _start_session(self, payload: ResponsePayload) -> None:
        self.user_model.set_session(payload.email, payload.token)
        log.info("Session started")
