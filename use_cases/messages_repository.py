"""User-facing message state and the response unpacking contract."""

from typing import Callable, List, Optional

from use_cases.gateways import ResponsePayload

MessagesListener = Callable[["MessagesRepository"], None]


class MessagesRepository:
    def __init__(self):
        self.app_messages: List[Optional[str]] = []
        self.show_validation_warning = False
        self._listeners: List[MessagesListener] = []

    def unpack_response(self, payload: ResponsePayload, success_message: str) -> None:
        self.show_validation_warning = not payload.success
        self.app_messages = [success_message] if payload.success else [payload.server_message]
        self._notify()

    def reset(self) -> None:
        """
        Clears messages only. show_validation_warning keeps its value, so a
        failed login followed by logout leaves the warning set with no messages.
        """
        self.app_messages = []
        self._notify()

    def subscribe(self, listener: MessagesListener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(self)
