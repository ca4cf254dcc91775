from use_cases.gateways import ResponsePayload
from use_cases.messages_repository import MessagesRepository


def test_initial_state() -> None:
    repo = MessagesRepository()
    assert repo.app_messages == []
    assert repo.show_validation_warning is False


def test_unpack_success_uses_success_message() -> None:
    repo = MessagesRepository()
    repo.unpack_response(ResponsePayload(success=True, server_message="ignored"), "User registered")
    assert repo.app_messages == ["User registered"]
    assert repo.show_validation_warning is False


def test_unpack_failure_uses_server_message() -> None:
    repo = MessagesRepository()
    repo.unpack_response(ResponsePayload(success=False, server_message="Failed: nope"), "User registered")
    assert repo.app_messages == ["Failed: nope"]
    assert repo.show_validation_warning is True


def test_reset_keeps_validation_warning() -> None:
    repo = MessagesRepository()
    repo.unpack_response(ResponsePayload(success=False, server_message="Failed: nope"), "ok")

    repo.reset()

    assert repo.app_messages == []
    assert repo.show_validation_warning is True


def test_subscribers_notified_until_unsubscribed() -> None:
    repo = MessagesRepository()
    calls = []
    unsubscribe = repo.subscribe(lambda r: calls.append(list(r.app_messages)))

    repo.unpack_response(ResponsePayload(success=True), "hello")
    repo.reset()
    unsubscribe()
    repo.unpack_response(ResponsePayload(success=True), "ignored")

    assert calls == [["hello"], []]


def test_unpack_failure_without_server_message_keeps_none() -> None:
    repo = MessagesRepository()
    repo.unpack_response(ResponsePayload.from_dict({"success": False}), "ok")
    assert repo.app_messages == [None]
    assert repo.show_validation_warning is True
