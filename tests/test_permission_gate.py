from unittest.mock import MagicMock

import pytest

from locweather.exceptions import PermissionDeniedError
from locweather.permission import GateState, PermissionGate
from tests.fakes import FakePermissionProvider

REQUEST_CODE = 123


@pytest.fixture
def callbacks():
    return MagicMock(name="on_granted"), MagicMock(name="on_denied")


def make_gate(provider, callbacks) -> PermissionGate:
    on_granted, on_denied = callbacks
    return PermissionGate(provider, REQUEST_CODE, on_granted=on_granted, on_denied=on_denied)


def test_already_granted_proceeds_without_prompt(callbacks):
    provider = FakePermissionProvider(granted=True)
    gate = make_gate(provider, callbacks)

    gate.evaluate()

    callbacks[0].assert_called_once_with()
    callbacks[1].assert_not_called()
    assert provider.requests == []
    assert gate.state is GateState.GRANTED


def test_not_granted_issues_single_request(callbacks):
    provider = FakePermissionProvider(granted=False)
    gate = make_gate(provider, callbacks)

    gate.evaluate()
    gate.evaluate()

    assert [code for code, _ in provider.requests] == [REQUEST_CODE]
    assert gate.state is GateState.AWAITING_USER
    callbacks[0].assert_not_called()


def test_user_grants(callbacks):
    provider = FakePermissionProvider(granted=False)
    gate = make_gate(provider, callbacks)

    gate.evaluate()
    provider.answer(True)

    callbacks[0].assert_called_once_with()
    callbacks[1].assert_not_called()
    assert gate.state is GateState.GRANTED


def test_user_denies(callbacks):
    provider = FakePermissionProvider(granted=False)
    gate = make_gate(provider, callbacks)

    gate.evaluate()
    provider.answer(False)

    callbacks[0].assert_not_called()
    callbacks[1].assert_called_once()
    (error,), _ = callbacks[1].call_args
    assert isinstance(error, PermissionDeniedError)
    assert gate.state is GateState.DENIED


def test_result_is_evaluated_exactly_once(callbacks):
    provider = FakePermissionProvider(granted=False)
    gate = make_gate(provider, callbacks)

    gate.evaluate()
    gate.on_result(REQUEST_CODE, False)
    gate.on_result(REQUEST_CODE, True)

    callbacks[0].assert_not_called()
    callbacks[1].assert_called_once()


def test_foreign_request_code_is_ignored(callbacks):
    provider = FakePermissionProvider(granted=False)
    gate = make_gate(provider, callbacks)

    gate.evaluate()
    gate.on_result(999, True)

    callbacks[0].assert_not_called()
    assert gate.state is GateState.AWAITING_USER
