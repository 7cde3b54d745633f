import logging

import pytest

from locweather.exceptions import WeatherFetchError
from locweather.ui import (
    FETCH_ERROR_NOTICE,
    FETCH_ERROR_TEXT,
    LOCATION_ERROR_TEXT,
    PARSE_ERROR_NOTICE,
    PARSE_ERROR_TEXT,
    PERMISSION_DENIED_NOTICE,
    PERMISSION_REQUIRED_TEXT,
    WeatherPresenter,
)
from tests.fakes import PARIS_PAYLOAD, PARIS_TEXT


@pytest.fixture
def presenter(display, notifier) -> WeatherPresenter:
    return WeatherPresenter(display, notifier)


def test_render_payload_shows_summary(presenter, display, notifier):
    presenter.render_payload(PARIS_PAYLOAD)

    assert display.text == PARIS_TEXT
    assert notifier.messages == []


def test_missing_main_shows_parse_error(presenter, display, notifier):
    presenter.render_payload('{"name":"Paris","weather":[{"description":"clear sky"}]}')

    assert display.text == "Error parsing weather data"
    assert notifier.messages == [PARSE_ERROR_NOTICE]


def test_parse_error_replaces_previous_summary(presenter, display):
    presenter.render_payload(PARIS_PAYLOAD)
    presenter.render_payload("{}")

    assert display.texts == [PARIS_TEXT, PARSE_ERROR_TEXT]


def test_fetch_error(presenter, display, notifier):
    presenter.show_fetch_error(WeatherFetchError("timed out"))

    assert display.text == FETCH_ERROR_TEXT
    assert notifier.messages == [FETCH_ERROR_NOTICE]


def test_error_cause_is_logged_but_not_shown(presenter, display, caplog):
    with caplog.at_level(logging.DEBUG, logger="locweather"):
        presenter.show_fetch_error(WeatherFetchError("connection reset"))

    assert "connection reset" in caplog.text
    assert "connection reset" not in display.text


def test_permission_denied(presenter, display, notifier):
    presenter.show_permission_denied()

    assert display.text == PERMISSION_REQUIRED_TEXT
    assert notifier.messages == [PERMISSION_DENIED_NOTICE]


def test_location_error(presenter, display, notifier):
    presenter.show_location_error()

    assert display.text == LOCATION_ERROR_TEXT
    assert len(notifier.messages) == 1
