from unittest.mock import MagicMock, PropertyMock

import pytest
import requests
from urllib3.exceptions import LocationParseError

from hopspider.fetcher import Page, PageFetcher, Unreachable


def make_response(text="<html></html>", status_code=200, url="http://example.com/"):
    response = MagicMock()
    response.status_code = status_code
    response.text = text
    response.url = url
    if status_code >= 400:
        response.raise_for_status.side_effect = requests.HTTPError(f"{status_code} Error")
    return response


@pytest.fixture
def session():
    session = MagicMock(spec=requests.Session)
    session.headers = {}
    return session


def test_fetch_success(session):
    response = make_response(text='<a href="http://next.example.com">next</a>')
    session.get.return_value = response

    result = PageFetcher(session=session).fetch("http://example.com/")

    assert isinstance(result, Page)
    assert result.url == "http://example.com/"
    assert result.status_code == 200
    assert "next.example.com" in result.html
    response.close.assert_called_once()


def test_fetch_uses_connect_and_read_timeouts(session):
    session.get.return_value = make_response()

    PageFetcher(connect_timeout=2.0, read_timeout=3.0, session=session).fetch("http://example.com/")

    _, kwargs = session.get.call_args
    assert kwargs["timeout"] == (2.0, 3.0)
    assert kwargs["stream"] is True


def test_user_agent_header_on_owned_session(monkeypatch):
    created = MagicMock()
    created.headers = {}
    monkeypatch.setattr(requests, "Session", lambda: created)

    PageFetcher(user_agent="TestAgent/0.1")

    assert created.headers["User-Agent"] == "TestAgent/0.1"


def test_injected_session_headers_untouched(session):
    session.headers = {"User-Agent": "Caller/2.0"}
    PageFetcher(user_agent="TestAgent/0.1", session=session)
    assert session.headers["User-Agent"] == "Caller/2.0"


@pytest.mark.parametrize("error", [
    requests.ConnectionError("refused"),
    requests.Timeout("timed out"),
    requests.exceptions.MissingSchema("no scheme"),
    requests.exceptions.InvalidURL("bad url"),
])
def test_transport_failure_is_unreachable(session, error):
    session.get.side_effect = error

    result = PageFetcher(session=session).fetch("http://down.example.com/")

    assert isinstance(result, Unreachable)
    assert result.url == "http://down.example.com/"
    assert result.reason


def test_http_error_is_unreachable_and_closed(session):
    response = make_response(status_code=404)
    session.get.return_value = response

    result = PageFetcher(session=session).fetch("http://example.com/missing")

    assert isinstance(result, Unreachable)
    assert "404" in result.reason
    response.close.assert_called_once()


def test_body_read_failure_is_unreachable_and_closed(session):
    response = make_response()
    type(response).text = PropertyMock(side_effect=requests.exceptions.ChunkedEncodingError("broken"))
    session.get.return_value = response

    result = PageFetcher(session=session).fetch("http://example.com/")

    assert isinstance(result, Unreachable)
    response.close.assert_called_once()


def test_injected_session_not_closed(session):
    with PageFetcher(session=session):
        pass
    session.close.assert_not_called()


def test_owned_session_closed(monkeypatch):
    created = MagicMock()
    created.headers = {}
    monkeypatch.setattr(requests, "Session", lambda: created)

    with PageFetcher():
        pass

    created.close.assert_called_once()


@pytest.mark.parametrize("url", [
    "http://a..example.com/",
    "http://" + "a" * 64 + ".example.com/",
])
def test_unparseable_host_is_unreachable(session, url):
    session.get.side_effect = LocationParseError(url)

    result = PageFetcher(session=session).fetch(url)

    assert isinstance(result, Unreachable)
    assert result.url == url


def test_value_error_while_reading_is_unreachable_and_closed(session):
    response = make_response()
    response.raise_for_status.side_effect = LocationParseError("http://a..example.com/")
    session.get.return_value = response

    result = PageFetcher(session=session).fetch("http://example.com/")

    assert isinstance(result, Unreachable)
    response.close.assert_called_once()
