from unittest.mock import Mock

import pytest
import requests
from urllib3.exceptions import LocationParseError

from linkcrawl.exceptions import FetchFailure, HttpFetchError, HttpStatusError
from linkcrawl.services.http_service import HttpService


def _response(status_code=200, chunks=(b'<html></html>',), headers=None, encoding=None):
    resp = Mock()
    resp.status_code = status_code
    resp.headers = headers if headers is not None else {}
    resp.encoding = encoding
    resp.iter_content.return_value = iter(chunks)
    return resp


def test_open_streams_body():
    resp = _response(chunks=(b'hello ', b'world'))
    mock_http_client = Mock(return_value=resp)
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client, chunk_size=16)
    with http.open('http://example.com') as response:
        assert response.status_code == 200
        assert b''.join(response.body) == b'hello world'
    resp.iter_content.assert_called_once_with(chunk_size=16)


def test_open_sends_user_agent_timeout_and_streams():
    mock_http_client = Mock(return_value=_response())
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client, timeout=3)
    with http.open('http://example.com'):
        pass
    mock_http_client.assert_called_once_with(
        'http://example.com', headers={'User-Agent': 'TestAgent'}, timeout=3, stream=True
    )


def test_connection_released_after_use():
    resp = _response()
    http = HttpService(user_agent='TestAgent', http_client=Mock(return_value=resp))
    with http.open('http://example.com'):
        assert not resp.close.called
    assert resp.close.called


def test_connection_released_when_caller_raises():
    resp = _response()
    http = HttpService(user_agent='TestAgent', http_client=Mock(return_value=resp))
    with pytest.raises(RuntimeError):
        with http.open('http://example.com'):
            raise RuntimeError("parse blew up")
    assert resp.close.called


def test_open_wraps_requests_exception():
    mock_http_client = Mock(side_effect=requests.exceptions.Timeout("timed out"))
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)

    with pytest.raises(HttpFetchError) as exc:
        with http.open('http://example.com'):
            pass
    assert "http://example.com" in str(exc.value)
    assert isinstance(exc.value, FetchFailure)


def test_open_wraps_malformed_host_error():
    mock_http_client = Mock(side_effect=LocationParseError("foo..example.com"))
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)

    with pytest.raises(HttpFetchError) as exc:
        with http.open('http://foo..example.com/x'):
            pass
    assert exc.value.url == 'http://foo..example.com/x'


@pytest.mark.parametrize("status", [201, 301, 404, 500])
def test_non_200_status_raises_and_releases(status):
    resp = _response(status_code=status)
    http = HttpService(user_agent='TestAgent', http_client=Mock(return_value=resp))

    with pytest.raises(HttpStatusError) as exc:
        with http.open('http://example.com'):
            pass
    assert exc.value.status_code == status
    assert resp.close.called


def test_broken_stream_is_a_fetch_error():
    resp = _response()
    resp.iter_content.side_effect = requests.exceptions.ChunkedEncodingError("connection reset")
    http = HttpService(user_agent='TestAgent', http_client=Mock(return_value=resp))

    with pytest.raises(HttpFetchError):
        with http.open('http://example.com') as response:
            list(response.body)


def test_content_type_and_declared_charset():
    resp = _response(headers={'Content-Type': 'text/html; charset=utf-8'}, encoding='utf-8')
    http = HttpService(user_agent='TestAgent', http_client=Mock(return_value=resp))
    with http.open('http://example.com') as response:
        assert response.content_type == 'text/html; charset=utf-8'
        assert response.encoding == 'utf-8'


def test_guessed_charset_is_not_reported():
    resp = _response(headers={'Content-Type': 'text/html'}, encoding='ISO-8859-1')
    http = HttpService(user_agent='TestAgent', http_client=Mock(return_value=resp))
    with http.open('http://example.com') as response:
        assert response.content_type == 'text/html'
        assert response.encoding is None


def test_missing_content_type():
    http = HttpService(user_agent='TestAgent', http_client=Mock(return_value=_response(headers={})))
    with http.open('http://example.com') as response:
        assert response.content_type is None
        assert response.encoding is None


def test_open_bubbles_unexpected_exceptions():
    """Verify that non-requests exceptions from headers.get() are NOT swallowed."""
    resp = _response()
    resp.headers = Mock()
    resp.headers.get.side_effect = RuntimeError("Real bug in headers.get()")
    http = HttpService(user_agent='TestAgent', http_client=Mock(return_value=resp))

    with pytest.raises(RuntimeError, match="Real bug"):
        with http.open('http://example.com'):
            pass
    assert resp.close.called
