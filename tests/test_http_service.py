from depthcrawl.services.http_service import HttpService
from depthcrawl.exceptions import FetchError
from unittest.mock import Mock
import pytest
import requests


def test_fetch_success():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.text = 'hello world'
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    response = http.fetch('http://example.com')
    assert response.status_code == 200
    assert response.text == 'hello world'


def test_fetch_sends_user_agent_and_timeout():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.text = ''
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client, timeout=3)
    http.fetch('http://example.com')
    mock_http_client.assert_called_once_with(
        'http://example.com',
        headers={'User-Agent': 'TestAgent'},
        timeout=3,
        allow_redirects=True,
    )


def test_fetch_wraps_requests_exception():
    mock_http_client = Mock()
    mock_http_client.side_effect = requests.exceptions.Timeout("timed out")
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)

    with pytest.raises(FetchError) as exc:
        http.fetch('http://example.com')
    assert "http://example.com" in str(exc.value)
    assert isinstance(exc.value.original, requests.exceptions.Timeout)
    assert exc.value.status_code is None


@pytest.mark.parametrize("status", [404, 500, 503, 304])
def test_fetch_non_success_status_raises(status):
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = status
    mock_http_client.return_value.text = 'nope'
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)

    with pytest.raises(FetchError) as exc:
        http.fetch('http://example.com/missing')
    assert exc.value.status_code == status
    assert exc.value.url == 'http://example.com/missing'


def test_fetch_content_type_from_headers():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.text = '<html>test</html>'
    mock_http_client.return_value.headers = {'Content-Type': 'text/html; charset=utf-8'}
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    response = http.fetch('http://example.com')
    assert response.status_code == 200
    assert response.content_type == 'text/html; charset=utf-8'


def test_fetch_missing_content_type():
    mock_http_client = Mock()
    mock_http_client.return_value.status_code = 200
    mock_http_client.return_value.text = 'data'
    mock_http_client.return_value.headers = {}
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)
    response = http.fetch('http://example.com')
    assert response.content_type is None


def test_fetch_bubbles_unexpected_exceptions():
    """Verify that non-requests exceptions from headers.get() are NOT swallowed."""
    mock_http_client = Mock()
    mock_response = Mock()
    mock_response.status_code = 200
    mock_response.text = 'test'
    mock_response.headers.get.side_effect = RuntimeError("Real bug in headers.get()")
    mock_http_client.return_value = mock_response
    http = HttpService(user_agent='TestAgent', http_client=mock_http_client)

    with pytest.raises(RuntimeError, match="Real bug"):
        http.fetch('http://example.com')
