"""
Tests for MockServer Client Requests Transport

Tests the requests-based transport including:
- Session and adapter setup (no retries)
- Request parameters passed to requests
- Mapping of requests exceptions to client errors
- Response release on every exit path
"""

import logging
import pickle
from unittest.mock import Mock, PropertyMock, patch

import pytest
import requests

from src.mockserver_client.config import TransportConfig
from src.mockserver_client.errors import TransportError, RequestConstructionError
from src.mockserver_client.transport import (
    RequestsTransport,
    TransportRequest,
    TransportResponse
)


@pytest.fixture
def put_request():
    """Control request carrying a JSON body."""
    return TransportRequest(
        method='PUT',
        url='http://mockserver:1080/mockserver/expectation',
        body=b'{"a":1}',
        headers={'Content-Type': 'application/json'}
    )


def make_response(status_code=201, content=b'{}'):
    response = Mock()
    response.status_code = status_code
    response.content = content
    response.url = 'http://mockserver:1080/mockserver/expectation'
    return response


class TestTransportResponse:
    """Test TransportResponse value type."""

    def test_text(self):
        """Test body is decoded as UTF-8."""
        response = TransportResponse(status_code=406, body='café'.encode('utf-8'))

        assert response.text == 'café'

    def test_text_replaces_invalid_bytes(self):
        """Test undecodable bytes do not raise."""
        response = TransportResponse(status_code=500, body=b'\xff\xfeerror')

        assert response.text.endswith('error')

    def test_default_body(self):
        """Test empty body by default."""
        assert TransportResponse(status_code=200).text == ''


class TestRequestsTransportSetup:
    """Test session construction."""

    def test_default_config(self):
        """Test defaults are used without a config."""
        transport = RequestsTransport()

        assert transport.config == TransportConfig()
        transport.close()

    def test_adapter_has_no_retries(self):
        """Test the mounted adapter never retries."""
        transport = RequestsTransport(TransportConfig(pool_maxsize=4))

        for prefix in ('http://mockserver', 'https://mockserver'):
            adapter = transport.session.get_adapter(prefix)
            assert adapter.max_retries.total == 0
            assert adapter._pool_maxsize == 4

        transport.close()

    def test_log_level_applied(self):
        """Test configured log level is set on the transport logger."""
        transport = RequestsTransport(TransportConfig(log_level='debug'))

        assert transport.logger.level == logging.DEBUG
        transport.close()


class TestRequestsTransportSend:
    """Test sending requests."""

    @patch('src.mockserver_client.transport.requests_transport.requests.Session')
    def test_send_success(self, mock_session_class, put_request):
        """Test request parameters and response conversion."""
        mock_response = make_response(201, b'{"ok":true}')
        mock_session = Mock()
        mock_session.request.return_value = mock_response
        mock_session_class.return_value = mock_session

        transport = RequestsTransport(TransportConfig(timeout=5, verify_ssl=False))
        result = transport.send(put_request)

        assert result == TransportResponse(status_code=201, body=b'{"ok":true}')
        mock_session.request.assert_called_once_with(
            method='PUT',
            url='http://mockserver:1080/mockserver/expectation',
            data=b'{"a":1}',
            headers={'Content-Type': 'application/json'},
            timeout=5,
            verify=False,
            allow_redirects=False,
            stream=True
        )
        mock_response.close.assert_called_once()

    @patch('src.mockserver_client.transport.requests_transport.requests.Session')
    def test_connection_error(self, mock_session_class, put_request):
        """Test connection failures become TransportError after one attempt."""
        mock_session = Mock()
        failure = requests.exceptions.ConnectionError('Connection refused')
        mock_session.request.side_effect = failure
        mock_session_class.return_value = mock_session

        transport = RequestsTransport()

        with pytest.raises(TransportError) as exc_info:
            transport.send(put_request)

        assert exc_info.value.__cause__ is failure
        assert exc_info.value.method == 'PUT'
        assert exc_info.value.url == put_request.url
        assert 'Connection refused' in str(exc_info.value)
        assert mock_session.request.call_count == 1

        restored = pickle.loads(pickle.dumps(exc_info.value))
        assert isinstance(restored, TransportError)
        assert str(restored) == str(exc_info.value)
        assert restored.url == put_request.url

    @patch('src.mockserver_client.transport.requests_transport.requests.Session')
    def test_timeout(self, mock_session_class, put_request):
        """Test timeouts become TransportError."""
        mock_session = Mock()
        mock_session.request.side_effect = requests.exceptions.ReadTimeout('timed out')
        mock_session_class.return_value = mock_session

        with pytest.raises(TransportError, match='timed out'):
            RequestsTransport().send(put_request)

    @pytest.mark.parametrize('exception', [
        requests.exceptions.MissingSchema('no scheme'),
        requests.exceptions.InvalidSchema('bad scheme'),
        requests.exceptions.InvalidURL('bad url')
    ])
    @patch('src.mockserver_client.transport.requests_transport.requests.Session')
    def test_invalid_url(self, mock_session_class, exception, put_request):
        """Test URL errors become RequestConstructionError."""
        mock_session = Mock()
        mock_session.request.side_effect = exception
        mock_session_class.return_value = mock_session

        with pytest.raises(RequestConstructionError):
            RequestsTransport().send(put_request)

    @patch('src.mockserver_client.transport.requests_transport.requests.Session')
    def test_body_read_failure(self, mock_session_class, put_request):
        """Test a failure reading the body is a TransportError and still closes."""
        mock_response = Mock()
        mock_response.url = put_request.url
        type(mock_response).content = PropertyMock(
            side_effect=requests.exceptions.ChunkedEncodingError('connection broken')
        )
        mock_session = Mock()
        mock_session.request.return_value = mock_response
        mock_session_class.return_value = mock_session

        with pytest.raises(TransportError, match='Reading response body'):
            RequestsTransport().send(put_request)

        mock_response.close.assert_called_once()

    @patch('src.mockserver_client.transport.requests_transport.requests.Session')
    def test_close_failure_is_logged(self, mock_session_class, put_request, caplog):
        """Test a failing close is logged and the response still returned."""
        mock_response = make_response(201, b'created')
        mock_response.close.side_effect = OSError('socket already closed')
        mock_session = Mock()
        mock_session.request.return_value = mock_response
        mock_session_class.return_value = mock_session

        transport = RequestsTransport()
        with caplog.at_level(logging.WARNING, logger='mockserver_client.transport'):
            result = transport.send(put_request)

        assert result.status_code == 201
        assert 'Failed to close response' in caplog.text
        assert 'socket already closed' in caplog.text

    @patch('src.mockserver_client.transport.requests_transport.requests.Session')
    def test_close_closes_session(self, mock_session_class):
        """Test close() closes the session."""
        mock_session = Mock()
        mock_session_class.return_value = mock_session

        RequestsTransport().close()

        mock_session.close.assert_called_once()
