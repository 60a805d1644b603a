"""
MockServer Client Requests Transport

Default blocking transport built on a pooled requests.Session.
"""

import logging
from typing import Optional

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from .base import Transport, TransportRequest, TransportResponse
from ..config import TransportConfig
from ..errors import TransportError, RequestConstructionError


class RequestsTransport(Transport):
    """
    Send control requests through a shared requests.Session.

    Every request is attempted exactly once. The response is streamed,
    read to the end and closed before send() returns, on every exit path.

    Example:
        transport = RequestsTransport(TransportConfig(timeout=5))
        client = MockServerClient('localhost:1080', transport=transport)
    """

    def __init__(self, config: Optional[TransportConfig] = None):
        """
        Initialize transport.

        Args:
            config: Optional TransportConfig (timeouts, TLS verification, pool sizes)
        """
        self.config = config or TransportConfig()

        self.logger = logging.getLogger("mockserver_client.transport")
        self.logger.setLevel(self.config.level)

        self.session = self._create_session()

    def _create_session(self) -> requests.Session:
        """Create HTTP session with a pooled adapter and no retries."""
        session = requests.Session()

        # Single attempt per request
        retry_strategy = Retry(total=0, read=False)

        adapter = HTTPAdapter(
            pool_connections=self.config.pool_connections,
            pool_maxsize=self.config.pool_maxsize,
            max_retries=retry_strategy
        )
        session.mount("http://", adapter)
        session.mount("https://", adapter)

        return session

    def send(self, request: TransportRequest) -> TransportResponse:
        """
        Send a control request and read the full response.

        Args:
            request: Prepared TransportRequest

        Returns:
            TransportResponse with status code and raw body

        Raises:
            RequestConstructionError: If requests rejects the URL
            TransportError: On connection, timeout or body read failure
        """
        try:
            response = self.session.request(
                method=request.method,
                url=request.url,
                data=request.body,
                headers=request.headers,
                timeout=self.config.timeout,
                verify=self.config.verify_ssl,
                allow_redirects=False,
                stream=True
            )
        except (requests.exceptions.MissingSchema,
                requests.exceptions.InvalidSchema,
                requests.exceptions.InvalidURL) as e:
            raise RequestConstructionError(f"Invalid control URL {request.url}: {e}") from e
        except requests.exceptions.RequestException as e:
            raise TransportError(
                f"{request.method} {request.url} failed: {e}",
                method=request.method,
                url=request.url
            ) from e

        try:
            body = response.content
        except requests.exceptions.RequestException as e:
            raise TransportError(
                f"Reading response body of {request.method} {request.url} failed: {e}",
                method=request.method,
                url=request.url
            ) from e
        finally:
            self._release(response)

        return TransportResponse(status_code=response.status_code, body=body)

    def _release(self, response: requests.Response):
        """Close the response; a failure here is logged, never raised."""
        try:
            response.close()
        except Exception as e:
            self.logger.warning(f"Failed to close response from {response.url}: {e}")

    def close(self):
        """Close the underlying session and its connection pool."""
        self.session.close()
