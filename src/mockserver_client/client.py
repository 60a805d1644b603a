"""
MockServer Control Client

Programs a remote MockServer: registers expectations, verifies received
requests and resets server state between test runs.

Every operation is one blocking PUT to a fixed control path. A status code
other than the one the operation expects raises RemoteRejectionError with
the code and the raw response body.
"""

import json
import logging
from typing import Any, Dict, Iterable, Optional

from .common import URLBuilder, ExpectationLoader
from .errors import SerializationError, RemoteRejectionError
from .models import Expectation, VerificationRequest
from .transport import Transport, TransportRequest, RequestsTransport

logger = logging.getLogger("mockserver_client.client")

EXPECTATION_PATH = "/mockserver/expectation"
VERIFY_PATH = "/mockserver/verify"
RESET_PATH = "/mockserver/reset"

JSON_HEADERS = {'Content-Type': 'application/json'}


class MockServerClient:
    """
    Client for the MockServer control API.

    Holds only the base URL and the transport; both are fixed at
    construction, so one instance can be shared between threads as long as
    the transport can.

    Example:
        client = MockServerClient('mockserver:1080')
        client.reset()
        client.create_expectation(Expectation(
            http_request=HttpRequest(method='GET', path='/users/1'),
            http_response=HttpResponse(status_code=200, body={'id': 1}),
            times=Times(remaining_times=1, unlimited=False)
        ))
        # ... exercise the system under test ...
        client.verify_request(VerificationRequest(
            http_request=VerificationHttpRequest(method='GET', path='/users/1'),
            times=VerificationTimes(at_least=1)
        ))
    """

    def __init__(self, address: str, transport: Optional[Transport] = None):
        """
        Initialize client.

        Args:
            address: MockServer address; 'host:port' gets an http:// prefix
            transport: Optional Transport (defaults to RequestsTransport)

        Raises:
            RequestConstructionError: If address is not a usable HTTP(S) address
        """
        self._base_url = URLBuilder.normalize_address(address)
        self._transport = transport if transport is not None else RequestsTransport()

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def transport(self) -> Transport:
        return self._transport

    def create_expectation(self, expectation: Expectation):
        """
        Register an expectation. MockServer answers 201 when accepted.

        Raises:
            SerializationError: If the expectation cannot be encoded
            TransportError: If the request could not be sent
            RemoteRejectionError: If MockServer did not answer 201
        """
        self._execute(
            operation="creating mockserver expectation",
            path=EXPECTATION_PATH,
            payload=self._serialize(expectation),
            expected_status=201
        )

    def verify_request(self, verification: VerificationRequest):
        """
        Verify a request was received within the given bounds.

        MockServer answers 202 when the request log satisfies the bounds and
        406 when it doesn't; the 406 body explains what was found instead.

        Raises:
            SerializationError: If the verification cannot be encoded
            TransportError: If the request could not be sent
            RemoteRejectionError: If MockServer did not answer 202
        """
        self._execute(
            operation="verifying mockserver request",
            path=VERIFY_PATH,
            payload=self._serialize(verification),
            expected_status=202
        )

    def reset(self):
        """
        Clear all expectations and recorded requests. Expects 200.

        Raises:
            TransportError: If the request could not be sent
            RemoteRejectionError: If MockServer did not answer 200
        """
        self._execute(
            operation="resetting mockserver",
            path=RESET_PATH,
            payload=None,
            expected_status=200
        )

    def create_expectations(self, expectations: Iterable[Expectation]) -> int:
        """
        Register several expectations in order, one request each.

        Stops at the first failure; earlier expectations stay registered.

        Returns:
            Number of expectations registered
        """
        count = 0
        for expectation in expectations:
            self.create_expectation(expectation)
            count += 1
        return count

    def load_expectations(self, file_path: str) -> int:
        """
        Register every expectation defined in a JSON or YAML file.

        Args:
            file_path: Path to an expectation file (see ExpectationLoader)

        Returns:
            Number of expectations registered
        """
        expectations = ExpectationLoader(file_path).load()
        return self.create_expectations(expectations)

    def close(self):
        """Close the transport, if it holds resources."""
        close = getattr(self._transport, 'close', None)
        if callable(close):
            close()

    def __enter__(self) -> 'MockServerClient':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    @staticmethod
    def _serialize(model: Any) -> bytes:
        """Encode a wire model as compact JSON."""
        try:
            data: Dict[str, Any] = model.to_dict()
            return json.dumps(data, separators=(',', ':'), allow_nan=False).encode('utf-8')
        except (TypeError, ValueError, RecursionError) as e:
            raise SerializationError(
                f"Cannot encode {type(model).__name__} as JSON: {e}"
            ) from e

    def _execute(
        self,
        operation: str,
        path: str,
        payload: Optional[bytes],
        expected_status: int
    ):
        """Send one control request and check its status code."""
        url = URLBuilder.join(self._base_url, path)
        request = TransportRequest(
            method="PUT",
            url=url,
            body=payload,
            headers=dict(JSON_HEADERS) if payload is not None else {}
        )

        logger.debug(f"PUT {url}")
        response = self._transport.send(request)
        logger.debug(f"PUT {url} -> {response.status_code}")

        if response.status_code != expected_status:
            error = RemoteRejectionError(operation, response.status_code, response.text)
            logger.warning(str(error))
            raise error
