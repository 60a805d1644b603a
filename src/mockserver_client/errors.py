"""
MockServer Client Errors

Exception hierarchy raised by the control client and its transports.
"""

from typing import Optional


class MockServerClientError(Exception):
    """Base class for every error raised by mockserver_client."""


class SerializationError(MockServerClientError):
    """A model could not be encoded to (or decoded from) the wire format."""


class RequestConstructionError(MockServerClientError):
    """The base address or a constructed control URL is malformed."""


class TransportError(MockServerClientError):
    """
    The underlying send failed before a complete response was available.

    Covers connection failures, timeouts and I/O errors while reading the
    response body. The original exception is kept as ``__cause__``.
    """

    def __init__(self, message: str, method: Optional[str] = None, url: Optional[str] = None):
        super().__init__(message)
        self.method = method
        self.url = url

    def __reduce__(self):
        return (self.__class__, (str(self), self.method, self.url))


class RemoteRejectionError(MockServerClientError):
    """
    MockServer answered, but not with the status the operation expects.

    Attributes:
        operation: Human readable action, e.g. "creating mockserver expectation"
        status_code: Status code MockServer returned
        body: Raw response body text, verbatim
    """

    def __init__(self, operation: str, status_code: int, body: str):
        self.operation = operation
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"error {operation}. received status code: {status_code} with body: {body}"
        )

    def __reduce__(self):
        return (self.__class__, (self.operation, self.status_code, self.body))
