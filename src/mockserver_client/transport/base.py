"""
MockServer Client Transport Abstraction

The client depends only on this interface, so tests can swap in a
deterministic double instead of the network.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, Optional


@dataclass(frozen=True)
class TransportRequest:
    """A fully formed outbound control request."""

    method: str
    url: str
    body: Optional[bytes] = None
    headers: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class TransportResponse:
    """Status code and fully read body of a control response."""

    status_code: int
    body: bytes = b''

    @property
    def text(self) -> str:
        """Body decoded as UTF-8, undecodable bytes replaced."""
        return self.body.decode('utf-8', errors='replace')


class Transport(ABC):
    """Sends a prepared request and returns the complete response."""

    @abstractmethod
    def send(self, request: TransportRequest) -> TransportResponse:
        """
        Send a request.

        Implementations must read the whole body and release the underlying
        response before returning, on success and failure alike.

        Raises:
            TransportError: Connection, timeout or I/O failure
            RequestConstructionError: The request URL is malformed
        """
