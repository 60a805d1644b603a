"""
MockServer Expectation Models

Wire shape of an expectation: a request matcher, the response to serve
when it matches, and how many times the expectation may be consumed.

Example:
    expectation = Expectation(
        http_request=HttpRequest(method='POST', path='/some/resource'),
        http_response=HttpResponse(status_code=201, body={'field': 'value'}),
        times=Times(remaining_times=1, unlimited=False)
    )
    expectation.to_dict()
    # {'httpRequest': {'method': 'POST', 'path': '/some/resource'},
    #  'httpResponse': {'statusCode': 201, 'body': {'field': 'value'}},
    #  'times': {'remainingTimes': 1, 'unlimited': False}}
"""

from dataclasses import dataclass
from typing import Dict, Any, Optional

from ..errors import SerializationError


def require_key(data: Dict[str, Any], key: str, model: str) -> Any:
    """Fetch a mandatory wire key, raising SerializationError when missing."""
    if not isinstance(data, dict):
        raise SerializationError(f"{model} must be a mapping, got {type(data).__name__}")
    if key not in data:
        raise SerializationError(f"{model} is missing required key '{key}'")
    return data[key]


@dataclass(frozen=True)
class HttpRequest:
    """Request an expectation matches against. ``body`` is any JSON-like value."""

    method: str
    path: str
    body: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {'method': self.method, 'path': self.path}
        if self.body is not None:
            data['body'] = self.body
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HttpRequest':
        return cls(
            method=require_key(data, 'method', 'httpRequest'),
            path=require_key(data, 'path', 'httpRequest'),
            body=data.get('body')
        )


@dataclass(frozen=True)
class HttpResponse:
    """Response MockServer serves when the expectation matches."""

    status_code: int
    body: Optional[Any] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {'statusCode': self.status_code}
        if self.body is not None:
            data['body'] = self.body
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'HttpResponse':
        return cls(
            status_code=require_key(data, 'statusCode', 'httpResponse'),
            body=data.get('body')
        )


@dataclass(frozen=True)
class Times:
    """
    Call policy for an expectation.

    ``remaining_times`` is sent as given even when ``unlimited`` is True;
    MockServer ignores it in that case.
    """

    remaining_times: int
    unlimited: bool

    def to_dict(self) -> Dict[str, Any]:
        return {'remainingTimes': self.remaining_times, 'unlimited': self.unlimited}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Times':
        return cls(
            remaining_times=require_key(data, 'remainingTimes', 'times'),
            unlimited=require_key(data, 'unlimited', 'times')
        )


@dataclass(frozen=True)
class Expectation:
    """A request/response rule registered with MockServer."""

    http_request: HttpRequest
    http_response: HttpResponse
    times: Times

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON structure PUT to /mockserver/expectation."""
        return {
            'httpRequest': self.http_request.to_dict(),
            'httpResponse': self.http_response.to_dict(),
            'times': self.times.to_dict()
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Expectation':
        """Create Expectation from its wire dictionary."""
        return cls(
            http_request=HttpRequest.from_dict(require_key(data, 'httpRequest', 'expectation')),
            http_response=HttpResponse.from_dict(require_key(data, 'httpResponse', 'expectation')),
            times=Times.from_dict(require_key(data, 'times', 'expectation'))
        )
