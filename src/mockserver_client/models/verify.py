"""
MockServer Verification Models

Wire shape of a verification: which request to look for in MockServer's
request log and how many times it must have been received.
"""

from dataclasses import dataclass, field
from typing import Dict, Any, Optional

from ..errors import SerializationError
from .create import require_key

# Body matcher type, as described in the MockServer documentation
TYPE_JSON = "JSON"

# JSON body match types
MATCH_TYPE_STRICT = "STRICT"
MATCH_TYPE_ONLY_MATCHING_FIELDS = "ONLY_MATCHING_FIELDS"


@dataclass(frozen=True)
class BodyMatcher:
    """
    How MockServer should compare a logged request body.

    The client never interprets ``match_type``; it is transmitted as-is.
    ``json`` optionally carries the expected body shape.
    """

    match_type: str
    json: Optional[Any] = None
    type: str = field(default=TYPE_JSON, init=False)

    def to_dict(self) -> Dict[str, Any]:
        data = {'type': self.type, 'matchType': self.match_type}
        if self.json is not None:
            data['json'] = self.json
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'BodyMatcher':
        body_type = data.get('type', TYPE_JSON) if isinstance(data, dict) else None
        if body_type != TYPE_JSON:
            raise SerializationError(f"Unsupported body matcher type: {body_type!r}")
        return cls(
            match_type=require_key(data, 'matchType', 'body'),
            json=data.get('json')
        )


@dataclass(frozen=True)
class VerificationHttpRequest:
    """Request to look for in MockServer's request log."""

    method: str
    path: str
    body: Optional[BodyMatcher] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {'method': self.method, 'path': self.path}
        if self.body is not None:
            data['body'] = self.body.to_dict()
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'VerificationHttpRequest':
        body = data.get('body') if isinstance(data, dict) else None
        return cls(
            method=require_key(data, 'method', 'httpRequest'),
            path=require_key(data, 'path', 'httpRequest'),
            body=BodyMatcher.from_dict(body) if body is not None else None
        )


@dataclass(frozen=True)
class VerificationTimes:
    """
    Call bounds for a verification.

    ``None`` means "not specified" and the key is left out of the payload.
    An explicit 0 is a real bound and is sent.
    """

    at_least: Optional[int] = None
    at_most: Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {}
        if self.at_least is not None:
            data['atLeast'] = self.at_least
        if self.at_most is not None:
            data['atMost'] = self.at_most
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'VerificationTimes':
        return cls(at_least=data.get('atLeast'), at_most=data.get('atMost'))


@dataclass(frozen=True)
class VerificationRequest:
    """A query against MockServer's request log."""

    http_request: VerificationHttpRequest
    times: VerificationTimes = field(default_factory=VerificationTimes)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to the JSON structure PUT to /mockserver/verify."""
        return {
            'httpRequest': self.http_request.to_dict(),
            'times': self.times.to_dict()
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'VerificationRequest':
        times = data.get('times') if isinstance(data, dict) else None
        return cls(
            http_request=VerificationHttpRequest.from_dict(
                require_key(data, 'httpRequest', 'verification')
            ),
            times=VerificationTimes.from_dict(times or {})
        )
