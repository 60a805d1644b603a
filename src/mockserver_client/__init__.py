"""
MockServer Client

Python client for the MockServer control API.

This package provides:
- Control client (create expectation, verify request, reset)
- Typed wire models for expectations and verifications
- Pluggable transport with a requests-based default
- Expectation file loading (JSON / YAML)
"""

from .client import MockServerClient
from .config import TransportConfig
from .errors import (
    MockServerClientError,
    SerializationError,
    RequestConstructionError,
    TransportError,
    RemoteRejectionError
)
from .models import (
    Expectation,
    HttpRequest,
    HttpResponse,
    Times,
    VerificationRequest,
    VerificationHttpRequest,
    VerificationTimes,
    BodyMatcher,
    TYPE_JSON,
    MATCH_TYPE_STRICT,
    MATCH_TYPE_ONLY_MATCHING_FIELDS
)
from .transport import Transport, TransportRequest, TransportResponse, RequestsTransport
from .common import ExpectationLoader

__all__ = [
    # Client
    'MockServerClient',
    'TransportConfig',

    # Errors
    'MockServerClientError',
    'SerializationError',
    'RequestConstructionError',
    'TransportError',
    'RemoteRejectionError',

    # Models
    'Expectation',
    'HttpRequest',
    'HttpResponse',
    'Times',
    'VerificationRequest',
    'VerificationHttpRequest',
    'VerificationTimes',
    'BodyMatcher',
    'TYPE_JSON',
    'MATCH_TYPE_STRICT',
    'MATCH_TYPE_ONLY_MATCHING_FIELDS',

    # Transport
    'Transport',
    'TransportRequest',
    'TransportResponse',
    'RequestsTransport',

    # Loading
    'ExpectationLoader',
]

__version__ = '1.0.0'
