"""
MockServer Client Models

Typed wire models for the MockServer control API.

This module provides:
- Expectation models (request matcher, response template, call policy)
- Verification models (request matcher, body matcher, call bounds)
"""

from .create import Expectation, HttpRequest, HttpResponse, Times
from .verify import (
    VerificationRequest,
    VerificationHttpRequest,
    VerificationTimes,
    BodyMatcher,
    TYPE_JSON,
    MATCH_TYPE_STRICT,
    MATCH_TYPE_ONLY_MATCHING_FIELDS
)

__all__ = [
    # Expectations
    'Expectation',
    'HttpRequest',
    'HttpResponse',
    'Times',

    # Verification
    'VerificationRequest',
    'VerificationHttpRequest',
    'VerificationTimes',
    'BodyMatcher',
    'TYPE_JSON',
    'MATCH_TYPE_STRICT',
    'MATCH_TYPE_ONLY_MATCHING_FIELDS',
]
