"""
MockServer Client Transport Module

Pluggable transport layer used by the control client.

This module provides:
- Transport interface and request/response value types
- requests-based default transport
"""

from .base import Transport, TransportRequest, TransportResponse
from .requests_transport import RequestsTransport

__all__ = [
    'Transport',
    'TransportRequest',
    'TransportResponse',
    'RequestsTransport',
]
