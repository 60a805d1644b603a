"""
MockServer Client Common Utilities

Shared helpers used across mockserver_client modules.
"""

from .url_utils import URLBuilder
from .utils import ExpectationLoader

__all__ = [
    'URLBuilder',
    'ExpectationLoader'
]
