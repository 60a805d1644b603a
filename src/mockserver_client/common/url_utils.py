"""
MockServer Client URL Utilities

Base address normalization and control URL construction.
"""

import re
from urllib.parse import urlparse

from ..errors import RequestConstructionError

_SCHEME_RE = re.compile(r'^[A-Za-z][A-Za-z0-9+.\-]*://')

SUPPORTED_SCHEMES = ('http', 'https')


class URLBuilder:
    """Builds control URLs from a MockServer base address."""

    @staticmethod
    def has_scheme(address: str) -> bool:
        """
        Check whether an address already carries a scheme.

        A bare ``host:port`` such as ``mockserver:1080`` has none; only a
        ``scheme://`` prefix counts.
        """
        return bool(_SCHEME_RE.match(address))

    @staticmethod
    def normalize_address(address: str) -> str:
        """
        Prefix ``http://`` to an address without a scheme.

        Args:
            address: Base address, e.g. 'mockserver:1080' or 'https://mock:1080'

        Returns:
            Address with a scheme; addresses that already had one are unchanged

        Raises:
            RequestConstructionError: If the result is not a usable HTTP(S) base URL
        """
        if not isinstance(address, str) or not address.strip():
            raise RequestConstructionError(f"Invalid mockserver address: {address!r}")

        if not URLBuilder.has_scheme(address):
            address = f"http://{address}"

        URLBuilder.validate_base_url(address)
        return address

    @staticmethod
    def validate_base_url(url: str):
        """
        Raise RequestConstructionError unless url is an absolute HTTP(S) URL.

        Args:
            url: URL to check
        """
        try:
            parsed = urlparse(url)
        except ValueError as e:
            raise RequestConstructionError(f"Malformed mockserver address: {url}: {e}") from e

        if parsed.scheme.lower() not in SUPPORTED_SCHEMES:
            raise RequestConstructionError(
                f"Unsupported scheme '{parsed.scheme}' in mockserver address: {url}"
            )
        if not parsed.hostname:
            raise RequestConstructionError(f"Missing host in mockserver address: {url}")

        try:
            parsed.port
        except ValueError as e:
            raise RequestConstructionError(f"Invalid port in mockserver address: {url}") from e

    @staticmethod
    def join(base_url: str, path: str) -> str:
        """
        Append a control path to the base URL.

        Args:
            base_url: Normalized base URL
            path: Absolute path, e.g. '/mockserver/reset'

        Returns:
            Absolute control URL
        """
        return f"{base_url.rstrip('/')}{path}"
