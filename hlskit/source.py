"""
Manifest source acquisition for HLSKit.

Fetches manifest bytes over HTTP(S) or reads them from disk. This is the only
fallible step of loading a manifest; parsing itself never raises. Timeouts
live here, the parser has none.
"""

import logging
from typing import Dict, Optional

import requests

logger = logging.getLogger(__name__)


class ManifestSourceError(Exception):
    """Raised when manifest content cannot be acquired."""


class ManifestIOError(ManifestSourceError, IOError):
    """Raised when a local manifest file cannot be read."""


class NetworkError(ManifestSourceError):
    """Raised when a manifest request fails at the transport level."""


class HTTPStatusError(NetworkError):
    """Raised when a manifest request answers with a non-200 status."""

    def __init__(self, url: str, status_code: int):
        super().__init__(f"HTTP error {status_code} for {url}")
        self.url = url
        self.status_code = status_code


def fetch_manifest_text(
    url: str,
    timeout: int = 30,
    verify_ssl: bool = True,
    headers: Optional[Dict[str, str]] = None,
) -> bytes:
    """
    Download manifest content from a URL.

    Args:
        url: Manifest URL
        timeout: Request timeout in seconds (default: 30)
        verify_ssl: Whether to verify SSL certificates (default: True)
        headers: Extra request headers

    Returns:
        Raw response body

    Raises:
        NetworkError: If the request fails
        HTTPStatusError: If the response status is not 200
    """
    try:
        response = requests.get(url, timeout=timeout, verify=verify_ssl, headers=headers)
    except requests.RequestException as e:
        logger.error(f"Failed to fetch manifest {url}: {str(e)}")
        raise NetworkError(f"Failed to fetch manifest: {str(e)}") from e

    if response.status_code != 200:
        logger.error(f"HTTP {response.status_code} for manifest {url}")
        raise HTTPStatusError(url, response.status_code)

    logger.info(f"Fetched manifest ({len(response.content)} bytes): {url}")
    return response.content


def read_manifest_file(path: str) -> bytes:
    """
    Read manifest content from a local file.

    Raises:
        ManifestIOError: If the file cannot be opened or read
    """
    try:
        with open(path, 'rb') as f:
            content = f.read()
    except OSError as e:
        logger.error(f"Failed to read manifest {path}: {str(e)}")
        raise ManifestIOError(f"Failed to read manifest file: {str(e)}") from e

    logger.info(f"Read manifest ({len(content)} bytes): {path}")
    return content
