"""
URL resolution for manifest references.

Variant and segment URIs are usually relative to the manifest that lists
them. A resolver holds the base of one source, either an HTTP(S) directory
URL or a local directory, and resolves references against it without I/O.
"""

import os
from urllib.parse import urljoin, urlsplit, urlunsplit


def is_http_url(value: str) -> bool:
    """Check whether a string carries an http:// or https:// scheme."""
    lowered = value.lower()
    return lowered.startswith('http://') or lowered.startswith('https://')


def base_ref_for_url(url: str) -> str:
    """
    Get the directory URL of a manifest URL.

    Example:
        >>> base_ref_for_url("https://cdn.example.com/live/master.m3u8?token=1")
        'https://cdn.example.com/live/'
    """
    parts = urlsplit(url)
    path = parts.path.rsplit('/', 1)[0] + '/'
    return urlunsplit((parts.scheme, parts.netloc, path, '', ''))


def base_ref_for_path(path: str) -> str:
    """Get the directory of a local manifest path ("." for a bare file name)."""
    return os.path.dirname(path) or '.'


def base_ref_for_source(source_identifier: str) -> str:
    """Derive the base ref from a URL or a file path."""
    if is_http_url(source_identifier):
        return base_ref_for_url(source_identifier)
    return base_ref_for_path(source_identifier)


class URLResolver:
    """
    Resolves relative references against a single base.

    One resolver belongs to one source. Build a new one, together with a new
    parser, for every manifest that is loaded.
    """

    def __init__(self, base_ref: str):
        self.base_ref = base_ref

    @classmethod
    def for_source(cls, source_identifier: str) -> "URLResolver":
        return cls(base_ref_for_source(source_identifier))

    def resolve(self, relative: str) -> str:
        """
        Resolve a reference to an absolute URL or path.

        Args:
            relative: URI as written in the manifest

        Returns:
            The reference unchanged if it is already an HTTP(S) URL, joined with
            the base URL if the base is HTTP(S), otherwise a lexically joined path

        Example:
            >>> URLResolver("https://example.com/video/").resolve("../audio/a.m3u8")
            'https://example.com/audio/a.m3u8'
        """
        if is_http_url(relative):
            return relative
        if is_http_url(self.base_ref):
            return urljoin(self.base_ref, relative)
        return os.path.normpath(os.path.join(self.base_ref, relative))

    def __repr__(self) -> str:
        return f"URLResolver(base_ref={self.base_ref!r})"
