"""
Host extraction and current-host providers.

extract_host() turns an href into the host used for classification.
HostProvider implementations answer "what is this site's host?" when no
explicit host was configured, so the annotator never reads request state
directly and tests can inject a fixed value.
"""

import os
from abc import ABC, abstractmethod
from typing import Mapping, Optional
from urllib.parse import urlsplit

from .logger import get_module_logger

logger = get_module_logger("hosts")


def strip_port(host: str) -> str:
    """
    Drop a trailing ":port" from a host value.

    Bracketed IPv6 literals ("[::1]:8080") keep their brackets so they
    compare equal to the host extract_host() returns for the same URL.
    """
    if host.startswith('['):
        end = host.find(']')
        return host[:end + 1] if end != -1 else host
    return host.split(':', 1)[0]


def extract_host(href: str) -> Optional[str]:
    """
    Return the host component of an href, or None if it has none.

    Relative paths, fragments, mailto: links and strings urlsplit rejects
    all count as "no host". Case is preserved. Never raises.
    """
    try:
        parts = urlsplit(href.strip())
    except ValueError as e:
        logger.debug(f"Unparseable href {href!r}: {e}")
        return None

    if not parts.netloc:
        return None

    # user:pass@host:port → host
    host = strip_port(parts.netloc.rpartition('@')[2])
    return host or None


class HostProvider(ABC):
    """Abstract source of the current site's host."""

    @abstractmethod
    def get_current_host(self) -> str:
        """
        Return the current host without a port, or "" when unknown.
        """
        pass


class StaticHostProvider(HostProvider):
    """Always returns the same host."""

    def __init__(self, host: str):
        self.host = strip_port(host) if host else ""

    def get_current_host(self) -> str:
        return self.host


class EnvironHostProvider(HostProvider):
    """
    Reads the request host from a CGI/WSGI style environ mapping.

    The mapping is read on every call, so passing a per-request WSGI environ
    (or leaving the default of os.environ under CGI) always reflects the
    current request.
    """

    def __init__(self, environ: Optional[Mapping[str, str]] = None, key: str = "HTTP_HOST"):
        self.environ = environ if environ is not None else os.environ
        self.key = key

    def get_current_host(self) -> str:
        value = self.environ.get(self.key) or ""
        return strip_port(value.strip())
