"""
nofollow

Adds rel="nofollow" to links that point off-site.
- Document: parse HTML into a tree (with parser fallback) and serialize it back
- Hosts: extract hosts from hrefs, supply the current site's host
- Annotator: classify every link and merge "nofollow" into its rel

Public API surface:
  Core                  — Annotator, annotate, annotate_with_report
  Data models           — Policy, AnnotationResult, LinkDecision, LinkAction, LinkReason
  Host providers        — HostProvider, StaticHostProvider, EnvironHostProvider
  Error types           — NoFollowError, ParseError (alias MalformedInputError)
"""

from .annotator import Annotator, annotate, annotate_with_report

from .schemas import Policy, AnnotationResult, LinkDecision, LinkAction, LinkReason

from .hosts import HostProvider, StaticHostProvider, EnvironHostProvider, extract_host, strip_port

from .exceptions import NoFollowError, ParseError, MalformedInputError

__version__ = "0.1.0"
__all__ = [
    "Annotator",
    "annotate",
    "annotate_with_report",
    "Policy",
    "AnnotationResult",
    "LinkDecision",
    "LinkAction",
    "LinkReason",
    "HostProvider",
    "StaticHostProvider",
    "EnvironHostProvider",
    "extract_host",
    "strip_port",
    "NoFollowError",
    "ParseError",
    "MalformedInputError",
]
