"""
Link Annotator: adds rel="nofollow" to off-site links.

For every <a> in document order the first matching rule wins:
  1. no href (or an empty one)                → skip
  2. no host and relative links are ignored   → skip
  3. host is the current host                 → skip
  4. host is allowlisted                      → skip
  5. rel already contains "nofollow"          → skip
  6. otherwise                                → append "nofollow" to rel

The whole document is re-serialized afterwards. Running the annotator twice
with the same policy changes nothing the second time.
"""

from typing import Iterable, Optional, Union

from .document import parse_document, serialize_document
from .hosts import HostProvider, extract_host, strip_port
from .schemas import Policy, AnnotationResult, LinkDecision, LinkAction, LinkReason
from .logger import get_module_logger

logger = get_module_logger("annotator")

NOFOLLOW = "nofollow"


class Annotator:
    """
    Adds rel="nofollow" to external links.

    The current host is fixed at construction time (explicit) or, when not
    given, asked of the host provider on every call. Instances never change
    after construction; with_current_host() returns a new one.
    """

    def __init__(
        self,
        current_host: Optional[str] = None,
        host_provider: Optional[HostProvider] = None
    ):
        # "" is treated as not set
        self._current_host = current_host or None
        self._host_provider = host_provider

    @property
    def current_host(self) -> Optional[str]:
        """The explicitly configured host, or None."""
        return self._current_host

    @property
    def host_provider(self) -> Optional[HostProvider]:
        return self._host_provider

    def with_current_host(self, host: str) -> "Annotator":
        """Return a copy of this annotator pinned to an explicit host."""
        return Annotator(current_host=host, host_provider=self._host_provider)

    def resolve_current_host(self, policy: Optional[Policy] = None) -> str:
        """
        Work out which host counts as "this site" for one call.

        Precedence: policy.current_host, then the annotator's explicit host,
        then the host provider (port stripped). Returns "" when none of them
        knows.
        """
        if policy is not None and policy.current_host:
            return policy.current_host
        if self._current_host:
            return self._current_host
        if self._host_provider is not None:
            return strip_port(self._host_provider.get_current_host() or "")
        return ""

    def process(self, html: Union[str, bytes], policy: Optional[Policy] = None) -> AnnotationResult:
        """
        Annotate HTML and report what happened to every link.

        Args:
            html: HTML string, not necessarily well-formed
            policy: Annotation policy (defaults: empty allowlist, ignore relative)

        Returns:
            AnnotationResult with the serialized HTML and one decision per anchor

        Raises:
            ParseError: if the HTML cannot be parsed at all
        """
        policy = policy or Policy()
        warnings = []

        soup = parse_document(html, warnings)
        current_host = self.resolve_current_host(policy)
        logger.debug(f"Current host: {current_host!r}")

        decisions = []
        for anchor in soup.find_all('a'):
            decision = self._classify(anchor, policy, current_host)
            if decision.action == LinkAction.ANNOTATED:
                anchor['rel'] = decision.rel_after
            logger.debug(f"{decision.href!r}: {decision.action.value} ({decision.reason.value})")
            decisions.append(decision)

        result = AnnotationResult(
            html=serialize_document(soup),
            links=decisions,
            warnings=warnings
        )
        logger.debug(f"Annotated {len(result.annotated)} of {len(decisions)} links")
        return result

    def annotate(
        self,
        html: Union[str, bytes],
        allowlist: Iterable[str] = (),
        ignore_relative: bool = True,
        current_host: Optional[str] = None
    ) -> str:
        """
        Add rel="nofollow" to external links in a string of HTML.

        Args:
            html: HTML string
            allowlist: Hostnames to leave alone
            ignore_relative: Whether to leave relative links (e.g. /about-us) alone
            current_host: Overrides the annotator's host for this call only

        Returns:
            The re-serialized HTML

        Raises:
            ParseError: if the HTML cannot be parsed at all
        """
        policy = Policy(
            current_host=current_host,
            allowlist=frozenset(allowlist),
            ignore_relative=ignore_relative
        )
        return self.process(html, policy).html

    def _classify(self, anchor, policy: Policy, current_host: str) -> LinkDecision:
        """Apply the skip rules to one anchor and compute its new rel."""
        href = anchor.get('href')
        rel = anchor.get('rel')

        def skip(reason: LinkReason, host: Optional[str] = None) -> LinkDecision:
            return LinkDecision(href=href, host=host, rel_before=rel, rel_after=rel,
                                action=LinkAction.SKIPPED, reason=reason)

        if href is None or not href.strip():
            return skip(LinkReason.MISSING_HREF)

        host = extract_host(href)

        if host is None:
            if policy.ignore_relative:
                return skip(LinkReason.RELATIVE)
        elif host == current_host:
            return skip(LinkReason.CURRENT_HOST, host)
        elif host in policy.allowlist:
            return skip(LinkReason.ALLOWLISTED, host)

        if rel is None:
            new_rel = NOFOLLOW
        else:
            # Single-space split: "a  b" keeps its empty token and round-trips
            tokens = rel.split(' ')
            if NOFOLLOW in tokens:
                return skip(LinkReason.ALREADY_NOFOLLOW, host)
            new_rel = ' '.join(tokens + [NOFOLLOW])

        return LinkDecision(href=href, host=host, rel_before=rel, rel_after=new_rel,
                            action=LinkAction.ANNOTATED, reason=LinkReason.EXTERNAL)


def annotate(
    html: Union[str, bytes],
    allowlist: Iterable[str] = (),
    ignore_relative: bool = True,
    current_host: Optional[str] = None,
    host_provider: Optional[HostProvider] = None
) -> str:
    """Convenience function to annotate HTML in one call."""
    return Annotator(host_provider=host_provider).annotate(
        html, allowlist=allowlist, ignore_relative=ignore_relative, current_host=current_host
    )


def annotate_with_report(
    html: Union[str, bytes],
    policy: Optional[Policy] = None,
    host_provider: Optional[HostProvider] = None
) -> AnnotationResult:
    """Convenience function returning the full AnnotationResult."""
    return Annotator(host_provider=host_provider).process(html, policy)
