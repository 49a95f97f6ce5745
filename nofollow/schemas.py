"""
Pydantic schemas defining the annotator's inputs and outputs.

Policy: per-call configuration passed into the Annotator
AnnotationResult: serialized HTML plus one LinkDecision per anchor

Data flow:
  HTML + Policy → Annotator.process() → AnnotationResult
"""

from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class Policy(BaseModel):
    """Immutable per-call annotation policy."""
    model_config = ConfigDict(frozen=True)

    # Empty or None means "ask the annotator / host provider"
    current_host: Optional[str] = None
    # Exact, case-sensitive hostname matches
    allowlist: frozenset[str] = Field(default_factory=frozenset)
    ignore_relative: bool = True


class LinkAction(str, Enum):
    ANNOTATED = "annotated"
    SKIPPED = "skipped"


class LinkReason(str, Enum):
    """Why an anchor was annotated or left alone, in rule order."""
    MISSING_HREF = "missing_href"
    RELATIVE = "relative"
    CURRENT_HOST = "current_host"
    ALLOWLISTED = "allowlisted"
    ALREADY_NOFOLLOW = "already_nofollow"
    EXTERNAL = "external"


class LinkDecision(BaseModel):
    """What happened to a single anchor."""
    href: Optional[str] = None
    host: Optional[str] = None       # None for relative or unparseable hrefs
    rel_before: Optional[str] = None
    rel_after: Optional[str] = None
    action: LinkAction
    reason: LinkReason


class AnnotationResult(BaseModel):
    """Output of Annotator.process()."""
    html: str
    links: list[LinkDecision] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)  # Parser fallbacks and other non-fatal issues

    @property
    def annotated(self) -> list[LinkDecision]:
        return [d for d in self.links if d.action == LinkAction.ANNOTATED]
