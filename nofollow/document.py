"""
Document layer: HTML string ⇄ BeautifulSoup tree.

Design principle: recover from bad HTML whenever any parser can. Only when
every parser in the chain raises does parsing fail, with a ParseError.
"""

from typing import Optional, Union
from bs4 import BeautifulSoup

from .logger import get_module_logger
from .exceptions import ParseError

logger = get_module_logger("document")

# --- Parser fallback chain: html5lib → lxml → html.parser ---
# html5lib implements the WHATWG parsing algorithm and recovers from the
# worst malformed markup. lxml is fast and tolerant; html.parser ships with
# Python and is always available.
PARSERS = ('html5lib', 'lxml', 'html.parser')


def parse_document(html: Union[str, bytes], warnings: Optional[list[str]] = None) -> BeautifulSoup:
    """
    Parse HTML into a mutable tree.

    Args:
        html: Raw HTML text or bytes, well-formed or not
        warnings: Optional list that receives one entry per failed parser

    Returns:
        BeautifulSoup document with attribute values kept as plain strings

    Raises:
        ParseError: if the input is not text or no parser could handle it
    """
    if not isinstance(html, (str, bytes)):
        logger.error(f"Cannot parse {type(html).__name__} as HTML")
        raise ParseError(
            "Could not parse the provided HTML.",
            details={"input_type": type(html).__name__}
        )

    attempts = []
    for parser in PARSERS:
        try:
            # multi_valued_attributes=None keeps rel="a b" as the string "a b"
            # instead of a list, so tokens are split exactly once, by us.
            return BeautifulSoup(html, parser, multi_valued_attributes=None)
        except Exception as e:
            logger.warning(f"{parser} parsing failed: {e}")
            attempts.append((parser, str(e)))
            if warnings is not None:
                warnings.append(f"{parser} parsing failed: {e}")

    logger.error(f"All parsers failed: {', '.join(p for p, _ in attempts)}")
    raise ParseError("Could not parse the provided HTML.", attempts=attempts)


def serialize_document(soup: BeautifulSoup) -> str:
    """Serialize the whole document, touched or not."""
    return str(soup)
