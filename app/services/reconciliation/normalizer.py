"""Company name canonicalization used for matching."""

import re
from typing import Optional

_PUNCTUATION_RE = re.compile(r"[.,;:\-_/]")
_WHITESPACE_RE = re.compile(r"\s+")

# Italian legal-form suffixes, stripped as whole words
LEGAL_SUFFIXES = (
    "srl", "s.r.l",
    "srls", "s.r.l.s",
    "spa", "s.p.a",
    "snc", "s.n.c",
    "sas", "s.a.s",
    "sb", "s.b",
    "ss", "s.s",
    "sc", "s.c",
    "scarl", "s.c.a.r.l",
)

_SUFFIX_RES = tuple(
    re.compile(r"\b" + re.escape(suffix) + r"\b", re.IGNORECASE) for suffix in LEGAL_SUFFIXES
)


def _collapse(value: str) -> str:
    return _WHITESPACE_RE.sub(" ", value).strip()


def normalize_company_name(name: Optional[str]) -> str:
    """
    Normalize a company name for matching.

    Lowercases, removes punctuation, collapses whitespace and strips legal
    suffixes (srl, spa, ...) as whole words. Idempotent.

    Examples:
        "Acme S.r.l." -> "acme"
        "ACME SRL" -> "acme"
        "Working Mom Srl SB" -> "working mom"
    """
    if not name:
        return ""

    normalized = _PUNCTUATION_RE.sub("", name.lower().strip())
    normalized = _WHITESPACE_RE.sub(" ", normalized)

    for suffix_re in _SUFFIX_RES:
        normalized = suffix_re.sub("", normalized).strip()

    return _collapse(normalized)


def exact_key(name: Optional[str]) -> str:
    """Key for raw exact matching: lowercase + trim only."""
    if not name:
        return ""
    return name.lower().strip()
