"""Name keys for matching scraped pitcher names.

Scrapers sometimes glue a position marker onto the name (``"John Doe - P"``),
and sources disagree on punctuation and spacing. A name key throws all of
that away so records for the same person compare equal.
"""

import re

POSITION_ARTIFACT = " - P"

_POSITION_SUFFIX_RE = re.compile(r"\s*-\s*p\s*", re.IGNORECASE)
_NON_LETTER_RE = re.compile(r"[^a-z\s]")
_WHITESPACE_RE = re.compile(r"\s+")


def normalize_name(raw_name: str | None) -> str:
    if not raw_name:
        return ""
    key = raw_name.lower()
    key = _POSITION_SUFFIX_RE.sub(" ", key)
    key = _NON_LETTER_RE.sub("", key)
    key = _WHITESPACE_RE.sub(" ", key)
    return key.strip()


def _contains_tokens(haystack: list[str], needle: list[str]) -> bool:
    width = len(needle)
    return any(haystack[i : i + width] == needle for i in range(len(haystack) - width + 1))


def keys_match(a: str, b: str) -> bool:
    """Compare two already-normalized keys.

    Equal keys match. Failing that, the shorter key matches when its tokens
    appear as a contiguous run in the longer one ("smith" in "john smith",
    but not "lee" in "leeroy"). Empty keys never match.
    """
    if not a or not b:
        return False
    if a == b:
        return True
    a_tokens, b_tokens = a.split(), b.split()
    if len(a_tokens) > len(b_tokens):
        a_tokens, b_tokens = b_tokens, a_tokens
    return _contains_tokens(b_tokens, a_tokens)


def names_match(a: str | None, b: str | None) -> bool:
    return keys_match(normalize_name(a), normalize_name(b))


def has_position_artifact(name: str | None) -> bool:
    return name is not None and POSITION_ARTIFACT in name
