"""Slug generation for heading anchors and page identifiers"""

import re


_NON_ALNUM_RE = re.compile(r'[\W_]+')


def slugify(text: str) -> str:
    """Lowercase text, collapse each non-alphanumeric run to one hyphen, trim hyphens."""
    return '-'.join(s for s in _NON_ALNUM_RE.sub('-', text.lower()).split('-') if s)


def capitalize(text: str) -> str:
    """Uppercase only the first character ('forms' -> 'Forms')."""
    return text[:1].upper() + text[1:]
