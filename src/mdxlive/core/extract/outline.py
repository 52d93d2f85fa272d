"""Heading outline extraction from markdown-it tokens"""

from mdxlive.core.models import HeadingEntry
from mdxlive.core.utils.slug import slugify


def heading_level(token) -> int | None:
    """Return heading level (1-6) for heading_open tokens else None."""
    if token.type == 'heading_open' and len(token.tag) == 2 and token.tag[0] == 'h':
        return int(token.tag[1])
    return None


def inline_text(token) -> str:
    """Plain rendered text of an inline token: text and code spans, breaks as spaces."""
    if not token.children:
        return token.content
    parts = []
    for child in token.children:
        if child.type in ('text', 'code_inline', 'html_inline'):
            parts.append(child.content)
        elif child.type in ('softbreak', 'hardbreak'):
            parts.append(' ')
    return ''.join(parts)


def tokens_to_outline(tokens: list) -> list[HeadingEntry]:
    """Walk heading_open/inline/heading_close triples into HeadingEntry items."""
    outline: list[HeadingEntry] = []
    current: tuple[int, list[str]] | None = None

    for tok in tokens:
        level = heading_level(tok)
        if level is not None:
            current = (level, [])
        elif tok.type == 'inline' and current is not None:
            current[1].append(inline_text(tok))
        elif tok.type == 'heading_close' and current is not None:
            title = ''.join(current[1]).strip()
            outline.append(HeadingEntry(title=title, id=slugify(title), level=current[0]))
            current = None

    return outline


def assign_heading_ids(tokens: list) -> None:
    """Set id="<slug>" on each heading_open so rendered anchors match the outline."""
    for i, tok in enumerate(tokens):
        if heading_level(tok) is not None and i + 1 < len(tokens) and tokens[i + 1].type == 'inline':
            tok.attrSet('id', slugify(inline_text(tokens[i + 1]).strip()))
