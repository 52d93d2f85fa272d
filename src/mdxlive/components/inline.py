"""Inline usage parsing for documentation snippets like <Button variant="primary">Click</Button>.

Only one top-level element is recognised. Nested tags of the same name are matched
with an explicit depth counter; anything the grammar can't handle yields None so
callers can fall back to full-source transformation.
"""

import html
import re
from typing import Optional

from mdxlive.components.models import InlineUsage, PropKind, PropValue


# attribute text: quoted strings and {expr} are opaque, so '>' or '/' inside them is fine
_ATTRS = r'''((?:"[^"]*"|'[^']*'|\{[^}]*\}|[^>"'{])*?)'''

SELF_CLOSING_RE = re.compile(rf'^<([A-Z][a-zA-Z0-9]*)(?=[\s/])\s*{_ATTRS}\s*/>')
OPEN_TAG_RE = re.compile(rf'^<([A-Z][a-zA-Z0-9]*)(?=[\s>])\s*{_ATTRS}\s*>')
PROP_RE = re.compile(
    r'''([a-zA-Z_][\w:-]*)(?:\s*=\s*(?:"([^"]*)"|'([^']*)'|\{([^}]*)\}))?'''
)


def parse_props(props_str: str) -> dict[str, PropValue]:
    """Parse name="str" | name='str' | name={expr} | bare-name (boolean true), in order."""
    props: dict[str, PropValue] = {}
    for m in PROP_RE.finditer(props_str.strip()):
        name, dq, sq, expr = m.groups()
        if dq is not None:
            props[name] = PropValue.string(dq)
        elif sq is not None:
            props[name] = PropValue.string(sq)
        elif expr is not None:
            props[name] = PropValue.expression(expr)
        else:
            props[name] = PropValue.boolean(True)
    return props


def _tag_at(source: str, pos: int, component: str) -> Optional[tuple[bool, int]]:
    """Classify `<component` at pos: (is_self_closing, end_index), or None if not that tag.

    The character right after the name decides whether this is the same tag at all
    (`<Card>` / `<Card ` vs `<CardHeader`).
    """
    after = pos + 1 + len(component)
    if after >= len(source) or source[after] not in ' \t\r\n/>':
        return None
    m = re.compile(rf'{_ATTRS}\s*(/?)>').match(source, after)
    if not m:
        return None
    return m.group(2) == '/', m.end()


def find_matching_close(source: str, component: str, start: int) -> Optional[int]:
    """Index of the close tag that balances an open tag ending just before start."""
    open_prefix = f'<{component}'
    close_re = re.compile(rf'</{re.escape(component)}\s*>')
    depth = 1
    pos = start

    while pos < len(source):
        close = close_re.search(source, pos)
        if close is None:
            return None
        nxt = source.find(open_prefix, pos, close.start())
        if nxt == -1:
            depth -= 1
            if depth == 0:
                return close.start()
            pos = close.end()
            continue

        tag = _tag_at(source, nxt, component)
        if tag is None:
            pos = nxt + 1
            continue
        self_closing, end = tag
        if not self_closing:
            depth += 1
        pos = end

    return None


def _parse_self_closing(source: str) -> Optional[InlineUsage]:
    m = SELF_CLOSING_RE.match(source)
    if not m:
        return None
    return InlineUsage(component=m.group(1), props=parse_props(m.group(2)), self_closing=True)


def _parse_with_children(source: str) -> Optional[InlineUsage]:
    m = OPEN_TAG_RE.match(source)
    if not m:
        return None
    component = m.group(1)
    close = find_matching_close(source, component, m.end())
    if close is None:
        return None
    children = source[m.end():close].strip()
    return InlineUsage(
        component=component,
        props=parse_props(m.group(2)),
        children=children or None,
        self_closing=False,
    )


def parse_usage(source: str) -> Optional[InlineUsage]:
    """Parse the first top-level element of a usage snippet, or None."""
    source = source.strip()
    return _parse_self_closing(source) or _parse_with_children(source)


def render_custom_element(usage: InlineUsage, tag_name: str) -> str:
    """Render usage as <tag_name ...attrs>children</tag_name>.

    String props are HTML-escaped (quotes included); true booleans become bare
    attributes; false booleans and {expression} props are dropped.
    """
    attrs = []
    for name, prop in usage.props.items():
        if prop.kind == PropKind.string:
            attrs.append(f'{name}="{html.escape(prop.value, quote=True)}"')
        elif prop.kind == PropKind.boolean and prop.value is True:
            attrs.append(name)

    attrs_str = (' ' + ' '.join(attrs)) if attrs else ''
    return f'<{tag_name}{attrs_str}>{usage.children or ""}</{tag_name}>'
