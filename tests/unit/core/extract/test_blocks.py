"""Unit tests for core/extract/blocks.py"""

import pytest

from mdxlive.core.extract.blocks import (
    filename_from_info,
    language_from_info,
    mode_from_info,
    tokens_to_code_blocks,
)
from mdxlive.core.models import BlockMode, Language


@pytest.mark.parametrize("info,expected", [
    ("tsx", Language.tsx),
    ("TSX live", Language.tsx),
    ("jsx", Language.jsx),
    ("typescript", Language.ts),
    ("javascript editable", Language.js),
    ("sh", Language.bash),
    ("shell", Language.bash),
    ("json", Language.json),
    ("python", Language.unknown),
    ("", Language.unknown),
])
def test_language_from_info(info, expected):
    """The first info token maps case-insensitively through the alias table."""
    assert language_from_info(info) == expected


@pytest.mark.parametrize("info,expected", [
    ("tsx live", BlockMode.live),
    ("tsx LIVE", BlockMode.live),
    ("tsx editable", BlockMode.editable),
    ("tsx preview", BlockMode.preview),
    ("tsx live editable", BlockMode.live),
    ("tsx editable preview", BlockMode.editable),
    ("tsx", BlockMode.source),
])
def test_mode_from_info(info, expected):
    """Mode is the first of live/editable/preview found anywhere in the info string."""
    assert mode_from_info(info) == expected


@pytest.mark.parametrize("info,expected", [
    ('tsx filename="Button.tsx"', "Button.tsx"),
    ("tsx file=src/Card.tsx live", "src/Card.tsx"),
    ('tsx file=a.tsx filename="b.tsx"', "a.tsx"),
    ('tsx filename=""', None),
    ("tsx live", None),
])
def test_filename_from_info(info, expected):
    """filename="..." or file=... is read left to right; the leftmost wins."""
    assert filename_from_info(info) == expected


def test_tokens_to_code_blocks_offset(parser):
    """line_offset shifts line numbers and ids but not the body span."""
    tokens = parser.parse("Intro\n\n```tsx live\n<Button />\n```\n")
    [block] = tokens_to_code_blocks(tokens, line_offset=4)
    assert block.line_number == 7
    assert block.id == "block-7"
    assert block.span == (2, 5)
    assert block.is_live


def test_tokens_to_code_blocks_source_order(parser):
    """Fenced and indented blocks are returned in encounter order."""
    md = "```css\na {}\n```\n\n    indented\n\n~~~jsx preview\n<X />\n~~~\n"
    blocks = tokens_to_code_blocks(parser.parse(md))
    assert [b.language for b in blocks] == [Language.css, Language.unknown, Language.jsx]
    assert [b.mode for b in blocks] == [BlockMode.source, BlockMode.source, BlockMode.preview]
    assert blocks[1].source == "indented\n"


@pytest.mark.parametrize("info", ["ts live", "vue live", "html live"])
def test_live_requires_tsx_or_jsx(parser, info):
    """Only tsx/jsx blocks in live mode count as live."""
    [block] = tokens_to_code_blocks(parser.parse(f"```{info}\nx\n```\n"))
    assert block.mode == BlockMode.live
    assert not block.is_live
