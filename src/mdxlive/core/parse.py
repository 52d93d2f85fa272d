"""Frontmatter extraction, markdown-it tokenization and document assembly"""

import re
from pathlib import Path
from typing import Iterable, Optional

import yaml
from markdown_it import MarkdownIt
from pydantic import ValidationError

from mdxlive.core.errors import MalformedFrontmatterError, UnclosedFrontmatterError
from mdxlive.core.extract.blocks import tokens_to_code_blocks
from mdxlive.core.extract.outline import tokens_to_outline
from mdxlive.core.models import Document, Frontmatter
from mdxlive.core.utils.fs import walk_files


FRONTMATTER_MARKER = '---'
CLOSING_MARKER_RE = re.compile(r'^---[ \t]*\r?$', re.MULTILINE)
DOC_EXTENSIONS = ('.md', '.mdx')


def make_parser(preset: str = 'gfm-like') -> MarkdownIt:
    """Build a MarkdownIt instance for the given preset name."""
    return MarkdownIt(preset, options_update={"linkify": False})


def extract_frontmatter(source: str) -> tuple[Optional[Frontmatter], str]:
    """Return (frontmatter, body). Text without a leading --- marker is returned unchanged."""
    stripped = source.lstrip()
    if not stripped.startswith(FRONTMATTER_MARKER):
        return None, source

    first_newline = stripped.find('\n')
    if first_newline == -1:
        raise UnclosedFrontmatterError()
    close = CLOSING_MARKER_RE.search(stripped, first_newline + 1)
    if close is None:
        raise UnclosedFrontmatterError()

    header = stripped[first_newline + 1:close.start()]
    try:
        data = yaml.safe_load(header)
    except yaml.YAMLError as e:
        raise MalformedFrontmatterError(str(e)) from e
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise MalformedFrontmatterError(f"expected a mapping, got {type(data).__name__}")
    try:
        fm = Frontmatter.model_validate(data)
    except ValidationError as e:
        raise MalformedFrontmatterError(str(e)) from e

    return fm, stripped[close.end():].lstrip()


def dump_frontmatter(fm: Frontmatter) -> str:
    """Serialize a Frontmatter back into a --- delimited YAML header block."""
    data = fm.model_dump(exclude_none=True)
    header = yaml.dump(data, default_flow_style=False, allow_unicode=True, sort_keys=False)
    return f"---\n{header}---\n"


def parse_document(source: str, parser_config: str = 'gfm-like') -> Document:
    """Split source into header, body, code blocks and heading outline.

    Code block line numbers are 1-indexed against the full source text, i.e. the
    lines consumed by the header region are added back.
    """
    frontmatter, body = extract_frontmatter(source)
    line_offset = source[:len(source) - len(body)].count('\n')
    tokens = make_parser(parser_config).parse(body)
    return Document(
        frontmatter=frontmatter,
        body=body,
        code_blocks=tokens_to_code_blocks(tokens, line_offset),
        outline=tokens_to_outline(tokens),
    )


def discover_files(path: Path, extensions: Iterable[str] = DOC_EXTENSIONS) -> list[Path]:
    """Return sorted documentation files under path, or [path] if a single file."""
    exts = {e.lower() for e in extensions}
    if path.is_file():
        return [path] if path.suffix.lower() in exts else []
    return list(walk_files(path, exts))


def parse_file(path: Path, parser_config: str = 'gfm-like') -> Document:
    """Read and parse a single documentation file."""
    return parse_document(path.read_text(encoding='utf-8'), parser_config)
