"""Code-fence info string interpretation and token-to-CodeBlock conversion"""

import re
from typing import Optional

from mdxlive.core.models import BlockMode, CodeBlock, Language


LANGUAGE_ALIASES: dict[str, Language] = {
    'tsx':        Language.tsx,
    'jsx':        Language.jsx,
    'ts':         Language.ts,
    'typescript': Language.ts,
    'js':         Language.js,
    'javascript': Language.js,
    'vue':        Language.vue,
    'svelte':     Language.svelte,
    'html':       Language.html,
    'css':        Language.css,
    'json':       Language.json,
    'bash':       Language.bash,
    'sh':         Language.bash,
    'shell':      Language.bash,
}

# checked in order; first substring hit wins
MODE_MARKERS: tuple[tuple[str, BlockMode], ...] = (
    ('live',     BlockMode.live),
    ('editable', BlockMode.editable),
    ('preview',  BlockMode.preview),
)

FILENAME_RE = re.compile(r'filename="([^"]*)"|file=(\S+)')


def language_from_info(info: str) -> Language:
    """Map the first token of a fence info string to a Language (case-insensitive)."""
    parts = info.split()
    return LANGUAGE_ALIASES.get(parts[0].lower(), Language.unknown) if parts else Language.unknown


def mode_from_info(info: str) -> BlockMode:
    lower = info.lower()
    for marker, mode in MODE_MARKERS:
        if marker in lower:
            return mode
    return BlockMode.source


def filename_from_info(info: str) -> Optional[str]:
    """Return the leftmost filename="..." or file=... value, if any."""
    m = FILENAME_RE.search(info)
    if not m:
        return None
    name = m.group(1) if m.group(1) is not None else m.group(2).strip('"')
    return name or None


def block_from_token(token, line_offset: int) -> CodeBlock:
    """Build a CodeBlock from a markdown-it fence/code_block token.

    line_offset is the number of file lines that precede the body (the header region).
    Indented code blocks carry no info string and so get unknown/source metadata.
    """
    start, end = token.map if token.map else (0, 0)
    line_number = start + 1 + line_offset
    info = token.info.strip() if token.type == 'fence' else ''
    return CodeBlock(
        id=f"block-{line_number}",
        language=language_from_info(info),
        mode=mode_from_info(info),
        source=token.content,
        line_number=line_number,
        filename=filename_from_info(info),
        span=(start, end) if token.map else None,
    )


def tokens_to_code_blocks(tokens: list, line_offset: int = 0) -> list[CodeBlock]:
    """Collect fenced and indented code blocks in source order."""
    return [
        block_from_token(tok, line_offset)
        for tok in tokens
        if tok.type in ('fence', 'code_block')
    ]
