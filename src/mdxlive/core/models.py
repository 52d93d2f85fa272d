"""Intermediate data models for the parse and build pipeline"""

from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Language(str, Enum):
    """Programming language of a fenced code block."""
    tsx = "tsx"
    jsx = "jsx"
    ts = "ts"
    js = "js"
    vue = "vue"
    svelte = "svelte"
    html = "html"
    css = "css"
    json = "json"
    bash = "bash"
    unknown = "unknown"

    @property
    def is_transformable(self) -> bool:
        return self in (Language.tsx, Language.jsx)


class BlockMode(str, Enum):
    """How a code block is presented: live preview, editable, plain source or iframe preview."""
    live = "live"
    editable = "editable"
    source = "source"
    preview = "preview"


class Frontmatter(BaseModel):
    """YAML page header. Unknown keys are preserved."""
    model_config = ConfigDict(extra="allow")

    title:       str = ""
    description: Optional[str] = None
    component:   Optional[str] = None
    order:       Optional[int] = None
    nav:         bool = True
    slug:        Optional[str] = None


class CodeBlock(BaseModel):
    """A fenced or indented code block, line-numbered against the full source file."""
    model_config = ConfigDict(frozen=True)

    id:          str
    language:    Language = Language.unknown
    mode:        BlockMode = BlockMode.source
    source:      str
    line_number: int
    filename:    Optional[str] = None
    span:        Optional[tuple[int, int]] = None   # 0-indexed [start, end) body lines

    @property
    def is_live(self) -> bool:
        return self.mode == BlockMode.live and self.language.is_transformable


class HeadingEntry(BaseModel):
    model_config = ConfigDict(frozen=True)

    title: str
    id:    str
    level: int


class Document(BaseModel):
    """Parsed page: header, body text, code blocks and heading outline in source order."""
    model_config = ConfigDict(frozen=True)

    frontmatter: Optional[Frontmatter] = None
    body:        str
    code_blocks: list[CodeBlock] = []
    outline:     list[HeadingEntry] = []

    @property
    def live_blocks(self) -> list[CodeBlock]:
        return [b for b in self.code_blocks if b.is_live]


@dataclass(frozen=True)
class PageInfo:
    """A discovered page; output path is fixed before any page is built."""
    source_path:   Path
    relative_path: Path
    output_path:   Path
    document:      Document

    @property
    def title(self) -> str:
        fm = self.document.frontmatter
        if fm and fm.title:
            return fm.title
        return self.relative_path.stem

    @property
    def order(self) -> int:
        fm = self.document.frontmatter
        return fm.order if fm and fm.order is not None else 999

    @property
    def in_nav(self) -> bool:
        fm = self.document.frontmatter
        return fm.nav if fm else True


class NavItem(BaseModel):
    title:    str
    path:     str
    children: list["NavItem"] = []
    active:   bool = False


class PageContext(BaseModel):
    """Everything the page templates consume."""
    title:          str
    site_title:     str
    content:        str
    nav:            list[NavItem]
    toc:            list[HeadingEntry]
    base_url:       str
    web_components: list[str] = []
    styles:         list[str] = []


class SearchEntry(BaseModel):
    title:       str
    description: str
    url:         str
    content:     str


@dataclass
class BuildResult:
    pages:       int
    components:  int
    duration_ms: int
    output_dir:  Path
    failures:    list = field(default_factory=list)   # PageBuildError instances

    @property
    def ok(self) -> bool:
        return not self.failures
