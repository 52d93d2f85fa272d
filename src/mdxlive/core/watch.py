"""Dev-mode change handling: classify file events and map them to hot-reload messages"""

import logging
from enum import Enum
from pathlib import Path
from typing import Iterable, Literal, Union

from pydantic import BaseModel, ConfigDict

from mdxlive.components.generator import generate_web_component
from mdxlive.components.registry import COMPONENT_EXTENSIONS, preview_tag
from mdxlive.components.structure import extract_structure
from mdxlive.core.errors import MissingVariantsError
from mdxlive.core.parse import DOC_EXTENSIONS


logger = logging.getLogger(__name__)

# plain .ts/.js modules count as component changes
COMPONENT_SUFFIXES = (*COMPONENT_EXTENSIONS, '.ts', '.js')


class ChangeKind(str, Enum):
    doc_changed = "doc_changed"
    component_changed = "component_changed"
    created = "created"
    modified = "modified"
    deleted = "deleted"


class WatchEvent(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: ChangeKind
    path: Path


class Reload(BaseModel):
    type: Literal["reload"] = "reload"


class UpdateComponent(BaseModel):
    type: Literal["update_component"] = "update_component"
    tag_name:      str
    web_component: str


class UpdateContent(BaseModel):
    type: Literal["update_content"] = "update_content"
    path: str
    html: str


class Connected(BaseModel):
    type: Literal["connected"] = "connected"


HotReloadMessage = Union[Reload, UpdateComponent, UpdateContent, Connected]


def classify_change(
    path: Path,
    kind: str,
    doc_extensions: Iterable[str] = DOC_EXTENSIONS,
    component_extensions: Iterable[str] = COMPONENT_SUFFIXES,
    ) -> WatchEvent:
    """Map a raw (path, created|modified|deleted) pair to a WatchEvent.

    Only modifications are specialized; creates and deletes stay generic since they
    change the page set or registry and need a full rebuild. Pass the configured
    Settings.doc_extensions / component_extensions to match a customized project.
    """
    path = Path(path)
    raw = ChangeKind(kind)
    if raw not in (ChangeKind.created, ChangeKind.modified, ChangeKind.deleted):
        raise ValueError(f"Unsupported change kind: {kind}")

    suffix = path.suffix.lower()
    if raw == ChangeKind.modified:
        if suffix in {e.lower() for e in doc_extensions}:
            return WatchEvent(kind=ChangeKind.doc_changed, path=path)
        if suffix in {e.lower() for e in component_extensions}:
            return WatchEvent(kind=ChangeKind.component_changed, path=path)
    return WatchEvent(kind=raw, path=path)


def handle_change(event: WatchEvent) -> HotReloadMessage:
    """Component edits regenerate one custom element; everything else reloads the page."""
    if event.kind != ChangeKind.component_changed:
        return Reload()

    try:
        source = event.path.read_text(encoding='utf-8')
        structure = extract_structure(source)
    except (OSError, UnicodeDecodeError, MissingVariantsError) as e:
        logger.warning("Failed to regenerate %s, falling back to reload: %s", event.path, e)
        return Reload()

    tag = preview_tag(event.path.stem)
    logger.info("Regenerated %s from %s", tag, event.path)
    return UpdateComponent(tag_name=tag, web_component=generate_web_component(structure, tag))
