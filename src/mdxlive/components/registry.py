"""Component registry: scan a source tree and look up extracted components by name"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from mdxlive.components.generator import build_artifact
from mdxlive.components.models import Artifact, CachedComponent
from mdxlive.components.structure import extract_structure
from mdxlive.core.errors import ComponentNotFoundError, MissingVariantsError, RegistryError
from mdxlive.core.utils.fs import walk_files


logger = logging.getLogger(__name__)

COMPONENT_EXTENSIONS = ('.tsx', '.jsx')
SKIP_MARKERS = ('.test.', '.spec.', '.stories.', '.story.')


def is_component_file(path: Path) -> bool:
    """False for test/spec/story files and index modules."""
    name = path.name.lower()
    if any(marker in name for marker in SKIP_MARKERS):
        return False
    return path.stem.lower() != 'index'


def preview_tag(name: str) -> str:
    return f"{name.lower()}-preview"


class ComponentRegistry:
    """Case-insensitive name -> CachedComponent index, rebuilt wholesale by scan()."""

    def __init__(self, extensions: Iterable[str] = COMPONENT_EXTENSIONS) -> None:
        self.extensions = tuple(extensions)
        self._components: dict[str, CachedComponent] = {}

    def __len__(self) -> int:
        return len(self._components)

    def scan(self, root: Path) -> int:
        """Index every extractable component under root. Returns the number indexed.

        Files without a variant table are skipped at DEBUG; unreadable files at WARNING.
        When two files yield the same name the later one in walk order wins.
        """
        root = Path(root)
        if not root.is_dir():
            raise RegistryError(f"Components directory not found: {root}")

        components: dict[str, CachedComponent] = {}
        for path in walk_files(root, self.extensions):
            if not is_component_file(path):
                continue
            try:
                source = path.read_text(encoding='utf-8')
            except (OSError, UnicodeDecodeError) as e:
                logger.warning("Skipping unreadable component file %s: %s", path, e)
                continue
            try:
                structure = extract_structure(source)
            except MissingVariantsError:
                logger.debug("Skipping %s: no variantClasses", path)
                continue

            name = path.stem if structure.name == "Component" else structure.name
            key = name.casefold()
            if key in components:
                logger.debug("Component %s from %s replaces %s", name, path, components[key].source_path)
            components[key] = CachedComponent(
                name=name, source_path=path, structure=structure, raw_source=source,
            )

        self._components = components
        logger.info("Loaded %d component(s) from %s", len(components), root)
        return len(components)

    def get(self, name: str) -> Optional[CachedComponent]:
        return self._components.get(name.casefold())

    def contains(self, name: str) -> bool:
        return name.casefold() in self._components

    __contains__ = contains

    def names(self) -> list[str]:
        return sorted(c.name for c in self._components.values())

    def generate_artifact(self, name: str, tag_name: Optional[str] = None) -> Artifact:
        """Generate the custom element for a registered component.

        Raises ComponentNotFoundError if name is not indexed.
        """
        cached = self.get(name)
        if cached is None:
            raise ComponentNotFoundError(name)
        return build_artifact(cached.structure, tag_name or preview_tag(cached.name))
