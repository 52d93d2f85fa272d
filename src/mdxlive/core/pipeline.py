"""Build orchestration: page discovery, live-block transformation and parallel page builds"""

import html
import logging
import time
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Optional

from mdxlive.components.generator import build_artifact
from mdxlive.components.inline import parse_usage, render_custom_element
from mdxlive.components.models import Artifact
from mdxlive.components.registry import ComponentRegistry, preview_tag
from mdxlive.components.structure import extract_structure
from mdxlive.config import Settings
from mdxlive.core.errors import (
    BuildError,
    ComponentNotFoundError,
    FrontmatterError,
    MissingVariantsError,
    OutputPathError,
    PageBuildError,
    RegistryError,
)
from mdxlive.core.export import output_url, style_url, write_assets, write_site_indexes
from mdxlive.core.extract.outline import assign_heading_ids
from mdxlive.core.models import (
    BuildResult,
    CodeBlock,
    Document,
    Frontmatter,
    NavItem,
    PageContext,
    PageInfo,
)
from mdxlive.core.parse import discover_files, make_parser, parse_file
from mdxlive.core.templates import TemplateEngine
from mdxlive.core.utils.fs import write_text_atomic
from mdxlive.core.utils.slug import capitalize


logger = logging.getLogger(__name__)


def output_path_for(relative: Path, frontmatter: Optional[Frontmatter], output_dir: Path) -> Path:
    """slug override > dir/index.mdx -> dir/index.html > dir/name.mdx -> dir/name/index.html.

    Raises OutputPathError if the result would land outside output_dir.
    """
    if frontmatter and frontmatter.slug:
        candidate = output_dir / frontmatter.slug.strip('/') / 'index.html'
    elif relative.stem == 'index':
        candidate = output_dir / relative.parent / 'index.html'
    else:
        candidate = output_dir / relative.parent / relative.stem / 'index.html'

    root = output_dir.resolve()
    resolved = candidate.resolve()
    if not resolved.is_relative_to(root):
        raise OutputPathError(f"Output path {candidate} escapes output directory {output_dir}")
    return output_dir / resolved.relative_to(root)


def discover_pages(settings: Settings) -> tuple[list[PageInfo], list[PageBuildError]]:
    """Parse every doc file; unparseable files are returned as failures, not raised.

    Output paths must stay under the output directory and be unique: when two pages
    map to the same file, the first in discovery order keeps it and the rest fail.
    Pages are stable-sorted by frontmatter order (default 999).
    """
    docs_dir = Path(settings.docs_dir)
    output_dir = Path(settings.output_dir)
    if not docs_dir.is_dir():
        raise BuildError(f"Docs directory not found: {docs_dir}")

    pages: list[PageInfo] = []
    failures: list[PageBuildError] = []
    claimed: dict[Path, Path] = {}      # output path -> source path
    for path in discover_files(docs_dir, settings.doc_extensions):
        relative = path.relative_to(docs_dir)
        try:
            document = parse_file(path, settings.parser_config)
            output_path = output_path_for(relative, document.frontmatter, output_dir)
            if output_path in claimed:
                raise OutputPathError(f"Output path {output_path} already used by {claimed[output_path]}")
        except (FrontmatterError, OutputPathError, OSError, UnicodeDecodeError) as e:
            logger.error("Failed to parse %s: %s", path, e)
            failures.append(PageBuildError(path, e))
            continue
        claimed[output_path] = path
        pages.append(PageInfo(
            source_path=path,
            relative_path=relative,
            output_path=output_path,
            document=document,
        ))

    pages.sort(key=lambda p: p.order)
    return pages, failures


def build_navigation(pages: list[PageInfo], output_dir: Path, base_url: str) -> list[NavItem]:
    """Root pages flat, then one capitalized group per subdirectory in first-seen order."""
    groups: dict[Path, list[NavItem]] = {}
    for page in pages:
        if not page.in_nav:
            continue
        item = NavItem(title=page.title, path=output_url(page.output_path, output_dir, base_url))
        groups.setdefault(page.relative_path.parent, []).append(item)

    nav = groups.pop(Path('.'), [])
    for directory, items in groups.items():
        nav.append(NavItem(
            title=capitalize(directory.name or 'Section'),
            path=f"{base_url}{directory.as_posix()}/",
            children=items,
        ))
    return nav


def mark_active(nav: list[NavItem], url: str) -> list[NavItem]:
    """Per-page copy of nav with the item for url flagged active."""
    return [
        item.model_copy(update={
            'active': item.path == url,
            'children': [c.model_copy(update={'active': c.path == url}) for c in item.children],
        })
        for item in nav
    ]


def transform_live_blocks(
    document: Document,
    registry: ComponentRegistry,
    source_path: Path,
    ) -> tuple[dict[str, str], list[Artifact]]:
    """Turn each live block into preview markup. Returns (block_id -> html, artifacts).

    Usage snippets resolve through the registry; each component type is generated at
    most once per page. Blocks that don't parse as a usage are treated as full
    component source. Unresolvable blocks are logged and left as plain source.
    """
    generated: dict[str, str] = {}       # casefolded component name -> tag
    replacements: dict[str, str] = {}
    artifacts: list[Artifact] = []

    for block in document.live_blocks:
        usage = parse_usage(block.source)

        if usage is None:
            tag = f"preview-{block.id}"
            try:
                structure = extract_structure(block.source)
            except MissingVariantsError as e:
                logger.warning("Failed to transform block %s in %s: %s", block.id, source_path, e)
                continue
            artifacts.append(build_artifact(structure, tag))
            replacements[block.id] = f"<{tag}>{html.escape(structure.name)}</{tag}>"
            continue

        key = usage.component.casefold()
        if key not in generated:
            try:
                artifact = registry.generate_artifact(usage.component, preview_tag(usage.component))
            except ComponentNotFoundError:
                logger.warning(
                    "Component '%s' not found in registry (block %s in %s)",
                    usage.component, block.id, source_path,
                )
                continue
            generated[key] = artifact.tag_name
            artifacts.append(artifact)
        replacements[block.id] = render_custom_element(usage, generated[key])

    return replacements, artifacts


def render_markdown(
    body: str,
    code_blocks: list[CodeBlock],
    replacements: dict[str, str],
    parser_config: str = 'gfm-like',
    ) -> str:
    """Render body to HTML, putting a preview container before each replaced block's fence."""
    lines = body.splitlines(keepends=True)
    replaced = [b for b in code_blocks if b.id in replacements and b.span]
    # bottom-up so earlier spans stay valid
    for block in sorted(replaced, key=lambda b: b.span[0], reverse=True):
        start, end = block.span
        fence = ''.join(lines[start:end])
        if not fence.endswith('\n'):
            fence += '\n'
        lines[start:end] = [f'<div class="preview-container">{replacements[block.id]}</div>\n\n', fence]

    md = make_parser(parser_config)
    tokens = md.parse(''.join(lines))
    assign_heading_ids(tokens)
    return md.renderer.render(tokens, md.options, {})


def build_page(
    page: PageInfo,
    nav: list[NavItem],
    registry: ComponentRegistry,
    settings: Settings,
    templates: TemplateEngine,
    ) -> int:
    """Render and write one page. Returns the number of previews it contains."""
    output_dir = Path(settings.output_dir)
    replacements, artifacts = transform_live_blocks(page.document, registry, page.source_path)
    content = render_markdown(
        page.document.body, page.document.code_blocks, replacements, settings.parser_config,
    )
    url = output_url(page.output_path, output_dir, settings.base_url)
    context = PageContext(
        title=page.title,
        site_title=settings.title,
        content=content,
        nav=mark_active(nav, url),
        toc=page.document.outline,
        base_url=settings.base_url,
        web_components=[a.source for a in artifacts],
        styles=[style_url(s, settings.base_url) for s in settings.styles],
    )
    write_text_atomic(page.output_path, templates.render_page('doc.html', context))
    logger.debug("Wrote %s (%d preview(s))", page.output_path, len(replacements))
    return len(replacements)


def load_registry(settings: Settings) -> ComponentRegistry:
    registry = ComponentRegistry(settings.component_extensions)
    if settings.components_dir:
        try:
            registry.scan(Path(settings.components_dir))
        except RegistryError as e:
            logger.warning("Failed to scan components directory: %s", e)
    return registry


def build_site(settings: Settings, registry: Optional[ComponentRegistry] = None) -> BuildResult:
    """Build every page in parallel, then emit assets, search index, sitemap and robots.txt.

    A failing page is recorded in BuildResult.failures and never aborts its siblings.
    """
    start = time.perf_counter()
    output_dir = Path(settings.output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    if registry is None:
        registry = load_registry(settings)
    pages, failures = discover_pages(settings)
    nav = build_navigation(pages, output_dir, settings.base_url)
    templates = TemplateEngine()

    built: list[PageInfo] = []
    components = 0
    with ThreadPoolExecutor(max_workers=settings.max_workers) as executor:
        futures = {
            executor.submit(build_page, page, nav, registry, settings, templates): page
            for page in pages
        }
        for future in as_completed(futures):
            page = futures[future]
            try:
                components += future.result()
            except Exception as e:
                logger.error("Failed to build %s: %s", page.source_path, e)
                failures.append(PageBuildError(page.source_path, e))
                continue
            built.append(page)

    built_paths = {p.source_path for p in built}
    built = [p for p in pages if p.source_path in built_paths]

    write_assets(output_dir, settings.styles)
    write_site_indexes(built, output_dir, settings.base_url)

    failures.sort(key=lambda f: str(f.source_path))
    return BuildResult(
        pages=len(built),
        components=components,
        duration_ms=int((time.perf_counter() - start) * 1000),
        output_dir=output_dir,
        failures=failures,
    )
