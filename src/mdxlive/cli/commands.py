"""CLI command implementations"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from mdxlive.components.generator import generate_web_component
from mdxlive.components.registry import ComponentRegistry, preview_tag
from mdxlive.components.structure import extract_structure
from mdxlive.config import CONFIG_FILE, Settings, load_config
from mdxlive.core.errors import MdxliveError
from mdxlive.core.pipeline import build_site


LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _fail(msg: str, cause: Exception = None) -> None:
    """Print a user-friendly error to stderr and exit 1."""
    typer.echo(f"Error: {msg}", err=True)
    if cause:
        typer.echo(f"  {cause}", err=True)
    raise typer.Exit(1)


def _settings(overrides: dict = None) -> Settings:
    """Load config with standard CLI error handling."""
    try:
        return load_config(overrides=overrides)
    except ValueError as e:
        _fail(str(e))


def configure_logging(level: str, verbose: bool = False) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else level, format=LOG_FORMAT, force=True)


def build_cmd(
    docs: Annotated[Optional[str], typer.Option("--docs-dir", help="Documentation source directory")] = None,
    out: Annotated[Optional[str], typer.Option("--out-dir", help="Output directory")] = None,
    components: Annotated[Optional[str], typer.Option("--components-dir", help="Component source directory")] = None,
    base_url: Annotated[Optional[str], typer.Option("--base-url", help="URL prefix of the deployed site")] = None,
    title: Annotated[Optional[str], typer.Option("--title", help="Site title")] = None,
    workers: Annotated[Optional[int], typer.Option("--workers", help="Parallel page builds")] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Log at DEBUG level")] = False,
    ):
    """Build the static documentation site."""
    settings = _settings(overrides={
        "docs_dir": docs, "output_dir": out, "components_dir": components,
        "base_url": base_url, "title": title, "max_workers": workers,
    })
    configure_logging(settings.log_level, verbose)

    try:
        result = build_site(settings)
    except (MdxliveError, OSError) as e:
        _fail("Build failed", e)

    for failure in result.failures:
        typer.echo(f"  FAILED: {failure.source_path}: {failure.cause}", err=True)
    typer.echo(
        f"Built {result.pages} page(s) with {result.components} preview(s) "
        f"to {result.output_dir}/ in {result.duration_ms}ms"
    )
    if not result.ok:
        _fail(f"{len(result.failures)} page(s) failed")


def components_cmd(
    components: Annotated[Optional[str], typer.Option("--components-dir", help="Component source directory")] = None,
    ):
    """List components found in the components directory."""
    settings = _settings(overrides={"components_dir": components})
    configure_logging(settings.log_level)
    if not settings.components_dir:
        _fail("No components directory configured (set components_dir or --components-dir)")

    registry = ComponentRegistry(settings.component_extensions)
    try:
        registry.scan(Path(settings.components_dir))
    except MdxliveError as e:
        _fail(str(e))
    if not len(registry):
        typer.echo("No components found.")
        raise typer.Exit(1)

    for name in registry.names():
        structure = registry.get(name).structure
        sizes = ", ".join(structure.size_table) or "-"
        typer.echo(f"{name}  variants: {', '.join(structure.variant_table)}  sizes: {sizes}")


def generate_cmd(
    source: Annotated[Path, typer.Argument(help="Component source file")],
    tag: Annotated[Optional[str], typer.Option("--tag", help="Custom element tag name")] = None,
    ):
    """Print the generated custom element for one component source file."""
    try:
        structure = extract_structure(source.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as e:
        _fail(f"Cannot read {source}", e)
    except MdxliveError as e:
        _fail(str(e))
    typer.echo(generate_web_component(structure, tag or preview_tag(source.stem)))


SCAFFOLD = {
    CONFIG_FILE: """\
title: Documentation
docs_dir: docs
output_dir: dist
components_dir: src/components
base_url: /
""",
    "docs/index.mdx": """\
---
title: Introduction
order: 1
---

# Introduction

Welcome to the component documentation.
""",
    "docs/getting-started.mdx": """\
---
title: Getting Started
order: 2
---

# Getting Started

Run `mdxlive build` to generate the site into `dist/`.

## Live previews

Mark a `tsx` code block as `live` to render it as a Web Component preview.
""",
    "docs/components/button.mdx": """\
---
title: Button
component: Button
---

# Button

```tsx live
<Button variant="primary">Click me</Button>
```
""",
}


def init_cmd(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Overwrite existing files")] = False,
    ):
    """Scaffold config.yaml and starter documentation pages."""
    for name, content in SCAFFOLD.items():
        path = Path(name)
        if path.exists() and not yes:
            typer.echo(f"  kept: {name}")
            continue
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        typer.echo(f"  created: {name}")
    typer.echo("Project initialized. Run 'mdxlive build' to build the site.")
