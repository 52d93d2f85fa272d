"""Site-wide outputs: assets, search index, sitemap and robots.txt"""

import json
import logging
import shutil
from pathlib import Path

from mdxlive.core.assets import MAIN_CSS, MAIN_JS
from mdxlive.core.models import PageInfo, SearchEntry
from mdxlive.core.utils.fs import write_text_atomic


logger = logging.getLogger(__name__)

SEARCH_CONTENT_LINES = 10


def output_url(output_path: Path, output_dir: Path, base_url: str) -> str:
    """dist/button/index.html -> '<base_url>button/'; dist/index.html -> '<base_url>'."""
    parent = output_path.relative_to(output_dir).parent.as_posix()
    if parent in ('', '.'):
        return base_url
    return f"{base_url}{parent}/"


def style_url(style_path: str, base_url: str) -> str:
    return f"{base_url}assets/{Path(style_path).name or 'style.css'}"


def search_content(body: str, limit: int = SEARCH_CONTENT_LINES) -> str:
    """First `limit` prose lines of body: no headings, no fenced code, no blanks."""
    lines = []
    in_fence = False
    for line in body.splitlines():
        stripped = line.strip()
        if stripped.startswith(('```', '~~~')):
            in_fence = not in_fence
            continue
        if in_fence or not stripped or stripped.startswith('#'):
            continue
        lines.append(stripped)
        if len(lines) == limit:
            break
    return ' '.join(lines)


def build_search_index(pages: list[PageInfo], output_dir: Path, base_url: str) -> list[dict]:
    entries = []
    for page in pages:
        fm = page.document.frontmatter
        entries.append(SearchEntry(
            title=fm.title if fm else "",
            description=(fm.description or "") if fm else "",
            url=output_url(page.output_path, output_dir, base_url),
            content=search_content(page.document.body),
        ).model_dump())
    return entries


def build_sitemap(pages: list[PageInfo], output_dir: Path, base_url: str) -> str:
    """<loc> is base_url (no trailing slash) joined with the site-root page path."""
    prefix = base_url.rstrip('/')
    urls = "\n".join(
        f"  <url>\n    <loc>{prefix}{output_url(p.output_path, output_dir, '/')}</loc>\n  </url>"
        for p in pages
    )
    return (
        '<?xml version="1.0" encoding="UTF-8"?>\n'
        '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">\n'
        f"{urls}\n"
        "</urlset>\n"
    )


def build_robots(base_url: str) -> str:
    return f"User-agent: *\nAllow: /\nSitemap: {base_url}sitemap.xml\n"


def write_assets(output_dir: Path, styles: list[str]) -> list[Path]:
    """Write main.css/main.js and copy configured stylesheets into output_dir/assets."""
    assets_dir = output_dir / 'assets'
    assets_dir.mkdir(parents=True, exist_ok=True)
    written = [assets_dir / 'main.css', assets_dir / 'main.js']
    write_text_atomic(written[0], MAIN_CSS)
    write_text_atomic(written[1], MAIN_JS)

    for style in styles:
        src = Path(style)
        if not src.is_file():
            logger.warning("Stylesheet not found: %s", style)
            continue
        dest = assets_dir / src.name
        shutil.copyfile(src, dest)
        logger.info("Copied stylesheet %s", style)
        written.append(dest)
    return written


def write_site_indexes(pages: list[PageInfo], output_dir: Path, base_url: str) -> None:
    """Write search-index.json, sitemap.xml and robots.txt."""
    index = build_search_index(pages, output_dir, base_url)
    write_text_atomic(output_dir / 'search-index.json', json.dumps(index, indent=2, ensure_ascii=False))
    write_text_atomic(output_dir / 'sitemap.xml', build_sitemap(pages, output_dir, base_url))
    write_text_atomic(output_dir / 'robots.txt', build_robots(base_url))
