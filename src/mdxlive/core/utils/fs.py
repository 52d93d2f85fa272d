"""Filesystem helpers: symlink-following discovery and atomic writes"""

import os
import tempfile
from pathlib import Path
from typing import Iterable, Iterator


def walk_files(root: Path, extensions: Iterable[str]) -> Iterator[Path]:
    """Yield files under root (following links) whose suffix is in extensions, in sorted order."""
    exts = {e.lower() for e in extensions}
    for dirpath, dirnames, filenames in os.walk(root, followlinks=True):
        dirnames.sort()
        for name in sorted(filenames):
            p = Path(dirpath) / name
            if p.suffix.lower() in exts and p.is_file():
                yield p


def write_text_atomic(path: Path, text: str) -> None:
    """Write text to path via a sibling temp file so readers never see a partial file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(text)
        os.replace(tmp, path)
    except BaseException:
        if os.path.exists(tmp):
            os.unlink(tmp)
        raise
