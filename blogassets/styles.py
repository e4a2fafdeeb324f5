from pathlib import Path
from typing import List

import lesscpy
from rcssmin import cssmin

from .config import BuildConfig
from .files import min_name, select_files


LESS_PATTERNS = ["less/*.less", "!less/_*.less"]
CSS_PATTERNS = ["styles/*.css", "!styles/*.min.css"]


def compile_less(path: Path) -> str:
    """
    Compile a single .less file to CSS.

    Syntax errors are raised by lesscpy as-is.
    """
    with path.open("r", encoding="utf-8") as fh:
        return lesscpy.compile(fh, minify=False)


def minify_css(source: str) -> str:
    # special /*! ... */ comments are dropped too
    return cssmin(source, keep_bang_comments=False)


def run_less(config: BuildConfig) -> List[Path]:
    """
    Compile less/*.less into styles/. Partials (`_name.less`) are only
    reachable through @import and are never compiled on their own.
    """
    dest = config.styles_dir
    dest.mkdir(parents=True, exist_ok=True)

    written: List[Path] = []
    for src in select_files(config.root, LESS_PATTERNS):
        target = dest / f"{src.stem}.css"
        target.write_text(compile_less(src), encoding="utf-8")
        print(f"✅ {src.name} → {target}")
        written.append(target)
    return written


def run_css(config: BuildConfig) -> List[Path]:
    dest = config.css_dest
    dest.mkdir(parents=True, exist_ok=True)

    written: List[Path] = []
    for src in select_files(config.root, CSS_PATTERNS):
        target = dest / min_name(src)
        target.write_text(minify_css(src.read_text(encoding="utf-8")), encoding="utf-8")
        print(f"✅ {src.name} → {target}")
        written.append(target)
    return written
