from pathlib import Path
from typing import List

from rjsmin import jsmin

from .config import BuildConfig
from .files import min_name, select_files


SCRIPT_PATTERNS = ["scripts/*.js", "!scripts/*.min.js"]


def minify_script(source: str) -> str:
    return jsmin(source, keep_bang_comments=False)


def run_scripts(config: BuildConfig) -> List[Path]:
    """
    Minify every non-minified script into `<name>.min.js` under the output dir.

    No recovery: the first unreadable script aborts the task.
    """
    dest = config.scripts_dest
    dest.mkdir(parents=True, exist_ok=True)

    written: List[Path] = []
    for src in select_files(config.root, SCRIPT_PATTERNS):
        code = src.read_text(encoding="utf-8")
        target = dest / min_name(src)
        target.write_text(minify_script(code), encoding="utf-8")
        print(f"✅ {src.name} → {target}")
        written.append(target)
    return written
