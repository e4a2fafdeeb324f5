from fnmatch import fnmatch
from pathlib import Path
from typing import Iterable, List

MIN_MARKER = ".min"


def select_files(root: Path, patterns: Iterable[str]) -> List[Path]:
    """
    Select files under `root` the way gulp.src does.

    Plain patterns add matches, patterns starting with "!" remove them.
    Exclusions are matched against the POSIX path relative to `root`.
    """
    includes: List[str] = []
    excludes: List[str] = []
    for pattern in patterns:
        if pattern.startswith("!"):
            excludes.append(pattern[1:])
        else:
            includes.append(pattern)

    selected = set()
    for pattern in includes:
        for path in root.glob(pattern):
            if path.is_file():
                selected.add(path)

    result: List[Path] = []
    for path in sorted(selected):
        rel = path.relative_to(root).as_posix()
        if any(fnmatch(rel, ex) for ex in excludes):
            continue
        result.append(path)
    return result


def min_name(path: Path) -> str:
    # app.js -> app.min.js
    return f"{path.stem}{MIN_MARKER}{path.suffix}"
