from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, Iterable, List, Optional

from .config import BuildConfig
from .images import run_images
from .scripts import run_scripts
from .styles import run_css, run_less


TaskFn = Callable[[BuildConfig], List[Path]]

LEAF_TASKS: Dict[str, TaskFn] = {
    "images": run_images,
    "scripts": run_scripts,
    "less": run_less,
    "css": run_css,
}


@dataclass
class TaskResult:
    name: str
    written: List[Path] = field(default_factory=list)
    error: Optional[BaseException] = None

    @property
    def ok(self) -> bool:
        return self.error is None


class AssetPipeline:
    """
    Runs the build tasks:
    - images: recompress images/* in place
    - scripts: scripts/*.js -> <output>/*.min.js
    - less: less/*.less (no partials) -> styles/*.css
    - css: styles/*.css -> <css dest>/*.min.css
    - styles: less, then css
    - default: images, scripts, styles (or images, scripts, less when CSS
      minification is disabled for the default build)

    Leaf tasks share no state. A failing task is recorded and the remaining
    tasks still run; whatever was already written stays on disk.
    """

    def __init__(
        self,
        config: BuildConfig,
        tasks: Optional[Dict[str, TaskFn]] = None,
    ) -> None:
        self.config = config
        self.tasks = dict(tasks or LEAF_TASKS)

    @property
    def composites(self) -> Dict[str, List[str]]:
        default_styles = "styles" if self.config.default_minify_css else "less"
        return {
            "styles": ["less", "css"],
            "default": ["images", "scripts", default_styles],
        }

    def task_names(self) -> List[str]:
        return sorted(set(self.tasks) | set(self.composites))

    def expand(self, names: Iterable[str]) -> List[str]:
        """
        Flatten task names into the ordered list of leaf tasks to run.
        Each leaf appears once, at its first position. Raises KeyError on an
        unknown name.
        """
        ordered: List[str] = []
        for name in names:
            for leaf in self._expand_one(name):
                if leaf not in ordered:
                    ordered.append(leaf)
        return ordered

    def _expand_one(self, name: str) -> List[str]:
        if name in self.tasks:
            return [name]
        composites = self.composites
        if name not in composites:
            raise KeyError(f"Unknown task: {name!r}")
        leaves: List[str] = []
        for child in composites[name]:
            leaves.extend(self._expand_one(child))
        return leaves

    def run(self, names: Optional[Iterable[str]] = None) -> List[TaskResult]:
        leaves = self.expand(list(names) if names else ["default"])

        results: List[TaskResult] = []
        for leaf in leaves:
            print(f"📦 Running task '{leaf}'")
            result = TaskResult(name=leaf)
            try:
                result.written = self.tasks[leaf](self.config)
            except Exception as e:
                print(f"❌ Task '{leaf}' failed: {e}")
                result.error = e
            else:
                print(f"✨ Task '{leaf}' done ({len(result.written)} file(s) written)")
            results.append(result)
        return results
