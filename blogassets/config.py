import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional

from dotenv import dotenv_values, find_dotenv


ENV_PREFIX = "BLOG_ASSETS_"

DEFAULT_OUTPUT_DIR = "res"
DEFAULT_IMAGE_QUALITY = 95
DEFAULT_IMAGE_SPEED = 4

_TRUTHY = {"1", "true", "yes", "on"}
_FALSY = {"0", "false", "no", "off"}


@dataclass
class BuildConfig:
    """
    Build settings, resolved once at startup.

    `output_dir` receives minified scripts, `css_dir` receives minified
    stylesheets. Both are relative to `root` unless absolute.
    """

    root: Path = Path(".")
    output_dir: str = DEFAULT_OUTPUT_DIR
    css_dir: str = DEFAULT_OUTPUT_DIR
    image_quality: int = DEFAULT_IMAGE_QUALITY
    image_speed: int = DEFAULT_IMAGE_SPEED
    default_minify_css: bool = True

    def __post_init__(self) -> None:
        self.root = Path(self.root)
        if not 0 <= self.image_quality <= 100:
            raise ValueError(f"image_quality must be in 0..100, got {self.image_quality}")
        if not 1 <= self.image_speed <= 11:
            raise ValueError(f"image_speed must be in 1..11, got {self.image_speed}")

    @property
    def images_dir(self) -> Path:
        return self.root / "images"

    @property
    def scripts_dest(self) -> Path:
        return self.root / self.output_dir

    @property
    def styles_dir(self) -> Path:
        return self.root / "styles"

    @property
    def css_dest(self) -> Path:
        return self.root / self.css_dir


def load_config(
    env: Optional[Mapping[str, Optional[str]]] = None,
    use_dotenv: bool = True,
) -> BuildConfig:
    """
    Build a BuildConfig from BLOG_ASSETS_* variables.

    `env` defaults to os.environ merged over the entries of a .env file found
    from the working directory upwards; real environment variables win.
    """
    if env is None:
        env = dict(os.environ)
        if use_dotenv:
            env = {**dotenv_values(find_dotenv(usecwd=True)), **env}

    def get(name: str) -> Optional[str]:
        value = env.get(ENV_PREFIX + name)
        if value is None or value.strip() == "":
            return None
        return value.strip()

    kwargs = {}
    if get("ROOT"):
        kwargs["root"] = Path(get("ROOT"))
    if get("OUTPUT_DIR"):
        kwargs["output_dir"] = get("OUTPUT_DIR")
    if get("CSS_DIR"):
        kwargs["css_dir"] = get("CSS_DIR")
    if get("IMAGE_QUALITY"):
        kwargs["image_quality"] = int(get("IMAGE_QUALITY"))
    if get("IMAGE_SPEED"):
        kwargs["image_speed"] = int(get("IMAGE_SPEED"))
    if get("DEFAULT_MINIFY_CSS"):
        kwargs["default_minify_css"] = _parse_bool(get("DEFAULT_MINIFY_CSS"))

    return BuildConfig(**kwargs)


def _parse_bool(value: str) -> bool:
    lowered = value.lower()
    if lowered in _TRUTHY:
        return True
    if lowered in _FALSY:
        return False
    raise ValueError(f"Expected a boolean value, got {value!r}")
