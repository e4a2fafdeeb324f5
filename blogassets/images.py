import io
from pathlib import Path
from typing import Dict, List

from PIL import Image, ImageSequence
from scour import scour

from .config import BuildConfig
from .files import select_files


IMAGE_PATTERNS = ["images/*"]

# Extension -> Pillow format name. SVG goes through scour, anything else
# (ico, bmp, ...) is left alone.
RASTER_FORMATS: Dict[str, str] = {
    ".png": "PNG",
    ".jpg": "JPEG",
    ".jpeg": "JPEG",
    ".gif": "GIF",
    ".webp": "WEBP",
}
SVG_SUFFIX = ".svg"


def recompress(img: Image.Image, fmt: str, quality: int, speed: int) -> bytes:
    """
    Encode `img` in `fmt` with the optimiser enabled.

    `quality` (0-100) drives the lossy encoders (JPEG, WebP). `speed` follows
    pngquant's 1-11 scale: lower is slower and compresses harder.
    PNG and GIF stay lossless. Animated GIF, PNG and WebP keep every frame
    along with its timing and the loop count.
    """
    buf = io.BytesIO()
    params = {}
    icc = img.info.get("icc_profile")
    if icc:
        params["icc_profile"] = icc

    if getattr(img, "is_animated", False) and fmt != "JPEG":
        durations = [frame.info.get("duration", 0) for frame in ImageSequence.Iterator(img)]
        img.seek(0)
        params.update(save_all=True, duration=durations)
        if "loop" in img.info:
            params["loop"] = img.info["loop"]

    if fmt == "JPEG":
        if img.mode not in ("RGB", "L", "CMYK"):
            img = img.convert("RGB")
        params.update(quality=quality, optimize=True, progressive=True)
        exif = img.info.get("exif")
        if exif:
            params["exif"] = exif
    elif fmt == "PNG":
        if speed <= 4:
            params["optimize"] = True
        else:
            params["compress_level"] = max(1, 10 - speed)
    elif fmt == "GIF":
        params["optimize"] = True
    elif fmt == "WEBP":
        params.update(quality=quality, method=max(0, min(6, 7 - speed)))

    img.save(buf, format=fmt, **params)
    return buf.getvalue()


def scour_options():
    # same output as svgo with removeViewBox disabled: no comments, metadata,
    # prolog or indentation, viewBox untouched
    options = scour.sanitizeOptions()
    options.strip_comments = True
    options.remove_metadata = True
    options.strip_xml_prolog = True
    options.enable_viewboxing = False
    options.indent_type = "none"
    options.newlines = False
    return options


def minify_svg(source: bytes) -> bytes:
    return scour.scourString(source, scour_options()).encode("utf-8")


def optimize_image(path: Path, quality: int, speed: int) -> bool:
    """
    Recompress a single image in place.

    The file is rewritten only when the new encoding is strictly smaller, so
    the name is unchanged and the size never grows. Returns True if rewritten.
    Corrupt images raise whatever Pillow (or the SVG parser) raises.
    """
    suffix = path.suffix.lower()
    fmt = RASTER_FORMATS.get(suffix)
    if fmt is None and suffix != SVG_SUFFIX:
        return False

    original = path.read_bytes()
    if fmt is None:
        data = minify_svg(original)
    else:
        with Image.open(io.BytesIO(original)) as img:
            img.load()
            data = recompress(img, fmt, quality=quality, speed=speed)

    if len(data) >= len(original):
        return False
    path.write_bytes(data)
    return True


def run_images(config: BuildConfig) -> List[Path]:
    written: List[Path] = []
    for path in select_files(config.root, IMAGE_PATTERNS):
        before = path.stat().st_size
        if optimize_image(path, config.image_quality, config.image_speed):
            after = path.stat().st_size
            print(f"✅ {path.name}: {before} → {after} bytes")
            written.append(path)
        else:
            print(f"⏭️  {path.name}: kept as is")
    return written
