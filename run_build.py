import argparse
import sys
from pathlib import Path
from typing import List, Optional

from blogassets.config import BuildConfig, load_config
from blogassets.core import AssetPipeline


def parse_args(argv: Optional[List[str]], defaults: BuildConfig) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Build the blog theme assets (images, scripts, styles)."
    )
    parser.add_argument(
        "tasks",
        nargs="*",
        default=["default"],
        help="Tasks to run: images, scripts, less, css, styles, default.",
    )
    parser.add_argument(
        "--root",
        type=Path,
        default=defaults.root,
        help="Project root holding images/, scripts/, less/ and styles/.",
    )
    parser.add_argument(
        "--output-dir",
        default=defaults.output_dir,
        help="Destination for minified scripts, relative to the root.",
    )
    parser.add_argument(
        "--css-dir",
        default=defaults.css_dir,
        help="Destination for minified stylesheets, relative to the root.",
    )
    parser.add_argument(
        "--image-quality",
        type=int,
        default=defaults.image_quality,
        help="Lossy encoder quality, 0-100.",
    )
    parser.add_argument(
        "--image-speed",
        type=int,
        default=defaults.image_speed,
        help="Compression speed, 1 (slowest, smallest) to 11.",
    )
    parser.add_argument(
        "--no-default-minify",
        dest="default_minify_css",
        action="store_false",
        default=defaults.default_minify_css,
        help="Make the default task compile LESS without minifying CSS.",
    )
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    # Environment (and a local .env file, if present) supplies the defaults;
    # command line flags win.
    try:
        defaults = load_config()
    except ValueError as e:
        print(f"❌ Invalid configuration: {e}", file=sys.stderr)
        return 2

    args = parse_args(argv, defaults)

    try:
        config = BuildConfig(
            root=args.root,
            output_dir=args.output_dir,
            css_dir=args.css_dir,
            image_quality=args.image_quality,
            image_speed=args.image_speed,
            default_minify_css=args.default_minify_css,
        )
    except ValueError as e:
        print(f"❌ Invalid configuration: {e}", file=sys.stderr)
        return 2

    pipeline = AssetPipeline(config)
    try:
        results = pipeline.run(args.tasks)
    except KeyError as e:
        print(f"❌ {e.args[0]}. Available: {', '.join(pipeline.task_names())}", file=sys.stderr)
        return 2

    failed = [r.name for r in results if not r.ok]
    if failed:
        print(f"❌ Failed tasks: {', '.join(failed)}")
        return 1
    print("✅ Build complete")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
