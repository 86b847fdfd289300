#!/usr/bin/env python3
"""Render the showcase scene.

Three spheres on a floor in front of two walls, lit by a single point
light. The output format follows the file extension: .ppm writes plain
text P3, anything else goes through Pillow.

Usage:
    python examples/render_scene.py [options]

Options:
    --width WIDTH       Image width in pixels (default: 400)
    --height HEIGHT     Image height in pixels (default: 200)
    --depth DEPTH       Reflection/refraction recursion depth (default: 5)
    --workers N         Worker count (default: one per CPU)
    --backend NAME      "process" or "thread" (default: process)
    --output OUTPUT     Output file path (default: scene.png)
    --preview           Show the result in a Matplotlib window
    --verbose           Log every finished row
    --quiet             Suppress progress output

Example:
    python examples/render_scene.py --width 200 --height 100 --output scene.ppm
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path

from whitted.config import RenderSettings
from whitted.preview import save_png, save_ppm, show_preview
from whitted.scene import create_showcase_scene

logger = logging.getLogger("render_scene")


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the showcase scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--width", type=int, default=400, help="Image width in pixels (default: 400)")
    parser.add_argument("--height", type=int, default=200, help="Image height in pixels (default: 200)")
    parser.add_argument(
        "--depth",
        type=int,
        default=5,
        help="Reflection/refraction recursion depth (default: 5)",
    )
    parser.add_argument("--workers", type=int, default=None, help="Worker count (default: one per CPU)")
    parser.add_argument(
        "--backend",
        choices=("process", "thread"),
        default="process",
        help="Worker pool type (default: process)",
    )
    parser.add_argument("--output", type=str, default="scene.png", help="Output file path (default: scene.png)")
    parser.add_argument("--preview", action="store_true", help="Show the result in a Matplotlib window")
    parser.add_argument("--verbose", action="store_true", help="Log every finished row")
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output")
    return parser.parse_args()


def render_scene(
    width: int = 400,
    height: int = 200,
    settings: RenderSettings | None = None,
    output_path: str = "scene.png",
    quiet: bool = False,
    preview: bool = False,
) -> Path:
    """Render the showcase scene and save it.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        settings: Render settings; defaults to RenderSettings().
        output_path: Output file path (.ppm or an image format Pillow knows).
        quiet: If True, suppress progress output.
        preview: If True, display the image after saving.

    Returns:
        Path to the saved image file.
    """
    world, camera = create_showcase_scene(width, height)
    start_time = time.time()

    def progress_callback(done: int, total: int) -> None:
        if not quiet:
            elapsed = time.time() - start_time
            rows_per_sec = done / elapsed if elapsed > 0 else 0.0
            print(
                f"\r  Progress: {done}/{total} rows ({done / total * 100:.1f}%) - {rows_per_sec:.1f} rows/s",
                end="",
                flush=True,
            )

    canvas = camera.render(world, settings, callback=progress_callback)
    if not quiet:
        print()

    output_file = Path(output_path)
    if output_file.suffix.lower() == ".ppm":
        save_ppm(canvas, output_file)
    else:
        save_png(canvas, output_file)

    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {time.time() - start_time:.2f}s")

    if preview:
        show_preview(canvas)

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    level = logging.DEBUG if args.verbose else logging.WARNING if args.quiet else logging.INFO
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        settings = RenderSettings(max_depth=args.depth, workers=args.workers, backend=args.backend)
        render_scene(
            width=args.width,
            height=args.height,
            settings=settings,
            output_path=args.output,
            quiet=args.quiet,
            preview=args.preview,
        )
        return 0
    except Exception:
        logger.exception("Render failed")
        return 1


if __name__ == "__main__":
    sys.exit(main())
