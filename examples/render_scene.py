#!/usr/bin/env python3
"""Render the demo scene or a JSON scene file.

This script demonstrates end-to-end rendering with prism: it builds (or
loads) a scene, renders it with optional supersampling across worker
processes, and saves the result as a PNG.

Usage:
    python -m examples.render_scene [options]

Options:
    --scene PATH        JSON scene file (default: built-in demo scene)
    --width WIDTH       Image width for the demo scene (default: 800)
    --height HEIGHT     Image height for the demo scene (default: 600)
    --samples SAMPLES   Samples per pixel (default: 1)
    --workers N         Worker processes (default: 1)
    --seed SEED         Seed for the sub-pixel jitter
    --output OUTPUT     Output file path (default: render.png)
    --preview           Show the result in a Matplotlib window
    --quiet             Suppress progress output
    --verbose           Enable debug logging

Example:
    python -m examples.render_scene --width 400 --height 300 --samples 4 --workers 4
"""

from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the demo scene or a JSON scene file.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--scene",
        type=str,
        default=None,
        help="JSON scene file (default: built-in demo scene)",
    )
    parser.add_argument(
        "--width",
        type=int,
        default=800,
        help="Image width in pixels for the demo scene (default: 800)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=600,
        help="Image height in pixels for the demo scene (default: 600)",
    )
    parser.add_argument(
        "--samples",
        type=int,
        default=1,
        help="Samples per pixel; more than 1 enables jittered supersampling (default: 1)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=1,
        help="Worker processes (default: 1)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the sub-pixel jitter (default: random)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="render.png",
        help="Output file path (default: render.png)",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Show the result in a Matplotlib window",
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    return parser.parse_args()


def render_scene(
    scene_path: str | None = None,
    width: int = 800,
    height: int = 600,
    samples: int = 1,
    workers: int = 1,
    seed: int | None = None,
    output_path: str = "render.png",
    preview: bool = False,
    quiet: bool = False,
) -> Path:
    """Render a scene and save it to file.

    Args:
        scene_path: JSON scene file. None renders the demo scene.
        width: Image width for the demo scene.
        height: Image height for the demo scene.
        samples: Samples per pixel.
        workers: Worker processes.
        seed: Seed for the sub-pixel jitter.
        output_path: Output file path (PNG).
        preview: If True, show the result in a Matplotlib window.
        quiet: If True, suppress progress output.

    Returns:
        Path to the saved image file.
    """
    from prism.core.renderer import render
    from prism.preview.export import save_png
    from prism.scene.config import load_scene
    from prism.scene.demo import create_demo_scene

    if scene_path is not None:
        if not quiet:
            print(f"Loading scene from {scene_path}...")
        scene = load_scene(scene_path)
    else:
        if not quiet:
            print(f"Creating demo scene ({width}x{height})...")
        scene = create_demo_scene(width=width, height=height)

    if not quiet:
        print(
            f"Rendering {scene.width}x{scene.height} at {samples} sample(s) per pixel "
            f"with {workers} worker(s)..."
        )

    start_time = time.time()

    def progress_callback(rows_done: int, total_rows: int) -> None:
        if not quiet:
            elapsed = time.time() - start_time
            progress_pct = (rows_done / total_rows) * 100 if total_rows > 0 else 0
            rows_per_sec = rows_done / elapsed if elapsed > 0 else 0
            print(
                f"\r  Progress: {rows_done}/{total_rows} rows "
                f"({progress_pct:.1f}%) - {rows_per_sec:.1f} rows/s",
                end="",
                flush=True,
            )

    image = render(
        scene,
        samples,
        seed=seed,
        workers=workers,
        callback=progress_callback,
    )

    if not quiet:
        print()  # Newline after progress

    output_file = Path(output_path)
    save_png(image, output_file)

    total_time = time.time() - start_time
    if not quiet:
        print(f"Saved to: {output_file.absolute()}")
        print(f"Total time: {total_time:.2f}s")

    if preview:
        from prism.preview.display import show_preview

        show_preview(image, title=str(output_file))

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    from prism.errors import RenderError

    try:
        render_scene(
            scene_path=args.scene,
            width=args.width,
            height=args.height,
            samples=args.samples,
            workers=args.workers,
            seed=args.seed,
            output_path=args.output,
            preview=args.preview,
            quiet=args.quiet,
        )
        return 0
    except (RenderError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
