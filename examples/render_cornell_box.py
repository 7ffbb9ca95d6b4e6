#!/usr/bin/env python3
"""Render the Cornell box scene to a PNG file.

This script builds the Cornell box scene, renders it on a pool of worker
processes and saves the framebuffer as a PNG.

Usage:
    python -m examples.render_cornell_box [options]

Options:
    --width WIDTH       Image width in pixels (default: 800)
    --height HEIGHT     Image height in pixels (default: 600)
    --workers N         Worker processes (default: one per CPU; 1 = in-process)
    --seed SEED         Seed for glossy reflection sampling (default: 0)
    --noise-seed SEED   Seed for the wood grain noise (default: 0)
    --output OUTPUT     Output file path (default: cornell_box.png)
    --show              Show the result in a Matplotlib window
    --verbose           Log per-tile progress

Example:
    python -m examples.render_cornell_box --width 400 --height 300 --workers 4
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from cornell_rt.core.renderer import Renderer, RenderSettings
from cornell_rt.preview import save_png, show_preview
from cornell_rt.scene import CornellBoxParams, create_cornell_box_scene


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the Cornell box scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=800,
        help="Image width in pixels (default: 800)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=600,
        help="Image height in pixels (default: 600)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker processes (default: one per CPU, 1 renders in-process)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=0,
        help="Seed for glossy reflection sampling (default: 0)",
    )
    parser.add_argument(
        "--noise-seed",
        type=int,
        default=0,
        help="Seed for the wood grain noise (default: 0)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="cornell_box.png",
        help="Output file path (default: cornell_box.png)",
    )
    parser.add_argument(
        "--show",
        action="store_true",
        help="Show the result in a Matplotlib window",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log per-tile progress",
    )
    return parser.parse_args()


def render_cornell_box(
    width: int = 800,
    height: int = 600,
    workers: int | None = None,
    seed: int = 0,
    noise_seed: int = 0,
    output_path: str = "cornell_box.png",
    show: bool = False,
) -> Path:
    """Render the Cornell box scene and save to file.

    Args:
        width: Image width in pixels.
        height: Image height in pixels.
        workers: Number of worker processes (None for one per CPU).
        seed: Seed for the per-tile random generators.
        noise_seed: Seed for the wood grain noise.
        output_path: Output file path (PNG).
        show: Whether to display the result with Matplotlib.

    Returns:
        Path to the saved image file.
    """
    print(f"Creating Cornell box scene ({width}x{height})...")
    scene = create_cornell_box_scene(CornellBoxParams(noise_seed=noise_seed))

    settings = RenderSettings(width=width, height=height, workers=workers, seed=seed)
    renderer = Renderer(scene, settings)

    print(f"Rendering with {settings.worker_count} worker(s)...")

    def progress_callback(rows_done: int, total_rows: int) -> None:
        print(f"\r  Progress: {rows_done * 100 // total_rows}%", end="", flush=True)

    framebuffer = renderer.render(callback=progress_callback)
    print()

    output_file = Path(output_path)
    save_png(framebuffer, output_file)

    print(f"Saved to: {output_file.absolute()}")
    print(f"Render time: {renderer.last_render_seconds:.2f}s")

    if show:
        show_preview(framebuffer, render_seconds=renderer.last_render_seconds)

    return output_file


def main() -> int:
    """Main entry point."""
    args = parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        render_cornell_box(
            width=args.width,
            height=args.height,
            workers=args.workers,
            seed=args.seed,
            noise_seed=args.noise_seed,
            output_path=args.output,
            show=args.show,
        )
        return 0
    except (ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
