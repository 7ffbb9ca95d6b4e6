#!/usr/bin/env python3
"""Interactive Cornell box viewer.

This script renders the Cornell box scene on the CPU and shows it in a
Taichi GGUI window.

Usage:
    python -m examples.interactive_cornell_box [--width W] [--height H] [--workers N]

Controls:
    - SPACE: Render the scene again
    - ESC: Close the window
"""

from __future__ import annotations

import argparse
import logging
import multiprocessing
import platform
import sys

import taichi as ti


def initialize_taichi() -> str:
    """Initialize Taichi with the best available backend for the window.

    On macOS, prefers Metal. Falls back to CPU if GPU is unavailable.

    Returns:
        Name of the backend being used.
    """
    system = platform.system()

    if system == "Darwin":
        try:
            ti.init(arch=ti.metal)
            return "Metal (GPU)"
        except RuntimeError:
            pass

    try:
        ti.init(arch=ti.gpu)
        return "GPU"
    except RuntimeError:
        pass

    ti.init(arch=ti.cpu)
    return "CPU"


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Interactive Cornell box viewer.")
    parser.add_argument("--width", type=int, default=800, help="Window width (default: 800)")
    parser.add_argument("--height", type=int, default=600, help="Window height (default: 600)")
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Render worker processes (default: one per CPU)",
    )
    parser.add_argument("--seed", type=int, default=0, help="Sampling seed (default: 0)")
    parser.add_argument("--verbose", action="store_true", help="Log per-tile progress")
    return parser.parse_args()


def main() -> int:
    """Main entry point for the interactive viewer.

    Returns:
        Exit code (0 for success, non-zero for error).
    """
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    from cornell_rt.core.renderer import Renderer, RenderSettings
    from cornell_rt.preview.interactive import InteractivePreview
    from cornell_rt.scene import create_cornell_box_scene

    if not InteractivePreview.is_display_available():
        print("Error: No display available. Cannot run interactive preview.")
        print("This script requires a graphical display environment.")
        return 1

    backend = initialize_taichi()
    print(f"Taichi backend: {backend}")

    # Workers are spawned fresh rather than forked from the Taichi process
    renderer = Renderer(
        create_cornell_box_scene(),
        RenderSettings(width=args.width, height=args.height, workers=args.workers, seed=args.seed),
        mp_context=multiprocessing.get_context("spawn"),
    )

    print(f"Creating preview window ({args.width}x{args.height})...")
    preview = InteractivePreview(renderer)

    print("Rendering...")
    print("  - Press SPACE to render again")
    print("  - Press ESC to exit")
    print()

    try:
        preview.run()
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
    finally:
        preview.close()
        print("Preview window closed.")

    return 0


if __name__ == "__main__":
    sys.exit(main())
