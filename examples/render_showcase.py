#!/usr/bin/env python3
"""Render the showcase scene, or a scene described in a JSON file.

Usage:
    python examples/render_showcase.py [options]

Options:
    --width WIDTH       Image width in pixels (default: 200)
    --height HEIGHT     Image height in pixels (default: 100)
    --max-depth DEPTH   Reflection/refraction recursion budget (default: 4)
    --scene FILE        JSON scene description (default: built-in showcase)
    --obj FILE          Add an OBJ model to the scene
    --output OUTPUT     Output file, .ppm or .png (default: showcase.ppm);
                        "-" writes PPM to stdout
    --arch ARCH         Taichi backend for the canvas kernels (default: cpu)
    --preview           Show the result in a Matplotlib window
    --log-level LEVEL   Logging level (default: WARNING)
    --quiet             Suppress progress output

Example:
    python examples/render_showcase.py --width 400 --height 200 --output showcase.png
"""

from __future__ import annotations

import argparse
import json
import sys
import time
from pathlib import Path


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the showcase scene with the Whitted ray tracer.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--width", type=int, default=200, help="Image width in pixels (default: 200)")
    parser.add_argument("--height", type=int, default=100, help="Image height in pixels (default: 100)")
    parser.add_argument(
        "--max-depth",
        type=int,
        default=4,
        help="Reflection/refraction recursion budget (default: 4)",
    )
    parser.add_argument("--scene", type=str, default=None, help="JSON scene description")
    parser.add_argument("--obj", type=str, default=None, help="OBJ model to add to the scene")
    parser.add_argument(
        "--output",
        type=str,
        default="showcase.ppm",
        help='Output file, .ppm or .png (default: showcase.ppm); "-" for stdout',
    )
    parser.add_argument("--arch", type=str, default="cpu", help="Taichi backend (default: cpu)")
    parser.add_argument("--preview", action="store_true", help="Show a Matplotlib preview")
    parser.add_argument("--log-level", type=str, default="WARNING", help="Logging level")
    parser.add_argument("--quiet", action="store_true", help="Suppress progress output")
    return parser.parse_args()


def render_showcase(args: argparse.Namespace) -> None:
    """Build the scene, render it and write the output."""
    from whitted.core.config import RenderConfig
    from whitted.core.runtime import init_runtime
    from whitted.core.transforms import translation
    from whitted.preview.display import show_preview
    from whitted.preview.export import save_png, write_ppm
    from whitted.scene.builder import SceneConfig, build_camera, build_world
    from whitted.scene.objfile import parse_obj_file
    from whitted.scene.showcase import ShowcaseParams, create_showcase_scene

    config = RenderConfig(
        width=args.width,
        height=args.height,
        max_depth=args.max_depth,
        arch=args.arch,
    )
    init_runtime(config.arch)

    # Progress goes to stderr so PPM on stdout stays clean
    def log(message: str, **kwargs) -> None:
        if not args.quiet:
            print(message, file=sys.stderr, **kwargs)

    if args.scene is not None:
        scene_path = Path(args.scene)
        log(f"Loading scene {scene_path} ({config.width}x{config.height})...")
        data = json.loads(scene_path.read_text(encoding="utf-8"))
        scene = SceneConfig.from_dict({"base_dir": str(scene_path.parent), **data})
        world = build_world(scene)
        camera = build_camera(scene, config.width, config.height, config.field_of_view)
    else:
        log(f"Creating showcase scene ({config.width}x{config.height})...")
        world, camera = create_showcase_scene(
            ShowcaseParams(width=config.width, height=config.height, field_of_view=config.field_of_view)
        )

    if args.obj is not None:
        model = parse_obj_file(args.obj).to_group()
        model.transform = translation(0.0, 0.0, 2.0)
        world.add(model)

    start_time = time.time()

    def progress_callback(done: int, total: int) -> None:
        elapsed = time.time() - start_time
        log(f"\r  Progress: {done}/{total} rows ({done / total * 100:.1f}%) - {elapsed:.1f}s", end="", flush=True)

    canvas = camera.render(
        world,
        max_depth=config.max_depth,
        callback=None if args.quiet else progress_callback,
    )
    log("")  # Newline after progress

    if args.output == "-":
        write_ppm(canvas)
    elif args.output.lower().endswith(".png"):
        save_png(canvas, args.output)
        log(f"Saved to: {Path(args.output).absolute()}")
    else:
        write_ppm(canvas, args.output)
        log(f"Saved to: {Path(args.output).absolute()}")

    log(f"Total time: {time.time() - start_time:.2f}s")

    if args.preview:
        show_preview(canvas)


def main() -> int:
    """Main entry point."""
    args = parse_args()

    from whitted.core.errors import RayTracerError
    from whitted.logging_config import setup_logging

    setup_logging(args.log_level)

    try:
        render_showcase(args)
        return 0
    except (RayTracerError, ValueError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
