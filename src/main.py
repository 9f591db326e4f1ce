# main.py
import argparse
import sys
from dataclasses import replace
from pathlib import Path

from core.config import LOG_LEVEL, OUTPUT_DIR, QUALITY_PRESETS, RenderSettings
from core.errors import ConfigurationError, RenderError
from core.logging_config import setup_logging
from export.image_writer import save_image
from renderer.raytracer import Renderer
from scenes.builtin import BUILTIN_SCENES, get_builtin_scene
from scenes.loader import load_scene


def parse_args(argv=None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Render a scene with a Monte Carlo path tracer.")
    p.add_argument("--scene", default="default",
                   help=f"built-in scene ({', '.join(sorted(BUILTIN_SCENES))}) or path to a JSON scene file")
    p.add_argument("--quality", choices=sorted(QUALITY_PRESETS), default="balanced",
                   help="preset for samples per pixel and max depth")
    p.add_argument("--width", type=int, default=400)
    p.add_argument("--height", type=int, default=225)
    p.add_argument("--samples", type=int, help="samples per pixel (overrides --quality)")
    p.add_argument("--max-depth", type=int, help="maximum bounces per path (overrides --quality)")
    p.add_argument("--workers", type=int, help="number of parallel workers (default: CPU count)")
    p.add_argument("--tile-size", type=int, help="edge length of a square work unit in pixels")
    p.add_argument("--seed", type=int, default=0, help="base random seed")
    p.add_argument("--random-seed", action="store_true", help="draw a fresh base seed instead of --seed")
    p.add_argument("--executor", choices=["process", "thread"], help="kind of worker pool")
    p.add_argument("--output", type=Path, default=OUTPUT_DIR / "render.png",
                   help="output image; the format follows the extension")
    p.add_argument("--log-level", default=LOG_LEVEL)
    p.add_argument("--log-file", type=Path)
    return p.parse_args(argv)


def build_settings(args: argparse.Namespace) -> RenderSettings:
    settings = RenderSettings.from_quality(
        args.quality,
        width=args.width,
        height=args.height,
        samples_per_pixel=args.samples,
        max_depth=args.max_depth,
        workers=args.workers,
        tile_size=args.tile_size,
        executor=args.executor,
        seed=args.seed,
    )
    if args.random_seed:
        settings = replace(settings, seed=None)
    return settings


def resolve_scene(name: str):
    if name in BUILTIN_SCENES:
        return get_builtin_scene(name)
    return load_scene(name)


def main(argv=None) -> int:
    args = parse_args(argv)
    logger = setup_logging(args.log_level, args.log_file)

    try:
        settings = build_settings(args)
        scene = resolve_scene(args.scene)
        renderer = Renderer(settings)
        logger.info(f"Scene {scene.name!r} with {len(scene.world)} objects")
        buffer = renderer.render_scene(scene)
        save_image(buffer, args.output)
    except (ConfigurationError, ValueError) as e:
        logger.error(f"Configuration error: {e}")
        return 2
    except OSError as e:
        logger.error(f"Cannot read scene or write image: {e}")
        return 2
    except RenderError as e:
        logger.error(f"Render failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
