# renderer/raytracer.py
import logging
import random
import time
from concurrent.futures import ProcessPoolExecutor, ThreadPoolExecutor, as_completed
from functools import partial

import numpy as np

from camera.camera import Camera
from core.config import RenderSettings
from core.errors import RenderError
from core.vector import Color, Vector3
from geometry.hittable import Hittable
from renderer.integrator import ray_color
from renderer.pixel_buffer import PixelBuffer, Tile, make_tiles
from renderer.tone_mapping import gamma_correct

logger = logging.getLogger(__name__)

# Scene, camera, settings and seed of a process pool worker, set once per child process.
_worker_state = {}


def pixel_seed(seed: int, x: int, y: int, width: int, height: int) -> int:
    """
    Seed of the random stream owned by pixel (x, y). It depends only on the
    base seed and the pixel's coordinates, never on which worker renders it.
    """
    return (seed * height + y) * width + x


def render_pixel(x: int, y: int, world: Hittable, camera: Camera,
                 settings: RenderSettings, seed: int) -> Vector3:
    """
    Averages samples_per_pixel jittered samples of pixel (x, y), where y = 0
    is the top row. Returns linear (not gamma corrected) color.
    """
    rng = random.Random(pixel_seed(seed, x, y, settings.width, settings.height))
    color = Color(0.0, 0.0, 0.0)
    for _ in range(settings.samples_per_pixel):
        s = (x + rng.random()) / settings.width
        t = (settings.height - 1 - y + rng.random()) / settings.height
        ray = camera.get_ray(s, t, rng)
        color = color + ray_color(ray, world, settings.max_depth, rng)
    return color / settings.samples_per_pixel


def render_tile(tile: Tile, world: Hittable, camera: Camera,
                settings: RenderSettings, seed: int) -> np.ndarray:
    """Renders one tile to a (height, width, 3) array of linear colors."""
    block = np.empty((tile.height, tile.width, 3), dtype=np.float64)
    for x, y in tile.pixels():
        block[y - tile.y0, x - tile.x0] = tuple(render_pixel(x, y, world, camera, settings, seed))
    return block


def _init_worker(world, camera, settings, seed):
    _worker_state.update(world=world, camera=camera, settings=settings, seed=seed)


def _render_tile_job(tile: Tile) -> np.ndarray:
    return render_tile(tile, **_worker_state)


class Renderer:
    """
    Splits the image into tiles and renders them on a pool of workers.

    The scene and camera are only read while rendering, so every worker shares
    them. Each pixel draws from its own seeded random stream, which makes the
    result independent of the number of workers, the tile size and the order
    in which tiles complete.
    """
    def __init__(self, settings: RenderSettings):
        self.settings = settings.validate()
        if settings.seed is None:
            self.seed = random.randrange(2 ** 31)
            logger.info(f"Using random seed {self.seed}")
        else:
            self.seed = settings.seed

    def render_scene(self, scene) -> PixelBuffer:
        """Renders a scene, building its camera for this image's aspect ratio."""
        camera = Camera.from_config(scene.camera, self.settings.aspect_ratio)
        return self.render(scene.world, camera)

    def render(self, world: Hittable, camera: Camera) -> PixelBuffer:
        settings = self.settings
        tiles = make_tiles(settings.width, settings.height, settings.tile_size)
        workers = min(settings.workers, len(tiles))
        buffer = PixelBuffer(settings.width, settings.height)

        logger.info(f"Rendering {settings.width}x{settings.height}, "
                    f"{settings.samples_per_pixel} samples/pixel, max depth {settings.max_depth}, "
                    f"{len(tiles)} tiles on {workers} {settings.executor if workers > 1 else 'inline'} worker(s)")
        start = time.perf_counter()

        if workers == 1:
            self._render_inline(world, camera, tiles, buffer)
        else:
            self._render_parallel(world, camera, tiles, buffer, workers)

        if not buffer.complete:
            raise RenderError("Render finished with unwritten pixels")

        logger.info(f"Render finished in {time.perf_counter() - start:.2f}s")
        return buffer

    def _render_inline(self, world, camera, tiles, buffer):
        for done, tile in enumerate(tiles, 1):
            try:
                linear = render_tile(tile, world, camera, self.settings, self.seed)
            except Exception as e:
                raise RenderError(f"Rendering {tile} failed: {e}") from e
            self._store(buffer, tile, linear, done, len(tiles))

    def _make_pool(self, world, camera, workers):
        """Returns the executor and the callable that renders one tile on it."""
        if self.settings.executor == "process":
            pool = ProcessPoolExecutor(max_workers=workers, initializer=_init_worker,
                                       initargs=(world, camera, self.settings, self.seed))
            return pool, _render_tile_job
        # Threads share this process, so each job carries its own render context.
        job = partial(render_tile, world=world, camera=camera, settings=self.settings, seed=self.seed)
        return ThreadPoolExecutor(max_workers=workers), job

    def _render_parallel(self, world, camera, tiles, buffer, workers):
        pool, job = self._make_pool(world, camera, workers)
        with pool as executor:
            futures = {executor.submit(job, tile): tile for tile in tiles}
            try:
                for done, future in enumerate(as_completed(futures), 1):
                    tile = futures[future]
                    try:
                        linear = future.result()
                    except Exception as e:
                        raise RenderError(f"Rendering {tile} failed: {e}") from e
                    self._store(buffer, tile, linear, done, len(tiles))
            except BaseException:
                executor.shutdown(wait=False, cancel_futures=True)
                raise

    def _store(self, buffer, tile, linear, done, total):
        buffer.write_tile(tile, gamma_correct(linear, self.settings.gamma))
        logger.debug(f"Tile {done}/{total} done: {tile}")
