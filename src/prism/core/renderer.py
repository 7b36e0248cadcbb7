"""Renderer driver: turns a Scene into a raster.

For every pixel the driver generates one or more camera rays, shades each
with cast_ray at depth 0, averages the results in linear space and finally
gamma-encodes the whole raster to 8 bits.

- samples_per_pixel == 1: one ray through the pixel center (no jitter).
- samples_per_pixel > 1: that many rays with uniform sub-pixel jitter.

Rows are independent given the read-only scene. Each row draws its jitter
from its own numpy Generator spawned from a single SeedSequence, so a seeded
render produces the same image whether it runs in one process or is split
across a ProcessPoolExecutor.

Example:
    >>> from prism.core.renderer import render
    >>> from prism.scene.demo import create_demo_scene
    >>> image = render(create_demo_scene(width=160, height=120), samples_per_pixel=4, seed=7)
    >>> image.shape
    (120, 160, 3)
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Callable, Sequence
from concurrent.futures import ProcessPoolExecutor, as_completed

import numpy as np
import numpy.typing as npt

from prism.camera.pinhole import check_camera_model, create_prime
from prism.core.color import BLACK, Color, encode_image
from prism.core.integrator import cast_ray
from prism.scene.scene import Scene

logger = logging.getLogger(__name__)

# Callback receives (rows_completed, total_rows)
RowCallback = Callable[[int, int], None]

# Row bands handed out per worker process
BANDS_PER_WORKER = 4


def render_pixel(
    scene: Scene,
    pixel_x: int,
    pixel_y: int,
    samples_per_pixel: int = 1,
    rng: np.random.Generator | None = None,
) -> Color:
    """Compute the averaged linear color of a single pixel.

    A single sample without a generator goes through the pixel center.
    Otherwise every sample is jittered uniformly inside the pixel.

    Args:
        scene: The scene to render.
        pixel_x: Pixel column (0 = left).
        pixel_y: Pixel row (0 = top).
        samples_per_pixel: Number of rays to average.
        rng: Source of jitter. Passing one forces jitter even for a single
            sample; when omitted with several samples a fresh unseeded
            generator is used.

    Returns:
        The average color, not yet clamped or encoded.
    """
    if samples_per_pixel < 1:
        raise ValueError(f"samples_per_pixel = {samples_per_pixel} must be at least 1")

    if samples_per_pixel == 1 and rng is None:
        return cast_ray(scene, create_prime(pixel_x, pixel_y, scene), 0)

    if rng is None:
        rng = np.random.default_rng()

    total = BLACK
    for jitter_x, jitter_y in rng.random((samples_per_pixel, 2)):
        ray = create_prime(pixel_x, pixel_y, scene, (float(jitter_x), float(jitter_y)))
        total = total + cast_ray(scene, ray, 0)
    return total / samples_per_pixel


def render_row(
    scene: Scene,
    pixel_y: int,
    samples_per_pixel: int = 1,
    seed: np.random.SeedSequence | None = None,
    jitter: bool | None = None,
) -> npt.NDArray[np.float32]:
    """Render one row of pixels in linear space.

    Args:
        scene: The scene to render.
        pixel_y: Row index (0 = top).
        samples_per_pixel: Rays per pixel.
        seed: Seed for this row's jitter. None draws fresh entropy.
        jitter: Whether to jitter samples inside the pixel. Defaults to
            jittering only when samples_per_pixel > 1. Without jitter every
            sample goes through the pixel center, so one ray is enough.

    Returns:
        Array of shape (width, 3), dtype float32.
    """
    if jitter is None:
        jitter = samples_per_pixel > 1

    row = np.zeros((scene.width, 3), dtype=np.float32)
    if not jitter:
        for pixel_x in range(scene.width):
            row[pixel_x] = render_pixel(scene, pixel_x, pixel_y).to_tuple()
        return row

    rng = np.random.default_rng(seed)
    for pixel_x in range(scene.width):
        color = render_pixel(scene, pixel_x, pixel_y, samples_per_pixel, rng)
        row[pixel_x] = color.to_tuple()
    return row


def _render_band(
    scene: Scene,
    y0: int,
    y1: int,
    samples_per_pixel: int,
    seeds: Sequence[np.random.SeedSequence | None],
    jitter: bool,
) -> tuple[int, int, npt.NDArray[np.float32]]:
    """Render rows [y0, y1). Runs inside worker processes."""
    block = np.zeros((y1 - y0, scene.width, 3), dtype=np.float32)
    for offset, pixel_y in enumerate(range(y0, y1)):
        block[offset] = render_row(scene, pixel_y, samples_per_pixel, seeds[offset], jitter)
    return y0, y1, block


def make_bands(height: int, band_height: int) -> list[tuple[int, int]]:
    """Split [0, height) into consecutive row bands."""
    return [(y, min(y + band_height, height)) for y in range(0, height, band_height)]


def row_seeds(
    height: int,
    jitter: bool,
    seed: int | np.random.SeedSequence | None,
) -> list[np.random.SeedSequence | None]:
    """One independent seed per row; all None when there is no jitter."""
    if not jitter:
        return [None] * height
    sequence = seed if isinstance(seed, np.random.SeedSequence) else np.random.SeedSequence(seed)
    return sequence.spawn(height)


def render_linear(
    scene: Scene,
    samples_per_pixel: int = 1,
    *,
    seed: int | np.random.SeedSequence | None = None,
    jitter: bool | None = None,
    workers: int = 1,
    callback: RowCallback | None = None,
) -> npt.NDArray[np.float32]:
    """Render the scene to a linear float raster.

    Args:
        scene: The scene to render.
        samples_per_pixel: Rays per pixel.
        seed: Seed for the jitter. None draws fresh entropy.
        jitter: Whether to jitter samples inside the pixel. Defaults to
            jittering only when samples_per_pixel > 1. Without jitter every
            sample is the pixel center, so the image equals a one-sample
            render and the seed is unused.
        workers: Number of worker processes. 1 renders in this process.
        callback: Optional progress callback, called as rows complete with
            (rows_completed, total_rows).

    Returns:
        Array of shape (height, width, 3), dtype float32, top row first.

    Raises:
        CameraModelError: If the scene is not landscape.
        ValueError: If samples_per_pixel or workers is less than 1.
    """
    check_camera_model(scene)
    if samples_per_pixel < 1:
        raise ValueError(f"samples_per_pixel = {samples_per_pixel} must be at least 1")
    if workers < 1:
        raise ValueError(f"workers = {workers} must be at least 1")
    if jitter is None:
        jitter = samples_per_pixel > 1

    logger.info(
        "Rendering %dx%d, %d element(s), %d light(s), %d spp, %d worker(s)",
        scene.width,
        scene.height,
        scene.element_count,
        scene.light_count,
        samples_per_pixel,
        workers,
    )
    start_time = time.perf_counter()

    seeds = row_seeds(scene.height, jitter, seed)
    image = np.zeros((scene.height, scene.width, 3), dtype=np.float32)

    if workers == 1:
        for pixel_y in range(scene.height):
            image[pixel_y] = render_row(
                scene, pixel_y, samples_per_pixel, seeds[pixel_y], jitter
            )
            if callback is not None:
                callback(pixel_y + 1, scene.height)
    else:
        band_height = max(1, math.ceil(scene.height / (workers * BANDS_PER_WORKER)))
        rows_done = 0
        with ProcessPoolExecutor(max_workers=workers) as executor:
            futures = [
                executor.submit(
                    _render_band, scene, y0, y1, samples_per_pixel, seeds[y0:y1], jitter
                )
                for y0, y1 in make_bands(scene.height, band_height)
            ]
            for future in as_completed(futures):
                y0, y1, block = future.result()
                image[y0:y1] = block
                rows_done += y1 - y0
                if callback is not None:
                    callback(rows_done, scene.height)

    logger.debug(
        "Rendered %dx%d in %.2fs", scene.width, scene.height, time.perf_counter() - start_time
    )
    return image


def render(
    scene: Scene,
    samples_per_pixel: int = 1,
    *,
    seed: int | np.random.SeedSequence | None = None,
    workers: int = 1,
    callback: RowCallback | None = None,
) -> npt.NDArray[np.uint8]:
    """Render the scene to an 8-bit RGB raster.

    Same arguments as render_linear(). The linear result is clamped and
    gamma encoded per channel.

    Returns:
        Array of shape (height, width, 3), dtype uint8, top row first.
    """
    linear = render_linear(
        scene,
        samples_per_pixel,
        seed=seed,
        workers=workers,
        callback=callback,
    )
    return encode_image(linear)
