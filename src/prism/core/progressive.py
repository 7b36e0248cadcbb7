"""Progressive renderer for iterative sample accumulation.

This module provides a convenient wrapper around the renderer driver that supports:
- Progressive rendering that refines over time
- Batch rendering (multiple SPP in one call)
- Progress callbacks for UI updates
- Easy reset and re-render functionality

Every batch is a full jittered pass over the image. The renderer keeps the
running sum of all passes and the number of samples behind it, so the image
at any time is the average of every sample taken so far.

Example:
    >>> from prism.core.progressive import ProgressiveRenderer
    >>> from prism.scene.demo import create_demo_scene
    >>>
    >>> renderer = ProgressiveRenderer(create_demo_scene(width=320, height=240), seed=1)
    >>> renderer.render(16, batch_size=4)
    >>> image = renderer.get_image_numpy()
"""

from collections.abc import Callable, Generator

import numpy as np
import numpy.typing as npt

from prism.camera.pinhole import check_camera_model
from prism.core.color import GAMMA
from prism.core.renderer import render_linear
from prism.scene.scene import Scene

# Type alias for progress callback
# Callback receives (current_samples, total_target_samples)
ProgressCallback = Callable[[int, int], None]


class ProgressiveRenderer:
    """A progressive renderer that accumulates samples over time.

    Attributes:
        scene: The scene being rendered.
        workers: Worker processes used for each pass.
    """

    def __init__(
        self,
        scene: Scene,
        *,
        seed: int | None = None,
        workers: int = 1,
    ) -> None:
        """Initialize the progressive renderer.

        Args:
            scene: The scene to render.
            seed: Seed for the sub-pixel jitter. The same seed and the same
                sequence of render() calls produce the same image.
            workers: Worker processes per pass (1 renders in-process).

        Raises:
            CameraModelError: If the scene is not landscape.
        """
        check_camera_model(scene)
        self.scene = scene
        self.workers = workers
        self._seed = seed
        self._seed_sequence = np.random.SeedSequence(seed)
        self._accumulator = np.zeros((scene.height, scene.width, 3), dtype=np.float64)
        self._samples = 0

    @property
    def width(self) -> int:
        return self.scene.width

    @property
    def height(self) -> int:
        return self.scene.height

    @property
    def sample_count(self) -> int:
        """Get the current number of accumulated samples per pixel."""
        return self._samples

    def reset(self) -> None:
        """Reset the accumulator for a new render.

        Clears the color buffer and sample count and restarts the jitter
        sequence from the original seed.
        """
        self._accumulator.fill(0.0)
        self._samples = 0
        self._seed_sequence = np.random.SeedSequence(self._seed)

    def _render_batch(self, batch: int) -> None:
        (pass_seed,) = self._seed_sequence.spawn(1)
        linear = render_linear(
            self.scene,
            batch,
            seed=pass_seed,
            jitter=True,
            workers=self.workers,
        )
        # render_linear returns the batch average; weight it back to a sum
        self._accumulator += linear.astype(np.float64) * batch
        self._samples += batch

    def render(
        self,
        num_samples: int = 1,
        batch_size: int = 1,
        callback: ProgressCallback | None = None,
    ) -> None:
        """Render samples progressively with optional progress callback.

        Accumulates the specified number of samples into the existing buffer.
        Can be called multiple times to continue refining the image.

        Args:
            num_samples: Total number of samples to add.
            batch_size: Number of samples to render before each callback.
            callback: Optional callback function called after each batch.
                Receives (current_total_samples, target_total_samples).

        Example:
            >>> def progress(current, target):
            ...     print(f"Progress: {current}/{target} samples")
            >>> renderer.render(100, batch_size=10, callback=progress)
        """
        for current, target in self.render_progressive(num_samples, batch_size):
            if callback is not None:
                callback(current, target)

    def render_progressive(
        self,
        num_samples: int = 1,
        batch_size: int = 1,
    ) -> Generator[tuple[int, int], None, None]:
        """Render samples progressively, yielding progress after each batch.

        Args:
            num_samples: Total number of samples to add.
            batch_size: Number of samples to render before each yield.

        Yields:
            Tuple of (current_total_samples, target_total_samples).

        Raises:
            ValueError: If batch_size is less than 1.
        """
        if num_samples <= 0:
            return
        if batch_size < 1:
            raise ValueError(f"batch_size = {batch_size} must be at least 1")

        target_samples = self.sample_count + num_samples

        remaining = num_samples
        while remaining > 0:
            batch = min(batch_size, remaining)
            self._render_batch(batch)
            remaining -= batch
            yield (self.sample_count, target_samples)

    def get_image_numpy(self, gamma: float = 1.0) -> npt.NDArray[np.float32]:
        """Get the rendered image as a NumPy array.

        Returns the averaged buffer with values clamped to [0, 1] and
        optionally gamma corrected. Before any sample is taken the image is
        black.

        Args:
            gamma: Gamma correction value. Default 1.0 (linear).

        Returns:
            NumPy array of shape (height, width, 3) with dtype float32.
        """
        if self._samples == 0:
            return np.zeros((self.height, self.width, 3), dtype=np.float32)

        image = np.clip(self._accumulator / self._samples, 0.0, 1.0)
        if gamma != 1.0:
            image = np.power(image, 1.0 / gamma)
        return image.astype(np.float32)

    def get_image_uint8(self, gamma: float = GAMMA) -> npt.NDArray[np.uint8]:
        """Get the rendered image as an 8-bit NumPy array.

        Args:
            gamma: Gamma correction value. Default matches the 8-bit encoding
                used by render().

        Returns:
            NumPy array of shape (height, width, 3) with dtype uint8.
        """
        image = self.get_image_numpy(gamma=gamma)
        return (image * 255).astype(np.uint8)

    def save_image(self, filepath: str, gamma: float = GAMMA) -> None:
        """Save the rendered image to a file.

        Args:
            filepath: Path to save the image (e.g., "output.png").
            gamma: Gamma correction value.
        """
        from PIL import Image as PILImage

        image_uint8 = self.get_image_uint8(gamma=gamma)
        pil_image = PILImage.fromarray(image_uint8)
        pil_image.save(filepath)

    def __repr__(self) -> str:
        return (
            f"ProgressiveRenderer(width={self.width}, height={self.height}, "
            f"samples={self.sample_count})"
        )
