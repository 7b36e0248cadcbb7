"""Tests for the preview module.

This module tests the preview/display and preview/export functionality:
- PNG export of encoded rasters, including validation
- Matplotlib preview of an encoded raster

Note: Tests never open a window. The Matplotlib tests run on the Agg backend
with plt.show patched out.
"""

import numpy as np
import pytest
from PIL import Image as PILImage


class TestExport:
    """Tests for PNG export."""

    def test_save_png_round_trip(self, tmp_path, read_png):
        from prism.preview.export import save_png

        image = np.random.default_rng(3).integers(0, 256, (6, 8, 3), dtype=np.uint8)
        path = tmp_path / "out.png"
        save_png(image, path)

        assert path.exists()
        with PILImage.open(path) as saved:
            assert saved.size == (8, 6)
            assert saved.mode == "RGB"
        np.testing.assert_array_equal(read_png(path), image)

    def test_save_png_rejects_float_raster(self, tmp_path):
        from prism.preview.export import save_png

        with pytest.raises(ValueError):
            save_png(np.zeros((4, 4, 3), dtype=np.float32), tmp_path / "bad.png")

    def test_save_png_rejects_wrong_shape(self, tmp_path):
        from prism.preview.export import save_png

        with pytest.raises(ValueError):
            save_png(np.zeros((4, 4), dtype=np.uint8), tmp_path / "bad.png")

    def test_rendered_image_saves(self, small_scene, tmp_path, read_png):
        from prism.core.renderer import render
        from prism.preview.export import save_png

        image = render(small_scene)
        path = tmp_path / "render.png"
        save_png(image, path)
        np.testing.assert_array_equal(read_png(path), image)


class TestShowPreview:
    """Matplotlib display without opening windows."""

    @pytest.fixture(autouse=True)
    def headless(self, monkeypatch):
        import matplotlib

        matplotlib.use("Agg")
        import matplotlib.pyplot as plt

        shown = []
        monkeypatch.setattr(plt, "show", lambda block=True: shown.append(block))
        yield shown
        plt.close("all")

    def test_shows_raster_unchanged(self, headless, small_scene):
        import matplotlib.pyplot as plt

        from prism.core.renderer import render
        from prism.preview.display import show_preview

        image = render(small_scene)
        show_preview(image, block=False)

        assert headless == [False]
        ax = plt.gca()
        assert ax.get_title() == "Render Preview - 16x12"
        np.testing.assert_array_equal(np.asarray(ax.get_images()[0].get_array()), image)

    def test_custom_title(self, headless):
        import matplotlib.pyplot as plt

        from prism.preview.display import show_preview

        show_preview(np.zeros((6, 8, 3), dtype=np.uint8), title="demo.png")
        assert plt.gca().get_title() == "demo.png"
        assert headless == [True]

    def test_rejects_float_raster(self, headless):
        from prism.preview.display import show_preview

        with pytest.raises(ValueError):
            show_preview(np.zeros((6, 8, 3), dtype=np.float32))
        assert headless == []

    def test_cli_preview_flag(self, headless, tmp_path):
        import matplotlib.pyplot as plt

        from examples.render_scene import render_scene

        output = render_scene(
            width=16, height=12, output_path=str(tmp_path / "p.png"), preview=True, quiet=True
        )
        assert headless == [True]
        assert plt.gca().get_title() == str(output)
