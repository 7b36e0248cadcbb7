"""Unit tests for solid colors, textures and texture loading."""

import logging

import numpy as np
import pytest


class TestWrap:
    """Tests for the texture coordinate wrap."""

    def test_in_range(self):
        from prism.materials.colorization import wrap

        assert wrap(0.0, 4) == 0
        assert wrap(0.3, 4) == 1
        assert wrap(0.99, 4) == 3

    def test_tiles_past_one(self):
        from prism.materials.colorization import wrap

        assert wrap(1.0, 4) == 0
        assert wrap(2.3, 4) == 1

    def test_negative_wraps_forward(self):
        """wrap(-0.1, 10) == 9."""
        from prism.materials.colorization import wrap

        assert wrap(-0.1, 10) == 9
        assert wrap(-1.0, 10) == 0


class TestSolidColor:
    def test_sample_is_constant(self):
        from prism.core.color import Color
        from prism.materials.colorization import SolidColor, TextureCoordinates

        solid = SolidColor(Color(0.4, 1.0, 0.4))
        assert solid.sample(TextureCoordinates(0.1, 0.2)) == Color(0.4, 1.0, 0.4)
        assert solid.sample(TextureCoordinates(-7.0, 42.0)) == Color(0.4, 1.0, 0.4)


class TestTexture:
    """Tests for in-memory texture sampling."""

    def test_sample_decodes_texel(self):
        from prism.core.color import Color
        from prism.materials.colorization import Texture, TextureCoordinates

        image = np.array([[[255, 0, 128]]], dtype=np.uint8)
        color = Texture(image).sample(TextureCoordinates(0.5, 0.5))
        assert color.to_tuple() == pytest.approx(Color.from_rgb8(255, 0, 128).to_tuple())

    def test_sample_indexes_row_then_column(self):
        from prism.materials.colorization import Texture, TextureCoordinates

        image = np.zeros((2, 2, 3), dtype=np.uint8)
        image[1, 0] = (255, 255, 255)  # bottom-left
        texture = Texture(image)

        assert texture.sample(TextureCoordinates(0.25, 0.75)).red == pytest.approx(1.0)
        assert texture.sample(TextureCoordinates(0.75, 0.25)).red == 0.0

    def test_grayscale_image(self):
        from prism.materials.colorization import Texture, TextureCoordinates

        texture = Texture(np.full((3, 5), 255, dtype=np.uint8))
        assert texture.width == 5
        assert texture.height == 3
        assert texture.sample(TextureCoordinates(0.0, 0.0)).to_tuple() == pytest.approx(
            (1.0, 1.0, 1.0)
        )

    def test_image_is_read_only_copy(self):
        from prism.materials.colorization import Texture

        source = np.zeros((2, 2, 3), dtype=np.uint8)
        texture = Texture(source)
        source[0, 0] = 255
        assert texture.image[0, 0, 0] == 0
        with pytest.raises(ValueError):
            texture.image[0, 0, 0] = 1

    def test_empty_image_rejected(self):
        from prism.materials.colorization import Texture

        with pytest.raises(ValueError):
            Texture(np.zeros((0, 4, 3), dtype=np.uint8))


class TestLoadTexture:
    """Tests for loading textures with Pillow."""

    def test_load_png(self, texture_file):
        from prism.materials.colorization import TextureCoordinates, load_texture

        texture = load_texture(texture_file)
        assert (texture.width, texture.height) == (2, 2)
        assert texture.path == texture_file
        top_left = texture.sample(TextureCoordinates(0.0, 0.0))
        assert top_left.to_tuple() == pytest.approx((1.0, 0.0, 0.0))
        bottom_left = texture.sample(TextureCoordinates(0.0, 0.5))
        assert bottom_left.to_tuple() == pytest.approx((0.0, 0.0, 1.0))

    def test_missing_file_falls_back_to_placeholder(self, tmp_path, caplog):
        from prism.core.color import Color
        from prism.materials.colorization import (
            PLACEHOLDER_TEXEL,
            TextureCoordinates,
            load_texture,
        )

        with caplog.at_level(logging.WARNING, logger="prism.materials.colorization"):
            texture = load_texture(tmp_path / "missing.png")

        assert (texture.width, texture.height) == (1, 1)
        assert texture.sample(TextureCoordinates(0.3, 0.8)) == Color.from_rgb8(*PLACEHOLDER_TEXEL)
        assert "missing.png" in caplog.text

    def test_undecodable_file_falls_back(self, tmp_path):
        from prism.materials.colorization import load_texture

        bogus = tmp_path / "bogus.png"
        bogus.write_bytes(b"not an image")
        texture = load_texture(bogus)
        assert texture.path == bogus
        assert texture.image.shape == (1, 1, 3)
