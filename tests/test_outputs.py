"""Tests for 8-bit conversion, seed markers and image writing."""

import os

import cv2
import numpy as np
import pytest

from models import Color, Point2D, RasterBuffer, Seed, SeedSet
from utils.image_io import OutputError, save_image, suffixed_path
from visualization.draw_seeds import draw_seeds, seed_pixel
from visualization.save_outputs import save_all_outputs, save_raster, to_bgr8


def _buffer():
    pixels = np.zeros((2, 3, 3))
    pixels[..., 0] = 1.0  # pure red
    pixels[1, 2] = (0.0, 0.0, 1.0)  # one blue pixel
    return RasterBuffer(width=3, height=2, pixels=pixels)


class TestConversion:

    def test_to_bgr8_swaps_channels(self):
        bgr = to_bgr8(_buffer())
        assert bgr.dtype == np.uint8
        assert bgr.shape == (2, 3, 3)
        assert bgr[0, 0].tolist() == [0, 0, 255]
        assert bgr[1, 2].tolist() == [255, 0, 0]


class TestSaving:

    def test_save_raster_roundtrips_png(self, tmp_path):
        path = str(tmp_path / "out" / "voronoi.png")
        save_raster(path, _buffer())
        img = cv2.imread(path)
        assert img is not None
        assert np.array_equal(img, to_bgr8(_buffer()))

    def test_save_all_outputs_with_markers(self, tmp_path):
        path = str(tmp_path / "voronoi.png")
        seeds = SeedSet([Seed(Point2D(0.5, 0.5), Color(1.0, 0.0, 0.0))])
        written = save_all_outputs(path, _buffer(), seeds, mark_seeds=True)
        assert written == [path, str(tmp_path / "voronoi_seeds.png")]
        assert all(os.path.exists(p) for p in written)

    def test_save_all_outputs_without_markers(self, tmp_path):
        path = str(tmp_path / "voronoi.png")
        written = save_all_outputs(path, _buffer(), SeedSet(), mark_seeds=False)
        assert written == [path]

    def test_unknown_extension_raises(self, tmp_path):
        with pytest.raises(OutputError):
            save_image(str(tmp_path / "voronoi.notaformat"), np.zeros((2, 2, 3), np.uint8))

    def test_encoder_failure_raises(self, tmp_path, monkeypatch):
        monkeypatch.setattr(cv2, "imwrite", lambda path, img: False)
        with pytest.raises(OutputError):
            save_raster(str(tmp_path / "voronoi.png"), _buffer())

    def test_suffixed_path(self):
        assert suffixed_path("out/voronoi.png", "_seeds") == "out/voronoi_seeds.png"
        assert suffixed_path("voronoi", "_seeds") == "voronoi_seeds"


class TestSeedMarkers:

    def test_seed_pixel_inverts_sampling(self):
        s = Seed(Point2D(0.5, 0.25), Color(0, 0, 0))
        assert seed_pixel(s, 10, 8) == (5, 2)

    def test_seed_pixel_stays_in_bounds(self):
        s = Seed(Point2D(1.0, 1.0), Color(0, 0, 0))
        assert seed_pixel(s, 10, 8) == (9, 7)

    def test_draw_seeds_marks_center(self):
        img = np.full((20, 20, 3), 128, np.uint8)
        seeds = SeedSet([Seed(Point2D(0.5, 0.5), Color(1.0, 1.0, 1.0))])
        draw_seeds(img, seeds)
        assert img[10, 10].tolist() == [0, 0, 0]
        assert img[0, 0].tolist() == [128, 128, 128]
