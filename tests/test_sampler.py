from __future__ import annotations

import numpy as np
import pytest

from colorcube.model.points import Point3D
from colorcube.model.sampler import sample_pixels


def _image(h: int, w: int) -> np.ndarray:
    img = np.zeros((h, w, 4), dtype=np.uint8)
    img[..., 0] = np.arange(w, dtype=np.uint8)[None, :] * 10
    img[..., 1] = np.arange(h, dtype=np.uint8)[:, None] * 20
    img[..., 2] = 255
    img[..., 3] = 255
    return img


def test_full_resolution_walks_rows_then_columns() -> None:
    img = _image(2, 3)
    ps = sample_pixels(img.tobytes(), 3, 2, 1)
    assert len(ps) == 6
    assert ps[1] == Point3D(10 / 255, 0.0, 1.0)
    assert ps[3] == Point3D(0.0, 20 / 255, 1.0)


def test_step_samples_grid_from_origin() -> None:
    img = _image(5, 5)
    ps = sample_pixels(img, 5, 5, 2)
    # columns/rows 0, 2, 4
    assert len(ps) == 9
    assert ps[1].x == pytest.approx(20 / 255)
    assert ps[3].y == pytest.approx(40 / 255)


def test_transparent_pixels_are_skipped() -> None:
    img = _image(1, 4)
    img[0, :, 3] = [0, 2, 3, 255]
    ps = sample_pixels(img, 4, 1, 1)
    # 2/255 is below 1%, 3/255 is above it
    assert len(ps) == 2
    assert [p.x for p in ps] == pytest.approx([20 / 255, 30 / 255])


def test_fully_transparent_image_gives_empty_set() -> None:
    img = np.zeros((8, 8, 4), dtype=np.uint8)
    assert len(sample_pixels(img, 8, 8, 1)) == 0


def test_zero_sized_image() -> None:
    assert len(sample_pixels(b"", 0, 0, 1)) == 0


def test_invalid_step() -> None:
    with pytest.raises(ValueError, match="step"):
        sample_pixels(_image(2, 2), 2, 2, 0)


def test_short_buffer() -> None:
    with pytest.raises(ValueError, match="expected 64"):
        sample_pixels(bytes(10), 4, 4, 1)
