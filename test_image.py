# -*- coding: utf-8 -*-
import io
import logging

import numpy as np
import pytest
from PIL import Image

from tracer3d.image import (
    Framebuffer,
    quantize,
    read_ppm,
    render_gradient,
    save_image,
    write_ppm,
)
from tracer3d.math import Vec3


def test_quantize_truncates_and_saturates():
    frame = np.array([[[0.0, 0.5, 1.0], [-0.2, 1.5, np.nan]]], dtype=np.float32)
    out = quantize(frame)
    assert out.dtype == np.uint8
    assert out.tolist() == [[[0, 127, 255], [0, 255, 0]]]


def test_framebuffer_pixels():
    fb = Framebuffer(3, 2)
    fb.set_pixel(2, 1, Vec3(1.0, 0.5, 0.25))
    assert fb.get_pixel(2, 1) == Vec3(1.0, 0.5, 0.25)
    assert fb.get_pixel(0, 0) == Vec3()
    assert fb.as_np().shape == (2, 3, 3)
    assert fb.to_rgb8()[1, 2].tolist() == [255, 127, 63]


def test_framebuffer_bounds():
    fb = Framebuffer(3, 2)
    with pytest.raises(IndexError):
        fb.set_pixel(3, 0, Vec3())
    with pytest.raises(IndexError):
        fb.get_pixel(0, -1)
    with pytest.raises(ValueError):
        Framebuffer(0, 4)


def test_gradient_corners():
    rgb = render_gradient(4, 3).to_rgb8()
    assert rgb.shape == (3, 4, 3)
    assert rgb[0, 0].tolist() == [0, 255, 63]      # верхний левый
    assert rgb[0, 3].tolist() == [255, 255, 63]
    assert rgb[2, 0].tolist() == [0, 0, 63]        # нижний левый
    assert rgb[2, 3].tolist() == [255, 0, 63]
    assert rgb[1, 1].tolist() == [85, 127, 63]


def test_gradient_blue_and_size_checks():
    rgb = render_gradient(2, 2, blue=1.0).to_rgb8()
    assert np.all(rgb[..., 2] == 255)
    with pytest.raises(ValueError):
        render_gradient(1, 8)


def test_gradient_logs_progress(caplog):
    caplog.set_level(logging.DEBUG, logger="Tracer3D")
    render_gradient(2, 3)
    messages = [r.getMessage() for r in caplog.records]
    assert "[Gradient] Scanlines remaining: 2 of 3" in messages
    assert "[Gradient] Scanlines remaining: 0 of 3" in messages
    assert messages[-1] == "[Gradient] Done"


def test_write_ppm_layout():
    rgb = np.array([[[1, 2, 3], [4, 5, 6]],
                    [[7, 8, 9], [255, 0, 10]]], dtype=np.uint8)
    buf = io.StringIO()
    write_ppm(buf, rgb)
    lines = buf.getvalue().splitlines()
    assert lines[0] == "P3\t2 2\t255"
    assert lines[1:] == ["1 2 3", "4 5 6", "7 8 9", "255 0 10"]


def test_write_ppm_rejects_bad_arrays():
    with pytest.raises(ValueError):
        write_ppm(io.StringIO(), np.zeros((2, 2), dtype=np.uint8))
    with pytest.raises(ValueError):
        write_ppm(io.StringIO(), np.zeros((2, 2, 3), dtype=np.float32))


def test_read_ppm_back():
    rgb = render_gradient(5, 4).to_rgb8()
    buf = io.StringIO()
    write_ppm(buf, rgb)
    buf.seek(0)
    assert np.array_equal(read_ppm(buf), rgb)


def test_read_ppm_standard_header_with_comments():
    text = "P3\n# comment\n1 1\n255\n10 20 30\n"
    assert read_ppm(io.StringIO(text)).tolist() == [[[10, 20, 30]]]


def test_read_ppm_rescales_small_max_value():
    text = "P3\n2 1\n15\n15 7 0  0 15 1\n"
    assert read_ppm(io.StringIO(text)).tolist() == [[[255, 119, 0], [0, 255, 17]]]


@pytest.mark.parametrize("text", [
    "P6\n1 1\n255\n0 0 0\n",
    "P3\n1 1\n",
    "P3\n1 x\n255\n0 0 0\n",
    "P3\n1 1\n255\n0 0\n",
    "P3\n1 1\n255\n0 0 300\n",
    "P3\n0 1\n255\n",
])
def test_read_ppm_rejects_malformed(text):
    with pytest.raises(ValueError):
        read_ppm(io.StringIO(text))


def test_save_image_ppm_and_png(tmp_path):
    rgb = render_gradient(6, 5).to_rgb8()

    ppm = save_image(tmp_path / "out.ppm", rgb)
    with ppm.open(encoding="ascii") as f:
        assert np.array_equal(read_ppm(f), rgb)

    png = save_image(tmp_path / "out.png", rgb)
    with Image.open(png) as img:
        assert img.size == (6, 5)
        assert np.array_equal(np.asarray(img.convert("RGB")), rgb)
