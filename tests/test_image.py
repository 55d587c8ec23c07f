"""Tests for quantizing and writing framebuffers."""
import numpy as np
import pytest
from PIL import Image

from bumpysphere.core.renderer import Renderer
from bumpysphere.utils.image import encode_pixels, save_frame, to_image


def test_channel_quantization():
    framebuffer = np.array([[1.2, -0.3, 0.5]], dtype=np.float32)
    encoded = encode_pixels(framebuffer, 1, 1)
    assert encoded.dtype == np.uint8
    assert encoded.tolist() == [[[255, 0, 127]]]


def test_quantization_bounds_and_truncation():
    framebuffer = np.array([[0.0, 1.0, 0.999], [0.4, 0.2, 0.7]])
    encoded = encode_pixels(framebuffer, 2, 1)
    assert encoded[0, 0].tolist() == [0, 255, 254]
    assert encoded[0, 1].tolist() == [102, 51, 178]


def test_encoded_layout_is_row_major():
    width, height = 3, 2
    framebuffer = np.zeros((width * height, 3))
    # Pixel (i=2, j=1)
    framebuffer[2 + 1 * width] = [1.0, 0.0, 0.0]
    encoded = encode_pixels(framebuffer, width, height)
    assert encoded.shape == (height, width, 3)
    assert encoded[1, 2].tolist() == [255, 0, 0]
    assert encoded.sum() == 255


def test_size_mismatch_is_rejected():
    with pytest.raises(ValueError):
        encode_pixels(np.zeros((5, 3)), 2, 2)


def test_ppm_file_layout(tmp_path):
    width, height = 4, 4
    framebuffer = Renderer(width, height).render(0.0)
    path = save_frame(framebuffer, width, height, str(tmp_path / "frames" / "out.ppm"))

    data = (tmp_path / "frames" / "out.ppm").read_bytes()
    header = b"P6\n4 4\n255\n"
    assert path.endswith("out.ppm")
    assert data.startswith(header)
    assert len(data) == len(header) + width * height * 3
    assert data[len(header):] == encode_pixels(framebuffer, width, height).tobytes()


def test_png_round_trip(tmp_path):
    width, height = 6, 4
    framebuffer = Renderer(width, height).render(0.2)
    path = tmp_path / "frame.png"
    save_frame(framebuffer, width, height, str(path))

    with Image.open(path) as img:
        assert img.size == (width, height)
        assert img.mode == "RGB"
        np.testing.assert_array_equal(np.array(img), encode_pixels(framebuffer, width, height))


def test_renderer_image_and_validation():
    img = Renderer(5, 3).render_image(0.0)
    assert img.size == (5, 3)
    assert to_image(np.zeros((15, 3)), 5, 3).getpixel((0, 0)) == (0, 0, 0)

    with pytest.raises(ValueError):
        Renderer(0, 10)
