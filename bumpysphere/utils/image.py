import os
import numpy as np
from PIL import Image

def encode_pixels(framebuffer, width, height):
    """Quantize float RGB samples into a (height, width, 3) uint8 array.

    Channels are scaled by 255, truncated toward zero and then clamped, so
    1.2 -> 255, -0.3 -> 0 and 0.5 -> 127.
    """
    data = np.asarray(framebuffer, dtype=np.float64)
    if data.size != width * height * 3:
        raise ValueError(f"Framebuffer holds {data.size // 3} pixels, expected {width}x{height}")

    scaled = np.trunc(data.reshape((height, width, 3)) * 255.0)
    return np.clip(scaled, 0, 255).astype(np.uint8)

def to_image(framebuffer, width, height):
    return Image.fromarray(encode_pixels(framebuffer, width, height))

def save_frame(framebuffer, width, height, path):
    # Format follows the extension; .ppm gives a binary P6 file
    out_dir = os.path.dirname(path)
    if out_dir:
        os.makedirs(out_dir, exist_ok=True)

    to_image(framebuffer, width, height).save(path)
    return path
