from .engine import render_frame, WIDTH, HEIGHT
from ..utils.image import to_image, save_frame

class Renderer:
    """Fixed-size frame renderer for the bumpy sphere scene."""

    def __init__(self, width=WIDTH, height=HEIGHT):
        if width <= 0 or height <= 0:
            raise ValueError(f"Invalid frame size {width}x{height}")
        self.width = width
        self.height = height

    def render(self, noise_amplitude):
        return render_frame(self.width, self.height, noise_amplitude)

    def render_image(self, noise_amplitude):
        return to_image(self.render(noise_amplitude), self.width, self.height)

    def render_to_file(self, noise_amplitude, path):
        framebuffer = self.render(noise_amplitude)
        return save_frame(framebuffer, self.width, self.height, path)
