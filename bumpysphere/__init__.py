from .core.engine import render_frame
from .core.renderer import Renderer
from .animate import render_animation, render_yaml

__all__ = ['render_frame', 'Renderer', 'render_animation', 'render_yaml']
