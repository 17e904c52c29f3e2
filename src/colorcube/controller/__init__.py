"""
The CONTROLLER layer translates input into model changes:
pointer/wheel orbit control and image file loading.
"""
from colorcube.controller.image_loader import ImageLoadError, RgbaImage, load_rgba
from colorcube.controller.interaction import DragState, InteractionController

__all__ = [
    "DragState",
    "ImageLoadError",
    "InteractionController",
    "RgbaImage",
    "load_rgba",
]
