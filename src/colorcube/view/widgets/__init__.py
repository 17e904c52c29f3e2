from colorcube.view.widgets.cube_canvas import CubeCanvas

__all__ = ["CubeCanvas"]
