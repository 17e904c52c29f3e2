"""
The MODEL layer contains pure data structures and math.
It has NO knowledge of the GUI (Qt): points, view state, projection,
zoom fitting, pixel sampling and the built-in preset images.
"""
from colorcube.model.autofit import compute_fit_zoom
from colorcube.model.points import Point3D, PointSet
from colorcube.model.projection import ProjectedPoint, project, project_array
from colorcube.model.sampler import sample_pixels
from colorcube.model.state import ViewState, Viewport

__all__ = [
    "Point3D",
    "PointSet",
    "ProjectedPoint",
    "ViewState",
    "Viewport",
    "compute_fit_zoom",
    "project",
    "project_array",
    "sample_pixels",
]
