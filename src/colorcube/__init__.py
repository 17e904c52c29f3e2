"""Interactive RGB cube plot of an image's pixel colors."""
from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("colorcube")
except PackageNotFoundError:
    __version__ = "0.0.0-dev"
