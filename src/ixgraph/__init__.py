"""In-memory index-addressed graphs with breadth-first and depth-first traversal."""

__version__ = "0.1.0"

from .core import *  # noqa: F401,F403
from .core import __all__
