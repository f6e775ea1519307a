"""
navhub - navigation hierarchy and route registration engine.
"""

from navhub.__version__ import __version__

__all__ = ["__version__"]
