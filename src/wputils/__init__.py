"""wputils

Stateless helpers for WordPress-style theme and plugin development: string
and array utilities, fallback resolution, color math, HTML rendering, a tiny
markdown converter, and thin service functions over CMS collaborators.
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
