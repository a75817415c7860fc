"""Interfaces (application boundary) for wputils.

Defines the abstract CMS collaborators the service layer talks to: a post and
taxonomy registry, an object cache, a template loader and a hook registry.

Dependency rule: this package may import `wputils.domain` only. It is
imported by `wputils.service_layer`, `wputils.adapters` and
`wputils.bootstrap`.
"""

from .hooks import HookRegistry
from .object_cache import MISS, ObjectCache
from .post_registry import PostQuery, PostRegistry
from .template_loader import TemplateLoader

__all__ = [
    "HookRegistry",
    "MISS",
    "ObjectCache",
    "PostQuery",
    "PostRegistry",
    "TemplateLoader",
]
