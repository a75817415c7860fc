"""Wire the default adapters into a site container."""

import functools
import inspect
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from wputils import config
from wputils.adapters.hooks import InMemoryHookRegistry
from wputils.adapters.object_cache import InMemoryObjectCache
from wputils.adapters.post_registry import InMemoryPostRegistry
from wputils.adapters.template_loader import LocalTemplateLoader
from wputils.interfaces import HookRegistry, ObjectCache, PostRegistry, TemplateLoader


@dataclass(frozen=True)
class SiteContainer:
    """The collaborators of one site."""

    registry: PostRegistry
    cache: ObjectCache
    hooks: HookRegistry
    templates: TemplateLoader

    @property
    def dependencies(self) -> dict[str, object]:
        """Collaborators by the keyword names the service layer uses."""
        return {
            "registry": self.registry,
            "cache": self.cache,
            "hooks": self.hooks,
            "loader": self.templates,
        }

    def bind(self, service: Callable[..., Any]) -> Callable[..., Any]:
        """Return *service* with this site's collaborators filled in."""
        return inject_dependencies(service, self.dependencies)


def bootstrap(
    stylesheet_dir: str | Path | None = None,
    template_dir: str | Path | None = None,
) -> SiteContainer:
    """Build a site with in-memory collaborators and local templates.

    Args:
        stylesheet_dir: Active theme directory; read from the environment
            when omitted.
        template_dir: Parent theme directory. When omitted it is read from
            the environment if *stylesheet_dir* is too, and otherwise
            defaults to *stylesheet_dir*.

    Raises:
        ThemeDirNotSetError: If no theme directory is given or configured.
    """
    if stylesheet_dir is None:
        stylesheet_dir = config.get_stylesheet_directory()
        if template_dir is None:
            template_dir = config.get_template_directory()
    return SiteContainer(
        registry=InMemoryPostRegistry(),
        cache=InMemoryObjectCache(),
        hooks=InMemoryHookRegistry(),
        templates=LocalTemplateLoader(stylesheet_dir, template_dir),
    )


def inject_dependencies(
    service: Callable[..., Any], dependencies: Mapping[str, object]
) -> Callable[..., Any]:
    """Bind the keyword parameters of *service* found in *dependencies*.

    Keyword arguments given at call time take precedence over the bound ones.
    """
    params = inspect.signature(service).parameters
    deps = {
        name: dependency for name, dependency in dependencies.items() if name in params
    }

    @functools.wraps(service)
    def bound(*args: Any, **kwargs: Any) -> Any:
        return service(*args, **{**deps, **kwargs})

    return bound
