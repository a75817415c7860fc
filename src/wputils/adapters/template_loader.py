"""Template loader adapters.

Templates are `string.Template` sources: ``$name`` / ``${name}``
placeholders are substituted with the string form of the matching argument.
"""

import logging
from collections.abc import Mapping
from pathlib import Path
from string import Template
from typing import Any

from wputils.interfaces.template_loader import TemplateLoader
from wputils.utils.strings import str_unprefix

logger = logging.getLogger(__name__)

TEMPLATE_SUFFIX = ".html"


def _substitute(source: str, args: Mapping[str, Any]) -> str:
    values = {
        str(key): "" if value is None else str(value) for key, value in args.items()
    }
    return Template(source).safe_substitute(values)


class LocalTemplateLoader(TemplateLoader):
    """Loads templates from a child theme directory, then its parent.

    Args:
        stylesheet_dir: Directory searched first (the active theme).
        template_dir: Directory searched second (the parent theme). Defaults
            to *stylesheet_dir*.
        suffix: File suffix appended to template names.
    """

    def __init__(
        self,
        stylesheet_dir: str | Path,
        template_dir: str | Path | None = None,
        suffix: str = TEMPLATE_SUFFIX,
    ) -> None:
        self.stylesheet_dir = Path(stylesheet_dir)
        self.template_dir = Path(template_dir) if template_dir else self.stylesheet_dir
        self.suffix = suffix

    def find(self, name: str) -> str | None:
        relative = str_unprefix(name, "/") + self.suffix
        for directory in (self.stylesheet_dir, self.template_dir):
            candidate = directory / relative
            if candidate.is_file():
                logger.debug("Template %r resolved to %s", name, candidate)
                return str(candidate)
        return None

    def render(self, location: str, args: Mapping[str, Any]) -> str:
        return _substitute(Path(location).read_text(encoding="utf-8"), args)


class InMemoryTemplateLoader(TemplateLoader):
    """Serves templates from a mapping of names to sources.

    Names are matched without their leading slash, so ``"/parts/card"`` and
    ``"parts/card"`` refer to the same template.
    """

    def __init__(self, templates: Mapping[str, str] | None = None) -> None:
        self._templates = {
            str_unprefix(name, "/"): source
            for name, source in (templates or {}).items()
        }

    def add(self, name: str, source: str) -> None:
        """Add or replace a template."""
        self._templates[str_unprefix(name, "/")] = source

    def find(self, name: str) -> str | None:
        name = str_unprefix(name, "/")
        return name if name in self._templates else None

    def render(self, location: str, args: Mapping[str, Any]) -> str:
        return _substitute(self._templates[location], args)
