"""Interface for locating and rendering template parts."""

import abc
from collections.abc import Mapping
from typing import Any


class TemplateLoader(abc.ABC):
    """Contract for a template loader.

    Template names are slash-separated paths without a file suffix, e.g.
    ``"/parts/card-news"``.
    """

    @abc.abstractmethod
    def find(self, name: str) -> str | None:
        """Locate a template.

        Args:
            name (str): Template name.

        Returns:
            str | None: An opaque location usable with `render`, or None if
            the template does not exist.
        """

    @abc.abstractmethod
    def render(self, location: str, args: Mapping[str, Any]) -> str:
        """Render the template at *location* with *args*.

        Placeholders without a matching argument are left in place.

        Args:
            location (str): Location returned by `find`.
            args (Mapping[str, Any]): Template variables.

        Returns:
            str: The rendered output.
        """
