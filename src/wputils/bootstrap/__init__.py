"""Bootstrap (composition root) for wputils.

Assembles a site at runtime: wires concrete adapters into a `SiteContainer`
and binds service-layer functions to them.

Import rules:
- Entry points import *this* package (not adapters/service_layer/interfaces).
- This package may import: `wputils.adapters`, `wputils.service_layer`,
  `wputils.interfaces`, `wputils.domain`, and `wputils.config`.
- Inner layers must not import `wputils.bootstrap`.
"""

from .bootstrap import SiteContainer, bootstrap, inject_dependencies

__all__ = ["SiteContainer", "bootstrap", "inject_dependencies"]
