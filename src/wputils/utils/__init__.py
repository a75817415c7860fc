"""Support namespace for the stateless helpers at the heart of wputils.

Scope:
- Small, stateless helpers over primitive values (strings, lists, dicts,
  numbers) and opaque records: case conversion, array shaping, fallback
  resolution, color math, HTML rendering, URL classification, and the mini
  markdown converter.
- No CMS wiring, no registries, no caches. Anything that needs a collaborator
  lives in ``wputils.service_layer`` and receives it explicitly.
- Prefer pure functions. The only mutable state is owned by the caller
  (``Ref`` and ``Flag`` objects in ``fallbacks``).

Organization:
- Single-purpose modules (``values.py``, ``arrays.py``, ``fallbacks.py``,
  ``strings.py``, ``colors.py``, ``markdown.py``, ``html.py``, ``urls.py``,
  ``paths.py``) rather than one catch-all file.

Public API:
- Nothing is re-exported at the package level. Import specific helpers from
  their defining modules.
"""
