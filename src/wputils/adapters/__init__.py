"""Adapters (infrastructure) for wputils.

Concrete implementations of the collaborator interfaces: in-memory registries
and caches for tests and scripting, and a local-file template loader.

Dependency rule: may import `wputils.domain`, `wputils.interfaces` and
`wputils.utils`; the domain must not import this package.
"""
