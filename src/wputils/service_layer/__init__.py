"""Service layer for wputils.

CMS glue built on the collaborator interfaces: post and taxonomy resolution,
template parts with caching, hook sequencing, and theme asset lookup.
Collaborators are passed in as keyword-only arguments, so these functions
can be bound to a `wputils.bootstrap.SiteContainer`.

Dependency rule: may import `wputils.domain`, `wputils.interfaces`,
`wputils.utils` and `wputils.config`, but not `wputils.adapters` or
`wputils.entrypoints`.
"""
