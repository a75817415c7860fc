"""Value objects representing the CMS records the service layer works with.

These are opaque records as far as the helpers are concerned: they carry just
enough fields for lookups by id or slug, hierarchy walks, and content checks.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Post:
    """A post, page, attachment or custom post type entry."""

    id: int
    slug: str
    post_type: str = "post"
    status: str = "publish"
    parent: int = 0
    title: str = ""
    content: str = ""
    guid: str = ""


@dataclass(frozen=True)
class Term:
    """A taxonomy term."""

    term_id: int
    slug: str
    taxonomy: str
    name: str = ""


@dataclass(frozen=True)
class PostType:
    """A registered post type."""

    name: str
    label: str = ""
    public: bool = True
    builtin: bool = False
    hierarchical: bool = False


@dataclass(frozen=True)
class Taxonomy:
    """A registered taxonomy."""

    name: str
    label: str = ""
    public: bool = True
    builtin: bool = False
    hierarchical: bool = False
