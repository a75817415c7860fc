"""Post and taxonomy lookups."""

import logging
import re
from collections.abc import Mapping
from dataclasses import replace
from typing import Any, TypeAlias

from wputils.domain.errors import InvalidArgumentError
from wputils.domain.value_objects import Post, PostType, Taxonomy
from wputils.interfaces.post_registry import ANY, PostQuery, PostRegistry
from wputils.utils.arrays import array_exclude_keys
from wputils.utils.values import is_empty_value

logger = logging.getLogger(__name__)

ID_FIELDS = ("id", "ID", "term_id")

_MORE_COMMENT = re.compile(r"<!--more(.*?)?-->")
MORE_BLOCK_MARKER = "<!-- wp:more"

PostLike: TypeAlias = Post | int | str | None


def get_post_by_slug(
    slug: str,
    post_type: str = ANY,
    post_status: str = ANY,
    *,
    registry: PostRegistry,
) -> Post | None:
    """Get a post from its slug.

    Args:
        slug: The post slug.
        post_type: Post type name, default ``"any"``.
        post_status: Post status, default ``"any"``.
        registry: Where to look.

    Returns:
        Post | None: The first matching post.
    """
    posts = registry.find_posts(
        PostQuery(slug=slug, post_type=post_type, status=post_status, limit=1)
    )
    return posts[0] if posts else None


def resolve_post(
    post: PostLike = None,
    post_type: str = "",
    *,
    registry: PostRegistry,
    current: Post | None = None,
) -> Post | None:
    """Resolve a post, an id or a slug to a post.

    Args:
        post: Post, id or slug. Empty values resolve to *current*.
        post_type: Required post type; ``""`` or ``"any"`` accepts all.
        registry: Where to look up ids and slugs.
        current: The post being displayed, if any.

    Returns:
        Post | None: The post, or None if it cannot be found or has another
        post type.
    """
    if is_empty_value(post):
        return current
    match post:
        case bool():
            return None
        case int():
            resolved = registry.get_post(post)
        case str():
            resolved = get_post_by_slug(post, post_type or ANY, registry=registry)
        case Post():
            resolved = post
        case _:
            return None
    if resolved is not None and post_type in ("", ANY, resolved.post_type):
        return resolved
    return None


def resolve_taxonomy(
    taxonomy: Taxonomy | str | None, *, registry: PostRegistry
) -> Taxonomy | None:
    """Resolve a taxonomy name to a taxonomy, passing taxonomies through."""
    if isinstance(taxonomy, str):
        return registry.get_taxonomy(taxonomy)
    if isinstance(taxonomy, Taxonomy):
        return taxonomy
    return None


def resolve_object_id(obj: Any) -> int:
    """Get the primary key of a post or term (object or mapping), or ``0``."""
    for field in ID_FIELDS:
        if isinstance(obj, Mapping):
            if field in obj:
                return int(obj[field])
        elif hasattr(obj, field):
            return int(getattr(obj, field))
    return 0


def get_post_descendants(
    post: PostLike = None,
    depth: int = -1,
    check_post_type: bool = True,
    *,
    registry: PostRegistry,
    current: Post | None = None,
) -> list[Post]:
    """Get a flat, depth-first list of all descendants of a post.

    Args:
        post: Post, id or slug; defaults to *current*.
        depth: Levels below the children to descend; ``0`` returns children
            only and a negative value means no limit.
        check_post_type: Return nothing unless the post type is hierarchical.
        registry: Where to look.
        current: The post being displayed, if any.

    Returns:
        list[Post]: Each child followed by its own descendants.
    """
    resolved = resolve_post(post, registry=registry, current=current)
    if resolved is None:
        return []
    if check_post_type:
        post_type = registry.get_post_type(resolved.post_type)
        if post_type is None or not post_type.hierarchical:
            return []
    descendants = []
    children = registry.find_posts(
        PostQuery(post_type=resolved.post_type, parent=resolved.id)
    )
    for child in children:
        descendants.append(child)
        if depth != 0:
            descendants.extend(
                get_post_descendants(child, depth - 1, False, registry=registry)
            )
    return descendants


def pad_posts(
    posts: list[Post] | tuple[Post, ...],
    desired_post_count: int,
    query: PostQuery | None = None,
    *,
    registry: PostRegistry,
    current: Post | None = None,
) -> list[Post]:
    """Top up a list of posts to a desired count.

    Entries that are not posts are dropped first. Additional posts are
    fetched with *query*, excluding posts already present, the query's own
    exclusions, and *current*.

    Args:
        posts: The posts you have already.
        desired_post_count: Target length.
        query: Criteria for additional posts; any post by default.
        registry: Where to look.
        current: The post being displayed; never added.

    Returns:
        list[Post]: The original posts followed by the padding. Shorter than
        requested when not enough posts match.

    Raises:
        InvalidArgumentError: If *posts* is not a list or tuple.
    """
    if not isinstance(posts, (list, tuple)):
        raise InvalidArgumentError("posts must be a list or tuple of posts")
    padded = [post for post in posts if isinstance(post, Post)]
    missing = desired_post_count - len(padded)
    if missing <= 0:
        return padded
    query = query or PostQuery()
    exclude = dict.fromkeys(
        [
            *query.exclude_ids,
            *(post.id for post in padded),
            *([current.id] if current else []),
        ]
    )
    extra = registry.find_posts(
        replace(query, exclude_ids=tuple(exclude), limit=missing)
    )
    logger.debug("Padded %d posts with %d more", len(padded), len(extra))
    return padded + extra


def has_read_more_tag(
    post: PostLike = None,
    *,
    registry: PostRegistry,
    current: Post | None = None,
) -> bool:
    """Check a post's content for a "read more" block or comment."""
    resolved = resolve_post(post, registry=registry, current=current)
    if resolved is None:
        return False
    return MORE_BLOCK_MARKER in resolved.content or bool(
        _MORE_COMMENT.search(resolved.content)
    )


def get_custom_post_types(
    exclude: str | list[str] = "", *, registry: PostRegistry
) -> dict[str, PostType]:
    """Get public, non-builtin post types keyed by name.

    Args:
        exclude: Post type name(s) to leave out.
        registry: Where to look.
    """
    custom = {
        t.name: t for t in registry.list_post_types() if t.public and not t.builtin
    }
    return array_exclude_keys(custom, exclude)


def get_custom_taxonomies(
    exclude: str | list[str] = "", *, registry: PostRegistry
) -> dict[str, Taxonomy]:
    """Get public, non-builtin taxonomies keyed by name.

    Args:
        exclude: Taxonomy name(s) to leave out.
        registry: Where to look.
    """
    custom = {
        t.name: t for t in registry.list_taxonomies() if t.public and not t.builtin
    }
    return array_exclude_keys(custom, exclude)


def get_image_id(image_url: str, *, registry: PostRegistry) -> int:
    """Get the id of the attachment whose GUID is *image_url*, or ``0``."""
    found = registry.find_posts(PostQuery(guid=image_url, limit=1))
    return found[0].id if found else 0
