"""In-memory implementation of the PostRegistry interface."""

from wputils.domain.value_objects import Post, PostType, Taxonomy
from wputils.interfaces.post_registry import PostQuery, PostRegistry

BUILTIN_POST_TYPES = (
    PostType("post", label="Posts", builtin=True),
    PostType("page", label="Pages", builtin=True, hierarchical=True),
    PostType("attachment", label="Media", builtin=True),
)

BUILTIN_TAXONOMIES = (
    Taxonomy("category", label="Categories", builtin=True, hierarchical=True),
    Taxonomy("post_tag", label="Tags", builtin=True),
)


class InMemoryPostRegistry(PostRegistry):
    """In-memory implementation of the PostRegistry interface.

    Starts out with the built-in ``post``, ``page`` and ``attachment`` post
    types and the ``category`` and ``post_tag`` taxonomies registered.
    Registering a name again replaces the earlier registration, and adding a
    post with an existing id replaces that post.
    """

    def __init__(self) -> None:
        self._posts: dict[int, Post] = {}
        self._post_types: dict[str, PostType] = {t.name: t for t in BUILTIN_POST_TYPES}
        self._taxonomies: dict[str, Taxonomy] = {t.name: t for t in BUILTIN_TAXONOMIES}

    # --- Registration ---

    def add_post(self, post: Post) -> None:
        """Add or replace a post."""
        self._posts[post.id] = post

    def register_post_type(self, post_type: PostType) -> None:
        """Register or replace a post type."""
        self._post_types[post_type.name] = post_type

    def register_taxonomy(self, taxonomy: Taxonomy) -> None:
        """Register or replace a taxonomy."""
        self._taxonomies[taxonomy.name] = taxonomy

    # --- PostRegistry ---

    def get_post(self, post_id: int) -> Post | None:
        return self._posts.get(post_id)

    def find_posts(self, query: PostQuery) -> list[Post]:
        found = []
        for post in self._posts.values():
            if 0 <= query.limit <= len(found):
                break
            if query.matches(post):
                found.append(post)
        return found

    def get_post_type(self, name: str) -> PostType | None:
        return self._post_types.get(name)

    def list_post_types(self) -> list[PostType]:
        return list(self._post_types.values())

    def get_taxonomy(self, name: str) -> Taxonomy | None:
        return self._taxonomies.get(name)

    def list_taxonomies(self) -> list[Taxonomy]:
        return list(self._taxonomies.values())
