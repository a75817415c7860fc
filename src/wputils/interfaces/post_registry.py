"""Interface for looking up posts, post types and taxonomies."""

import abc
from dataclasses import dataclass

from wputils.domain.value_objects import Post, PostType, Taxonomy

ANY = "any"


@dataclass(frozen=True)
class PostQuery:
    """Criteria for `PostRegistry.find_posts`.

    Fields left at their defaults do not filter. ``"any"`` matches every post
    type or status.

    Attributes:
        slug (str | None): Exact slug.
        post_type (str): Post type name, or ``"any"``.
        status (str): Post status, or ``"any"``.
        parent (int | None): Id of the parent post.
        guid (str | None): Exact GUID (attachment URL for media).
        exclude_ids (tuple[int, ...]): Ids to leave out.
        limit (int): Max number of results; negative means no limit.
    """

    slug: str | None = None
    post_type: str = ANY
    status: str = ANY
    parent: int | None = None
    guid: str | None = None
    exclude_ids: tuple[int, ...] = ()
    limit: int = -1

    def matches(self, post: Post) -> bool:
        """Return True if *post* satisfies every criterion except the limit."""
        return (
            (self.slug is None or post.slug == self.slug)
            and self.post_type in (ANY, post.post_type)
            and self.status in (ANY, post.status)
            and (self.parent is None or post.parent == self.parent)
            and (self.guid is None or post.guid == self.guid)
            and post.id not in self.exclude_ids
        )


class PostRegistry(abc.ABC):
    """Read access to the site's posts and content type registrations."""

    @abc.abstractmethod
    def get_post(self, post_id: int) -> Post | None:
        """Lookup a post by id.

        Args:
            post_id (int): The post id.

        Returns:
            Post | None: The post if found, otherwise None.
        """

    @abc.abstractmethod
    def find_posts(self, query: PostQuery) -> list[Post]:
        """Return the posts matching *query*, in registration order.

        Args:
            query (PostQuery): Filter criteria and limit.

        Returns:
            list[Post]: Matching posts, possibly empty.
        """

    @abc.abstractmethod
    def get_post_type(self, name: str) -> PostType | None:
        """Lookup a registered post type by name."""

    @abc.abstractmethod
    def list_post_types(self) -> list[PostType]:
        """Return every registered post type."""

    @abc.abstractmethod
    def get_taxonomy(self, name: str) -> Taxonomy | None:
        """Lookup a registered taxonomy by name."""

    @abc.abstractmethod
    def list_taxonomies(self) -> list[Taxonomy]:
        """Return every registered taxonomy."""
