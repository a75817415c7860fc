"""Fixtures for service layer unit tests."""

import pytest

from wputils.adapters.hooks import InMemoryHookRegistry
from wputils.adapters.object_cache import InMemoryObjectCache
from wputils.adapters.post_registry import InMemoryPostRegistry
from wputils.adapters.template_loader import InMemoryTemplateLoader

# pylint: disable=redefined-outer-name


@pytest.fixture
def registry(pages, articles, book_type, genre_taxonomy) -> InMemoryPostRegistry:
    """A registry holding the page tree, the articles and custom types."""
    posts = InMemoryPostRegistry()
    for post in [*pages, *articles]:
        posts.add_post(post)
    posts.register_post_type(book_type)
    posts.register_taxonomy(genre_taxonomy)
    return posts


@pytest.fixture
def hooks() -> InMemoryHookRegistry:
    """An empty hook registry."""
    return InMemoryHookRegistry()


@pytest.fixture
def loader() -> InMemoryTemplateLoader:
    """Template parts used across templating tests."""
    return InMemoryTemplateLoader(
        {
            "card": "<div class=\"card\">$title</div>",
            "card-news": "<div class=\"card news\">$title</div>",
            "teaser": "<h2>$post_title</h2>$post_content",
        }
    )


class FakeClock:
    """A manually advanced clock for cache expiry tests."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        """Move the clock forward."""
        self.now += seconds


@pytest.fixture
def clock() -> FakeClock:
    """A fake clock starting at t=1000."""
    return FakeClock()


@pytest.fixture
def cache(clock) -> InMemoryObjectCache:
    """An empty object cache driven by the fake clock."""
    return InMemoryObjectCache(clock=clock)
