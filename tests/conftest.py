"""Global pytest fixtures and default marks for wputils."""

from pathlib import Path

import pytest

from wputils.domain.value_objects import Post, PostType, Taxonomy

# pylint: disable=unused-argument, redefined-outer-name

TESTS_ROOT = Path(__file__).parent.resolve()

# Top-level test directory -> mark applied to every test inside it
DEFAULT_MARKS = {"unit": "unit", "contract": "contract", "e2e": "e2e"}

WPUTILS_ENV_VARS = (
    "WPUTILS_SITE_URL",
    "WPUTILS_STYLESHEET_DIR",
    "WPUTILS_TEMPLATE_DIR",
    "WPUTILS_TEMPLATE_URI",
)


@pytest.hookimpl(tryfirst=True)
def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Mark items by their top-level directory unless already marked."""
    for item in items:
        path = item.path.resolve()
        if TESTS_ROOT not in path.parents:
            continue
        top_level = path.relative_to(TESTS_ROOT).parts[0]
        if (name := DEFAULT_MARKS.get(top_level)) is None:
            continue
        if not any(marker.name == name for marker in item.iter_markers()):
            item.add_marker(getattr(pytest.mark, name))


@pytest.fixture(autouse=True)
def _clean_wputils_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test without wputils configuration from the outer environment."""
    for name in WPUTILS_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def pages() -> list[Post]:
    """A small page tree: home > about > (team > alumni, history), plus contact."""
    return [
        Post(1, "home", post_type="page", title="Home"),
        Post(2, "about", post_type="page", parent=1, title="About"),
        Post(3, "team", post_type="page", parent=2, title="Team"),
        Post(4, "alumni", post_type="page", parent=3, title="Alumni"),
        Post(5, "history", post_type="page", parent=2, title="History"),
        Post(6, "contact", post_type="page", title="Contact"),
    ]


@pytest.fixture
def articles() -> list[Post]:
    """Blog posts, one of them a draft, one with a read-more tag, one image."""
    return [
        Post(10, "hello-world", title="Hello world", content="Hi<!--more-->there"),
        Post(11, "second", title="Second", content="<p>No teaser.</p>"),
        Post(12, "draft", status="draft", title="Draft"),
        Post(
            13,
            "photo",
            post_type="attachment",
            guid="https://example.com/uploads/photo.jpg",
        ),
    ]


@pytest.fixture
def book_type() -> PostType:
    """A public custom post type."""
    return PostType("book", label="Books")


@pytest.fixture
def genre_taxonomy() -> Taxonomy:
    """A public custom taxonomy."""
    return Taxonomy("genre", label="Genres", hierarchical=True)
