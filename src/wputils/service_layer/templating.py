"""Template parts with fallbacks, post data and output caching."""

import dataclasses
import json
import logging
from collections.abc import Mapping
from typing import Any

from wputils import config
from wputils.domain.errors import InvalidArgumentError, TemplateNotFoundError
from wputils.domain.value_objects import Post
from wputils.interfaces.object_cache import MISS, ObjectCache
from wputils.interfaces.post_registry import PostRegistry
from wputils.interfaces.template_loader import TemplateLoader
from wputils.utils.arrays import parse_query_args
from wputils.utils.strings import str_prefix

from .posts import resolve_object_id, resolve_post

logger = logging.getLogger(__name__)

SET_POST_DATA_ARG = "set_post_data"
POST_ARG = "post"
POST_FIELD_PREFIX = "post_"
PLAIN_TYPES = (str, int, float, bool, list, dict, tuple)


def template_candidates(path: str | list[str]) -> list[str]:
    """List template names to try, most specific first.

    A list of segments is joined with hyphens; each following candidate drops
    the last segment: ``["card", "news", "wide"]`` gives ``/card-news-wide``,
    ``/card-news`` and ``/card``. Non-string segments are ignored.

    Raises:
        InvalidArgumentError: If *path* is neither a string nor a list.
    """
    if isinstance(path, str):
        segments = [path]
    elif isinstance(path, (list, tuple)):
        segments = [segment for segment in path if isinstance(segment, str)]
    else:
        raise InvalidArgumentError("path must be a string or a list of strings")
    return [
        str_prefix("-".join(segments[:end]), "/") for end in range(len(segments), 0, -1)
    ]


def _cache_group(template_args: Mapping[str, Any], cache_args: dict[str, Any]) -> str:
    group = dict(cache_args)
    for key, value in template_args.items():
        if value is None or isinstance(value, PLAIN_TYPES):
            group[key] = value
        elif resolve_object_id(value):
            group[key] = resolve_object_id(value)
    return json.dumps(group, sort_keys=True, default=str)


def _post_fields(post: Post) -> dict[str, Any]:
    return {
        f"{POST_FIELD_PREFIX}{field.name}": getattr(post, field.name)
        for field in dataclasses.fields(post)
    }


def get_template_part_with(
    path: str | list[str],
    template_args: Mapping[str, Any] | str | None = None,
    cache_args: Mapping[str, Any] | str | None = None,
    *,
    loader: TemplateLoader,
    cache: ObjectCache | None = None,
    registry: PostRegistry | None = None,
    current: Post | None = None,
) -> str:
    """Render the first existing template among the candidates for *path*.

    When *cache_args* is non-empty, the output is cached for
    `wputils.config.TEMPLATE_CACHE_TTL` seconds, keyed on the template
    location and grouped by the cache args merged with every plain template
    argument (objects contribute their id).

    When ``template_args["set_post_data"]`` is truthy, the post named by
    ``template_args["post"]`` (resolved through *registry*, falling back to
    *current*) is passed to the template as ``post`` together with one
    ``post_<field>`` variable per post field.

    Args:
        path: Template name, or segments to join with hyphens (see
            `template_candidates`).
        template_args: Template variables as a mapping or query string.
        cache_args: Cache discriminators as a mapping or query string.
        loader: Locates and renders templates.
        cache: Object cache; output is not cached without one.
        registry: Resolves ``template_args["post"]`` ids and slugs.
        current: The post being displayed, if any.

    Returns:
        str: The rendered template.

    Raises:
        InvalidArgumentError: If *path* is neither a string nor a list.
        TemplateNotFoundError: If no candidate template exists.
    """
    candidates = template_candidates(path)
    location = next(
        (found for name in candidates if (found := loader.find(name)) is not None),
        None,
    )
    if location is None:
        raise TemplateNotFoundError(candidates)

    args = parse_query_args(template_args)
    cache_group = None
    if cache is not None and (parsed_cache_args := parse_query_args(cache_args)):
        cache_group = _cache_group(args, parsed_cache_args)
        if (cached := cache.get(location, cache_group)) is not MISS:
            logger.debug("Template cache hit for %s", location)
            return cached

    if args.get(SET_POST_DATA_ARG):
        post = current
        if registry is not None:
            post = (
                resolve_post(args.get(POST_ARG), registry=registry, current=current)
                or current
            )
        if post is not None:
            args = {**args, POST_ARG: post, **_post_fields(post)}

    output = loader.render(location, args)
    if cache_group is not None:
        cache.set(location, output, cache_group, config.TEMPLATE_CACHE_TTL)
    return output
