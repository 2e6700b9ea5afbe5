"""Blog discovery and loading.

A blog is a directory containing a ``blog.yml`` manifest. Its posts are the
``.md`` files sitting directly beside the manifest. ``load`` walks a base
directory recursively and returns one ``Blog`` per manifest found.
"""

import collections
import logging
import os
import pathlib
import stat

import pydantic

from .errors import EmptyBlogError
from .manifest import MANIFEST_FILE, load_manifest
from .posts import IndexedPost, Post, load_post

POSTS_EXT = '.md'

logger = logging.getLogger(__name__)


class Blog(pydantic.BaseModel):
    """One loaded blog and its posts, newest first."""

    model_config = pydantic.ConfigDict(frozen=True)

    title: str
    index_title: str
    description: str
    maintained_by: str
    prefix: pathlib.PurePosixPath
    posts: list[IndexedPost]

    @property
    def url_prefix(self) -> str:
        """Prefix as used in URLs: empty for the root blog, else ending in '/'."""
        text = self.prefix.as_posix()
        if text == '.':
            return ''
        return text + '/'

    @pydantic.field_serializer('prefix')
    def serialize_prefix(self, prefix: pathlib.PurePosixPath) -> str:
        """Serialize prefix with its trailing slash."""
        return self.url_prefix


def annotate_years(
    sorted_posts: list[Post], directory: pathlib.Path
) -> list[IndexedPost]:
    """Mark the posts whose year differs from the one listed before them.

    sorted_posts must already be in display order. The first post always shows
    its year. Raises EmptyBlogError if there are no posts.
    """
    if not sorted_posts:
        raise EmptyBlogError(directory, 'blog has no posts')
    indexed: list[IndexedPost] = []
    previous_year: int | None = None
    for post in sorted_posts:
        indexed.append(
            IndexedPost(**dict(post), show_year=post.year != previous_year)
        )
        previous_year = post.year
    return indexed


def _is_file(path: pathlib.Path) -> bool:
    return stat.S_ISREG(path.stat().st_mode)


def _is_dir(path: pathlib.Path) -> bool:
    return stat.S_ISDIR(path.stat().st_mode)


def load_blog(prefix: pathlib.PurePath, directory: pathlib.Path) -> Blog:
    """Load the blog whose manifest lives in directory.

    Only files directly inside directory are considered posts; subdirectories
    are left to the tree walk.
    """
    manifest = load_manifest(directory)

    found: list[Post] = []
    for path in directory.iterdir():
        if _is_file(path) and path.suffix == POSTS_EXT:
            logger.debug('Loading post %s', path)
            found.append(load_post(path, manifest))

    # Ascending then reversed, so equal URLs end up in reverse discovery order
    found.sort(key=lambda p: p.url)
    found.reverse()

    counts = collections.Counter(p.url for p in found)
    duplicates = sorted(url for url, count in counts.items() if count > 1)
    if duplicates:
        logger.warning('Duplicate post URLs in %s: %s', directory, duplicates)

    return Blog(
        title=manifest.title,
        index_title=manifest.index_title,
        description=manifest.description,
        maintained_by=manifest.maintained_by,
        prefix=pathlib.PurePosixPath(pathlib.PurePath(prefix).as_posix()),
        posts=annotate_years(found, directory),
    )


def _load_recursive(
    base: pathlib.Path, current: pathlib.Path, blogs: list[Blog]
) -> None:
    for path in current.iterdir():
        if _is_dir(path):
            _load_recursive(base, path, blogs)
        elif path.name == MANIFEST_FILE and _is_file(path):
            prefix = pathlib.PurePath(os.path.relpath(current, base))
            logger.debug('Found blog at %s', current)
            blogs.append(load_blog(prefix, current))


def load(base: pathlib.Path) -> list[Blog]:
    """Recursively load every blog under base, in directory traversal order.

    The first error encountered aborts the whole load.
    """
    blogs: list[Blog] = []
    _load_recursive(base, base, blogs)
    logger.info('Loaded %d blogs from %s', len(blogs), base)
    return blogs


def find_blog(blogs: list[Blog], url_prefix: str) -> Blog | None:
    """Return the blog whose URL prefix is url_prefix, if any."""
    return next((b for b in blogs if b.url_prefix == url_prefix), None)
