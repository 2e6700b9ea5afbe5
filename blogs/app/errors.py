"""Errors raised while loading a tree of blogs.

Filesystem failures are not wrapped: they surface as the builtin ``OSError``
family so callers keep the underlying system error.
"""

import pathlib


class BlogError(Exception):
    """Base class for content errors, carrying the offending path."""

    path: pathlib.Path

    def __init__(self, path: pathlib.Path, message: str) -> None:
        super().__init__(f'{path}: {message}')
        self.path = path


class ManifestError(BlogError):
    """A blog.yml file is missing, unreadable, malformed or fails the schema."""


class PostError(BlogError):
    """A content file could not be turned into a post."""


class EmptyBlogError(BlogError):
    """A blog directory has a valid manifest but no posts."""
