"""Post loading: one markdown file with YAML front matter becomes one Post."""

import datetime
import pathlib
import re

import frontmatter  # type: ignore[reportMissingTypeStubs]
import markdown
import pydantic
import yaml

from .errors import PostError
from .manifest import Manifest

# Content files are named like 2024-03-09-some-slug.md
FILENAME_RE = re.compile(
    r'^(?P<year>\d{4})-(?P<month>\d{1,2})-(?P<day>\d{1,2})-(?P<slug>.+)\.md$'
)
TEAM_RE = re.compile(r'(?P<name>[^<]*) <(?P<url>[^>]+)>')
MARKDOWN_EXTENSIONS = ['fenced_code', 'codehilite', 'tables', 'toc']


class PostMetadata(pydantic.BaseModel):
    """Front matter specification for posts."""

    title: str
    author: str
    release: bool = False
    team: str | None = None
    layout: str


class Post(pydantic.BaseModel):
    """A parsed post, ready for rendering."""

    model_config = pydantic.ConfigDict(frozen=True)

    filename: str
    layout: str
    title: str
    author: str
    year: int
    month: int
    day: int
    contents: str
    url: str
    published: str
    updated: str
    release: bool
    has_team: bool
    team: str | None
    team_url: str | None

    @property
    def date(self) -> datetime.date:
        """Returns the publication date."""
        return datetime.date(self.year, self.month, self.day)


class IndexedPost(Post):
    """A post placed in its blog's listing, with the year-grouping hint."""

    show_year: bool


def _published(date: datetime.date) -> str:
    """RFC 3339 timestamp at midnight UTC on date."""
    midnight = datetime.datetime.combine(date, datetime.time(), tzinfo=datetime.UTC)
    return midnight.isoformat()


def _split_team(team: str | None, path: pathlib.Path) -> tuple[str | None, str | None]:
    """Split `Name <url>` team metadata into its parts."""
    if team is None:
        return None, None
    match = TEAM_RE.search(team)
    if match is None:
        raise PostError(path, f'team {team!r} should have format `$name <$url>`')
    return match['name'], match['url']


def load_post(path: pathlib.Path, manifest: Manifest) -> Post:
    """Load the post at path for the blog described by manifest.

    Raises PostError if the filename, front matter or body is not a valid post.
    Filesystem errors propagate unchanged.
    """
    match = FILENAME_RE.match(path.name)
    if match is None:
        raise PostError(path, 'filename should look like YYYY-MM-DD-slug.md')
    try:
        date = datetime.date(
            int(match['year']), int(match['month']), int(match['day'])
        )
    except ValueError as e:
        raise PostError(path, f'invalid date in filename: {e}') from e
    slug = match['slug']

    try:
        with path.open(encoding='utf-8') as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise PostError(path, f'cannot decode post: {e}') from e
    try:
        post = frontmatter.loads(text)
        metadata = PostMetadata.model_validate(post.metadata)
    except yaml.YAMLError as e:
        raise PostError(path, f'invalid front matter: {e}') from e
    except pydantic.ValidationError as e:
        raise PostError(path, f'invalid front matter: {e}') from e

    if metadata.layout != 'post':
        raise PostError(path, 'should have layout `post`')
    if manifest.requires_team and metadata.team is None:
        raise PostError(path, 'lacks team metadata')
    team, team_url = _split_team(metadata.team, path)

    published = _published(date)
    return Post(
        filename=f'{slug}.md',
        layout=metadata.layout,
        title=metadata.title,
        author=metadata.author,
        year=date.year,
        month=date.month,
        day=date.day,
        contents=markdown.markdown(post.content, extensions=MARKDOWN_EXTENSIONS),
        url=f'{date:%Y/%m/%d}/{slug}.html',
        published=published,
        updated=published,
        release=metadata.release,
        has_team=team is not None,
        team=team,
        team_url=team_url,
    )
