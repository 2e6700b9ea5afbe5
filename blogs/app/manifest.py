"""Blog manifest (blog.yml) parsing and validation."""

import pathlib
import typing

import pydantic
import yaml

from .errors import ManifestError

MANIFEST_FILE = 'blog.yml'


def _kebab(name: str) -> str:
    return name.replace('_', '-')


class Manifest(pydantic.BaseModel):
    """Metadata identifying a directory as a blog.

    The document must carry exactly these five keys (in kebab-case) with values
    of exactly these types. Nothing is defaulted and nothing is coerced.
    """

    model_config = pydantic.ConfigDict(
        alias_generator=_kebab, extra='forbid', frozen=True, strict=True
    )

    title: str
    index_title: str
    description: str
    maintained_by: str
    requires_team: bool

    @pydantic.model_validator(mode='before')
    @classmethod
    def check_keys(cls, data: typing.Any) -> typing.Any:
        """Reject documents whose keys differ from the allowed set."""
        if not isinstance(data, dict):
            raise ValueError('manifest must be a mapping')
        allowed = {_kebab(name) for name in cls.model_fields}
        keys = set(typing.cast(dict[typing.Any, typing.Any], data))
        unknown = sorted(str(key) for key in keys - allowed)
        if unknown:
            raise ValueError(f'unknown fields: {", ".join(unknown)}')
        missing = sorted(allowed - keys)
        if missing:
            raise ValueError(f'missing fields: {", ".join(missing)}')
        return data


def parse_manifest(text: str, path: pathlib.Path) -> Manifest:
    """Parse manifest YAML, raising ManifestError that names path."""
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ManifestError(path, f'invalid YAML: {e}') from e
    try:
        return Manifest.model_validate(data)
    except pydantic.ValidationError as e:
        raise ManifestError(path, f'invalid manifest: {e}') from e


def load_manifest(directory: pathlib.Path) -> Manifest:
    """Read and validate the blog.yml inside directory."""
    path = directory / MANIFEST_FILE
    try:
        with path.open(encoding='utf-8') as f:
            text = f.read()
    except (OSError, UnicodeDecodeError) as e:
        raise ManifestError(path, f'cannot read manifest: {e}') from e
    return parse_manifest(text, path)
