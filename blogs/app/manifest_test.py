"""Unit tests for manifest.py module."""

import pathlib
import tempfile
import unittest

from blogs.app import errors, manifest

VALID_MANIFEST = """\
title: Rust Blog
index-title: The Rust Programming Language Blog
description: Empowering everyone to build reliable and efficient software.
maintained-by: the Rust Teams
requires-team: false
"""

VALID_DATA = {
    'title': 'Rust Blog',
    'index-title': 'The Rust Programming Language Blog',
    'description': 'Empowering everyone to build reliable and efficient software.',
    'maintained-by': 'the Rust Teams',
    'requires-team': False,
}


class TestManifest(unittest.TestCase):
    """Tests for the Manifest model."""

    def test_valid_manifest_copies_fields(self) -> None:
        """All five fields are copied verbatim."""
        m = manifest.Manifest.model_validate(VALID_DATA)
        self.assertEqual(m.title, 'Rust Blog')
        self.assertEqual(m.index_title, 'The Rust Programming Language Blog')
        self.assertEqual(
            m.description,
            'Empowering everyone to build reliable and efficient software.',
        )
        self.assertEqual(m.maintained_by, 'the Rust Teams')
        self.assertFalse(m.requires_team)

    def test_missing_field_rejected(self) -> None:
        """Dropping any one key fails validation."""
        path = pathlib.Path('blog.yml')
        for key in VALID_DATA:
            with self.subTest(key=key):
                data = {k: v for k, v in VALID_DATA.items() if k != key}
                text = ''.join(f'{k}: {v!r}\n' for k, v in data.items())
                with self.assertRaisesRegex(errors.ManifestError, key):
                    manifest.parse_manifest(text, path)

    def test_extra_field_rejected(self) -> None:
        """An unrecognized key fails validation."""
        text = VALID_MANIFEST + 'homepage: https://example.com\n'
        with self.assertRaisesRegex(errors.ManifestError, 'unknown fields: homepage'):
            manifest.parse_manifest(text, pathlib.Path('blog.yml'))

    def test_snake_case_key_rejected(self) -> None:
        """Keys must use hyphens, not underscores."""
        text = VALID_MANIFEST.replace('index-title', 'index_title')
        with self.assertRaises(errors.ManifestError):
            manifest.parse_manifest(text, pathlib.Path('blog.yml'))

    def test_wrong_bool_kind_rejected(self) -> None:
        """requires-team must be a real boolean, not a string."""
        text = VALID_MANIFEST.replace('requires-team: false', 'requires-team: "yes"')
        with self.assertRaises(errors.ManifestError):
            manifest.parse_manifest(text, pathlib.Path('blog.yml'))

    def test_wrong_string_kind_rejected(self) -> None:
        """title must be a string, not a number."""
        text = VALID_MANIFEST.replace('title: Rust Blog', 'title: 2024')
        with self.assertRaises(errors.ManifestError):
            manifest.parse_manifest(text, pathlib.Path('blog.yml'))

    def test_non_mapping_rejected(self) -> None:
        """A YAML list or empty document is not a manifest."""
        for text in ['- title\n- description\n', '']:
            with self.subTest(text=text):
                with self.assertRaisesRegex(errors.ManifestError, 'mapping'):
                    manifest.parse_manifest(text, pathlib.Path('blog.yml'))

    def test_invalid_yaml_rejected(self) -> None:
        """Broken YAML syntax is a manifest error naming the file."""
        path = pathlib.Path('some/blog.yml')
        with self.assertRaisesRegex(errors.ManifestError, 'invalid YAML') as ctx:
            manifest.parse_manifest('title: [unclosed\n', path)
        self.assertEqual(ctx.exception.path, path)


class TestLoadManifest(unittest.TestCase):
    """Tests for load_manifest function."""

    def test_loads_from_directory(self) -> None:
        """The manifest is read from blog.yml in the given directory."""
        with tempfile.TemporaryDirectory() as tmpdir:
            directory = pathlib.Path(tmpdir)
            (directory / manifest.MANIFEST_FILE).write_text(VALID_MANIFEST)
            m = manifest.load_manifest(directory)
        self.assertEqual(m.title, 'Rust Blog')

    def test_missing_file_is_manifest_error(self) -> None:
        """A directory without blog.yml raises ManifestError."""
        with tempfile.TemporaryDirectory() as tmpdir:
            directory = pathlib.Path(tmpdir)
            with self.assertRaises(errors.ManifestError) as ctx:
                manifest.load_manifest(directory)
        self.assertEqual(ctx.exception.path, directory / 'blog.yml')
        self.assertIsInstance(ctx.exception.__cause__, FileNotFoundError)


if __name__ == '__main__':
    unittest.main()
