"""Shared application settings read from environment variables."""

import os
import pathlib

# Base directory walked for blog.yml manifests
BLOGS_DIR: pathlib.Path = pathlib.Path(os.environ.get('BLOGS_DIR', 'posts'))
# Where generate_blogs writes the loaded model; '-' means stdout
OUTPUT_FILE: str = os.environ.get('BLOGS_OUTPUT', '-')
