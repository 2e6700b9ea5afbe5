"""Load a tree of blogs and write the resulting model as JSON.

Usage::

    python -m blogs.generate_blogs [BASE] [-o OUTPUT] [-v]

BASE defaults to ``BLOGS_DIR`` and OUTPUT to ``BLOGS_OUTPUT`` (stdout when
``-``). Any content or filesystem error fails the whole run with exit code 1.
"""

import argparse
import json
import logging
import pathlib
import sys

import common.log
import common.settings
from blogs.app import blogs, errors

logger = logging.getLogger(__name__)


def dump_blogs(blog_list: list[blogs.Blog]) -> str:
    """Serialize blogs to an indented JSON document."""
    data = [blog.model_dump(mode='json') for blog in blog_list]
    return json.dumps(data, indent=2, ensure_ascii=False) + '\n'


def write_output(text: str, output: str) -> None:
    """Write text to the output path, or stdout for '-'."""
    if output == '-':
        sys.stdout.write(text)
        return
    path = pathlib.Path(output)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(text)


def _parse_args(argv: list[str]) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(description='Load blogs and dump them as JSON')
    parser.add_argument(
        'base',
        nargs='?',
        type=pathlib.Path,
        default=common.settings.BLOGS_DIR,
        help='Directory to search for blog.yml manifests',
    )
    parser.add_argument(
        '-o',
        '--output',
        default=common.settings.OUTPUT_FILE,
        help="Output JSON file ('-' for stdout)",
    )
    parser.add_argument(
        '-v', '--verbose', action='store_true', help='Log every blog and post loaded'
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Load every blog under the base directory and write the model."""
    args = _parse_args(sys.argv[1:] if argv is None else argv)
    common.log.configure_logging(verbose=args.verbose)

    try:
        blog_list = blogs.load(args.base)
    except (errors.BlogError, OSError) as e:
        logger.error('Failed to load blogs from %s: %s', args.base, e)
        return 1

    write_output(dump_blogs(blog_list), args.output)
    post_count = sum(len(blog.posts) for blog in blog_list)
    logger.info('Wrote %d blogs with %d posts', len(blog_list), post_count)
    return 0


if __name__ == '__main__':
    sys.exit(main())
