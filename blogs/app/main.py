"""FastAPI application exposing the loaded blog model as JSON."""

import logging
from typing import Any

import fastapi
import uvicorn

import common.log
import common.settings

from . import blogs, errors

logger = logging.getLogger(__name__)

app = fastapi.FastAPI(title='Blogs')

common.log.configure_logging()


def _load() -> list[blogs.Blog]:
    """Load every blog under the configured directory, mapping load errors to 500."""
    try:
        return blogs.load(common.settings.BLOGS_DIR)
    except (errors.BlogError, OSError) as e:
        logger.error('Failed to load blogs: %s', e)
        raise fastapi.HTTPException(status_code=500, detail=str(e)) from e


@app.get('/blogs')
async def list_blogs() -> list[dict[str, Any]]:
    """Return all blogs with their posts."""
    return [blog.model_dump(mode='json') for blog in _load()]


@app.get('/blog')
async def get_blog(prefix: str = '') -> dict[str, Any]:
    """Return the blog at prefix (e.g. 'inside-rust/'); empty for the root blog."""
    matched = blogs.find_blog(_load(), prefix)
    if matched is None:
        raise fastapi.HTTPException(status_code=404, detail='Blog not found')
    return matched.model_dump(mode='json')


@app.api_route('/health', methods=['GET', 'HEAD'])
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {'status': 'healthy'}


if __name__ == '__main__':
    uvicorn.run(app, host='0.0.0.0', port=8000)
