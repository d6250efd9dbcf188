"""
Inkwell - a static blog generator.

Inkwell turns markdown posts with tags and dates into a static HTML site:
an index page, one page per post and one page per tag, rendered through
Jinja2 templates.
"""

__version__ = "1.0.0"

from .blog import Blog, Post, load_blog
from .generator import GenerationError, StaticBlogGenerator
from .slug import make_slug

__all__ = ['Blog', 'Post', 'load_blog', 'GenerationError', 'StaticBlogGenerator', 'make_slug']
