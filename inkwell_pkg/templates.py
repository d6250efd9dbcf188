"""
Jinja2 template loading for the index, post and tag pages.
"""

import os
import logging
from jinja2 import Environment, FileSystemLoader, StrictUndefined

from .transforms import default_transforms

LAYOUT_TEMPLATE = 'layout.tmpl'
INDEX_TEMPLATE = 'index.tmpl'
POST_TEMPLATE = 'post.tmpl'
TAG_TEMPLATE = 'tag.tmpl'

# Template definitions are never copied into the output tree.
TEMPLATE_FILES = (LAYOUT_TEMPLATE, INDEX_TEMPLATE, POST_TEMPLATE, TAG_TEMPLATE)


class TemplateSet:
    """
    The three page templates of a theme, each extending the shared layout.

    Every instance owns its Jinja2 environment and its own copy of the
    transform functions, registered as both globals and filters.
    """

    def __init__(self, templates_dir, transforms=None):
        self.templates_dir = templates_dir
        self.logger = logging.getLogger('Inkwell.templates')
        self.transforms = dict(transforms) if transforms is not None else default_transforms()

        self.env = Environment(
            loader=FileSystemLoader(templates_dir),
            autoescape=True,
            undefined=StrictUndefined,
            keep_trailing_newline=True,
        )
        self.env.globals.update(self.transforms)
        self.env.filters.update(self.transforms)

        # Children only resolve ``extends`` at render time, so compile the
        # layout here to surface a missing or broken layout early.
        self.layout = self.env.get_template(LAYOUT_TEMPLATE)
        self.index = self.env.get_template(INDEX_TEMPLATE)
        self.post = self.env.get_template(POST_TEMPLATE)
        self.tag = self.env.get_template(TAG_TEMPLATE)
        self.logger.debug(f"Loaded templates from {os.path.abspath(templates_dir)}")
