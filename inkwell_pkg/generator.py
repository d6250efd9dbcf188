"""
Static HTML generation for a Blog.

StaticBlogGenerator snapshots a Blog, loads a template set and writes
index.html, one page per post and one page per tag into an output
directory that it rebuilds from scratch on every run.
"""

import os
import shutil
import posixpath
import logging
from dataclasses import dataclass
from typing import Callable, List, Optional

from .blog import Blog, Post
from .slug import make_slug
from .templates import TEMPLATE_FILES, TemplateSet

TAGS_DIR = 'tags'

ProgressFunc = Callable[[str], None]


class GenerationError(Exception):
    """A generation phase failed; the original error is chained."""

    def __init__(self, phase, error):
        super().__init__(f"failed to {phase}: {error}")
        self.phase = phase


@dataclass(frozen=True)
class TagPage:
    name: str
    posts: List[Post]


def _ignore_templates(directory, names):
    return [name for name in names if name in TEMPLATE_FILES]


def prepare_output_dir(templates_dir, output_dir):
    """
    Reset output_dir to a copy of templates_dir without the template files.

    The previous output is removed first and is not restored if the copy
    fails. Symlinks are copied as symlinks.

    Raises:
        OSError: The source tree could not be copied or the tags
            directory could not be created
    """
    shutil.rmtree(output_dir, ignore_errors=True)
    shutil.copytree(templates_dir, output_dir, symlinks=True, ignore=_ignore_templates)
    os.makedirs(os.path.join(output_dir, TAGS_DIR), exist_ok=True)


class StaticBlogGenerator:
    """
    Generates a Blog to static HTML files.

    Args:
        blog: Blog to generate; queried once, here
        templates_dir: Directory holding layout.tmpl, index.tmpl, post.tmpl,
            tag.tmpl and any static assets
        output_dir: Directory to (re)create
        progress: Called with each page's relative path before it is written
        transforms: Replacement template function mapping

    Raises:
        FileNotFoundError: templates_dir does not exist
        jinja2.TemplateNotFound: A template file is missing
        jinja2.TemplateSyntaxError: A template file cannot be parsed
    """

    def __init__(self, blog: Blog, templates_dir: str, output_dir: str,
                 progress: Optional[ProgressFunc] = None, transforms=None):
        if not os.path.exists(templates_dir):
            raise FileNotFoundError(f"Templates directory not found: {templates_dir}")

        self.templates_dir = templates_dir
        self.output_dir = output_dir
        self.progress = progress or (lambda path: None)
        self.logger = logging.getLogger('Inkwell')

        self.templates = TemplateSet(templates_dir, transforms)

        self.posts = blog.posts_by_date()
        self.posts_by_tag = {}
        for tag in blog.tags(sort=True):
            self.posts_by_tag[tag] = blog.posts_by_date(tag=tag)

    def generate(self):
        """
        Generate the whole site, stopping at the first failure.

        Pages written before a failure stay on disk.

        Raises:
            GenerationError: Naming the phase that failed
        """
        self.logger.info(f"Generating site in {self.output_dir}")
        self._run_phase('prepare output directory', self.prepare_output_dir)
        self._run_phase('generate index', self.generate_index)
        self._run_phase('generate tags', self.generate_tags)
        self._run_phase('generate posts', self.generate_posts)
        self.logger.debug(f"Finished writing {self.output_dir}")

    def _run_phase(self, phase, step):
        try:
            step()
        except Exception as e:
            raise GenerationError(phase, e) from e

    def prepare_output_dir(self):
        prepare_output_dir(self.templates_dir, self.output_dir)

    def generate_index(self):
        self.generate_page(self.templates.index, 'index.html', {'posts': self.posts})

    def generate_tags(self):
        for tag, posts in self.posts_by_tag.items():
            page = TagPage(tag, posts)
            path = posixpath.join(TAGS_DIR, make_slug(tag) + '.html')
            self.generate_page(self.templates.tag, path,
                               {'tag': page, 'name': page.name, 'posts': page.posts})

    def generate_posts(self):
        for post in self.posts:
            self.generate_page(self.templates.post, make_slug(post.title) + '.html', {'post': post})

    def generate_page(self, template, path, context):
        """
        Render template with context into output_dir/path.

        The progress callback sees the path before anything else happens.
        Rendering completes before the file is opened, so a failed render
        leaves no partial file. An existing file is overwritten.
        """
        self.progress(path)
        rendered_html = template.render(context)
        output_file_path = os.path.join(self.output_dir, path)
        with open(output_file_path, 'w', encoding='utf-8') as output_file:
            output_file.write(rendered_html)
        self.logger.debug(f"Generated HTML: {output_file_path}")
