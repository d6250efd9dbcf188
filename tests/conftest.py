"""Test configuration and fixtures for Inkwell tests."""

import pytest
import tempfile
import shutil
import os
from pathlib import Path
from datetime import datetime

import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from inkwell_pkg.blog import Blog, Post

LAYOUT = """<html><head><title>{% block title %}{% endblock %}</title></head>
<body>{% block content %}{% endblock %}</body></html>
"""

INDEX = """{% extends "layout.tmpl" %}
{% block title %}Index{% endblock %}
{% block content %}{% for post in posts %}<li class="{{ 'even' if even(loop.index0) else 'odd' }}">{{ inc(loop.index0) }}. {{ post.title }} ({{ formatDate(post.date) }})</li>
{% endfor %}{% endblock %}
"""

POST = """{% extends "layout.tmpl" %}
{% block title %}{{ post.title }}{% endblock %}
{% block content %}{{ html(post.body) }}<p class="summary">{{ post.body|summary }}</p><footer>{{ formatYear(post.date) }}</footer>{% endblock %}
"""

TAG = """{% extends "layout.tmpl" %}
{% block title %}{{ name }}{% endblock %}
{% block content %}<h1>{{ tag.name }}</h1>{% for post in posts %}<a href="../{{ slug(post.title) }}.html">{{ post.title }}</a>
{% endfor %}{% endblock %}
"""


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir, ignore_errors=True)


def write_templates(templates_dir, **overrides):
    """Write the four test templates, replacing any named in overrides."""
    templates = {'layout.tmpl': LAYOUT, 'index.tmpl': INDEX, 'post.tmpl': POST, 'tag.tmpl': TAG}
    templates.update({f'{name}.tmpl': text for name, text in overrides.items()})
    for name, text in templates.items():
        if text is not None:
            (Path(templates_dir) / name).write_text(text, encoding='utf-8')


@pytest.fixture
def templates_dir(temp_dir):
    """Create a templates directory with the four templates and some assets."""
    templates_dir = Path(temp_dir) / 'templates'
    templates_dir.mkdir()
    write_templates(templates_dir)

    (templates_dir / 'style.css').write_text('body { color: black; }\n')
    images_dir = templates_dir / 'images'
    images_dir.mkdir()
    (images_dir / 'logo.png').write_bytes(b'\x89PNG\r\n\x1a\n')
    # Template names are excluded at every level of the tree.
    (images_dir / 'post.tmpl').write_text('not copied')

    return str(templates_dir)


@pytest.fixture
def output_dir(temp_dir):
    """Path for generated output; not created."""
    return str(Path(temp_dir) / 'output')


@pytest.fixture
def sample_posts():
    """Three posts, deliberately out of date order."""
    return [
        Post(
            title='Second Post',
            body='# Second\n\nMiddle of the road.\n\nMore text.',
            tags=frozenset({'python', 'web'}),
            date=datetime(2023, 2, 1),
        ),
        Post(
            title='First Post',
            body='Opening paragraph with *emphasis*.',
            tags=frozenset({'python'}),
            date=datetime(2023, 1, 1),
        ),
        Post(
            title='Third Post',
            body='## Only a heading',
            tags=frozenset({'Big News'}),
            date=datetime(2023, 3, 1),
        ),
    ]


@pytest.fixture
def sample_blog(sample_posts):
    return Blog(sample_posts)


@pytest.fixture
def content_dir(temp_dir):
    """Create a content directory with markdown posts."""
    content_dir = Path(temp_dir) / 'content'
    content_dir.mkdir()

    (content_dir / 'first.md').write_text("""---
title: First Post
date: 2023-01-01
tags: [python, web]
---

# First

Hello there.
""", encoding='utf-8')

    (content_dir / 'second.md').write_text("""---
title: Second Post
date: 2023-02-01T10:30:00
tags: python, notes
---

Second body.
""", encoding='utf-8')

    (content_dir / 'notes.txt').write_text('ignored')

    return str(content_dir)


def read_tree(root):
    """Map every file under root (relative path) to its bytes."""
    tree = {}
    for dirpath, dirnames, filenames in os.walk(root):
        for filename in filenames:
            path = os.path.join(dirpath, filename)
            with open(path, 'rb') as f:
                tree[os.path.relpath(path, root)] = f.read()
    return tree
