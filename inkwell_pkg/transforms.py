"""
Functions exposed to templates.

Each TemplateSet gets its own mapping from ``default_transforms``; these
are the only computations available to presentation logic.
"""

import mistune
from markupsafe import Markup

from .slug import make_slug

MONTH_ABBREVIATIONS = ('Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
                       'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec')


def create_markdown_parser():
    """Create a Mistune markdown parser with a custom renderer."""
    class CustomRenderer(mistune.HTMLRenderer):
        def __init__(self):
            super().__init__(escape=False)

        def block_code(self, code, info=None):
            escaped_code = mistune.escape(code)
            return '<pre><code>{}</code></pre>\n'.format(escaped_code)

    return mistune.create_markdown(
        renderer=CustomRenderer(),
        plugins=['table', 'strikethrough', 'footnotes']
    )


_markdown_parser = create_markdown_parser()


def to_html(markdown_text):
    """Render markdown to an HTML fragment that Jinja2 will not escape again."""
    return Markup(_markdown_parser(markdown_text or ''))


def summary(content):
    """Return the first paragraph of content that is not a heading."""
    for paragraph in content.split('\n\n'):
        if not paragraph.startswith('#'):
            return paragraph
    return content


def even(integer):
    return integer % 2 == 0


def inc(integer):
    return integer + 1


def format_date(timestamp):
    """Format as ``02 Jan, 2006`` regardless of the process locale."""
    month = MONTH_ABBREVIATIONS[timestamp.month - 1]
    return f"{timestamp.day:02d} {month}, {timestamp.year:04d}"


def format_year(timestamp):
    return f"{timestamp.year:04d}"


def default_transforms(markdown=None):
    """
    Build a fresh name -> function mapping for a template set.

    Args:
        markdown: Optional replacement for the markdown renderer. Its result
            is wrapped in Markup so templates embed it unescaped.

    Returns:
        Dictionary of template functions
    """
    if markdown is None:
        html = to_html
    else:
        def html(markdown_text):
            return Markup(markdown(markdown_text))

    return {
        'html': html,
        'summary': summary,
        'even': even,
        'inc': inc,
        'slug': make_slug,
        'formatDate': format_date,
        'formatYear': format_year,
    }
