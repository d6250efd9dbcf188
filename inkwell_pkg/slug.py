"""
Slug generation for post titles and tag names.
"""

from slugify import slugify


def make_slug(text: str) -> str:
    """
    Convert text to a lowercase, hyphen-separated, ASCII-only slug.

    The result is safe as a filename stem and as a URL path segment:
    separators, dots and reserved characters are dropped, so no path
    traversal sequence survives. Distinct inputs may map to the same slug.

    Args:
        text: Title or tag name

    Returns:
        Slug string, empty if the text holds nothing sluggable
    """
    if text is None:
        return ''
    return slugify(str(text), lowercase=True, separator='-')
