"""
Blog content model and its loader.

A Blog owns an ordered list of immutable posts and answers the two
queries the generator needs: posts sorted by date (optionally for one
tag) and the distinct tags in use.
"""

import os
import logging
from dataclasses import dataclass, field
from datetime import datetime, date, timezone
from typing import FrozenSet, Iterable, List, Optional

import yaml

logger = logging.getLogger('Inkwell.blog')

DATE_FORMATS = ['%Y-%m-%dT%H:%M:%S', '%Y-%m-%d %H:%M:%S', '%Y-%m-%d', '%b %d, %Y']


@dataclass(frozen=True)
class Post:
    title: str
    body: str
    tags: FrozenSet[str] = field(default_factory=frozenset)
    date: datetime = datetime.min


class Blog:
    """An ordered collection of posts."""

    def __init__(self, posts: Iterable[Post] = ()):
        self._posts = list(posts)

    def __len__(self):
        return len(self._posts)

    def __iter__(self):
        return iter(self._posts)

    def posts_by_date(self, reverse: bool = False, tag: Optional[str] = None) -> List[Post]:
        """
        Return posts ordered by date.

        Args:
            reverse: Newest first instead of chronological order
            tag: Only include posts carrying this tag

        Returns:
            New list of posts; ties keep their original order
        """
        posts = self._posts
        if tag is not None:
            posts = [post for post in posts if tag in post.tags]
        return sorted(posts, key=lambda post: post.date, reverse=reverse)

    def tags(self, sort: bool = False) -> List[str]:
        """Return each tag once, in order of first appearance unless sorted."""
        seen = {}
        for post in self._posts:
            for tag in sorted(post.tags):
                seen.setdefault(tag, None)
        tags = list(seen)
        if sort:
            tags.sort()
        return tags


def parse_date(value):
    """Parse a front matter date into a naive datetime, or datetime.min.

    Offset-aware values are converted to UTC so every post date compares.
    """
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            return value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    elif isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    elif isinstance(value, str):
        for fmt in DATE_FORMATS:
            try:
                return datetime.strptime(value.strip(), fmt)
            except ValueError:
                continue
    return datetime.min


def parse_tags(value):
    if value is None:
        return frozenset()
    if isinstance(value, str):
        value = value.split(',')
    return frozenset(str(tag).strip() for tag in value if str(tag).strip())


def parse_markdown_with_metadata(filepath):
    """
    Parse a markdown file with YAML front matter.

    Returns:
        Tuple of (metadata dict, markdown body)

    Raises:
        OSError: The file could not be read
        ValueError: The front matter is not valid YAML or not a mapping
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        content = f.read()

    if not content.startswith('---'):
        return {}, content.strip()

    parts = content.split('---', 2)
    if len(parts) < 3:
        return {}, content.strip()

    try:
        metadata = yaml.safe_load(parts[1]) or {}
    except yaml.YAMLError as e:
        raise ValueError(f"Invalid YAML front matter in {filepath}: {e}")
    if not isinstance(metadata, dict):
        raise ValueError(f"Front matter in {filepath} is not a mapping")

    return metadata, parts[2].strip()


def load_post(filepath):
    metadata, body = parse_markdown_with_metadata(filepath)

    title = metadata.get('title')
    if not isinstance(title, str) or not title.strip():
        title = os.path.splitext(os.path.basename(filepath))[0]

    published = parse_date(metadata.get('date'))
    if published == datetime.min:
        logger.warning(f"No usable date in {filepath}, sorting it first")

    return Post(title=title, body=body, tags=parse_tags(metadata.get('tags')), date=published)


def load_blog(content_dir):
    """
    Load every markdown file in content_dir into a Blog.

    Files are read in filename order. Files that cannot be read or parsed
    are logged and skipped.
    """
    if not os.path.isdir(content_dir):
        raise FileNotFoundError(f"Content directory not found: {content_dir}")

    posts = []
    for name in sorted(os.listdir(content_dir)):
        if not name.endswith('.md'):
            continue
        filepath = os.path.join(content_dir, name)
        try:
            posts.append(load_post(filepath))
        except (OSError, ValueError) as e:
            logger.error(f"Skipping {filepath}: {e}")

    logger.info(f"Loaded {len(posts)} posts from {content_dir}")
    return Blog(posts)
