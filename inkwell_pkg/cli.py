#!/usr/bin/env python3
"""
Command-line interface for Inkwell.
"""

import os
import sys
import time
import logging
import argparse
from importlib import resources
from typing import List, Optional

from . import __version__
from .blog import load_blog
from .generator import StaticBlogGenerator
from .settings import InkwellSettings

SAMPLE_POST = """---
title: Hello, World!
date: 2024-01-15
tags: [meta, welcome]
---

# Hello

This is your first post. Edit or delete it, then run `inkwell` again.

## What next

Write more posts in this directory. Each one needs a title, a date and
optionally a list of tags.
"""


def setup_logging(quiet: bool = False, log_file: Optional[str] = None) -> logging.Logger:
    """Set up console and optional file logging for the Inkwell loggers."""
    logger = logging.getLogger('Inkwell')
    logger.setLevel(logging.DEBUG)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.WARNING if quiet else logging.INFO)
    console_handler.setFormatter(logging.Formatter('%(message)s'))
    logger.addHandler(console_handler)

    if log_file:
        log_dir = os.path.dirname(os.path.abspath(log_file))
        os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
        logger.addHandler(file_handler)

    return logger


def create_starter_structure(base_dir: str, templates: str = 'templates', content: str = 'content') -> None:
    """Copy the bundled theme and a sample post into base_dir, keeping existing files."""
    logger = logging.getLogger('Inkwell')

    template_dest = os.path.join(base_dir, templates)
    content_dest = os.path.join(base_dir, content)
    os.makedirs(template_dest, exist_ok=True)
    os.makedirs(content_dest, exist_ok=True)

    theme = resources.files('inkwell_pkg').joinpath('theme')
    for resource in sorted(theme.iterdir(), key=lambda r: r.name):
        if not resource.is_file():
            continue
        dest_path = os.path.join(template_dest, resource.name)
        if os.path.exists(dest_path):
            logger.info(f"Template already exists: {os.path.join(templates, resource.name)}")
            continue
        with open(dest_path, 'wb') as f:
            f.write(resource.read_bytes())
        logger.info(f"Created template: {os.path.join(templates, resource.name)}")

    post_path = os.path.join(content_dest, 'hello-world.md')
    if os.path.exists(post_path):
        logger.info(f"Sample post already exists: {os.path.join(content, 'hello-world.md')}")
    else:
        with open(post_path, 'w', encoding='utf-8') as f:
            f.write(SAMPLE_POST)
        logger.info(f"Created sample post: {os.path.join(content, 'hello-world.md')}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog='inkwell', description='Inkwell - Static Blog Generator')
    parser.add_argument('--content', type=str,
                        help='Directory containing markdown posts')
    parser.add_argument('--templates', type=str,
                        help='Directory containing templates and static assets')
    parser.add_argument('--output', type=str,
                        help='Output directory (removed and rebuilt)')
    parser.add_argument('--log-file', dest='log_file', type=str,
                        help='Also write a debug log to this file')
    parser.add_argument('--quiet', action='store_true', default=None,
                        help='Only report warnings and errors')
    parser.add_argument('--init', type=str, choices=['yml', 'yaml', 'json'],
                        help='Create a sample configuration file and starter theme')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')
    return parser


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    args = build_parser().parse_args(argv)

    try:
        settings_loader = InkwellSettings()

        if args.init:
            logger = setup_logging(quiet=bool(args.quiet))
            config_path = settings_loader.create_sample_config(args.init)
            logger.info(f"Created sample configuration file: {config_path}")
            create_starter_structure(settings_loader.config_dir)
            logger.info("Edit the templates and posts, then run 'inkwell' to build your blog.")
            return

        settings_loader.load_settings()
        args_dict = {k: v for k, v in vars(args).items() if v is not None}
        final_settings = settings_loader.merge_with_args(args_dict)

        logger = setup_logging(final_settings['quiet'], final_settings['log_file'])
        start_time = time.time()

        blog = load_blog(final_settings['content'])
        generator = StaticBlogGenerator(
            blog,
            final_settings['templates'],
            final_settings['output'],
            progress=lambda path: logger.info(f"Generating {path}"),
        )
        generator.generate()

        total_time = time.time() - start_time
        logger.info(f"Generated {len(generator.posts)} posts and "
                    f"{len(generator.posts_by_tag)} tag pages in {total_time:.2f}s")
    except Exception as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == '__main__':
    main()
