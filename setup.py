#!/usr/bin/env python3
"""
Setup script for Inkwell - static blog generator.
"""

from setuptools import setup, find_packages
import os

# Read the contents of README file
this_directory = os.path.abspath(os.path.dirname(__file__))
with open(os.path.join(this_directory, 'README.md'), encoding='utf-8') as f:
    long_description = f.read()

setup(
    name='inkwell',
    version='1.0.0',
    description='A static blog generator: markdown posts and tags to HTML pages',
    long_description=long_description,
    long_description_content_type='text/markdown',
    packages=find_packages(exclude=['tests', 'tests.*']),
    package_data={
        'inkwell_pkg': [
            'theme/*.tmpl',
            'theme/*.css',
        ],
    },
    include_package_data=True,
    install_requires=[
        'Jinja2>=3.0',
        'MarkupSafe>=2.0',
        'mistune>=2.0',
        'PyYAML>=5.4',
        'python-slugify>=5.0',
    ],
    extras_require={
        'test': [
            'pytest>=7.0',
        ],
    },
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Topic :: Internet :: WWW/HTTP :: Site Management',
        'Topic :: Software Development :: Code Generators',
        'Topic :: Text Processing :: Markup :: HTML',
    ],
    python_requires='>=3.9',
    entry_points={
        'console_scripts': [
            'inkwell=inkwell_pkg.cli:main',
        ],
    },
    keywords='static site generator, blog, markdown, jinja2, tags',
)
