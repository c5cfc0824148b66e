import re
from setuptools import find_packages, setup

__version__ ,= re.findall('__version__ = "(.*)"', open('lark_calculator/__init__.py').read())


def parse_description():
    """
    Parse the description in the README file
    """
    from os.path import dirname, join, exists
    readme_fpath = join(dirname(__file__), 'README.md')
    # This breaks on pip install, so check that it exists.
    if exists(readme_fpath):
        with open(readme_fpath, 'r') as f:
            text = f.read()
        return text
    return ''

setup(
    name = "lark-calculator",
    version = __version__,
    packages=find_packages(exclude=['tests', 'tests.*']),

    install_requires = ['lark>=1.1.4', 'lark-cython>=0.0.15'],
    extras_require = {
        'test': ['pytest'],
    },
    entry_points = {
        'console_scripts': ['lark-calc = lark_calculator.cli:main'],
    },

    description = "A 32-bit integer calculator built on a Lark grammar and a Pratt parser",
    keywords = "Lark LALR Pratt parser calculator",
    long_description = parse_description(),
    long_description_content_type = 'text/markdown',
    license = 'MIT',
    python_requires = '>=3.8',
    classifiers = [
        "Development Status :: 4 - Beta",
        'Intended Audience :: Developers',
        'Topic :: Software Development :: Interpreters',
        'Topic :: Utilities',
        'Operating System :: Microsoft :: Windows',
        'Operating System :: MacOS',
        'Operating System :: POSIX :: Linux',
        'License :: OSI Approved :: MIT License',
        # Supported Python versions
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
    ],
)
