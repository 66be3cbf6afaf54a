from setuptools import setup, find_packages
from os import path
import re

here = path.abspath(path.dirname(__file__))

with open(path.join(here, 'docs', 'README.md')) as f:
    long_description = f.read()

# NOTE: version is read from the source, pqueue is not importable before it
# is installed.
with open(path.join(here, 'pqueue', '__init__.py')) as f:
    version = re.search(r'__version__ = "(.*)"', f.read()).group(1)

setup(
        name = 'pqueue',
        version = version,
        description = 'Binary min heap priority queue with removal of items \
by value',
        long_description = long_description,
        long_description_content_type = 'text/markdown',
        license = 'GPLv3',
        entry_points = {
            'console_scripts': ['pqueue = pqueue.__main__:main']},
        packages = find_packages(exclude = ['tests']),
        include_package_data = True,
        package_data = {'pqueue': ['config.ini']},
        install_requires = [],
        extras_require = {'test': ['pytest']},
        classifiers = ['Programming Language :: Python :: 3 :: Only'],
        python_requires = '>=3.6')
