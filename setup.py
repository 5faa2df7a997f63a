#!/usr/bin/env python

"""Set up the pyneostmt package.

(C) Copyright 2013-2023 Dassault Systemes SE.  All Rights Reserved.

This software is licensed under a BSD 3-Clause License.
See the LICENSE file provided with this software.

This package can be installed using pip as follows:

    pip install pyneostmt

To install with the test requirements:

    pip install 'pyneostmt[test]'
"""

import os
import re

from setuptools import setup

with open(os.path.join(os.path.dirname(__file__), 'pyneostmt', '__init__.py')) as v:
    m = re.search(r"^ *__version__ *= *'(.*?)'", v.read(), re.M)
    if m is None:
        raise RuntimeError("Cannot detect version in pyneostmt/__init__.py")
    VERSION = m.group(1)

readme = os.path.join(os.path.dirname(__file__), 'README.rst')

with open(readme) as r:
    long_description = r.read()

setup(
    name='pyneostmt',
    version=VERSION,
    author='pyneostmt developers',
    description='PEP 249 statement layer for graph database drivers',
    keywords='graph cypher database dbapi statement',
    packages=['pyneostmt'],
    license='BSD License',
    long_description=long_description,
    python_requires='>=3.9',
    install_requires=['tzlocal>=3.0'],
    extras_require=dict(test=['pytest>=7.0']),
    classifiers=[
        'Development Status :: 4 - Beta',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: BSD License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Topic :: Database :: Front-Ends',
    ],
)
