#!/usr/bin/env python
"""
Copyright 2025 Hathor Labs

Licensed under the Apache License, Version 2.0 (the "License");
you may not use this file except in compliance with the License.
You may obtain a copy of the License at

   http://www.apache.org/licenses/LICENSE-2.0

Unless required by applicable law or agreed to in writing, software
distributed under the License is distributed on an "AS IS" BASIS,
WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
See the License for the specific language governing permissions and
limitations under the License.
"""

import re

from setuptools import find_packages, setup

# XXX: read it instead of importing tagcodec, the dependencies are not installed yet when this runs
with open('tagcodec/version.py') as fp:
    version = re.search(r"^BASE_VERSION = '([^']+)'$", fp.read(), re.MULTILINE).group(1)

install_requires = [
    'colorama',
    'configargparse',
    'pydantic>=2',
    'pyyaml',
    'structlog',
    'typing_extensions>=4.6',
]

setup(
    name='tagcodec',
    version=version,
    description='JSON codec for tagged unions with associated values',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache-2.0',
    entry_points={
        'console_scripts': ['tagcodec-cli=tagcodec.cli.main:main'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.11',
    packages=find_packages(include=('tagcodec', 'tagcodec.*')),
    install_requires=install_requires,
    extras_require={
        'test': ['pytest'],
    },
)
