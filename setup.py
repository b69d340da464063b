#!/usr/bin/env python
"""
Copyright 2026 Hathor Labs

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

from setuptools import find_packages, setup

from msgpack_append import __version__

install_requires = [
    'colorama',
    'configargparse',
    'pydantic>=2',
    'structlog>=22.2',
    'typing_extensions>=4.6',
]

tests_require = [
    'msgpack>=1.0',
    'pytest',
]

setup(
    name='msgpack-append',
    version=__version__,
    description='MessagePack encoder that appends values to a caller-owned buffer',
    author='Hathor Team',
    author_email='contact@hathor.network',
    url='https://hathor.network/',
    license='Apache License 2.0',
    entry_points={
        'console_scripts': ['msgpack-append=msgpack_append.cli.main:main'],
    },
    classifiers=[
        'Programming Language :: Python :: 3',
        'Operating System :: OS Independent',
        'License :: OSI Approved :: Apache Software License',
    ],
    python_requires='>=3.11',
    packages=find_packages(exclude=('msgpack_append_tests', 'msgpack_append_tests.*')),
    install_requires=install_requires,
    extras_require={'test': tests_require},
)
