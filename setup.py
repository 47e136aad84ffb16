#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Licensed under the GNU LGPL v2.1 - https://www.gnu.org/licenses/old-licenses/lgpl-2.1.en.html

"""
Run with::

    python ./setup.py install
"""

from pathlib import Path

from setuptools import find_packages, setup


# packages included for build-testing everywhere
core_testenv = [
    'pytest',
    'pytest-cov',
    'testfixtures',
]

# independent Porter implementation, used to cross-check stems over the large test vocabulary
reference_env = core_testenv + [
    'gensim >= 4.0',
]

install_requires = [
    'smart_open >= 1.8.1',
]

setup(
    name='porterstem',
    version='1.0.0.dev0',
    description='The Porter stemming algorithm for English words',
    long_description=Path("README.md").read_text(),
    long_description_content_type='text/markdown',
    packages=find_packages(),

    keywords='Porter stemmer, stemming, suffix stripping, information retrieval',

    license='LGPL-2.1-only',

    platforms='any',

    zip_safe=False,

    classifiers=[  # from https://pypi.org/classifiers/
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: Science/Research',
        'Operating System :: OS Independent',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: 3.9',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: 3.11',
        'Programming Language :: Python :: 3.12',
        'Programming Language :: Python :: 3 :: Only',
        'Topic :: Text Processing :: Linguistic',
    ],

    python_requires='>=3.8',
    install_requires=install_requires,
    tests_require=core_testenv,
    extras_require={
        'test': core_testenv,
        'reference': reference_env,
    },

    package_data={'porterstem.test': ['test_data/*']},
    include_package_data=True,
)
