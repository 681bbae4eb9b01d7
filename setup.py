#!/usr/bin/env python
# -*- coding: utf-8 -*-
from setuptools import setup

with open('README.md', encoding='utf8') as readme_file:
    readme = readme_file.read()

with open('logflare/VERSION', encoding='utf8') as version_file:
    version = version_file.read().strip()


setup(
    name='logflare-client',
    version=version,
    description="Sends batches of structured log events to the Logflare ingestion API.",
    long_description=readme,
    long_description_content_type="text/markdown",
    author="Logflare",
    author_email='support@logflare.app',
    url='https://github.com/Logflare/logflare',
    packages=[
        'logflare',
    ],
    package_dir={'logflare': 'logflare'},
    package_data={'logflare': ['VERSION']},
    include_package_data=True,
    install_requires=[
        'httpx>=0.24',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-asyncio',
        ],
    },
    python_requires=">=3.8",
    license="MIT license",
    zip_safe=False,
    keywords='logflare logging',
    classifiers=[
        'Development Status :: 3 - Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
        'Topic :: System :: Logging',
    ]
)
