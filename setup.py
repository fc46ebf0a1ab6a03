# -*- coding: utf-8 -*-
from setuptools import setup
from setuptools import find_packages
import dubman

with open('README.md', encoding='utf-8') as file:
    long_description = file.read()

setup(
    name='Dubman',
    version=dubman.__version__,
    description='Man pages for the DUB package manager, parsed out of its --help output with a small backtracking parser-combinator engine.',
    long_description=long_description,
    long_description_content_type='text/markdown',
    license='MIT',

    packages=find_packages(exclude=['tests', 'tests.*']),
    install_requires=[],
    include_package_data=True,
    zip_safe=False,
    test_suite='tests',
    extras_require={
        'testing': ['pytest', 'pytest-xdist', 'hypothesis'],
    },
    entry_points={
        'console_scripts': [
            'dubman = dubman:main',
        ],
    },

    classifiers=[
        'Programming Language :: Python :: 3',
        'License :: OSI Approved :: MIT License',
        'Development Status :: 3 - Alpha',
        'Environment :: Console',
        'Topic :: Documentation',
        'Topic :: Software Development :: Documentation',
        'Topic :: Text Processing :: General',
    ],
)
