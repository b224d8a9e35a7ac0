#!/usr/bin/env python

from setuptools import find_packages, setup

setup(
    name='oosys',
    version="0.1dev",
    description='oosys: object system with virtual properties and method hooks',
    packages=find_packages(include=["oosys", "oosys.*"]),
    install_requires=[
        'web.py',
        'simplejson',
        'PyYAML',
        # web.py imports cgi, which left the standard library in 3.13
        'legacy-cgi; python_version >= "3.13"',
    ],
    extras_require={
        'test': ['pytest'],
    },
    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.10',
        'Programming Language :: Python :: Implementation :: CPython',
    ],
    license="Public Domain",
    platforms=["any"],
)
