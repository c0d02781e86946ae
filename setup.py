#!/usr/bin/env python3
from setuptools import setup

setup(
    name='fasttag',
    version='1.0.0',
    license='GNU Affero GPL v3',
    author='Florian Leitner',
    author_email='florian.leitner@gmail.com',
    url='https://github.com/fnl/libfnl',
    description='a fast lexicon- and rule-based part-of-speech tagger',
    long_description=open('README.rst').read(),
    install_requires=[
        'nltk >= 3.0',
    ],
    extras_require={
        'test': ['pytest'],
    },
    packages=[
        'fasttag',
    ],
    package_dir={'': 'src'},
    scripts=[
        'scripts/fasttagger.py',
    ],
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'License :: OSI Approved :: GNU Affero General Public License v3',
        'Operating System :: POSIX',
        'Programming Language :: Python :: 3',
        'Topic :: Software Development :: Libraries',
        'Topic :: Text Processing',
        'Topic :: Text Processing :: Linguistic',
    ],
)
