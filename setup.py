#!/usr/bin/env python3

from setuptools import setup, find_packages


def read_file(fn):
    with open(fn) as f:
        content = f.read()
    return content

setup(
    name="codontrans",
    version="0.1.0",
    description="Frame 1 nucleotide to protein translation with a shared codon table",
    long_description=read_file("README.rst"),
    long_description_content_type="text/x-rst",
    license="GPL-3",
    classifiers=[
        'Development Status :: 4 - Beta',
        'Environment :: Console',
        'Intended Audience :: Science/Research',
        'License :: OSI Approved :: GNU General Public License v3 or later (GPLv3+)',
        'Natural Language :: English',
        'Operating System :: MacOS',
        'Operating System :: POSIX :: Linux',
        'Programming Language :: Python :: 3',
        'Topic :: Scientific/Engineering :: Bio-Informatics',
    ],
    platforms=["linux", "macos"],
    keywords="bioinformatics translation codon genetic-code protein",
    packages=find_packages('src'),
    package_dir={'': 'src'},
    package_data={'codontrans': ['etc/*.tsv', 'etc/*.yml']},
    zip_safe=False,
    install_requires=[
        'click>8',
        'ruamel.yaml>0.15',
        'pandas>=0.20',
        'coloredlogs',
        'tqdm>=4.21.0',
    ],
    tests_require=[
        'pytest',
        'pytest-timeout',
    ],
    extras_require={
        'test': [
            'pytest',
            'pytest-timeout',
        ],
        'profile': [
            'yappi',
        ],
    },
    python_requires='>=3.10',
    include_package_data=True,
    entry_points='''
        [console_scripts]
        codontrans=codontrans.cli:main
    ''',
)
