#!/usr/bin/env python
#
# Copyright 2026 Canonical Ltd.  This software is licensed under the
# GNU Affero General Public License version 3 (see the file LICENSE).

from setuptools import (
    find_packages,
    setup,
    )


__version__ = '0.1.0'

setup(
    name='poio',
    version=__version__,
    packages=find_packages('lib'),
    package_dir={'': 'lib'},
    include_package_data=True,
    zip_safe=False,
    maintainer='poio Developers',
    description=('Read, normalize and write gettext PO and POT message '
                 'catalogs.'),
    license='Affero GPL v3',
    python_requires='>=3.7',
    # this list should only contain direct dependencies--things imported.
    install_requires=[
        'lazr.enum',
        'pytz',
        'zope.interface',
        'zope.schema',
    ],
    extras_require=dict(
        test=[
            'fixtures',
            'testtools',
            'zope.testrunner',
        ],
    ),
    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Programming Language :: Python",
        "Programming Language :: Python :: 3",
        "Topic :: Software Development :: Localization",
    ],
)
