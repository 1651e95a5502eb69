#!/usr/bin/env python

from setuptools import find_packages, setup


install_requires = [
    'cssselect',
    'cssutils',
    'lxml',
    'minify-html>=0.16',
]

tests_require = [
    'beautifulsoup4',
    'exam',
    'pytest',
]

setup(
    name='tailinline',
    version='0.1.0',
    description='Inlines utility CSS classes of HTML templates as style attributes.',
    packages=find_packages(exclude=('tests',)),
    install_requires=install_requires,
    tests_require=tests_require,
    extras_require={
        'dev': [
            'flake8',
        ],
        'tests': tests_require,
    },
    entry_points={
        'console_scripts': [
            'tailinline = tailinline.__main__:main',
        ],
    },
    zip_safe=False,
    license='Apache License 2.0',
    python_requires='>=3.6',
    classifiers=[
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
    ],
)
