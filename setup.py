#!/usr/bin/env python

"""The setup script."""
import re

from setuptools import setup, find_packages

with open('sm_keys/__init__.py', encoding='utf-8') as init_file:
    about = dict(re.findall(r"^__(version|author)__ = '([^']*)'", init_file.read(), re.M))

with open('README.rst', encoding='utf-8') as readme_file:
    readme = readme_file.read()

with open('HISTORY.rst', encoding='utf-8') as history_file:
    history = history_file.read()

requirements = ['pyasn1', 'cryptography']

test_requirements = ['pytest>=3', ]

setup(
    name='sm-keys',
    version=about['version'],
    author=about['author'],
    license="MIT license",
    description="SM2 key pairs in PKCS#8 and SubjectPublicKeyInfo, with PBES2 password protection",
    long_description=readme + '\n\n' + history,
    long_description_content_type='text/x-rst',
    install_requires=requirements,
    extras_require={'test': test_requirements},
    include_package_data=True,
    keywords=['sm2', 'gm', 'pkcs8', 'pbes2', 'pem'],
    packages=find_packages(include=['sm_keys', 'sm_keys.*']),
    tests_require=test_requirements,
    zip_safe=False,
    python_requires='>=3.7',
    classifiers=[
        'Development Status :: 2 - Pre-Alpha',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Natural Language :: English',
        'Programming Language :: Python :: 3',
    ],
)
