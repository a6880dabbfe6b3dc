# -*- coding: utf-8 -*-
"""
    async_proxy
    ~~~~~~~~~~~
    Asynchronous SOCKS4 and SOCKS5 client handshakes over any
    already connected stream.

    :copyright: (c) 2013-present by Abhinav Singh and contributors.
    :license: BSD, see LICENSE for more details.
"""
from setuptools import setup, find_packages

VERSION = (0, 2, 0)
__version__ = '.'.join(map(str, VERSION[0:3]))
__description__ = '''Asynchronous SOCKS4 and SOCKS5 client handshakes
    over any already connected asyncio stream.'''
__author__ = 'Abhinav Singh'
__author_email__ = 'mailsforabhinav@gmail.com'
__license__ = 'BSD'

if __name__ == '__main__':
    setup(
        name='async_proxy',
        version=__version__,
        author=__author__,
        author_email=__author_email__,
        description=__description__,
        long_description=open(
            'README.md', 'r', encoding='utf-8').read().strip(),
        long_description_content_type='text/markdown',
        license=__license__,
        python_requires='>=3.7',
        zip_safe=False,
        packages=find_packages(exclude=['tests', 'tests.*']),
        package_data={'async_proxy': ['py.typed']},
        install_requires=open('requirements.txt', 'r').read().strip().split(),
        extras_require={
            'testing': open('requirements-testing.txt', 'r').read().strip().split(),
        },
        entry_points={
            'console_scripts': [
                'async-proxy = async_proxy:entry_point'
            ]
        },
        classifiers=[
            'Development Status :: 4 - Beta',
            'Environment :: Console',
            'Framework :: AsyncIO',
            'Intended Audience :: Developers',
            'License :: OSI Approved :: BSD License',
            'Operating System :: OS Independent',
            'Programming Language :: Python :: 3 :: Only',
            'Programming Language :: Python :: 3',
            'Topic :: Internet',
            'Topic :: Internet :: Proxy Servers',
            'Topic :: Software Development :: Libraries :: Python Modules',
            'Topic :: System :: Networking',
            'Typing :: Typed',
        ],
        keywords=(
            'socks, socks4, socks5, proxy client, asyncio, tunnel'
        )
    )
