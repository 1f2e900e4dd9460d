'''
Named enumerations with bit-flag values.
'''
import os
import sys

import setuptools

README_PATH = 'README.md'

LONG_DESCRIPTION = ''
if os.path.exists(README_PATH):
    with open(README_PATH, 'r') as fd:
        LONG_DESCRIPTION = fd.read()

setuptools.setup(
    name='pyenum',
    version='0.0.1',
    license='MIT License',
    author='',
    author_email='',
    description='Named enumerations with bit-flag values',
    long_description=LONG_DESCRIPTION,
    long_description_content_type='text/markdown',
    install_requires=[],
    extras_require={
        'completion': ['argcomplete'],
        'test': ['pytest'],
    },
    packages=setuptools.find_packages(exclude=['test']),
    zip_safe=True,
    python_requires='>=3.8',
    classifiers=[
        'Environment :: Console',
        'Intended Audience :: Developers',
        'License :: OSI Approved :: MIT License',
        'Operating System :: OS Independent',
        'Programming Language :: Python',
        'Programming Language :: Python :: 3',
        'Programming Language :: Python :: 3.8',
        'Programming Language :: Python :: Implementation :: CPython',
        'Development Status :: 2 - Pre-Alpha',
        'Topic :: Software Development',
        'Topic :: Software Development :: Libraries',
        'Topic :: Software Development :: Libraries :: Python Modules',
        'Topic :: Utilities'
    ],
    entry_points={
        'console_scripts': [
            'pyenum = pyenum.__main__:main',
            f'pyenum{sys.version_info.major} = pyenum.__main__:main',
        ]
    }
)
