import os

from setuptools import setup, find_packages


# ----------------------------------------------------------------------------------------------------------------------
# Read the version information without importing the package

basedir = 'src'

_version = {}
with open(os.path.join(basedir, 'numspan', 'version.py')) as f:
    exec(f.read(), _version)

# ----------------------------------------------------------------------------------------------------------------------

setup(
    name='pynumspan',
    version=_version['__version__'],
    description='Intervals over ordered numeric domains: classification, membership, cardinality and intersection.',
    package_dir={'': basedir},
    packages=find_packages(basedir),
    python_requires='>=3.8',
    install_requires=[
        'numpy',
        'dnutils',
    ],
    extras_require={
        'test': [
            'ddt',
            'pytest',
        ]
    },
)
