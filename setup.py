from setuptools import find_packages, setup

from namestamp.config import NAME
from namestamp.version import __version__
from requirements import EXTRAS, INSTALL

setup(
    name=NAME,
    version=__version__,
    packages=find_packages(include=[NAME, f'{NAME}.*']),
    package_data={NAME: ['version']},
    install_requires=INSTALL,
    extras_require=EXTRAS,
    entry_points=dict(console_scripts=[f'{NAME} = {NAME}.__main__:main']),
    python_requires='>=3.8',
    description='Stamp the package version onto the name field of a YAML config file',
    keywords='yaml config version bump',
)
