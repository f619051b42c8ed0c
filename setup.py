from setuptools import setup
from pathlib import Path

# Stolen from microsofts recommenders repository:
here = Path(__file__).absolute().parent
version_data = {}
with open(here.joinpath("matchstats", "__init__.py"), "r") as f:
    exec(f.read(), version_data)
version = version_data.get("__version__", "0.0")

setup(
    name='matchstats',
    version=version,
    packages=['matchstats'],
    entry_points={'console_scripts': ['matchstats = matchstats.cli:app']},
    python_requires='>=3.11',
    install_requires=[
        'pydantic>=2',
        'typer>=0.9',
        'rich>=13',
    ],
    include_package_data=True
)
