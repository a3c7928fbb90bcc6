from setuptools import setup
from os import path
from io import open

from statscollector import __version__

here = path.abspath(path.dirname(__file__))

with open(path.join(here, "README.md"), encoding="utf-8") as f:
    long_description = f.read()

setup(
    name="statscollector",
    version=__version__,
    description="Write time series points to InfluxDB, with a recording test double",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3.8",
        "Programming Language :: Python :: 3.9",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
    ],
    keywords="influxdb metrics stats time series",
    packages=["statscollector"],
    python_requires=">=3.8, <4",
    install_requires=[
        "influxdb-client>=1.30.0",
        "ujson>=5.0.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0",
            "flake8>=6.0",
        ]
    },
)
