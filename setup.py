# setup.py
from setuptools import setup, find_packages

setup(
    name="wavemesh",
    version="1.0.0",
    description="Wavefront OBJ loader producing tangent-space triangle lists",
    packages=find_packages(include=["wavemesh", "wavemesh.*"]),
    python_requires=">=3.9",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
