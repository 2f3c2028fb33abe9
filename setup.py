# setup.py
from setuptools import setup, find_packages

setup(
    name="linmath3d",
    version="1.0.0",
    description="Small 3D linear algebra core: vectors, matrices, quaternions",
    packages=find_packages(include=["linmath3d", "linmath3d.*"]),
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.20.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
)
