"""Setup script for tinyknn."""
from setuptools import setup, find_packages

setup(
    name="tinyknn",
    version="0.1.0",
    description="Streaming k-nearest-neighbour classifier over a sliding window",
    packages=find_packages(include=["tinyknn", "tinyknn.*"]),
    package_dir={"": "."},
    python_requires=">=3.8",
    install_requires=[
        "numpy",
        "scikit-learn",
    ],
    extras_require={
        "test": ["pytest"],
    },
)
