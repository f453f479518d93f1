"""
Setup script for the birdwalk recommendation package.
"""

from setuptools import setup, find_packages

setup(
    name="birdwalk",
    version="1.0.0",
    description="Random walk recommendations on user-item interaction graphs",
    author="birdwalk developers",
    packages=find_packages(exclude=["tests", "tests.*"]),
    package_data={"config": ["*.yaml"]},
    python_requires=">=3.8",
    install_requires=[
        "numpy>=1.23.0",
        "pyyaml>=6.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.3.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "birdwalk-recommend=scripts.recommend:main",
            "birdwalk-benchmark=scripts.benchmark_latency:main",
        ],
    },
)
