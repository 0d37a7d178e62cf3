# setup.py
from setuptools import setup, find_packages

setup(
    name="robots_scout",
    version="0.1.0",
    description="robots.txt analyzer and validator RobotsScout",
    packages=find_packages(include=["robots_scout", "robots_scout.*"]),
    install_requires=[
        "aiohttp>=3.9",
        "click>=8.2",
        "pydantic>=2.5",
        "PyYAML>=6.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.4",
            "pytest-asyncio>=0.23",
        ],
    },
    entry_points={
        "console_scripts": [
            "robots-scout=robots_scout.cli:cli",
        ],
    },
    python_requires=">=3.11",
)
