from setuptools import setup, find_packages

setup(
    name="stylize",
    version="0.1.0",
    description="Composable style functions for building styled text",
    packages=find_packages(exclude=["tests", "tests.*"]),
    install_requires=[
        "rich",
    ],
    extras_require={
        "test": ["pytest"],
    },
    python_requires=">=3.11",
)
