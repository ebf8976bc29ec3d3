from setuptools import setup, find_packages


with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="vizgraph",
    version="0.1.0",
    description="Shortest-path search and random graph generation for graph visualizations.",
    long_description=long_description,
    long_description_content_type="text/markdown",
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    packages=find_packages(exclude=("tests", "tests.*")),
    python_requires=">=3.9",
    extras_require={"dev": ["pytest", "networkx"]},
    entry_points={"console_scripts": ["vizgraph=vizgraph.cli:main"]},
)
