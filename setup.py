from setuptools import setup

setup(
    name="adjgraph",
    version="0.1.0",
    author="Mitchell Kember",
    description="Generic adjacency-list graph container",
    license="MIT",
    packages=["adjgraph"],
    python_requires=">=3.7",
    install_requires=["PyYAML>=4.2b1"],
    extras_require={"test": ["pytest"]},
    entry_points={"console_scripts": ["adjgraph = adjgraph.cli:main"]},
)
