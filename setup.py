# setup.py
from setuptools import setup, find_namespace_packages

setup(
    name="repograph",
    version="1.0.0",
    description="Repository tree builder and heuristic import graph extractor",
    author="Enrique Paredes",
    author_email="eparedesbalen@gmail.com",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["repograph", "repograph.*"]),
    python_requires=">=3.9",
    install_requires=[
        "pathspec>=0.10",  # gitignore pattern matching
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        'console_scripts': [
            'repograph=repograph.interface.cli.app:main',
        ],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
