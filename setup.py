"""Setup file for the embedkit package."""

from setuptools import setup, find_packages

setup(
    name="embedkit",
    version="0.1.0",
    description="Word-vector geometry toolkit: nearest neighbours, outliers and analogies",
    package_dir={"": "src"},
    packages=find_packages(where="src"),
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "scipy",
        "pandas",
        "gensim",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "embedkit=embedkit.cli:main",
        ],
    },
)
