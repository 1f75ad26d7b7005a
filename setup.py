# setup.py
from setuptools import setup, find_packages

setup(
    name="mal",
    version="0.1.0",
    description="A small Lisp interpreter with lexical closures and tail calls",
    packages=find_packages(include=["mal", "mal.*"]),
    package_data={"mal": ["prelude/*.mal"]},
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
