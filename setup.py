# setup.py
from setuptools import setup, find_packages

setup(
    name="lisparse",
    version="0.1.0",
    description="A small Lisp reader, evaluator and environment model",
    packages=find_packages(include=["lisparse", "lisparse.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    zip_safe=False,
)
