# setup.py
from setuptools import setup, find_packages

setup(
    name="orelang",
    version="0.1.0",
    description="Interpreter for a toy language whose programs are JSON arrays",
    packages=find_packages(include=["orelang", "orelang.*"]),
    python_requires=">=3.10",
    extras_require={
        "test": ["pytest", "hypothesis"],
    },
    entry_points={
        "console_scripts": ["orelang=orelang.__main__:main"],
    },
    zip_safe=False,
)
