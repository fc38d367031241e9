"""
setup.py

Установка Water Sort Solver.

Использование:
    pip install -e .            # решатель, CLI и JSON API
    pip install -e .[test]      # + pytest
"""

from setuptools import setup, find_packages

setup(
    name="watersort_solver",
    version="1.0.0",
    description="Water Sort puzzle solver (BFS / A*)",
    python_requires=">=3.8",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["main"],
    install_requires=[
        "flask>=2.0",
    ],
    extras_require={
        "test": ["pytest>=7.0"],
    },
    entry_points={
        "console_scripts": [
            "watersort-solver=main:main",
        ],
    },
    zip_safe=False,
)
