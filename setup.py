# setup.py
from setuptools import setup, find_packages

setup(
    name="sexpa",
    version="0.1.0",
    packages=find_packages(include=["sexpa", "sexpa.*"]),
    python_requires=">=3.10",
    install_requires=["loguru"],
    extras_require={"test": ["pytest", "hypothesis"]},
    entry_points={"console_scripts": ["sexpa = sexpa.interpreter:main"]},
    zip_safe=False,
)
