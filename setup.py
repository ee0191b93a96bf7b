from __future__ import annotations

from pathlib import Path

from setuptools import find_packages, setup  # type: ignore


ROOT = Path(__file__).resolve().parent


setup(
    name="docledger",
    version="0.1.0",
    description="Document hash registry: ownership, integrity verification and an emergency pause, served over HTTP",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages(where=str(ROOT / "src")),
    install_requires=[
        "fastapi",
        "uvicorn",
        "httpx",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "docledger=docledger.__main__:main",
        ],
    },
)
