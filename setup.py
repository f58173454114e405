from __future__ import annotations

from setuptools import find_packages, setup  # type: ignore


setup(
    name="taxreg",
    version="0.1.0",
    description="In-memory taxpayer registry served over HTTP",
    python_requires=">=3.10",
    package_dir={"": "src"},
    packages=find_packages("src"),
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
            "taxreg=taxreg.__main__:main",
        ],
    },
)
