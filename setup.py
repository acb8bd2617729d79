"""
Setup file.
"""

import os

from setuptools import find_packages, setup

KEYWORDS = "frontend npm build embed static resources"
HERE = os.path.dirname(os.path.abspath(__file__))


if __name__ == "__main__":
    setup(
        name="frontend-embed",
        version="0.1.0",
        description="Build a web frontend and stage it as embeddable static resources",
        keywords=KEYWORDS,
        python_requires=">=3.10",
        package_dir={"": "src"},
        packages=find_packages(where="src"),
        install_requires=["fasteners"],
        extras_require={"test": ["pytest"]},
        entry_points={
            "console_scripts": ["frontend-embed=frontend_embed.cli:main"],
        },
        include_package_data=True,
    )
