#!/usr/bin/env python3

from setuptools import setup, find_packages
import os

directory = os.path.dirname(os.path.realpath(__file__))


if __name__ == "__main__":
    setup(
        name="waypath",
        packages=find_packages(include=["waypath", "waypath.*"]),
        python_requires='>3.10.0',
        version="0.1.0",
        license="MIT",
        description="Path tweening: move transforms along waypoint paths",
        author="mirmik",
        author_email="mirmikns@yandex.ru",
        long_description=open(os.path.join(
            directory, "README.md"), "r", encoding="utf8").read(),
        long_description_content_type="text/markdown",
        keywords=["tween", "animation", "spline", "gamedev"],
        classifiers=[],
        install_requires=[
            "numpy",
            "scipy",
        ],
        extras_require={
            "test": ["pytest"],
        },
        zip_safe=False,
    )
