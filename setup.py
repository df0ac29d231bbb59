#!/usr/bin/env python3

from setuptools import setup, find_packages
import os

directory = os.path.dirname(os.path.realpath(__file__))


if __name__ == "__main__":
    setup(
        name="beatmotion",
        packages=find_packages(include=["beatmotion", "beatmotion.*"]),
        python_requires='>3.10.0',
        version="0.1.0",
        license="MIT",
        description="Keyframe animation core for rhythm game beatmap authoring",
        long_description=open(os.path.join(
            directory, "README.md"), "r", encoding="utf8").read(),
        long_description_content_type="text/markdown",
        keywords=["animation", "keyframes", "beatmap"],
        classifiers=[],
        install_requires=[
            "numpy",
        ],
        extras_require={
            "test": [
                "pytest",
            ],
        },
        zip_safe=False,
    )
