#!/usr/bin/env python3

""" Build script for the chainable SVG path builder. """

import shutil
from pathlib import Path

from setuptools import Command, setup

ROOT = Path(__file__).parent


class clean(Command):
    description = "Remove build output, egg-info and test caches."
    user_options = []

    def initialize_options(self):
        pass

    def finalize_options(self):
        pass

    def run(self):
        targets = [ROOT / "build", ROOT / "dist", ROOT / ".pytest_cache",
                   *ROOT.glob("*.egg-info"), *ROOT.rglob("__pycache__")]
        for path in targets:
            if path.is_dir():
                shutil.rmtree(path)


setup(
    name="svg-path-chain",
    version="0.1.0",
    description="Chainable SVG path string generator with some sugar added.",
    license="MIT",
    python_requires=">=3.7",
    packages=["svg_path_chain"],
    extras_require={"test": ["pytest"]},
    cmdclass={"clean": clean},
)
