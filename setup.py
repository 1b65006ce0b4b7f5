from setuptools import setup

setup(
    packages=["vicforcing.core"],
)
