"""
Fallback setup.py for older pip versions that don't support pyproject.toml
"""
from setuptools import setup

setup()
