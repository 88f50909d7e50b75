"""Utility modules for the pyshape command line.

This package contains helpers for importing schema descriptions by
reference and reading the JSON and TOML documents to validate.
"""
