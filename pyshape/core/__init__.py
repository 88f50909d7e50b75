"""Core components of the pyshape validation engine.

This package contains the immutable `Validator` every check is built on, the
schema compiler, the error aggregator, the two invocation modes, and the
configuration manager used by the command line.
"""
