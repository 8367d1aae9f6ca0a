"""Publish the types-registry package without rollbacks or redundant releases."""

__version__ = "0.1.0"
