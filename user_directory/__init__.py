"""
Top-level package for the User Directory application.

All functionality lives in the ``app`` subpackage; this module only
marks the directory as a package so ``user_directory.app.main`` can be
imported from the project root and from the tests.
"""

__all__ = []
