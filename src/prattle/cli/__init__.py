"""CLI package.

The ``cli`` sub-package contains the Click application, including the
line-oriented REPL.  It imports library code lazily inside commands so
``prattle --help`` stays fast.
"""
from __future__ import annotations
