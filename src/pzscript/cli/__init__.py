"""CLI package.

The ``cli`` sub-package contains the Click application. It imports only
from the public API of the parent package.
"""
from __future__ import annotations
