"""CLI package.

The ``cli`` sub-package contains the Click application used to inspect
option resolution from a shell.  It imports only the exported names of
the ``parsers``, ``resolver`` and ``schema`` sub-packages.
"""
from __future__ import annotations
