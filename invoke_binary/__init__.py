"""
Companion binary launcher.

Picks the pre-compiled executable matching this host's platform and
architecture from the package directory and runs it. Unsupported hosts
fail with exit status 1; there is no fallback binary.
"""
from __future__ import annotations

from .errors import LauncherError, SpawnFailure, UnsupportedPlatform
from .launcher import invoke, main, run
from .platforms import ARTIFACTS, VERSION, artifact_name, current_platform

__all__ = [
    "ARTIFACTS",
    "VERSION",
    "LauncherError",
    "SpawnFailure",
    "UnsupportedPlatform",
    "artifact_name",
    "current_platform",
    "invoke",
    "main",
    "run",
]
