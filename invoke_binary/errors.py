"""Errors raised while selecting or starting the companion binary."""


class LauncherError(Exception):
    """Base class for launcher failures that map to exit status 1."""


class UnsupportedPlatform(LauncherError):
    def __init__(self, os_name, arch):
        self.os_name = os_name
        self.arch = arch
        super().__init__(f"Unsupported platform ({os_name}) and architecture ({arch})")


class SpawnFailure(LauncherError):
    def __init__(self, path, reason):
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to start {path}: {reason}")
