"""Host platform detection and the artifact name table."""
import sys
import platform

from .errors import UnsupportedPlatform

VERSION = "fe69787a187edfbcf28dd6d030fbe61f7a3f32c0"

ARTIFACTS = {
    ('linux', 'amd64'): f"main-linux-amd64-{VERSION}",
    ('linux', 'arm64'): f"main-linux-arm64-{VERSION}",
    ('windows', 'amd64'): f"main-windows-amd64-{VERSION}",
    ('windows', 'arm64'): f"main-windows-arm64-{VERSION}",
}


def normalize_os(system):
    system = system.lower()
    if system.startswith('linux'):
        return 'linux'
    if system in ['win32', 'cygwin', 'windows']:
        return 'windows'
    return system


def normalize_arch(machine):
    machine = machine.lower()
    if machine in ['x86_64', 'amd64', 'x64']:
        return 'amd64'
    if machine in ['aarch64', 'arm64', 'armv8']:
        return 'arm64'
    return machine


def current_platform():
    """Return the normalised (os, arch) pair of the running host."""
    return normalize_os(sys.platform), normalize_arch(platform.machine())


def artifact_name(os_name, arch):
    """Return the companion binary file name for a platform pair.

    Raises UnsupportedPlatform for any pair outside the table; there is
    no default binary.
    """
    key = (os_name, arch)
    if key not in ARTIFACTS:
        raise UnsupportedPlatform(os_name, arch)
    return ARTIFACTS[key]
