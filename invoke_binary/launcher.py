"""Select the companion binary for this host and run it.

The binary lives next to this module, named after the platform and the
pinned version (see ``platforms.ARTIFACTS``). Its exit status becomes ours.
"""
import logging
import subprocess
import sys
from pathlib import Path

from core.config import config
from core.logger import setup_logging
from .errors import LauncherError, SpawnFailure
from .platforms import artifact_name, current_platform

BASE_DIR = Path(__file__).resolve().parent

logger = logging.getLogger(__name__)


def binary_path(name, base_dir=None):
    """Full path of a sibling executable, independent of the working directory."""
    return Path(base_dir or BASE_DIR) / name


def invoke(path, args=()):
    """Run ``path`` with inherited stdio and return its exit status.

    A child killed by a signal has no exit status of its own and maps to 1.
    Ctrl-C reaches the child through the shared terminal; the launcher keeps
    waiting for it instead of abandoning it.
    """
    cmd = [str(path), *args]
    logger.debug(f"Starting {cmd[0]} with {len(cmd) - 1} argument(s)")
    try:
        proc = subprocess.Popen(cmd)
    except OSError as e:
        raise SpawnFailure(path, e) from e

    while True:
        try:
            status = proc.wait()
            break
        except KeyboardInterrupt:
            logger.debug(f"Interrupted, still waiting for {path}")

    if status < 0:
        logger.debug(f"{path} terminated by signal {-status}")
        return 1
    return status


def run(argv=None, base_dir=None):
    """Resolve, launch and wait. Returns the status the process should exit with."""
    setup_logging()

    if argv is None:
        argv = sys.argv
    args = argv[1:] if config.get("launcher.forward_args", False) is True else []

    try:
        os_name, arch = current_platform()
        name = artifact_name(os_name, arch)
        return invoke(binary_path(name, base_dir), args)
    except LauncherError as e:
        logger.error(str(e))
        return 1


def main():
    sys.exit(run())


if __name__ == "__main__":
    main()
