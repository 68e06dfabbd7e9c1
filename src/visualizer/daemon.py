"""Run the visualizer in the background as a Linux daemon."""

import argparse
import atexit
import sys
from pathlib import Path

import daemon
from daemon.pidfile import PIDLockFile

from app import create_app
from run_server import resolve_host

from .config import load_config_file
from .logger import setup_logging, teardown_logging

# Path to the PID file for the daemon process
PID_FILE = "/tmp/trie_visualizer.pid"
# Paths to log files for stdout and stderr
STDOUT_LOG = "/tmp/trie_visualizer_stdout.log"
STDERR_LOG = "/tmp/trie_visualizer_stderr.log"
# Working directory for the daemon process
WORKDIR = Path("/tmp/")
# File creation mask for the daemon process
UMASK = 0o027
# The configuration settings file of the visualizer
CONFIG_PATH = Path(__file__).parent.parent.parent / "config.txt"


def cleanup() -> None:
    """Cleanup function to be called on exit."""
    try:
        teardown_logging()
    except Exception as e:
        print(f"Error during cleanup: {e}", file=sys.stderr)


def main() -> None:
    """Parse the arguments and serve the app inside the daemon."""
    parser = argparse.ArgumentParser(description="Run the trie visualizer.")
    parser.add_argument(
        "--ip",
        choices=["config", "local", "public"],
        default="config",
        help="Bind to the configured host, the local IP, or every interface",
    )
    parser.add_argument(
        "--config_path",
        type=str,
        default=str(CONFIG_PATH),
        help="Optional path to the config file.",
        required=False,
    )
    args = parser.parse_args()

    # The config is read before detaching so errors reach the terminal
    config = load_config_file(Path(args.config_path))

    host = resolve_host(args.ip, config.host)

    atexit.register(cleanup)

    # Ensure log files exist (create if not)
    open(STDOUT_LOG, "a").close()
    open(STDERR_LOG, "a").close()

    with daemon.DaemonContext(
        working_directory=str(WORKDIR),
        umask=UMASK,
        pidfile=PIDLockFile(PID_FILE),
        stdout=open(STDOUT_LOG, "a"),
        stderr=open(STDERR_LOG, "a"),
        detach_process=True,
    ):
        setup_logging(level=config.log_level)
        app = create_app(config)
        # The reloader would fork a second, undetached process
        app.run(host=host, port=config.port, debug=False, use_reloader=False)


if __name__ == "__main__":
    main()
