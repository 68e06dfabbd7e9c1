"""This module provides the entry point for running the visualizer."""

import argparse
import os
import signal
import socket
import subprocess
import sys
from pathlib import Path
from typing import Any

from app import create_app
from src.visualizer.config import load_config_file
from src.visualizer.logger import setup_logging

CONFIG_PATH = Path(__file__).parent / "config.txt"


def get_local_ip() -> Any:
    """Return the local IP address of the machine.

    Returns:
        str: The local IP address as a string.

    """
    with socket.socket(socket.AF_INET, socket.SOCK_DGRAM) as s:
        s.connect(("8.8.8.8", 80))
        return s.getsockname()[0]


def resolve_host(ip_option: str, configured_host: str) -> str:
    """Pick the interface to bind to.

    Args:
        ip_option (str): "public", "local" or "config".
        configured_host (str): The host from the configuration file.

    Returns:
        str: The address passed to Flask.

    """
    if ip_option == "public":
        return "0.0.0.0"
    if ip_option == "local":
        return get_local_ip()
    return configured_host


def parse_args(argv: Any = None) -> argparse.Namespace:
    """Parse the command line arguments."""
    parser = argparse.ArgumentParser(description="Run the trie visualizer.")
    parser.add_argument(
        "--ip",
        choices=["config", "local", "public"],
        default="config",
        help="Bind to the configured host, the local IP, or every interface",
    )
    parser.add_argument(
        "--mode",
        default="normal",
        choices=["normal", "daemon"],
        help="Run mode: 'normal' or 'daemon' (default: normal)",
    )
    parser.add_argument(
        "--config_path",
        type=str,
        default=str(CONFIG_PATH),
        help="Optional path to the config file.",
        required=False,
    )
    return parser.parse_args(argv)


def handle_sigterm(signum: int, frame: Any) -> None:
    """Handle SIGTERM or SIGINT signals to perform a
    graceful shutdown of the application.

    Args:
        signum (int): The signal number received.
        frame (FrameType): The current stack frame (unused).

    Exits:
        Exits the process with status code 0.

    """
    print("[SERVER] Shutdown signal received.")
    sys.exit(0)


def main(argv: Any = None) -> None:
    """Run the visualizer."""
    args = parse_args(argv)
    config_path = Path(args.config_path)

    if args.mode == "daemon":
        # Run the visualizer as a daemon using the current Python
        # executable and environment
        env = os.environ.copy()
        env["PYTHONPATH"] = str(Path(__file__).parent)
        subprocess.run(
            [
                sys.executable,
                "-m",
                "src.visualizer.daemon",
                "--ip",
                str(args.ip),
                "--config_path",
                str(config_path.resolve()),
            ],
            check=False,
            env=env,
            cwd=str(Path(__file__).parent),
        )
        return

    config = load_config_file(config_path)
    setup_logging(level=config.log_level)
    print(config)

    signal.signal(signal.SIGTERM, handle_sigterm)

    app = create_app(config)
    app.run(
        host=resolve_host(args.ip, config.host),
        port=config.port,
        debug=config.debug,
    )


if __name__ == "__main__":
    main()
