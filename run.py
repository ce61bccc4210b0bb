"""
Run script for the BMI Calculator Gradio application.
"""

import argparse
import socket
import subprocess
import sys
from typing import List

from dotenv import load_dotenv


def is_port_in_use(port: int) -> bool:
    """Check if a port is already in use."""
    with socket.socket(socket.AF_INET, socket.SOCK_STREAM) as s:
        return s.connect_ex(("localhost", port)) == 0


def build_command(reload: bool = True, args: List[str] = None) -> List[str]:
    """Build the command that starts the app, with hot-reloading by default."""
    if args is None:
        args = []

    if reload:
        cmd = ["gradio", "app/main.py"]
    else:
        cmd = [sys.executable, "-m", "app.main"]

    # Add any additional arguments
    cmd.extend(args)
    return cmd


def main(argv: List[str] = None) -> int:
    parser = argparse.ArgumentParser(description="Run the BMI Calculator")
    parser.add_argument(
        "--no-reload", action="store_true", help="Run without Gradio hot-reloading"
    )
    args, extra = parser.parse_known_args(argv)

    load_dotenv()

    # Imported after load_dotenv so a local .env can set the port
    from app.config import PORT

    if is_port_in_use(PORT):
        print(f"Port {PORT} is already in use. Stop the other process or set PORT.")
        return 1

    cmd = build_command(reload=not args.no_reload, args=extra)
    print(f"Starting BMI Calculator on port {PORT}...")
    return subprocess.run(cmd).returncode


if __name__ == "__main__":
    sys.exit(main())
