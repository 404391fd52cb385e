#!/usr/bin/env python3
"""
Start the options prediction dashboard under Streamlit.

Runs from the project root so config/strikepath.yaml is found, with src/
on PYTHONPATH so the strikepath package imports without installation.

Usage:
    python scripts/run_dashboard.py
    python scripts/run_dashboard.py --port 8600 --log-level DEBUG
"""

import argparse
import os
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
APP_PATH = PROJECT_ROOT / "src" / "strikepath" / "dashboard" / "app.py"


def build_command(port: int, headless: bool) -> list[str]:
    """streamlit invocation via the current interpreter."""
    cmd = [sys.executable, "-m", "streamlit", "run", str(APP_PATH), "--server.port", str(port)]
    if headless:
        cmd += ["--server.headless", "true"]
    return cmd


def main() -> int:
    parser = argparse.ArgumentParser(description="Start the strikepath dashboard")
    parser.add_argument("--port", type=int, default=8501, help="Streamlit port (default: 8501)")
    parser.add_argument("--headless", action="store_true", help="Do not open a browser")
    parser.add_argument("--log-level", default=None, help="Overrides STRIKEPATH_LOG_LEVEL for the app")
    args = parser.parse_args()

    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(PROJECT_ROOT / "src"), env.get("PYTHONPATH")]))
    if args.log_level:
        env["STRIKEPATH_LOG_LEVEL"] = args.log_level.upper()

    print(f"strikepath dashboard -> http://localhost:{args.port} (Ctrl+C to stop)")
    try:
        return subprocess.run(build_command(args.port, args.headless), cwd=PROJECT_ROOT, env=env).returncode
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())
