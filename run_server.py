#!/usr/bin/env python3
"""Launch the Task Manager API under uvicorn.

    python run_server.py                 # 127.0.0.1:5161 with hot-reload
    python run_server.py --no-reload --host 0.0.0.0
"""

import argparse
import logging
import os
import subprocess
import sys

logger = logging.getLogger("run_server")

APP_PATH = "taskmanager.main:app"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Start the Task Manager API")
    parser.add_argument("--host", default=os.getenv("HOST", "127.0.0.1"))
    parser.add_argument("--port", type=int, default=int(os.getenv("PORT", "5161")))
    parser.add_argument("--no-reload", action="store_true", help="Disable hot-reload")
    parser.add_argument(
        "--log-level",
        default=os.getenv("LOG_LEVEL", "info").lower(),
        choices=["critical", "error", "warning", "info", "debug", "trace"],
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=None,
        help="Worker processes; implies --no-reload",
    )
    return parser


def build_command(args: argparse.Namespace) -> list[str]:
    """Build the uvicorn command line for the parsed arguments."""
    cmd = [
        sys.executable, "-m", "uvicorn", APP_PATH,
        "--host", args.host,
        "--port", str(args.port),
        "--log-level", args.log_level,
    ]
    if args.workers is not None:
        cmd.extend(["--workers", str(args.workers)])
    elif not args.no_reload:
        cmd.append("--reload")
    return cmd


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level.upper() if args.log_level != "trace" else "DEBUG")

    # Tasks are held in process memory; every worker owns a separate list.
    if args.workers is not None and args.workers > 1:
        logger.warning("%d workers will each keep their own task list", args.workers)

    cmd = build_command(args)
    logger.info("Serving %s on http://%s:%d", APP_PATH, args.host, args.port)
    try:
        return subprocess.run(cmd).returncode
    except KeyboardInterrupt:
        return 0


if __name__ == "__main__":
    sys.exit(main())
