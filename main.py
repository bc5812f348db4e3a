#!/usr/bin/env python3
"""
Media Log: launch the web GUI, or print a report.

Usage:
    python main.py                          # http://localhost:8000
    python main.py --port 9000              # http://localhost:9000
    python main.py --host 0.0.0.0           # listen on all interfaces
    python main.py --data /path/to/data.json
    python main.py --data https://example.org/data.json
    python main.py --reload                 # auto-reload on code changes
    python main.py --report 2024            # yearly report to stdout
    python main.py --report 2024 --month 3  # monthly report to stdout
"""

from __future__ import annotations

import argparse
import os
import sys
import webbrowser
from pathlib import Path


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Launch the Media Log web interface.",
    )
    parser.add_argument(
        "--host", default=os.getenv("APP_HOST", "127.0.0.1"),
        help="Bind address (default: 127.0.0.1 or APP_HOST env var)",
    )
    parser.add_argument(
        "--port", type=int, default=int(os.getenv("APP_PORT", "8000")),
        help="Port to listen on (default: 8000 or APP_PORT env var)",
    )
    parser.add_argument(
        "--data", default=None,
        help="Path or URL of the JSON data file (default: data.json or APP_DATA_PATH env var)",
    )
    parser.add_argument(
        "--reload", action="store_true",
        help="Enable auto-reload on file changes (development mode)",
    )
    parser.add_argument(
        "--no-browser", action="store_true",
        help="Don't open a browser window automatically",
    )
    parser.add_argument(
        "--report", type=int, default=None, metavar="YEAR",
        help="Print the report for YEAR as plain text and exit",
    )
    parser.add_argument(
        "--month", default="all",
        help="Narrow --report to one month, 1-12 (default: all)",
    )
    return parser


def print_report(data_source: str, year: int, month: str) -> int:
    """Print a text report; returns the process exit code."""
    from medialog.loader import load_snapshot
    from medialog.report import ReportWindow, compute_report
    from medialog.text_report import render_report
    from utils.config import AppConfig

    try:
        window = ReportWindow.parse(year, month)
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 2

    snapshot = load_snapshot(data_source, AppConfig.from_env().fetch_timeout)
    if not snapshot.available:
        print(snapshot.message, file=sys.stderr)
        print(f"  {snapshot.error}", file=sys.stderr)
        return 1

    print(render_report(compute_report(snapshot.records, window)))
    return 0


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    # Set data source env var if provided via CLI
    if args.data is not None:
        os.environ["APP_DATA_PATH"] = str(args.data)
    os.environ["APP_HOST"] = args.host
    os.environ["APP_PORT"] = str(args.port)

    data_source = os.getenv("APP_DATA_PATH", "data.json")

    if args.report is not None:
        sys.exit(print_report(data_source, args.report, args.month))

    if not data_source.startswith(("http://", "https://")) and not Path(data_source).exists():
        print(f"Warning: Data file not found at {data_source}")
        print("  Pass --data /path/to/data.json or set APP_DATA_PATH.")
        print("  The pages will show a load-failure message until it exists.")
        print()

    try:
        import uvicorn
    except ImportError:
        print("Error: uvicorn is not installed.")
        print("  pip install uvicorn[standard]")
        sys.exit(1)

    url = f"http://{'localhost' if args.host == '0.0.0.0' else args.host}:{args.port}"
    print(f"Starting Media Log at {url}")
    print(f"Data: {data_source}")
    print()

    if not args.no_browser:
        # Open browser after a short delay to let the server start
        import threading
        threading.Timer(1.5, webbrowser.open, args=(url,)).start()

    uvicorn.run(
        "api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level="info",
    )


if __name__ == "__main__":
    main()
