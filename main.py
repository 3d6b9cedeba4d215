"""
Main entrypoint: scan contract files from the command line, or serve the API.

    python main.py scan Token.sol Vault.sol
    cat Token.sol | python main.py scan -
    python main.py scan --fail-on HIGH contracts/*.sol
    python main.py serve

scan prints one JSON verdict per line (path-prefixed when more than one file
is given). Exit code 1 when --fail-on is reached or a verdict fails to encode,
2 when a file cannot be read or exceeds MAX_SOURCE_CHARS.

Env: API_HOST, API_PORT, LOG_LEVEL, LOG_FORMAT, MAX_SOURCE_CHARS.
"""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

# Configure structured logging before other imports that may log
from contract_guard.guard_logging import get_logger

logger = get_logger("main")

_LEVEL_RANK = {"LOW": 0, "MEDIUM": 1, "HIGH": 2}


def _read_source(path: str) -> str:
    if path == "-":
        buffer = getattr(sys.stdin, "buffer", None)
        if buffer is None:
            return sys.stdin.read()
        return buffer.read().decode("utf-8", errors="replace")
    return Path(path).read_text(encoding="utf-8", errors="replace")


def cmd_scan(args: argparse.Namespace) -> int:
    from contract_guard.analytics import analyze
    from contract_guard.analytics.encoder import is_encoding_failure
    from contract_guard.config import get_settings

    max_chars = get_settings().max_source_chars
    threshold = _LEVEL_RANK[args.fail_on] if args.fail_on else None
    exit_code = 0
    for path in args.paths:
        try:
            source = _read_source(path)
        except OSError as e:
            logger.error("scan_read_failed", path=path, error=str(e))
            print(f"{path}: cannot read ({e.strerror or e})", file=sys.stderr)
            exit_code = max(exit_code, 2)
            continue
        if max_chars > 0 and len(source) > max_chars:
            logger.error("scan_source_too_large", path=path, source_chars=len(source), limit=max_chars)
            print(f"{path}: source exceeds {max_chars} characters", file=sys.stderr)
            exit_code = max(exit_code, 2)
            continue

        encoded = analyze(source)
        print(f"{path}: {encoded}" if len(args.paths) > 1 else encoded)
        if is_encoding_failure(encoded):
            exit_code = max(exit_code, 1)
            continue

        level = json.loads(encoded)["risk_level"]
        logger.info("scan_file_done", path=path, risk_level=level)
        if threshold is not None and _LEVEL_RANK[level] >= threshold:
            exit_code = max(exit_code, 1)
    return exit_code


def cmd_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from contract_guard.config import get_settings

    settings = get_settings()
    host = args.host or settings.api_host
    port = args.port or settings.api_port
    logger.info("main_server_starting", host=host, port=port)
    uvicorn.run(
        "contract_guard.api_server.app:app",
        host=host,
        port=port,
        log_level=settings.log_level.lower(),
    )
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Contract Guard: lexical scam-pattern scanner")
    sub = parser.add_subparsers(dest="command", required=True)

    scan = sub.add_parser("scan", help="Scan contract source files ('-' reads stdin)")
    scan.add_argument("paths", nargs="+", help="Contract source files")
    scan.add_argument(
        "--fail-on",
        choices=sorted(_LEVEL_RANK, key=_LEVEL_RANK.get),
        default=None,
        help="Exit 1 if any file reaches this risk level",
    )
    scan.set_defaults(func=cmd_scan)

    serve = sub.add_parser("serve", help="Run the HTTP API with uvicorn")
    serve.add_argument("--host", default=None, help="Bind host (default: API_HOST)")
    serve.add_argument("--port", type=int, default=None, help="Bind port (default: API_PORT)")
    serve.set_defaults(func=cmd_serve)
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
