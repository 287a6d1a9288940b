"""Command-line runner for one-shot analysis and the HTTP server."""

from __future__ import annotations

import argparse
import json
from pathlib import Path
import sys

from phish_risk_engine.config.settings import AppConfig, load_config
from phish_risk_engine.core.errors import ConfigError, InputValidationError
from phish_risk_engine.core.logging import configure_logging
from phish_risk_engine.core.requests import validate_request
from phish_risk_engine.engine import analyze_input


def run_once(payload: dict[str, object], *, config: AppConfig | None = None) -> str:
    cfg = config or load_config()[0]
    item = validate_request(payload, max_chars=cfg.max_input_chars)
    result = analyze_input(item)
    return json.dumps(result.to_payload(), ensure_ascii=True)


def serve(cfg: AppConfig, *, host: str | None = None, port: int | None = None) -> None:
    import uvicorn

    from phish_risk_engine.api.app import create_app

    uvicorn.run(create_app(cfg), host=host or cfg.host, port=port or cfg.port, log_config=None)


def _read_email_file(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    return Path(path).read_text(encoding="utf-8")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="phish-risk-engine")
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--url", help="Analyze a single URL.")
    source.add_argument("--email", help="Analyze an email body passed inline.")
    source.add_argument("--email-file", help="Analyze an email body read from a file, or '-' for stdin.")
    source.add_argument("--serve", action="store_true", help="Start the HTTP API.")
    parser.add_argument("--config", help="Path to a YAML config file.")
    parser.add_argument("--log-level", help="Override the configured log level, e.g. DEBUG.")
    parser.add_argument("--host", help="Bind address for --serve.")
    parser.add_argument("--port", type=int, help="Port for --serve.")
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        cfg, _ = load_config(args.config)
    except ConfigError as exc:
        parser.error(str(exc))
    configure_logging(args.log_level or cfg.log_level, cfg.log_format)

    if args.serve:
        serve(cfg, host=args.host, port=args.port)
        return

    payload: dict[str, object] = {}
    if args.url is not None:
        payload["url"] = args.url
    elif args.email is not None:
        payload["email"] = args.email
    elif args.email_file is not None:
        try:
            payload["email"] = _read_email_file(args.email_file)
        except OSError as exc:
            parser.error(f"cannot read {args.email_file}: {exc}")
    try:
        print(run_once(payload, config=cfg))
    except InputValidationError as exc:
        parser.error(exc.message)
