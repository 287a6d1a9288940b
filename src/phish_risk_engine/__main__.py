"""CLI entrypoint for phish_risk_engine."""

from __future__ import annotations

from phish_risk_engine.cli import main

if __name__ == "__main__":
    main()
