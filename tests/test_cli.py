from __future__ import annotations

import io
import json

import pytest

from phish_risk_engine import cli
from phish_risk_engine.core.errors import InputValidationError


def test_run_once_url(run_cli_once):
    result = run_cli_once({"url": "https://secure-verify.tk"})
    assert result["risk_score"] == 4
    assert result["risk_level"] == "medium"
    assert result["type"] == "url"


def test_run_once_rejects_missing_input():
    with pytest.raises(InputValidationError):
        cli.run_once({})


def test_main_prints_json_for_url(capsys):
    cli.main(["--url", "https://example.com"])
    payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert payload["risk_score"] == 0
    assert payload["indicators"] == []


def test_main_reads_email_file(tmp_path, capsys):
    body = tmp_path / "mail.txt"
    body.write_text("URGENT: verify your account now or it will be suspended. Send your ssn.", encoding="utf-8")
    cli.main(["--email-file", str(body)])
    payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert payload["risk_score"] == 5
    assert payload["type"] == "email"


def test_main_reads_email_from_stdin(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("Claim your lottery prize"))
    cli.main(["--email-file", "-"])
    payload = json.loads(capsys.readouterr().out.strip().splitlines()[-1])
    assert payload["indicators"] == ["Financial references detected: prize, lottery"]


def test_main_without_input_exits_with_usage_error(capsys):
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code == 2
    assert "Either url or email is required" in capsys.readouterr().err


def test_main_rejects_conflicting_inputs():
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--url", "https://a.test", "--email", "hi"])
    assert excinfo.value.code == 2


def test_main_reports_bad_config(tmp_path, capsys):
    path = tmp_path / "bad.yaml"
    path.write_text("[unterminated", encoding="utf-8")
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["--config", str(path), "--url", "https://a.test"])
    assert excinfo.value.code == 2
    assert "invalid YAML" in capsys.readouterr().err


def test_main_serve_uses_configured_address(monkeypatch):
    calls: list[dict[str, object]] = []

    def _fake_serve(cfg, *, host=None, port=None):
        calls.append({"host": host, "port": port, "cfg_port": cfg.port})

    monkeypatch.setattr(cli, "serve", _fake_serve)
    cli.main(["--serve", "--port", "8123"])
    assert calls == [{"host": None, "port": 8123, "cfg_port": 5000}]
