from __future__ import annotations

import sys
from pathlib import Path

import pytest

from scripts import resource_url


def _run(monkeypatch, capsys, *argv: str):
    monkeypatch.setattr(sys, "argv", ["resource_url.py", *argv])
    with pytest.raises(SystemExit) as excinfo:
        resource_url.main()
    return excinfo.value.code, capsys.readouterr().out


def test_resolve_falls_back_to_current_context(monkeypatch, capsys) -> None:
    code, out = _run(monkeypatch, capsys, "resolve", "--value", "test/resource", "--current-context", "/TestContext")

    assert code == 0
    assert out.strip().splitlines()[-1] == "/TestContext/test/resource"


def test_resolve_uses_deployed_default_webapp(monkeypatch, capsys) -> None:
    code, out = _run(
        monkeypatch,
        capsys,
        "resolve",
        "--value",
        "/test/resource",
        "--deployed",
        "/ResourceServingWebapp",
    )

    assert code == 0
    assert out.strip().splitlines()[-1] == "/ResourceServingWebapp/test/resource"


def test_resolve_with_override_and_var(monkeypatch, capsys) -> None:
    code, out = _run(
        monkeypatch,
        capsys,
        "resolve",
        "--value",
        "/test/resource",
        "--override",
        "OverrideResourceWebapp",
        "--deployed",
        "/OverrideResourceWebapp",
        "--var",
        "cssUrl",
    )

    assert code == 0
    assert out.strip().splitlines()[-1] == "cssUrl=/OverrideResourceWebapp/test/resource"


def test_resolve_from_config(monkeypatch, capsys, tmp_path: Path) -> None:
    config_path = tmp_path / "container.json"
    config_path.write_text(
        '{"contexts": [{"path": "/site"}, {"path": "/ResourceServingWebapp"}]}', encoding="utf-8"
    )

    code, out = _run(
        monkeypatch, capsys, "resolve", "--value", "a.js", "--config", str(config_path), "--context", "/site"
    )

    assert code == 0
    assert out.strip().splitlines()[-1] == "/ResourceServingWebapp/a.js"


def test_resolve_unknown_context_in_config_fails(monkeypatch, capsys, tmp_path: Path) -> None:
    config_path = tmp_path / "container.json"
    config_path.write_text('{"contexts": []}', encoding="utf-8")

    code, out = _run(monkeypatch, capsys, "resolve", "--value", "a.js", "--config", str(config_path))

    assert code == 1
    assert "ERROR: Context not found" in out


def test_resolve_invalid_scope_fails(monkeypatch, capsys) -> None:
    code, out = _run(monkeypatch, capsys, "resolve", "--value", "a.js", "--var", "v", "--scope", "galaxy")

    assert code == 1
    assert "ERROR: Unknown scope: galaxy" in out


def test_remote_posts_to_api(monkeypatch, capsys) -> None:
    # Arrange
    captured = {}

    class DummyResponse:
        status_code = 200

        def json(self):
            return {"url": "/ResourceServingWebapp/a.js", "output": "/ResourceServingWebapp/a.js"}

    def fake_post(url, json, timeout):
        captured["url"] = url
        captured["json"] = json
        captured["timeout"] = timeout
        return DummyResponse()

    monkeypatch.setattr(resource_url.requests, "post", fake_post)

    # Act
    code, out = _run(
        monkeypatch,
        capsys,
        "remote",
        "--value",
        "a.js",
        "--context",
        "/portal/",
        "--api-base-url",
        "http://localhost:8000/",
    )

    # Assert
    assert code == 0
    assert captured["url"] == "http://localhost:8000/contexts/portal/resource-include"
    assert captured["json"] == {"value": "a.js"}
    assert captured["timeout"] == resource_url.DEFAULT_API_TIMEOUT_SEC
    assert "Status: 200" in out


def test_no_command_prints_help(monkeypatch, capsys) -> None:
    code, _out = _run(monkeypatch, capsys)

    assert code == 1
