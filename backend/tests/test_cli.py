"""
Tests for the command line entry point
"""
import httpx

from codemurf import cli
from codemurf.core import backend_client as backend_client_module


def test_parser_serve_options():
    args = cli.build_parser().parse_args(["serve", "--port", "8080", "--no-reload"])

    assert args.cmd == "serve"
    assert args.port == 8080
    assert args.reload is False
    assert args.host is None


def test_no_command_prints_help(capsys):
    assert cli.main([]) == 1
    assert "usage" in capsys.readouterr().out


def test_serve_runs_uvicorn(monkeypatch):
    calls = {}

    def fake_run(app, **kwargs):
        calls["app"] = app
        calls.update(kwargs)

    monkeypatch.setattr("uvicorn.run", fake_run)

    assert cli.main(["serve", "--host", "127.0.0.1", "--port", "9000", "--no-reload"]) == 0
    assert calls["app"] == "codemurf.main:app"
    assert calls["host"] == "127.0.0.1"
    assert calls["port"] == 9000
    assert calls["reload"] is False


def _patch_transport(monkeypatch, handler):
    original = backend_client_module.BackendClient.__init__

    def init(self, base_url=None, timeout=None, transport=None):
        original(self, base_url=base_url, timeout=timeout, transport=httpx.MockTransport(handler))

    monkeypatch.setattr(backend_client_module.BackendClient, "__init__", init)


def test_check_backend_healthy(monkeypatch, capsys):
    _patch_transport(monkeypatch, lambda request: httpx.Response(200, json={"status": "ok"}))

    assert cli.main(["check-backend", "--url", "http://backend.test"]) == 0
    assert "is healthy" in capsys.readouterr().out


def test_check_backend_unreachable(monkeypatch, capsys):
    def refuse(request):
        raise httpx.ConnectError("refused", request=request)

    _patch_transport(monkeypatch, refuse)

    assert cli.main(["check-backend", "--url", "http://backend.test"]) == 1
    assert "not healthy" in capsys.readouterr().out
