import httpx
from click.testing import CliRunner

from top10.viewer import cli

def patch_client(monkeypatch, handler):
    def fake_create_client(config):
        return httpx.AsyncClient(
            transport=httpx.MockTransport(handler),
            base_url=config.base_url
        )
    monkeypatch.setattr(cli, "create_client", fake_create_client)

def test_prints_rows(monkeypatch):
    patch_client(monkeypatch, lambda request: httpx.Response(
        200, json=[{"name": "Alice", "score": 100}]
    ))

    result = CliRunner().invoke(cli.main, ["--base-url", "http://example.test"])

    assert result.exit_code == 0
    assert "<tr><td>1</td><td>Alice</td><td>100</td></tr>" in result.output

def test_exits_nonzero_on_failure(monkeypatch):
    patch_client(monkeypatch, lambda request: httpx.Response(500, text="boom"))

    result = CliRunner().invoke(cli.main, [])

    assert result.exit_code == 1
