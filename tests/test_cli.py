"""Tests for the command-line client."""

import json

import pytest
from httpx import ASGITransport

from scripts.cli.url_shortener_cli import main


@pytest.fixture
def run_cli(app):
    async def run(*argv):
        return await main(
            ["--base-url", "http://testserver", *argv],
            transport=ASGITransport(app=app),
        )
    return run


class TestCLI:
    
    async def test_shorten(self, run_cli, capsys):
        exit_code = await run_cli("shorten", "https://example.com/long", "--validity", "5", "--shortcode", "cli1")
        
        assert exit_code == 0
        output = json.loads(capsys.readouterr().out)
        assert output["success"] is True
        assert output["shortCode"] == "cli1"
        assert output["shortLink"] == "http://testserver/cli1"
    
    async def test_shorten_fractional_validity(self, run_cli, capsys):
        exit_code = await run_cli("shorten", "https://example.com/long", "--validity", "0.5")
        
        assert exit_code == 0
        assert json.loads(capsys.readouterr().out)["success"] is True
    
    async def test_shorten_invalid_url(self, run_cli, capsys):
        exit_code = await run_cli("shorten", "not-a-url")
        
        assert exit_code == 1
        output = json.loads(capsys.readouterr().err)
        assert output["success"] is False
        assert output["status"] == 400
    
    async def test_resolve_and_stats(self, run_cli, capsys):
        await run_cli("shorten", "https://example.com/target", "--shortcode", "cli2")
        capsys.readouterr()
        
        assert await run_cli("resolve", "cli2") == 0
        resolved = json.loads(capsys.readouterr().out)
        assert resolved["original_url"] == "https://example.com/target"
        
        assert await run_cli("stats", "cli2") == 0
        stats = json.loads(capsys.readouterr().out)
        assert stats["clickCount"] == 1
    
    async def test_resolve_missing(self, run_cli, capsys):
        assert await run_cli("resolve", "missing") == 1
        output = json.loads(capsys.readouterr().err)
        assert output["status"] == 404
    
    async def test_health(self, run_cli, capsys):
        assert await run_cli("health") == 0
        output = json.loads(capsys.readouterr().out)
        assert output["health"]["status"] == "healthy"
    
    async def test_no_command(self, capsys):
        assert await main([]) == 1
