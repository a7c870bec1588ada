"""
End-to-end tests for the `wiki` command with a faked Wikipedia.
"""

import httpx
import pytest
from typer.testing import CliRunner

import cli.main as cli_main
from adapters.http_client import build_client
from conftest import FakeWikipedia, search_payload
from core.domain.models import DISAMBIGUATION_MESSAGE

runner = CliRunner()


@pytest.fixture
def install_fake(monkeypatch):
    """Route the command's HTTP client through a `FakeWikipedia`."""

    def _install(fake: FakeWikipedia) -> FakeWikipedia:
        monkeypatch.setattr(
            cli_main,
            "build_client",
            lambda settings: build_client(settings, transport=httpx.MockTransport(fake)),
        )
        return fake

    return _install


def test_no_arguments_prints_usage_without_network(monkeypatch):
    def _fail(*args, **kwargs):
        raise AssertionError("no HTTP client should be built")

    monkeypatch.setattr(cli_main, "build_client", _fail)
    result = runner.invoke(cli_main.app, [])

    assert result.exit_code == 0
    assert result.stdout.strip() == "Usage: wiki <args>"


def test_prints_extract(install_fake):
    fake = install_fake(
        FakeWikipedia(
            search=search_payload("Cat", "Dog"),
            summary={"type": "standard", "extract": "A cat is a small carnivorous mammal."},
        )
    )
    result = runner.invoke(cli_main.app, ["cat"])

    assert result.exit_code == 0, result.output
    assert "A cat is a small carnivorous mammal." in result.stdout
    assert [r.url.path for r in fake.requests] == ["/w/api.php", "/api/rest_v1/page/summary/Cat"]


def test_words_are_joined_into_one_query(install_fake):
    fake = install_fake(
        FakeWikipedia(
            search=search_payload("Black hole"),
            summary={"type": "standard", "extract": "A region of spacetime."},
        )
    )
    result = runner.invoke(cli_main.app, ["black", "hole", "physics"])

    assert result.exit_code == 0, result.output
    assert fake.search_requests[0].url.params["srsearch"] == "black hole physics"
    assert fake.summary_requests[0].url.raw_path == b"/api/rest_v1/page/summary/Black_hole"


def test_disambiguation_notice(install_fake):
    install_fake(
        FakeWikipedia(
            search=search_payload("Mercury"),
            summary={"type": "disambiguation", "extract": "Mercury may refer to:"},
        )
    )
    result = runner.invoke(cli_main.app, ["mercury"])

    assert result.exit_code == 0
    assert DISAMBIGUATION_MESSAGE in result.stdout
    assert "may refer to" not in result.stdout


def test_missing_extract_prints_fallback(install_fake):
    install_fake(FakeWikipedia(search=search_payload("Stub"), summary={"type": "no-extract"}))
    result = runner.invoke(cli_main.app, ["stub"])

    assert result.exit_code == 0
    assert "No extract available." in result.stdout


def test_search_error_exits_non_zero_without_summary_call(install_fake):
    fake = install_fake(FakeWikipedia(search=search_payload("Cat"), search_status=503))
    result = runner.invoke(cli_main.app, ["cat"])

    assert result.exit_code == 1
    assert fake.summary_requests == []
    assert "HTTP 503" in result.output


def test_no_results_exits_non_zero(install_fake):
    fake = install_fake(FakeWikipedia(search={"query": {"search": []}}))
    result = runner.invoke(cli_main.app, ["qwzxv"])

    assert result.exit_code == 1
    assert "No results found" in result.output
    assert len(fake.requests) == 1


def test_summary_error_exits_non_zero(install_fake):
    install_fake(FakeWikipedia(search=search_payload("Cat"), summary_status=404))
    result = runner.invoke(cli_main.app, ["cat"])

    assert result.exit_code == 1
    assert "HTTP 404" in result.output


def test_malformed_summary_exits_non_zero(install_fake):
    install_fake(FakeWikipedia(search=search_payload("Cat"), summary="<html></html>"))
    result = runner.invoke(cli_main.app, ["cat"])

    assert result.exit_code == 1
    assert "Could not decode response" in result.output


def test_transport_error_exits_non_zero(install_fake):
    install_fake(FakeWikipedia(raise_on="search"))
    result = runner.invoke(cli_main.app, ["cat"])

    assert result.exit_code == 1
    assert "Transport error" in result.output


def test_custom_user_agent_from_env(install_fake, monkeypatch):
    monkeypatch.setenv("WIKI_CLI_USER_AGENT", "wiki-cli-tests/0.1")
    fake = install_fake(
        FakeWikipedia(search=search_payload("Cat"), summary={"type": "standard", "extract": "x"})
    )
    result = runner.invoke(cli_main.app, ["cat"])

    assert result.exit_code == 0
    assert {r.headers["User-Agent"] for r in fake.requests} == {"wiki-cli-tests/0.1"}


def test_version_flag():
    result = runner.invoke(cli_main.app, ["--version"])

    assert result.exit_code == 0
    assert result.stdout.startswith("wiki ")
