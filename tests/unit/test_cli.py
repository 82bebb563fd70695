"""Unit tests for the command line interface."""

from unittest.mock import patch

import httpx
import pytest

from fdy_fetch_client import FetchClient
from fdy_fetch_client.cli import build_parser, format_data, main, parse_headers
from tests.helpers.engine_mocks import create_mock_engine, json_response, make_engine_response

pytestmark = pytest.mark.unit


def run_cli(argv, engine):
    """Run main() against ``engine`` and return the exit code."""
    def factory(config):
        return FetchClient(config, engine=engine)

    with patch("fdy_fetch_client.cli.create_client", side_effect=factory):
        with pytest.raises(SystemExit) as exc_info:
            main(argv)
    return exc_info.value.code


class TestHelpers:
    """Test argument helpers."""

    def test_parse_headers(self):
        assert parse_headers(["Accept: application/json", "X-Token:abc:def"]) == {
            "Accept": "application/json",
            "X-Token": "abc:def",
        }

    def test_parse_headers_empty(self):
        assert parse_headers(None) == {}

    def test_parse_headers_invalid(self):
        with pytest.raises(ValueError):
            parse_headers(["no-colon"])

    def test_format_data(self):
        assert format_data("text") == "text"
        assert format_data({"a": 1}) == '{\n  "a": 1\n}'

    def test_body_only_for_post_and_put(self):
        parser = build_parser()
        assert parser.parse_args(["post", "/x", "-d", "{}"]).data == "{}"
        with pytest.raises(SystemExit):
            parser.parse_args(["get", "/x", "-d", "{}"])


class TestMain:
    """Test end-to-end CLI runs with a mock engine."""

    def test_get_prints_json(self, capsys):
        engine = create_mock_engine(json_response({"id": 1}))

        code = run_cli(["get", "/users/1", "--base-url", "https://api.example.com",
                        "-H", "Accept: application/json", "--timeout", "5"], engine)

        assert code == 0
        options = engine.send.call_args.kwargs
        assert options["url"] == "https://api.example.com/users/1"
        assert options["headers"] == {"Accept": "application/json"}
        assert options["timeout"] == 5.0
        out = capsys.readouterr().out
        assert "Status: 200" in out
        assert '"id": 1' in out

    def test_post_sends_body(self, capsys):
        engine = create_mock_engine(make_engine_response(status_code=201, body="created"))

        code = run_cli(["post", "https://api.example.com/items", "-d", '{"a": 1}'], engine)

        assert code == 0
        assert engine.send.call_args.kwargs["body"] == '{"a": 1}'
        assert "created" in capsys.readouterr().out

    def test_http_error_exit_code(self, capsys):
        engine = create_mock_engine(make_engine_response(status_code=404, body='{"err": 1}'))

        code = run_cli(["delete", "https://api.example.com/items/1"], engine)

        assert code == 1
        captured = capsys.readouterr()
        assert "Request failed with status code: 404" in captured.err
        assert '"err": 1' in captured.out

    def test_transport_error_exit_code(self, capsys):
        engine = create_mock_engine(side_effect=httpx.ConnectError("refused"))

        code = run_cli(["get", "https://down.example.com"], engine)

        assert code == 2
        assert "Transport error: refused" in capsys.readouterr().err

    def test_invalid_header_exit_code(self, capsys):
        code = run_cli(["get", "https://x", "-H", "broken"], create_mock_engine())
        assert code == 2
        assert "Invalid header" in capsys.readouterr().err

    def test_no_command_prints_help(self, capsys):
        main([])
        assert "usage" in capsys.readouterr().out.lower()
