# topmark:header:start
#
#   project      : RecordJSON
#   file         : test_select_cmd.py
#   file_relpath : tests/cli/test_select_cmd.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests for `recordjson select`."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from recordjson.cli.exit_codes import ExitCode
from tests.cli.conftest import assert_exit, assert_SUCCESS, run_cli_in
from tests.conftest import mark_cli

if TYPE_CHECKING:
    from pathlib import Path

BOOK = {
    "id": 1,
    "title": "Dune",
    "author": {"id": 7, "name": "Herbert", "publisher": {"id": 3, "name": "Chilton"}},
    "tags": [{"id": 10, "label": "scifi"}, {"id": 11, "label": "classic"}],
}


def _write_book(tmp_path: Path) -> None:
    (tmp_path / "book.json").write_text(json.dumps(BOOK), encoding="utf-8")


@mark_cli
def test_select_defaults_to_fields_only(tmp_path: Path) -> None:
    _write_book(tmp_path)

    result = run_cli_in(tmp_path, ["select", "book.json"])

    assert_SUCCESS(result)
    assert result.output == '{"id":1,"title":"Dune"}\n'


@mark_cli
def test_select_fields_and_deep_include(tmp_path: Path) -> None:
    _write_book(tmp_path)

    result = run_cli_in(
        tmp_path,
        ["select", "book.json", "-f", "title", "-i", "author", "-i", "author/publisher"],
    )

    assert_SUCCESS(result)
    assert json.loads(result.output) == {
        "title": "Dune",
        "author": {"id": 7, "name": "Herbert", "publisher": {"id": 3, "name": "Chilton"}},
    }


@mark_cli
def test_select_relation_as_field(tmp_path: Path) -> None:
    _write_book(tmp_path)

    result = run_cli_in(tmp_path, ["select", "book.json", "-f", "id", "-f", "tags"])

    assert_SUCCESS(result)
    assert json.loads(result.output) == {
        "id": 1,
        "tags": [{"id": 10, "label": "scifi"}, {"id": 11, "label": "classic"}],
    }


@mark_cli
def test_select_array_of_records_from_stdin(tmp_path: Path) -> None:
    result = run_cli_in(
        tmp_path,
        ["select", "-", "-f", "name"],
        input_text='[{"name": "a", "x": 1}, {"name": "b", "x": 2}]',
    )

    assert_SUCCESS(result)
    assert result.output == '[{"name":"a"},{"name":"b"}]\n'


@mark_cli
def test_select_pretty(tmp_path: Path) -> None:
    _write_book(tmp_path)

    result = run_cli_in(tmp_path, ["select", "book.json", "-f", "id", "--pretty"])

    assert_SUCCESS(result)
    assert result.output == '{\n  "id": 1\n}\n'


@mark_cli
def test_select_uses_config_defaults(tmp_path: Path) -> None:
    _write_book(tmp_path)
    (tmp_path / "recordjson.toml").write_text(
        '[serializer]\nfields = ["title"]\ninclude = ["author"]\npretty_print = true\n',
        encoding="utf-8",
    )

    result = run_cli_in(tmp_path, ["select", "book.json", "--compact"])

    assert_SUCCESS(result)
    assert result.output == '{"title":"Dune","author":{"id":7,"name":"Herbert"}}\n'


@mark_cli
def test_select_explicit_config_file(tmp_path: Path) -> None:
    _write_book(tmp_path)
    (tmp_path / "alt.toml").write_text('[serializer]\nfields = ["id"]\n', encoding="utf-8")

    result = run_cli_in(tmp_path, ["--config", "alt.toml", "select", "book.json"])

    assert_SUCCESS(result)
    assert result.output == '{"id":1}\n'


@mark_cli
def test_select_rejects_scalar_document(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["select"], input_text="42")

    assert_exit(result, ExitCode.DATA_ERROR)
    assert "Expected a JSON object or an array of JSON objects" in result.output


@mark_cli
def test_select_rejects_malformed_json(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["select"], input_text="{nope}")

    assert_exit(result, ExitCode.DATA_ERROR)
