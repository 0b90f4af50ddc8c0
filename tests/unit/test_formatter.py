"""Tests for output formatting."""

from __future__ import annotations

import json
from io import StringIO
from unittest.mock import patch

import pytest
from rich.console import Console

from vimeo_client.models.metadata import Language
from vimeo_client.output.formatter import output, output_csv, to_plain


@pytest.fixture
def buf():
    out = StringIO()
    console = Console(file=out, force_terminal=False, width=200)
    with patch("vimeo_client.output.formatter.console", console):
        yield out


class TestToPlain:
    def test_model_drops_none(self):
        assert to_plain(Language(code="en")) == {"code": "en"}

    def test_list_of_models(self):
        assert to_plain([Language(code="en", name="English")]) == [{"code": "en", "name": "English"}]


class TestOutput:
    def test_json(self, buf):
        output([Language(code="en", name="English")], "json")
        assert json.loads(buf.getvalue()) == [{"code": "en", "name": "English"}]

    def test_yaml(self, buf):
        output({"code": "en"}, "yaml")
        assert "code: en" in buf.getvalue()

    def test_csv(self, buf):
        output_csv(["Code", "Name"], [["en", "English"], ["fr", None]])
        out = buf.getvalue()
        assert "Code,Name" in out
        assert "fr," in out

    def test_csv_without_rows_falls_back_to_json(self, buf):
        output({"a": 1}, "csv")
        assert json.loads(buf.getvalue()) == {"a": 1}

    def test_table_rows(self, buf):
        output([], "table", columns=["Code", "Name"], rows=[["en", "English"]], title="Languages")
        assert "English" in buf.getvalue()

    def test_model_as_kv_table(self, buf):
        output(Language(code="en", name="English"), "table")
        out = buf.getvalue()
        assert "code" in out
        assert "English" in out

    def test_unknown_format(self):
        with pytest.raises(ValueError, match="Unknown output format"):
            output({}, "xml")
