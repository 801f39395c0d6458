"""Tests for output formatting."""

from __future__ import annotations

import json
from io import StringIO
from unittest.mock import patch

import pytest
import yaml
from rich.console import Console

from armkit.output.formatter import output, output_csv, to_plain
from armkit.output.tables import cell, flatten
from armkit.services.customerinsights.models import Hub, ProvisioningState


@pytest.fixture
def buf():
    buf = StringIO()
    console = Console(file=buf, force_terminal=False, width=200)
    with patch("armkit.output.formatter.console", console):
        yield buf


class TestToPlain:
    def test_model_uses_wire_names(self, mock_hub: dict):
        plain = to_plain(Hub.from_wire(mock_hub))
        assert plain["properties"]["apiEndpoint"] == mock_hub["properties"]["apiEndpoint"]

    def test_list_of_models(self):
        assert to_plain([Hub(location="a"), Hub(location="b")]) == [
            {"location": "a"},
            {"location": "b"},
        ]

    def test_passthrough(self):
        assert to_plain({"k": 1}) == {"k": 1}


class TestOutputJson:
    def test_model(self, buf, mock_hub: dict):
        output(Hub.from_wire(mock_hub), "json")
        assert json.loads(buf.getvalue())["name"] == "hub1"

    def test_empty_list(self, buf):
        output([], "json")
        assert json.loads(buf.getvalue()) == []


class TestOutputYaml:
    def test_model(self, buf, mock_hub: dict):
        output(Hub.from_wire(mock_hub), "yaml")
        data = yaml.safe_load(buf.getvalue())
        assert data["properties"]["provisioningState"] == "Succeeded"


class TestOutputCsv:
    def test_csv_output(self, buf):
        output_csv(["Name", "Value"], [["a", "1"], ["b", None]])
        out = buf.getvalue()
        assert "Name,Value" in out
        assert "a,1" in out
        assert "b," in out

    def test_csv_without_rows_falls_back_to_json(self, buf):
        output({"k": "v"}, "csv")
        assert json.loads(buf.getvalue()) == {"k": "v"}


class TestOutputTable:
    def test_kv_model_flattened(self, buf, mock_hub: dict):
        output(Hub.from_wire(mock_hub), "table", kv=True, title="Hub")
        out = buf.getvalue()
        assert "properties.hubBillingInfo.maxUnits" in out
        assert "hub1" in out

    def test_columns_rows(self, buf):
        output([], "table", columns=["A", "B"], rows=[["1", ProvisioningState.SUCCEEDED]])
        out = buf.getvalue()
        assert "Succeeded" in out

    def test_fallback_other(self, buf):
        output("plain text", "table")
        assert "plain text" in buf.getvalue()


class TestCells:
    def test_none_is_blank(self):
        assert cell(None) == ""

    def test_enum_value(self):
        assert cell(ProvisioningState("Brand-New")) == "Brand-New"

    def test_nested_json(self):
        assert cell({"a": [1]}) == '{"a": [1]}'

    def test_flatten(self):
        assert flatten({"a": {"b": 1, "c": {}}, "d": 2}) == {"a.b": 1, "a.c": {}, "d": 2}
