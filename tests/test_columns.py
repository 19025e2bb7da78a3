import json

import pytest

from column_renderers.columns.loader import load_columns
from column_renderers.columns.schemas import ColumnDefinition
from column_renderers.columns.table import render_rows, resolve_data_index
from column_renderers.columns.validator import (
    validate_column,
    validate_columns,
    validate_columns_json,
)
from column_renderers.renderers.schemas import RenderConfig, TaggedText


def make_column(**overrides):
    column = {"title": "Active", "dataIndex": "active"}
    column.update(overrides)
    return column


class TestColumnDefinition:
    def test_camel_case_keys(self):
        column = ColumnDefinition.model_validate(
            {"title": "Created", "dataIndex": "created_at", "sortField": "created"}
        )
        assert column.data_index == "created_at"
        assert column.sort_field == "created"
        assert column.column_key == "created_at"

    def test_default_render_config(self):
        column = ColumnDefinition(title="Name", data_index="name")
        assert column.render == RenderConfig(type="default", config={})


class TestValidateColumn:
    def test_valid_column(self):
        assert validate_column(make_column(), 0) == []

    def test_required_fields(self):
        errors = validate_column({"title": "  ", "dataIndex": ""}, 2)
        assert errors == ["Column 3: title is required", "Column 3: data field is required"]

    @pytest.mark.parametrize("width", [49, 1001, "wide", float("nan"), True])
    def test_width_out_of_bounds(self, width):
        errors = validate_column(make_column(width=width), 0)
        assert errors == ["Column 1: width must be between 50 and 1000 pixels"]

    @pytest.mark.parametrize("width", [50, 1000, "120", 200.5])
    def test_width_in_bounds(self, width):
        assert validate_column(make_column(width=width), 0) == []

    def test_render_type_is_required(self):
        column = make_column(render={"config": {"trueText": "Sim"}})
        assert validate_column(column, 0) == ["Column 1: render type is required"]

    @pytest.mark.parametrize("date_format", [12, ["dd/MM"], {"f": "yyyy"}, True])
    def test_non_string_date_format(self, date_format):
        column = make_column(render={"type": "date", "config": {"format": date_format}})
        assert validate_column(column, 0) == ["Column 1: invalid date format"]

    def test_non_string_date_format_on_model_column(self):
        column = ColumnDefinition(
            title="Created",
            data_index="created",
            render=RenderConfig(type="date", config={"format": 12}),
        )
        assert validate_column(column, 0) == ["Column 1: invalid date format"]

    @pytest.mark.parametrize(
        "render",
        [
            {"type": "boolean", "config": {}},
            {"type": "boolean"},
            {"type": "date", "config": {}},
            {"type": "date", "config": {"format": ""}},
            {"type": "currency"},
        ],
    )
    def test_renderer_defaults_fill_missing_config(self, render):
        assert validate_column(make_column(render=render), 0) == []

    def test_accepted_boolean_column_renders(self, executor):
        render = {"type": "boolean", "config": {}}
        assert validate_column(make_column(render=render), 0) == []
        assert executor.apply(True, render) == TaggedText(text="Sim", color="green")

    def test_rejected_date_format_would_render_invalid_text(self, executor):
        render = {"type": "date", "config": {"format": 12}}
        result = validate_columns([make_column(title="When", dataIndex="when", render=render)])
        assert result.errors == ["Column 1: invalid date format"]
        assert executor.apply("2024-01-01", render) == "-"


class TestValidateColumns:
    def test_not_a_list(self):
        result = validate_columns({"title": "x"})
        assert result.errors == ["columns configuration must be a list"]

    def test_empty_list(self):
        result = validate_columns([])
        assert result.errors == ["at least one column must be configured"]

    def test_duplicate_data_fields(self):
        columns = [
            make_column(dataIndex="a"),
            make_column(dataIndex="b"),
            make_column(dataIndex="a"),
            make_column(dataIndex="b"),
            make_column(dataIndex="a"),
        ]
        result = validate_columns(columns)
        assert result.errors == ["duplicate data fields found: a, b"]

    def test_valid_list(self):
        columns = [
            make_column(),
            make_column(
                title="Created",
                dataIndex="created",
                render={"type": "date", "config": {"format": "dd/MM/yyyy"}},
            ),
        ]
        assert validate_columns(columns).valid


class TestValidateColumnsJson:
    def test_invalid_json(self):
        result = validate_columns_json("[{")
        assert not result.valid
        assert result.errors[0].startswith("invalid JSON")

    def test_not_an_array(self):
        result = validate_columns_json('{"title": "x"}')
        assert result.errors == ["JSON must be an array of columns"]

    def test_missing_keys(self):
        result = validate_columns_json('[{"title": "A"}, {"dataIndex": "b"}, 3]')
        assert result.errors == [
            'Column 1: the "dataIndex" field is required',
            'Column 2: the "title" field is required',
            "Column 3: must be an object",
        ]
        assert result.data is None

    def test_valid_import(self):
        text = json.dumps([make_column()])
        result = validate_columns_json(text)
        assert result.valid
        assert result.data == [make_column()]


class TestLoadColumns:
    def test_yaml(self, tmp_path):
        path = tmp_path / "columns.yaml"
        path.write_text(
            "columns:\n"
            "  - title: Active\n"
            "    dataIndex: active\n"
            "    render:\n"
            "      type: boolean\n"
            "      config:\n"
            "        showAsTag: false\n",
            encoding="utf-8",
        )

        columns = load_columns(path)

        assert len(columns) == 1
        assert columns[0].render == RenderConfig(type="boolean", config={"showAsTag": False})

    def test_json_list(self, tmp_path):
        path = tmp_path / "columns.json"
        path.write_text(json.dumps([make_column(), make_column(dataIndex="b")]))
        assert [c.data_index for c in load_columns(path)] == ["active", "b"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_columns(tmp_path / "nope.json")

    def test_wrong_shape(self, tmp_path):
        path = tmp_path / "columns.json"
        path.write_text('{"cols": []}')
        with pytest.raises(ValueError):
            load_columns(path)


class TestRenderRows:
    def test_resolve_data_index(self):
        record = {"a": {"b": {"c": 1}}, "x.y": 2}
        assert resolve_data_index(record, "a.b.c") == 1
        assert resolve_data_index(record, "x.y") == 2
        assert resolve_data_index(record, "a.z") is None
        assert resolve_data_index(None, "a") is None

    def test_render_rows(self, executor):
        columns = [
            ColumnDefinition(title="Name", data_index="name"),
            ColumnDefinition(
                key="active",
                title="Active",
                data_index="flags.active",
                render=RenderConfig(type="boolean"),
            ),
            ColumnDefinition(
                title="Created",
                data_index="created",
                render=RenderConfig(type="date", config={"format": "yyyy-MM-dd"}),
            ),
        ]
        records = [
            {"name": "Ana", "flags": {"active": True}, "created": "2024-05-01T10:00:00"},
            {"name": None, "flags": {}, "created": None},
        ]

        rows = render_rows(columns, records, executor)

        assert rows == [
            {
                "name": "Ana",
                "active": TaggedText(text="Sim", color="green"),
                "created": "2024-05-01",
            },
            {
                "name": "",
                "active": TaggedText(text="Não", color="red"),
                "created": "-",
            },
        ]
