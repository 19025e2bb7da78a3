import pytest

from column_renderers.renderers.schemas import RenderConfig
from column_renderers.renderers.validator import validate_render_config


def test_absent_config_is_valid(registry):
    result = validate_render_config(None, registry)
    assert result.valid
    assert result.errors == []


def test_missing_type(registry):
    result = validate_render_config({"config": {}}, registry)
    assert not result.valid
    assert result.errors == ["render type is required"]


def test_unknown_type(registry):
    result = validate_render_config({"type": "currency"}, registry)
    assert result.errors == ['render type "currency" is not registered']


def test_boolean_requires_both_texts(registry):
    result = validate_render_config({"type": "boolean", "config": {}}, registry)
    assert not result.valid
    assert result.errors == ["true text is required", "false text is required"]


def test_boolean_with_texts_is_valid(registry):
    config = {"type": "boolean", "config": {"trueText": "Sim", "falseText": "Não"}}
    assert validate_render_config(config, registry).valid


def test_boolean_missing_config_counts_as_empty(registry):
    result = validate_render_config({"type": "boolean"}, registry)
    assert len(result.errors) == 2


def test_date_requires_format(registry):
    result = validate_render_config({"type": "date", "config": {"format": ""}}, registry)
    assert result.errors == ["date format is required"]


def test_date_with_format_is_valid(registry):
    config = RenderConfig(type="date", config={"format": "yyyy-MM-dd"})
    assert validate_render_config(config, registry).valid


def test_default_needs_no_config(registry):
    assert validate_render_config({"type": "default"}, registry).valid


def test_errors_accumulate_for_unregistered_builtin_type(empty_registry):
    result = validate_render_config({"type": "boolean", "config": {}}, empty_registry)
    assert result.errors == [
        'render type "boolean" is not registered',
        "true text is required",
        "false text is required",
    ]


@pytest.mark.parametrize("config", [{"type": "date", "config": None}, {"type": "date", "config": "x"}])
def test_non_mapping_config_is_treated_as_empty(registry, config):
    assert validate_render_config(config, registry).errors == ["date format is required"]


def test_validation_does_not_modify_input(registry):
    config = {"type": "boolean", "config": {}}
    validate_render_config(config, registry)
    assert config == {"type": "boolean", "config": {}}


def test_render_config_round_trips_through_json():
    config = RenderConfig(
        type="boolean",
        config={"trueText": "Sim", "showAsTag": False, "nested": {"n": [1, 2.5, None]}},
    )
    assert RenderConfig.model_validate_json(config.model_dump_json()) == config


def test_render_config_rejects_non_plain_values():
    with pytest.raises(ValueError):
        RenderConfig(type="date", config={"when": object()})
