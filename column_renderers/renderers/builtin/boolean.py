"""Boolean renderer — converts truthy/falsy values to custom text.

Example: True -> "Sim", False -> "Não", optionally shown as a colored tag.
"""

from numbers import Real
from typing import Any, Optional

from ..schemas import FieldDescriptor, FieldKind, FieldOption, RendererVariant, TaggedText

DEFAULT_BOOLEAN_CONFIG: dict[str, Any] = {
    "trueText": "Sim",
    "falseText": "Não",
    "showAsTag": True,
    "trueColor": "green",
    "falseColor": "red",
}

TRUE_COLORS = [
    FieldOption(value="green", label="Verde"),
    FieldOption(value="blue", label="Azul"),
    FieldOption(value="cyan", label="Ciano"),
    FieldOption(value="lime", label="Lima"),
]

FALSE_COLORS = [
    FieldOption(value="red", label="Vermelho"),
    FieldOption(value="volcano", label="Laranja"),
    FieldOption(value="orange", label="Laranja Claro"),
    FieldOption(value="gold", label="Dourado"),
]


def _shows_tag(config: dict[str, Any]) -> bool:
    return bool(config.get("showAsTag"))


BOOLEAN_FIELDS = [
    FieldDescriptor(
        name="trueText",
        label="Texto para verdadeiro*",
        kind=FieldKind.TEXT,
        placeholder="Sim",
        default_value="Sim",
    ),
    FieldDescriptor(
        name="falseText",
        label="Texto para falso*",
        kind=FieldKind.TEXT,
        placeholder="Não",
        default_value="Não",
    ),
    FieldDescriptor(
        name="showAsTag",
        label="Exibir com tag",
        kind=FieldKind.CHECKBOX,
        default_value=True,
    ),
    FieldDescriptor(
        name="trueColor",
        label="Cor para verdadeiro",
        kind=FieldKind.SELECT,
        default_value="green",
        options=TRUE_COLORS,
        visible_when=_shows_tag,
    ),
    FieldDescriptor(
        name="falseColor",
        label="Cor para falso",
        kind=FieldKind.SELECT,
        default_value="red",
        options=FALSE_COLORS,
        visible_when=_shows_tag,
    ),
]


def coerce_bool(value: Any) -> bool:
    """Coerce a cell value to a boolean.

    Strings are true only for "true" (any case) or "1"; numbers are true
    when nonzero; anything else, None included, is false.
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        return value.lower() == "true" or value == "1"
    if isinstance(value, Real):
        return value != 0
    return False


def render_boolean(
    value: Any, config: Optional[dict[str, Any]] = None, record: Optional[Any] = None
) -> Any:
    """Render a boolean as custom text, tagged with a color when showAsTag is set."""
    final_config = {**DEFAULT_BOOLEAN_CONFIG, **(config or {})}

    flag = coerce_bool(value)
    text = final_config["trueText"] if flag else final_config["falseText"]

    if final_config["showAsTag"]:
        color = final_config["trueColor"] if flag else final_config["falseColor"]
        return TaggedText(text=text, color=color)

    return text


BOOLEAN_RENDERER = RendererVariant(
    label="Booleano",
    description="converte booleano para texto",
    render=render_boolean,
    fields=BOOLEAN_FIELDS,
    default_config=DEFAULT_BOOLEAN_CONFIG,
)
