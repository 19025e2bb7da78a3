"""Renderer schemas — data models for the column renderer catalog.

RendererVariants bundle a render function with the metadata a
configuration UI needs (label, field descriptors, default config).
RenderConfigs are the serializable {type, config} pairs stored with
each column definition.
"""

from enum import Enum
from typing import Any, Callable, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

RenderFunction = Callable[[Any, dict[str, Any], Optional[Any]], Any]


class FieldKind(str, Enum):
    """Input control type for a renderer configuration field."""

    TEXT = "text"
    NUMBER = "number"
    SELECT = "select"
    CHECKBOX = "checkbox"
    COLOR = "color"


class FieldOption(BaseModel):
    """A selectable option for a select field."""

    model_config = ConfigDict(frozen=True)

    value: Any
    label: str


class FieldDescriptor(BaseModel):
    """Describes one configuration input for a renderer.

    Purely descriptive: consumed by configuration forms to build
    inputs. The core never evaluates visible_when while rendering.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., description="Config key this field edits")
    label: str = Field(..., description="Display label for the input")
    kind: FieldKind = Field(default=FieldKind.TEXT, alias="type")
    default_value: Any = Field(default=None, alias="defaultValue")
    options: Optional[list[FieldOption]] = None
    placeholder: Optional[str] = None
    help_text: Optional[str] = Field(default=None, alias="helpText")
    allow_custom: bool = Field(
        default=False,
        alias="allowCustom",
        description="Select fields only: free text is accepted besides the options",
    )
    visible_when: Optional[Callable[[dict[str, Any]], bool]] = Field(
        default=None,
        alias="showWhen",
        exclude=True,
        description="Predicate over the current config; None means always visible",
    )

    def is_visible(self, config: dict[str, Any]) -> bool:
        """Evaluate visible_when against a config."""
        if self.visible_when is None:
            return True
        return bool(self.visible_when(config or {}))


class RendererVariant(BaseModel):
    """A renderer implementation with its configuration metadata.

    Immutable once registered. Variants have no identity of their own;
    they are known by the key they are registered under.
    """

    model_config = ConfigDict(frozen=True)

    label: str = ""
    description: str = ""
    render: RenderFunction = Field(..., exclude=True)
    fields: list[FieldDescriptor] = Field(default_factory=list)
    default_config: dict[str, Any] = Field(default_factory=dict)


class TaggedText(BaseModel):
    """Decorated display value: text shown with a color tag."""

    model_config = ConfigDict(frozen=True)

    text: str
    color: str


_PLAIN_SCALARS = (str, int, float, bool, type(None))


def _is_plain(value: Any) -> bool:
    if isinstance(value, _PLAIN_SCALARS):
        return True
    if isinstance(value, list):
        return all(_is_plain(v) for v in value)
    if isinstance(value, dict):
        return all(isinstance(k, str) and _is_plain(v) for k, v in value.items())
    return False


class RenderConfig(BaseModel):
    """Serializable render configuration attached to a column.

    type selects a renderer by registry key; config is merged over
    that renderer's default_config before rendering.
    """

    type: Optional[str] = Field(
        default=None, description="Renderer key, e.g. 'default', 'boolean', 'date'"
    )
    config: dict[str, Any] = Field(default_factory=dict)

    @field_validator("config")
    @classmethod
    def _plain_values_only(cls, value: dict[str, Any]) -> dict[str, Any]:
        if not _is_plain(value):
            raise ValueError(
                "render config values must be plain strings, numbers, "
                "booleans, lists or mappings"
            )
        return value


class RendererSummary(BaseModel):
    """Lightweight entry for renderer selection controls."""

    value: str
    label: str
    description: str = ""


class ValidationResult(BaseModel):
    """Outcome of a static configuration check."""

    valid: bool
    errors: list[str] = Field(default_factory=list)
