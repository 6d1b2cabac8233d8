from __future__ import annotations

from typing import Any, Callable, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

DEFAULT_SPRITE_URL = "https://cdnjs.cloudflare.com/ajax/libs/emojione/2.2.7/assets/sprites/emojione.sprites.png"

OUTPUT_EMOJI = "emoji"
OUTPUT_UNICODE = "unicode"


def default_style() -> dict[str, Any]:
    return {"backgroundImage": f"url({DEFAULT_SPRITE_URL})"}


class EmojifyOptions(BaseModel):
    """Conversion options.

    Accepts snake_case names or their camelCase aliases
    (``convertAscii``, ``onClick``). Unknown keys are kept and reach the
    renderer untouched. Values are coerced rather than rejected: flags take
    their truthiness, any ``output`` other than ``"unicode"`` becomes
    ``"emoji"``, a non-mapping ``style`` is empty and a non-callable
    ``on_click`` is dropped.
    """

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        alias_generator=to_camel,
        arbitrary_types_allowed=True,
    )

    convert_shortnames: bool = True
    convert_unicode: bool = True
    convert_ascii: bool = True
    style: dict[str, Any] = Field(default_factory=default_style)
    on_click: Callable[..., Any] | None = None
    output: str = OUTPUT_EMOJI

    @field_validator("convert_shortnames", "convert_unicode", "convert_ascii", mode="before")
    @classmethod
    def _truthy(cls, value: Any) -> bool:
        return bool(value)

    @field_validator("output", mode="before")
    @classmethod
    def _output_mode(cls, value: Any) -> str:
        return OUTPUT_UNICODE if value == OUTPUT_UNICODE else OUTPUT_EMOJI

    @field_validator("style", mode="before")
    @classmethod
    def _style_mapping(cls, value: Any) -> dict[str, Any]:
        return dict(value) if isinstance(value, Mapping) else {}

    @field_validator("on_click", mode="before")
    @classmethod
    def _click_handler(cls, value: Any) -> Callable[..., Any] | None:
        return value if callable(value) else None

    @property
    def wants_unicode(self) -> bool:
        return self.output == OUTPUT_UNICODE

    @classmethod
    def merge(cls, options: EmojifyOptions | Mapping[str, Any] | None = None, **overrides: Any) -> EmojifyOptions:
        """Layer ``options`` and then ``overrides`` over the documented defaults."""
        if isinstance(options, EmojifyOptions):
            if not overrides:
                return options
            data = options.model_dump()
        else:
            data = cls._field_names(options or {})
        data.update(cls._field_names(overrides))
        return cls.model_validate(data)

    @classmethod
    def _field_names(cls, values: Mapping[str, Any]) -> dict[str, Any]:
        # Fold camelCase aliases onto field names so later keys override earlier ones
        aliases = {to_camel(name): name for name in cls.model_fields}
        return {aliases.get(key, key): value for key, value in values.items()}
