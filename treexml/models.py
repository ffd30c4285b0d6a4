"""Pydantic models for render configuration."""

from typing import Any, Dict, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .filters import compile_filter


class RenderConfig(BaseModel):
    """Options and traversal state threaded through a render pass.

    Instances are frozen; each recursion level works on a copy produced by
    :meth:`child`.
    """

    header: Union[bool, str] = Field(
        False,
        description=(
            "Emit an XML declaration: True for the default one, or a literal "
            "declaration string."
        ),
    )
    indent: Optional[str] = Field(
        None,
        alias="indentUnit",
        description="Indent unit repeated per depth level. Empty disables line breaks.",
    )
    text_filter: Optional[Dict[str, Any]] = Field(
        None,
        alias="textFilter",
        description="Substitutions applied to text content.",
    )
    attribute_filter: Optional[Dict[str, Any]] = Field(
        None,
        alias="attributeFilter",
        description="Substitutions applied to attribute values.",
    )
    depth: int = Field(0, ge=0, description="Current nesting level.")
    is_first_item: bool = Field(
        False, description="Whether the node being rendered is the first of its siblings."
    )
    is_last_item: bool = Field(
        False, description="Whether the node being rendered is the last of its siblings."
    )

    model_config = ConfigDict(frozen=True, extra="forbid", populate_by_name=True)

    @field_validator("text_filter", "attribute_filter")
    @classmethod
    def _check_filter(cls, value: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
        if value:
            compile_filter(value)
        return value

    @property
    def pretty(self) -> bool:
        return bool(self.indent)

    def child(self, **changes: Any) -> "RenderConfig":
        """Return a copy with ``changes`` applied."""

        return self.model_copy(update=changes)

    def nested(self) -> "RenderConfig":
        return self.child(depth=self.depth + 1)

    def sibling(self, index: int, count: int) -> "RenderConfig":
        return self.child(is_first_item=index == 0, is_last_item=index + 1 == count)

    @classmethod
    def from_options(
        cls,
        config: Union["RenderConfig", Mapping[str, Any], None] = None,
        **options: Any,
    ) -> "RenderConfig":
        """Build a validated config from an existing one, a mapping, or keywords."""

        if isinstance(config, RenderConfig):
            if not options:
                return config
            data: Dict[str, Any] = config.model_dump()
        else:
            data = dict(config or {})
        data.update(options)
        return cls.model_validate(data)


__all__ = ["RenderConfig"]
