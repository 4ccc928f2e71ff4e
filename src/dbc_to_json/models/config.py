"""Converter configuration model."""

from __future__ import annotations

from typing import Annotated, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ALLOWED_ATTRIBUTES = ["GenMsgSendType"]


class ConverterConfig(BaseModel):
    """Settings for reading, serializing and writing.

    Example:
    -------
        ```yaml
        allowed_attributes:
          - GenMsgSendType
        indent: 2
        output_format: yaml
        encoding: cp1252
        ```

    """

    model_config = ConfigDict(
        # Forbid extra fields not defined in the model
        extra="forbid",
        # Validate default values
        validate_default=True,
    )

    allowed_attributes: Annotated[
        list[str],
        Field(
            default_factory=lambda: list(DEFAULT_ALLOWED_ATTRIBUTES),
            min_length=1,
            description="Message attribute names copied into the document",
        ),
    ]
    indent: Annotated[
        int,
        Field(default=4, ge=0, le=16, description="Spaces per nesting level"),
    ]
    output_format: Annotated[
        Literal["json", "yaml"],
        Field(default="json", description="Output document format"),
    ]
    ensure_ascii: Annotated[
        bool,
        Field(default=False, description="Escape non-ASCII characters in JSON output"),
    ]
    encoding: Annotated[
        str | None,
        Field(default=None, description="Text encoding of the DBC file"),
    ]
    strict: Annotated[
        bool,
        Field(default=True, description="Reject overlapping or oversized signals"),
    ]

    @field_validator("allowed_attributes")
    @classmethod
    def validate_attribute_names(cls, v: list[str]) -> list[str]:
        """Reject empty or whitespace-padded attribute names."""
        for name in v:
            if not name or name != name.strip():
                raise ValueError(f"Invalid attribute name: {name!r}")
        return v
