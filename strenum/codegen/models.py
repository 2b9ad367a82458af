"""Pydantic v2 models and error types for the enum code generator.

Defines the immutable input (``EnumSpec``), the intermediate values produced
while rendering (``DerivedIdentifier``, ``GeneratedSection``) and the final
``OutputArtifact`` handed to the file writer, together with the three error
kinds the generator surfaces to its callers.
"""

from __future__ import annotations

import re

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class StrenumError(Exception):
    """Base class for every error raised by the generator."""


class InvalidSpecError(StrenumError):
    """Raised when the type name or variant list cannot describe an enum.

    Detected before anything is rendered; the caller can fix its input and
    try again.
    """


class CollisionError(StrenumError):
    """Raised when two distinct variants derive the same identifier."""

    def __init__(self, first: str, second: str, identifier: str) -> None:
        self.first = first
        self.second = second
        self.identifier = identifier
        super().__init__(
            f"Variants {first!r} and {second!r} both derive the identifier "
            f"{identifier!r}; rename one of them."
        )


class CodegenInvalidError(StrenumError):
    """Raised when the host formatter rejects the generated source.

    This always indicates a bug in the emitters, never bad user input.
    """

    def __init__(self, message: str, source: bytes = b"", stderr: str = "") -> None:
        self.source = source
        self.stderr = stderr
        super().__init__(message)


# ---------------------------------------------------------------------------
# Input model
# ---------------------------------------------------------------------------

_TYPE_NAME_RE = re.compile(r"[A-Za-z_][A-Za-z0-9_]*")


class EnumSpec(BaseModel):
    """A closed, string-valued enumeration to generate."""

    model_config = ConfigDict(frozen=True)

    type_name: str = Field(..., description="Go type name, e.g. 'Status'")
    variants: tuple[str, ...] = Field(..., description="Variant values in output order")

    @field_validator("type_name")
    @classmethod
    def _check_type_name(cls, value: str) -> str:
        if not value:
            raise ValueError("type name must not be empty")
        if not _TYPE_NAME_RE.fullmatch(value):
            raise ValueError(f"type name {value!r} is not a valid identifier")
        return value

    @field_validator("variants")
    @classmethod
    def _check_variants(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("at least one variant is required")
        for variant in value:
            try:
                variant.encode("utf-8", "surrogateescape")
            except UnicodeEncodeError as exc:
                raise ValueError(f"variant {variant!r} is not encodable as UTF-8") from exc
        return value

    @classmethod
    def build(cls, type_name: str, *variants: str) -> "EnumSpec":
        """Validate raw input and return a spec.

        Raises:
            InvalidSpecError: If the type name or the variants are rejected.
        """
        try:
            return cls(type_name=type_name, variants=tuple(variants))
        except ValidationError as exc:
            messages = "; ".join(err["msg"] for err in exc.errors())
            raise InvalidSpecError(messages) from exc


# ---------------------------------------------------------------------------
# Intermediate and output models
# ---------------------------------------------------------------------------


class DerivedIdentifier(BaseModel):
    """A variant string and the identifier fragment derived from it."""

    model_config = ConfigDict(frozen=True)

    raw: str
    pascal_case: str


class GeneratedSection(BaseModel):
    """One rendered block of source text."""

    model_config = ConfigDict(frozen=True)

    name: str
    text: str


class OutputArtifact(BaseModel):
    """A complete, formatted Go compilation unit."""

    model_config = ConfigDict(frozen=True)

    package: str
    source: bytes
    formatted: bool = Field(default=False, description="Whether gofmt accepted the source")

    @property
    def filename(self) -> str:
        """File name the unit is written to inside its package directory."""
        return f"{self.package}.go"
