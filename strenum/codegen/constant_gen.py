"""Constant-table section.

For every variant, in input order, emits a private string constant holding
the literal value and a public enum constant converting it to the private
backing type.  Both groups live in one ``const`` block, each group aligned
the way ``gofmt`` aligns consecutive specs.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from .identifiers import derive_all, enum_const_name, private_backing_type, string_const_name
from .models import DerivedIdentifier, EnumSpec, GeneratedSection
from .templates import TemplateRenderer


def build_constant_rows(
    spec: EnumSpec, idents: Sequence[DerivedIdentifier] | None = None
) -> list[dict[str, str]]:
    """Return one ``{raw, str_name, enum_name}`` row per variant, in order.

    Raises:
        InvalidSpecError: If a variant yields an empty identifier.
        CollisionError: If two variants yield the same identifier.
    """
    if idents is None:
        idents = derive_all(spec.variants)
    return [
        {
            "raw": ident.raw,
            "str_name": string_const_name(spec.type_name, ident),
            "enum_name": enum_const_name(spec.type_name, ident),
        }
        for ident in idents
    ]


class ConstantGenerator:
    """Renders the ``const ( ... )`` block for one enum."""

    template = "constants.go.j2"

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def generate(self, spec: EnumSpec, rows: list[dict[str, str]] | None = None) -> GeneratedSection:
        if rows is None:
            rows = build_constant_rows(spec)
        context: dict[str, Any] = {
            "constants": rows,
            "backing": private_backing_type(spec.type_name),
            "str_width": max(len(row["str_name"]) for row in rows),
            "enum_width": max(len(row["enum_name"]) for row in rows),
        }
        return GeneratedSection(name="constants", text=self.renderer.render(self.template, context))
