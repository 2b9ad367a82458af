"""Parser section: ``FromString`` and the slice conversion helpers.

``FromString`` switches over the string constants of the constant table and
returns the matching enum constant, or ``ErrUnknownValue`` for anything
else.  ``ToStrings``/``MustToStrings``/``FromStrings`` convert whole slices.
"""

from __future__ import annotations

from .constant_gen import build_constant_rows
from .identifiers import interface_name
from .models import EnumSpec, GeneratedSection
from .templates import TemplateRenderer


class ParserGenerator:
    """Renders the lookup function and slice helpers for one enum."""

    template = "parser.go.j2"

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def generate(self, spec: EnumSpec, rows: list[dict[str, str]] | None = None) -> GeneratedSection:
        if rows is None:
            rows = build_constant_rows(spec)
        context = {
            "interface": interface_name(spec.type_name),
            "constants": rows,
        }
        return GeneratedSection(name="parser", text=self.renderer.render(self.template, context))
