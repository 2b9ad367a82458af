"""Assembles the generated sections into one Go compilation unit.

The order is fixed: banner and imports, marker type, constant table, parser.
Rendering is synchronous and holds no state between calls, so one
``Assembler`` can be shared freely.
"""

from __future__ import annotations

from .constant_gen import ConstantGenerator, build_constant_rows
from .identifiers import check_reserved_names, derive_all, package_name
from .marker_gen import MarkerGenerator
from .models import EnumSpec, GeneratedSection
from .parser_gen import ParserGenerator
from .templates import TemplateRenderer

TOOL_NAME = "strenum"


class Assembler:
    """Renders every section of an enum and concatenates them."""

    header_template = "header.go.j2"

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()
        self.marker_gen = MarkerGenerator(self.renderer)
        self.constant_gen = ConstantGenerator(self.renderer)
        self.parser_gen = ParserGenerator(self.renderer)

    def header(self, spec: EnumSpec) -> GeneratedSection:
        """Banner comment, package clause and imports.

        The second banner line records the invocation (type name and the
        comma-joined variants) so the file can be regenerated verbatim.
        """
        context = {
            "tool": TOOL_NAME,
            "arguments": [spec.type_name, ",".join(spec.variants)],
            "package": package_name(spec.type_name),
        }
        return GeneratedSection(name="header", text=self.renderer.render(self.header_template, context))

    def sections(self, spec: EnumSpec) -> list[GeneratedSection]:
        """Render all sections in output order.

        Raises:
            InvalidSpecError: If a name cannot be derived or is produced twice.
            CollisionError: If two variants derive the same identifier.
        """
        idents = derive_all(spec.variants)
        check_reserved_names(spec, idents)
        rows = build_constant_rows(spec, idents)
        return [
            self.header(spec),
            self.marker_gen.generate(spec),
            self.constant_gen.generate(spec, rows),
            self.parser_gen.generate(spec, rows),
        ]

    def render(self, spec: EnumSpec) -> bytes:
        """Return the complete, gofmt-canonical source for *spec*."""
        text = "\n".join(section.text for section in self.sections(spec))
        return text.encode("utf-8")


def generate(type_name: str, *variants: str) -> bytes:
    """Generate the Go source for one enum.

    Example::

        source = generate("Status", "backlog", "in_review", "done")

    Raises:
        InvalidSpecError: Empty or malformed type name, no variants, or a
            variant without identifier characters.
        CollisionError: Two variants derive the same identifier.
    """
    spec = EnumSpec.build(type_name, *variants)
    return Assembler().render(spec)
