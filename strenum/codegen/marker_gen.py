"""Marker-type section: the sealed interface and its only implementation.

Emits an ``Enum<Type>`` interface carrying an unexported marker method, so
no type outside the generated package can satisfy it, and the private
string-backed type that every enum constant is built from.
"""

from __future__ import annotations

from .identifiers import derive_private_type_name, interface_name, private_backing_type
from .models import EnumSpec, GeneratedSection
from .templates import TemplateRenderer


class MarkerGenerator:
    """Renders the interface + backing type pair for one enum."""

    template = "marker.go.j2"

    def __init__(self, renderer: TemplateRenderer) -> None:
        self.renderer = renderer

    def generate(self, spec: EnumSpec) -> GeneratedSection:
        context = {
            "interface": interface_name(spec.type_name),
            "backing": private_backing_type(spec.type_name),
            "marker": derive_private_type_name(spec.type_name),
        }
        return GeneratedSection(name="marker", text=self.renderer.render(self.template, context))
