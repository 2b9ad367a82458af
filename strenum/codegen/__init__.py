"""strenum code generator -- emits closed, string-backed Go enums.

Given a type name and an ordered list of variant strings, renders one Go
package containing a sealed ``Enum<Type>`` interface, one constant per
variant, ``FromString`` and the slice conversion helpers.

Quick usage::

    from strenum.codegen import generate

    source = generate("Status", "backlog", "in_review", "done")

    # or, with gofmt validation and file output:
    from strenum.codegen import EnumGenerator

    path = await EnumGenerator().generate("Status", "backlog", "in_review", "done")
"""

from strenum.codegen.assembler import Assembler, generate
from strenum.codegen.generator import EnumGenerator
from strenum.codegen.gofmt import GofmtFormatter, GofmtUnavailableError
from strenum.codegen.identifiers import derive_identifier, derive_private_type_name
from strenum.codegen.models import (
    CodegenInvalidError,
    CollisionError,
    EnumSpec,
    InvalidSpecError,
    OutputArtifact,
    StrenumError,
)

__all__ = [
    "Assembler",
    "CodegenInvalidError",
    "CollisionError",
    "EnumGenerator",
    "EnumSpec",
    "GofmtFormatter",
    "GofmtUnavailableError",
    "InvalidSpecError",
    "OutputArtifact",
    "StrenumError",
    "derive_identifier",
    "derive_private_type_name",
    "generate",
]
