"""Identifier derivation for generated Go names.

Every Go name in a generated unit is built here from the type name and the
variant strings, so collisions are detected in one place before any text is
rendered.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence

from .golang import GO_KEYWORDS
from .models import CollisionError, DerivedIdentifier, EnumSpec, InvalidSpecError


# ---------------------------------------------------------------------------
# Naming convention
# ---------------------------------------------------------------------------

STRING_CONST_PREFIX = "str"
ENUM_PREFIX = "Enum"
PRIVATE_TYPE_PREFIX = "private"
PRIVATE_TYPE_SUFFIX = "EnumType"
PACKAGE_SUFFIX = "enum"
KEYWORD_METHOD_PREFIX = "is"

# Names emitted by the parser section and the fixed String method.
FIXED_NAMES: tuple[str, ...] = (
    "String",
    "FromString",
    "FromStrings",
    "ToStrings",
    "MustToStrings",
    "ErrUnknownValue",
    "ErrUnexpectedNil",
)

_SEPARATOR_RE = re.compile(r"[^0-9A-Za-z]+")


# ---------------------------------------------------------------------------
# Case conversion
# ---------------------------------------------------------------------------


def derive_identifier(value: str) -> str:
    """Convert a variant string into a Pascal-case identifier fragment.

    Splits on runs of non-alphanumeric ASCII characters, upper-cases the first
    character of every segment and keeps the remainder unchanged::

        derive_identifier("Cc_xxxx_zzz") -> "CcXxxxZzz"
        derive_identifier("in_review")   -> "InReview"
    """
    segments = _SEPARATOR_RE.split(value)
    return "".join(seg[0].upper() + seg[1:] for seg in segments if seg)


def derive(value: str) -> DerivedIdentifier:
    """Return the raw value together with its derived fragment."""
    return DerivedIdentifier(raw=value, pascal_case=derive_identifier(value))


def derive_all(variants: Iterable[str]) -> list[DerivedIdentifier]:
    """Derive every variant in order, rejecting empty and colliding fragments.

    Raises:
        InvalidSpecError: If a variant contains no identifier characters.
        CollisionError: If two distinct variants derive the same fragment.
    """
    seen: dict[str, str] = {}
    derived: list[DerivedIdentifier] = []
    for variant in variants:
        ident = derive(variant)
        if not ident.pascal_case:
            raise InvalidSpecError(
                f"Variant {variant!r} contains no letters or digits to build an identifier from."
            )
        previous = seen.get(ident.pascal_case)
        if previous is not None:
            raise CollisionError(previous, variant, ident.pascal_case)
        seen[ident.pascal_case] = variant
        derived.append(ident)
    return derived


# ---------------------------------------------------------------------------
# Type-level names
# ---------------------------------------------------------------------------


def type_identifier(type_name: str) -> str:
    """Pascal-case form of the type name (``main`` -> ``Main``).

    Raises:
        InvalidSpecError: If the type name has no letters or digits.
    """
    ident = derive_identifier(type_name)
    if not ident:
        raise InvalidSpecError(
            f"Type name {type_name!r} contains no letters or digits to build an identifier from."
        )
    return ident


def derive_private_type_name(type_name: str) -> str:
    """Name of the unexported marker method sealing the interface.

    Lower-cases the first character of the type identifier.  When that would
    produce a Go keyword (``Type`` -> ``type``) the ``is`` prefix is used
    instead (``isType``).
    """
    ident = type_identifier(type_name)
    lowered = ident[0].lower() + ident[1:]
    if lowered in GO_KEYWORDS:
        return KEYWORD_METHOD_PREFIX + ident
    return lowered


def interface_name(type_name: str) -> str:
    return ENUM_PREFIX + type_identifier(type_name)


def private_backing_type(type_name: str) -> str:
    return PRIVATE_TYPE_PREFIX + type_identifier(type_name) + PRIVATE_TYPE_SUFFIX


def package_name(type_name: str) -> str:
    return type_identifier(type_name).lower() + PACKAGE_SUFFIX


def string_const_name(type_name: str, ident: DerivedIdentifier) -> str:
    return STRING_CONST_PREFIX + type_identifier(type_name) + ident.pascal_case


def enum_const_name(type_name: str, ident: DerivedIdentifier) -> str:
    return ENUM_PREFIX + type_identifier(type_name) + ident.pascal_case


# ---------------------------------------------------------------------------
# Whole-unit check
# ---------------------------------------------------------------------------


def check_reserved_names(spec: EnumSpec, idents: Sequence[DerivedIdentifier]) -> None:
    """Ensure no two generated names in the unit coincide.

    This is a post-condition on the naming scheme rather than an input
    check: once ``derive_all`` has passed, the ``str``/``Enum`` prefixes and
    the lower-case marker method keep every name distinct.  It fails only
    if the prefixes or fixed names are changed inconsistently.

    Raises:
        InvalidSpecError: If the marker method, the private type or any
            constant shadows another generated name.
    """
    names: list[str] = [
        interface_name(spec.type_name),
        private_backing_type(spec.type_name),
        derive_private_type_name(spec.type_name),
        *FIXED_NAMES,
    ]
    for ident in idents:
        names.append(string_const_name(spec.type_name, ident))
        names.append(enum_const_name(spec.type_name, ident))

    seen: set[str] = set()
    for name in names:
        if name in seen:
            raise InvalidSpecError(
                f"Generated name {name!r} is produced twice for type {spec.type_name!r}."
            )
        seen.add(name)
