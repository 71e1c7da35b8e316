# Implements the "json-pointer" and "relative-json-pointer" formats of JSON schema
# See: https://json-schema.org/draft/2020-12/json-schema-validation#section-7.3.7

from typing import Optional
from dataclasses import dataclass
import re

_JSON_POINTER = re.compile(r"(/([^~/]|~[01])*)*", re.DOTALL)

# See: https://datatracker.ietf.org/doc/html/draft-bhutton-relative-json-pointer-00#section-3
_RELATIVE_JSON_POINTER = re.compile(
    r"(?P<prefix>0|[1-9][0-9]*)"
    r"(?P<shift>[+-](?:0|[1-9][0-9]*))?"
    r"(?:(?P<pointer>/.*)|(?P<identifier>#))?",
    re.DOTALL,
)


def valid_json_pointer(pointer: str) -> bool:
    return _JSON_POINTER.fullmatch(pointer) is not None


@dataclass(frozen=True)
class RelativePointer:
    prefix: int
    # Signed offset applied to the array index found 'prefix' levels up
    shift: Optional[int] = None
    pointer: str = ""
    identifier: bool = False


def parse_relative_json_pointer(pointer: str) -> Optional[RelativePointer]:
    match = _RELATIVE_JSON_POINTER.fullmatch(pointer)
    if match is None:
        return None
    nested = match.group("pointer") or ""
    if not valid_json_pointer(nested):
        return None
    shift = match.group("shift")
    return RelativePointer(
        prefix=int(match.group("prefix")),
        shift=None if shift is None else int(shift),
        pointer=nested,
        identifier=match.group("identifier") is not None,
    )


def valid_relative_json_pointer(pointer: str) -> bool:
    return parse_relative_json_pointer(pointer) is not None
