# Implements relative JSON pointer evaluation
# See: https://datatracker.ietf.org/doc/html/draft-bhutton-relative-json-pointer-00#section-4

from typing import Any
import logging

from ..config import ResolveConfig, DEFAULT_CONFIG
from ..result import Ok, Err, Result, NOT_FOUND, INVALID_RELATIVE_SYNTAX
from . import rfc6901
from .formats import RelativePointer, parse_relative_json_pointer
from .syntax import unescape
from .walk import Trail, record, node_kind, NodeKind, MISSING

log = logging.getLogger(__name__)


def _continue_with(value: Any, pointer: str, config: ResolveConfig) -> Result:
    if pointer == "":
        return Ok(value)
    return rfc6901.resolve(value, pointer, config)


def _identify(trail: Trail, level: int) -> Result:
    container = trail.ancestor(level)
    if container is MISSING:
        log.debug("Cannot go up %d levels from a depth of %d", level, len(trail))
        return NOT_FOUND
    token = trail.token(level)
    if node_kind(container) is NodeKind.SEQUENCE:
        return Ok(int(token))
    return Ok(unescape(token))


def _shift(trail: Trail, relative: RelativePointer, config: ResolveConfig) -> Result:
    container = trail.ancestor(relative.prefix)
    if container is MISSING:
        log.debug("Cannot go up %d levels from a depth of %d", relative.prefix, len(trail))
        return NOT_FOUND
    if node_kind(container) is not NodeKind.SEQUENCE:
        log.debug("Index manipulation requires an array, got %s", node_kind(container).value)
        return INVALID_RELATIVE_SYNTAX
    index = int(trail.token(relative.prefix)) + relative.shift
    if index < 0:
        # Array indices are non-negative
        log.debug("Index manipulation %+d results in negative index", relative.shift)
        return INVALID_RELATIVE_SYNTAX
    if index >= len(container):
        log.debug("Index %d out of range for array of length %d", index, len(container))
        return NOT_FOUND
    if relative.identifier:
        return Ok(index)
    return _continue_with(container[index], relative.pointer, config)


def resolve(document: Any, start_pointer: str, relative_pointer: str, config: ResolveConfig = DEFAULT_CONFIG) -> Result:
    if start_pointer == "" or start_pointer == "#":
        # The root has no parent, hence evaluation fails
        return NOT_FOUND

    result = rfc6901.resolve_while(document, start_pointer, Trail(), record, config)
    if isinstance(result, Err):
        return result
    start_value, trail = result.value

    relative = parse_relative_json_pointer(relative_pointer)
    if relative is None:
        log.debug("Invalid relative JSON pointer %r", relative_pointer)
        return INVALID_RELATIVE_SYNTAX

    if relative.shift is not None:
        return _shift(trail, relative, config)
    if relative.identifier:
        return _identify(trail, relative.prefix)

    if relative.prefix == 0:
        value = start_value
    else:
        value = trail.ancestor(relative.prefix - 1)
    if value is MISSING:
        log.debug("Cannot go up %d levels from a depth of %d", relative.prefix, len(trail))
        return NOT_FOUND
    return _continue_with(value, relative.pointer, config)
