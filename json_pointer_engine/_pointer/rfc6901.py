# Implements JSON pointer evaluation
# See: https://datatracker.ietf.org/doc/html/rfc6901#section-4

from typing import Any
import logging

from ..config import ResolveConfig, DEFAULT_CONFIG
from ..result import Ok, Err, Result, NOT_FOUND
from .syntax import tokenize, unescape
from .walk import Step, walk, follow, lookup, node_kind, NodeKind, MISSING

log = logging.getLogger(__name__)

# Appended to the last reference token to fetch the key or index instead of the value
IDENTIFIER_SUFFIX = "#"


def _identify(parent: Any, token: str) -> Result:
    if lookup(parent, token) is MISSING:
        log.debug("Cannot identify %r in %s", token, node_kind(parent).value)
        return NOT_FOUND
    if node_kind(parent) is NodeKind.SEQUENCE:
        return Ok(int(token))
    return Ok(unescape(token))


def resolve(document: Any, pointer: str, config: ResolveConfig = DEFAULT_CONFIG) -> Result:
    if pointer == "" or pointer == "#":
        return Ok(document)
    tokens = tokenize(pointer, config)
    if isinstance(tokens, Err):
        return tokens
    tokens = tokens.value

    *path, last = tokens
    if last.endswith(IDENTIFIER_SUFFIX):
        result = walk(document, path, follow, None)
        if isinstance(result, Err):
            return result
        parent, _ = result.value
        return _identify(parent, last[:-len(IDENTIFIER_SUFFIX)])

    result = walk(document, tokens, follow, None)
    if isinstance(result, Err):
        return result
    value, _ = result.value
    return Ok(value)


def resolve_while(document: Any, pointer: str, state: Any, step: Step, config: ResolveConfig = DEFAULT_CONFIG) -> Any:
    tokens = tokenize(pointer, config)
    if isinstance(tokens, Err):
        return tokens
    return walk(document, tokens.value, step, state)
