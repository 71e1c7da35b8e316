"""
Resolves RFC 6901 JSON pointers and relative JSON pointers against documents,
i.e. trees of mappings, sequences and scalars as returned by json.load().

All functions return a result instead of raising:
    result = resolve({"foo": ["bar", "baz"]}, "/foo/1")
    if result.ok():
        print(result.value)
Use result.unwrap() to get the value or a JsonPointerException.
"""
from typing import Any, Optional
from ._pointer import rfc6901, relative
from ._pointer.formats import valid_json_pointer, valid_relative_json_pointer
from ._pointer.syntax import unescape
from ._pointer.walk import Continue, Halt, Step
from .config import ResolveConfig, DEFAULT_CONFIG
from .result import Result

__all__ = [
    "resolve",
    "resolve_while",
    "valid_json_pointer",
    "valid_relative_json_pointer",
    "unescape",
    "Continue",
    "Halt",
]


def resolve(document: Any, pointer: str, relative_pointer: Optional[str] = None,
            config: Optional[ResolveConfig] = None) -> Result:
    """
    Returns the value of document at pointer. The pointer may use the string ('/a/b')
    or the URI fragment ('#/a/b') representation. If the last reference token ends
    with '#', the key or index of the value is returned instead.

    If relative_pointer is given, pointer denotes the starting location and
    relative_pointer is evaluated from there, e.g. with pointer='/foo/1':
        '0'    the value at /foo/1
        '1/0'  the value at /foo/0
        '0-1'  the value at /foo/0
        '0#'   the index 1
    """
    assert isinstance(pointer, str)
    config = config or DEFAULT_CONFIG
    if relative_pointer is None:
        return rfc6901.resolve(document, pointer, config)
    assert isinstance(relative_pointer, str)
    return relative.resolve(document, pointer, relative_pointer, config)


def resolve_while(document: Any, pointer: str, acc: Any, step: Step,
                  config: Optional[ResolveConfig] = None) -> Any:
    """
    Walks document along pointer, calling step(value, raw_token, (container, acc))
    for each reference token. The step returns Continue(value, acc) to descend
    further or Halt(result) to stop; a halting result is returned as is.
    Raw tokens are still escaped, see unescape().

    Returns Ok((value, acc)) once all tokens are consumed.
    """
    assert isinstance(pointer, str)
    return rfc6901.resolve_while(document, pointer, acc, step, config or DEFAULT_CONFIG)
