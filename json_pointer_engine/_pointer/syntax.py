# Implements the two representations of RFC 6901 JSON pointers
# See: https://datatracker.ietf.org/doc/html/rfc6901#section-5

from typing import List, Union
from urllib.parse import unquote
import logging
import re

from ..config import ResolveConfig, DEFAULT_CONFIG
from ..result import Ok, Err, INVALID_SYNTAX, TOO_DEEP

log = logging.getLogger(__name__)

# A '%' which does not start a two digit hex escape
_BROKEN_PERCENT_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def unescape(token: str) -> str:
    """
    Restores a reference token, i.e. '~1' becomes '/' and '~0' becomes '~'.
    The order matters: '~01' must become '~1' and not '/'.
    """
    return token.replace("~1", "/").replace("~0", "~")


def _decode_fragment(fragment: str) -> Union[str, None]:
    if "#" in fragment:
        # There is no URI with two fragments
        return None
    if _BROKEN_PERCENT_ESCAPE.search(fragment):
        return None
    try:
        return unquote(fragment, errors="strict")
    except UnicodeDecodeError:
        return None


def _split(path: str) -> List[str]:
    tokens = path.split("/")
    if tokens[0] == "":
        tokens.pop(0)
    return tokens


def tokenize(pointer: str, config: ResolveConfig = DEFAULT_CONFIG) -> Union[Ok, Err]:
    """
    Splits a pointer into its raw reference tokens.
    Tokens are still escaped, see unescape().
    """
    if pointer == "" or pointer == "#":
        return Ok([])
    if pointer.startswith("/"):
        tokens = _split(pointer)
    elif pointer.startswith("#"):
        path = _decode_fragment(pointer[1:])
        if path is None:
            log.debug("Invalid URI fragment in pointer %r", pointer)
            return INVALID_SYNTAX
        tokens = _split(path)
    else:
        log.debug("Pointer %r neither starts with '/' nor with '#'", pointer)
        return INVALID_SYNTAX
    if not config.allows(len(tokens)):
        log.debug("Pointer %r has %d tokens, limit is %d", pointer, len(tokens), config.max_depth)
        return TOO_DEEP
    return Ok(tokens)
