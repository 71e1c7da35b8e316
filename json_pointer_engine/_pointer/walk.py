from typing import Any, Callable, List, Sequence, Tuple, Union
from collections.abc import Mapping, Sequence as SequenceABC
from dataclasses import dataclass, field
from enum import Enum
import logging
import re

from ..result import Ok, NOT_FOUND
from .syntax import unescape

log = logging.getLogger(__name__)

_ARRAY_INDEX = re.compile(r"0|[1-9][0-9]*")


class Missing:
    def __repr__(self) -> str:
        return "MISSING"


MISSING = Missing()


class NodeKind(Enum):
    OBJECT = "object"
    SEQUENCE = "sequence"
    SCALAR = "scalar"


def node_kind(node: Any) -> NodeKind:
    if isinstance(node, Mapping):
        return NodeKind.OBJECT
    if isinstance(node, SequenceABC) and not isinstance(node, (str, bytes, bytearray)):
        return NodeKind.SEQUENCE
    return NodeKind.SCALAR


def parse_index(token: str) -> Union[int, None]:
    if _ARRAY_INDEX.fullmatch(token) is None:
        return None
    return int(token)


def lookup(node: Any, token: str) -> Any:
    """
    Returns the child of node addressed by the raw token or MISSING.
    """
    kind = node_kind(node)
    if kind is NodeKind.SEQUENCE:
        index = parse_index(token)
        if index is None or index >= len(node):
            return MISSING
        return node[index]
    if kind is NodeKind.OBJECT:
        key = unescape(token)
        if key not in node:
            return MISSING
        return node[key]
    return MISSING


@dataclass(frozen=True)
class Continue:
    value: Any
    state: Any


@dataclass(frozen=True)
class Halt:
    result: Any


Step = Callable[[Any, str, Tuple[Any, Any]], Union[Continue, Halt]]


def follow(value: Any, token: str, context: Tuple[Any, Any]) -> Continue:
    _, state = context
    return Continue(value, state)


def walk(document: Any, tokens: Sequence[str], step: Step, state: Any) -> Any:
    """
    Descends into document along tokens. At each level, step decides whether to
    continue (possibly with a different value and state) or to halt.
    Returns Ok((value, state)), NOT_FOUND or whatever a halting step returned.
    """
    value = document
    for token in tokens:
        child = lookup(value, token)
        if child is MISSING:
            log.debug("Cannot find %r in %s", token, node_kind(value).value)
            return NOT_FOUND
        outcome = step(child, token, (value, state))
        if isinstance(outcome, Halt):
            return outcome.result
        value, state = outcome.value, outcome.state
    return Ok((value, state))


@dataclass
class Trail:
    """
    Containers and raw tokens visited while descending, root first.
    Level 0 denotes the innermost container.
    """
    ancestors: List[Any] = field(default_factory=list)
    tokens: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.ancestors)

    def ancestor(self, level: int) -> Any:
        if level >= len(self.ancestors):
            return MISSING
        return self.ancestors[-1 - level]

    def token(self, level: int) -> Union[str, Missing]:
        if level >= len(self.tokens):
            return MISSING
        return self.tokens[-1 - level]


def record(value: Any, token: str, context: Tuple[Any, Trail]) -> Continue:
    container, trail = context
    trail.ancestors.append(container)
    trail.tokens.append(token)
    return Continue(value, trail)
