from typing import Any, Union
from dataclasses import dataclass
from enum import Enum
from .exception import InvalidPointerException, PointerNotFoundException


class ErrorKind(Enum):
    SYNTAX = 0
    NOT_FOUND = 1

    def exception(self):
        if self is ErrorKind.SYNTAX:
            return InvalidPointerException
        return PointerNotFoundException


@dataclass(frozen=True)
class Ok:
    value: Any

    def ok(self) -> bool:
        return True

    def unwrap(self) -> Any:
        return self.value


@dataclass(frozen=True)
class Err:
    kind: ErrorKind
    message: str

    def ok(self) -> bool:
        return False

    def unwrap(self) -> Any:
        """Raises the exception matching the error kind"""
        raise self.kind.exception()(self)


Result = Union[Ok, Err]

NOT_FOUND = Err(ErrorKind.NOT_FOUND, "not found")
INVALID_SYNTAX = Err(ErrorKind.SYNTAX, "invalid JSON pointer syntax")
INVALID_RELATIVE_SYNTAX = Err(ErrorKind.SYNTAX, "invalid relative JSON pointer syntax")
TOO_DEEP = Err(ErrorKind.SYNTAX, "JSON pointer exceeds maximum depth")
