class JsonPointerException(Exception):

    def __init__(self, error) -> None:
        super().__init__(error)
        self.error = error

    def __str__(self) -> str:
        return self.error.message


class InvalidPointerException(JsonPointerException):
    pass


class PointerNotFoundException(JsonPointerException):
    pass
