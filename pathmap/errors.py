from typing import Any


class PathMapError(Exception):
    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotAMapError(PathMapError):
    def __init__(self, value: Any, prefix: list):
        super().__init__(
            f"Expected a mapping at prefix {prefix!r}, got {type(value).__name__}."
        )
        self.value = value
        self.prefix = prefix


class MissingError(PathMapError):
    def __init__(self, prefix: list):
        super().__init__(f"Key path {prefix!r} does not exist.")
        self.prefix = prefix


class InvalidPathError(PathMapError):
    def __init__(self, path: Any):
        super().__init__(
            f"Invalid path {path!r}. Expected a list or tuple of hashable keys."
        )
        self.path = path


class AlreadyExistsError(PathMapError):
    def __init__(self, prefix: list):
        super().__init__(f"A value already exists at {prefix!r}.")
        self.prefix = prefix


class LeafMissingError(PathMapError):
    def __init__(self, path: list):
        super().__init__(f"Leaf at {path!r} does not exist.")
        self.path = path


class InvalidFunctionError(PathMapError):
    def __init__(self, value: Any, arity: int):
        super().__init__(
            f"Expected a callable accepting {arity} positional argument(s), got {value!r}."
        )
        self.value = value
        self.arity = arity


class InvalidInitializerError(PathMapError):
    def __init__(self, value: Any):
        super().__init__(
            f"Expected a callable accepting no arguments, got {value!r}."
        )
        self.value = value
