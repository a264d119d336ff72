from typing import Any

from .errors import (
    AlreadyExistsError,
    InvalidFunctionError,
    InvalidInitializerError,
    InvalidPathError,
    LeafMissingError,
    MissingError,
    NotAMapError,
    PathMapError,
)
from .options import PathMapOptions, resolve_options
from .pathmap import _UNSET, PathMap, resolve_pathmap

rebuild_name, pathmap = resolve_pathmap()


def fetch(data, path) -> Any:
    return pathmap.fetch(data, path)


def get(data, path, default: Any = None) -> Any:
    return pathmap.get(data, path, default)


def exists(data, path) -> bool:
    return pathmap.exists(data, path)


def validate_path(data, path) -> None:
    pathmap.validate_path(data, path)


def valid_path(data, path) -> bool:
    return pathmap.valid_path(data, path)


def put(data, path, value: Any) -> Any:
    return pathmap.put(data, path, value)


def put_auto(data, path, value: Any) -> Any:
    return pathmap.put_auto(data, path, value)


def put_new(data, path, value: Any) -> Any:
    return pathmap.put_new(data, path, value)


def put_new_auto(data, path, value: Any) -> Any:
    return pathmap.put_new_auto(data, path, value)


def ensure(data, path, initializer) -> Any:
    return pathmap.ensure(data, path, initializer)


def update(data, path, function, default: Any = _UNSET) -> Any:
    return pathmap.update(data, path, function, default)


def update_auto(data, path, default: Any, function) -> Any:
    return pathmap.update_auto(data, path, default, function)


__all__ = [
    "pathmap",
    "PathMap",
    "PathMapOptions",
    "rebuild_name",
    "resolve_options",
    "resolve_pathmap",
    "fetch",
    "get",
    "exists",
    "validate_path",
    "valid_path",
    "put",
    "put_auto",
    "put_new",
    "put_new_auto",
    "ensure",
    "update",
    "update_auto",
    "PathMapError",
    "NotAMapError",
    "MissingError",
    "InvalidPathError",
    "AlreadyExistsError",
    "LeafMissingError",
    "InvalidFunctionError",
    "InvalidInitializerError",
]
