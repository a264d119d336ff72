import inspect
import logging
from collections.abc import Mapping
from typing import Any, Protocol

from .errors import (
    InvalidFunctionError,
    InvalidInitializerError,
    InvalidPathError,
    NotAMapError,
    PathMapError,
)

logger = logging.getLogger(__name__)


class WalkPolicy(Protocol):
    def validate_arguments(self) -> None: ...

    def on_exhausted(self, node: Mapping) -> Any: ...

    def on_last_key(self, node: Mapping, key: Any, prefix: list) -> Any: ...

    def on_missing_intermediate(
        self, node: Mapping, key: Any, prefix: list
    ) -> Mapping: ...

    def on_descended(self, node: Mapping, key: Any, child_result: Any) -> Any: ...


def _is_path(path: Any) -> bool:
    if not isinstance(path, list | tuple):
        return False
    for key in path:
        try:
            hash(key)
        except TypeError:
            return False
    return True


def _accepts_positional(value: Any, count: int) -> bool:
    if not callable(value):
        return False
    try:
        signature = inspect.signature(value)
    except (TypeError, ValueError):
        # Some builtins expose no signature; trust them.
        return True
    try:
        signature.bind(*([None] * count))
    except TypeError:
        return False
    if inspect.isclass(value):
        # Constructors such as list or dict are judged by the call alone.
        return True
    try:
        signature.bind(*([None] * (count + 1)))
    except TypeError:
        return True
    return False


def validate_root_and_path(root: Any, path: Any) -> None:
    if not isinstance(root, Mapping):
        raise NotAMapError(root, [])
    if not _is_path(path):
        raise InvalidPathError(path)


def validate_function(function: Any, arity: int = 1) -> None:
    if not _accepts_positional(function, arity):
        raise InvalidFunctionError(function, arity)


def validate_initializer(initializer: Any) -> None:
    if not _accepts_positional(initializer, 0):
        raise InvalidInitializerError(initializer)


def walk(root: Mapping, path: list | tuple, policy: WalkPolicy) -> Any:
    """
    Walk `path` through `root`, letting `policy` decide every step.

    `root` and `path` must already be validated. The descent is a loop, so
    path length is not bounded by the recursion limit. Ancestors are then
    handed back to the policy from the deepest up. Failures raised at any
    depth propagate unchanged to the caller.
    """
    if not path:
        return policy.on_exhausted(root)

    path = list(path)
    ancestors: list[tuple[Mapping, Any]] = []
    node = root
    for depth, key in enumerate(path[:-1]):
        if not isinstance(node, Mapping):
            raise NotAMapError(node, path[:depth])
        ancestors.append((node, key))
        if key in node:
            node = node[key]
        else:
            node = policy.on_missing_intermediate(node, key, path[: depth + 1])

    if not isinstance(node, Mapping):
        raise NotAMapError(node, path[:-1])
    result = policy.on_last_key(node, path[-1], path)
    for node, key in reversed(ancestors):
        result = policy.on_descended(node, key, result)
    return result


def run(root: Any, path: Any, policy: WalkPolicy) -> Any:
    try:
        validate_root_and_path(root, path)
        policy.validate_arguments()
        return walk(root, path, policy)
    except PathMapError as ex:
        logger.debug(
            "%s failed on path %r: %s", type(policy).__name__, path, ex.message
        )
        raise
