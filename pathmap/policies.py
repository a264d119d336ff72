import copy
from collections.abc import Callable, Mapping
from typing import Any

from .errors import AlreadyExistsError, LeafMissingError, MissingError
from .options import PathMapOptions
from .walker import validate_function, validate_initializer


def rebuild_node(node: Mapping, key: Any, value: Any, rebuild: str) -> Mapping:
    # Only dict copies are known to own their storage.
    if rebuild == "copy" and isinstance(node, dict):
        new_node = copy.copy(node)
    else:
        new_node = dict(node)
    new_node[key] = value
    return new_node


class FetchPolicy:
    def validate_arguments(self) -> None:
        pass

    def on_exhausted(self, node):
        return node

    def on_last_key(self, node, key, prefix):
        if key not in node:
            raise MissingError(prefix)
        return node[key]

    def on_missing_intermediate(self, node, key, prefix):
        raise MissingError(prefix)

    def on_descended(self, node, key, child_result):
        return child_result


class _WritePolicy:
    vivify = False

    def __init__(self, options: PathMapOptions):
        self._options = options

    def validate_arguments(self) -> None:
        pass

    def on_missing_intermediate(self, node, key, prefix):
        if not self.vivify:
            raise MissingError(prefix)
        return self._options.vivify_factory()

    def on_descended(self, node, key, child_result):
        return self._set(node, key, child_result)

    def _set(self, node, key, value):
        return rebuild_node(node, key, value, self._options.rebuild)


class PutPolicy(_WritePolicy):
    def __init__(self, options: PathMapOptions, value: Any):
        super().__init__(options)
        self._value = value

    def on_exhausted(self, node):
        return self._value

    def on_last_key(self, node, key, prefix):
        if key not in node:
            raise MissingError(prefix)
        return self._set(node, key, self._value)


class PutAutoPolicy(PutPolicy):
    vivify = True

    def on_last_key(self, node, key, prefix):
        return self._set(node, key, self._value)


class PutNewPolicy(_WritePolicy):
    def __init__(self, options: PathMapOptions, value: Any):
        super().__init__(options)
        self._value = value

    def on_exhausted(self, node):
        raise AlreadyExistsError([])

    def on_last_key(self, node, key, prefix):
        if key in node:
            raise AlreadyExistsError(prefix)
        return self._set(node, key, self._value)


class PutNewAutoPolicy(PutNewPolicy):
    vivify = True


class EnsurePolicy(_WritePolicy):
    def __init__(self, options: PathMapOptions, initializer: Callable[[], Any]):
        super().__init__(options)
        self._initializer = initializer

    def validate_arguments(self) -> None:
        validate_initializer(self._initializer)

    def on_exhausted(self, node):
        return node

    def on_last_key(self, node, key, prefix):
        if key in node:
            return node
        return self._set(node, key, self._initializer())

    def on_descended(self, node, key, child_result):
        # Nothing was initialized below, keep the original subtree.
        if child_result is node[key]:
            return node
        return super().on_descended(node, key, child_result)


class UpdatePolicy(_WritePolicy):
    def __init__(self, options: PathMapOptions, function: Callable[[Any], Any]):
        super().__init__(options)
        self._function = function

    def validate_arguments(self) -> None:
        validate_function(self._function, 1)

    def on_exhausted(self, node):
        return self._function(node)

    def on_last_key(self, node, key, prefix):
        if key in node:
            return self._set(node, key, self._function(node[key]))
        return self._set(node, key, self._on_leaf_missing(prefix))

    def _on_leaf_missing(self, prefix):
        raise LeafMissingError(prefix)


class UpdateDefaultPolicy(UpdatePolicy):
    def __init__(
        self,
        options: PathMapOptions,
        function: Callable[[Any], Any],
        default: Any,
    ):
        super().__init__(options, function)
        self._default = default

    def _on_leaf_missing(self, prefix):
        return self._default


class UpdateAutoPolicy(UpdateDefaultPolicy):
    vivify = True

    def _on_leaf_missing(self, prefix):
        return self._function(self._default)
