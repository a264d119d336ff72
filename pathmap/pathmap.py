from collections.abc import Callable, Mapping
from typing import Any

from .errors import PathMapError
from .options import PathMapOptions, resolve_options
from .policies import (
    EnsurePolicy,
    FetchPolicy,
    PutAutoPolicy,
    PutNewAutoPolicy,
    PutNewPolicy,
    PutPolicy,
    UpdateAutoPolicy,
    UpdateDefaultPolicy,
    UpdatePolicy,
)
from .walker import run

_UNSET = object()


class PathMap:
    def __init__(self, options: PathMapOptions | None = None):
        self._options = options if options is not None else PathMapOptions()

    @property
    def options(self) -> PathMapOptions:
        return self._options

    def fetch(self, data: Mapping, path: list | tuple) -> Any:
        """
        Return the value stored at `path` in `data`.

        Args:
            data: Root mapping to read from.
            path: List or tuple of keys. An empty path addresses `data` itself.

        Returns:
            The value at `path`, or `data` itself when `path` is empty.

        Raises:
            NotAMapError: If `data`, or any value the walk must descend through,
                is not a mapping.
            InvalidPathError: If `path` is not a list or tuple of hashable keys.
            MissingError: If a key along `path` does not exist.

        Examples:
            >>> pathmap.fetch({"a": {"b": 1}}, ["a", "b"])
            1
            >>> pathmap.fetch({"a": {"b": 1}}, [])
            {'a': {'b': 1}}
            >>> pathmap.fetch({"a": 1}, ["a", "b"])
            Traceback (most recent call last):
            ...
            pathmap.errors.NotAMapError: Expected a mapping at prefix ['a'], got int.
        """
        return run(data, path, FetchPolicy())

    def get(self, data: Any, path: Any, default: Any = None) -> Any:
        """
        Return the value at `path`, or `default` on any failure.

        Unlike `fetch`, this never raises for malformed input: a non-mapping
        root or a malformed path also yields `default`.

        Examples:
            >>> pathmap.get({"a": {"b": 1}}, ["a", "b"])
            1
            >>> pathmap.get({"a": {}}, ["a", "b"], default="n/a")
            'n/a'
            >>> pathmap.get("oops", "a.b", default=0)
            0
        """
        try:
            return self.fetch(data, path)
        except PathMapError:
            return default

    def exists(self, data: Any, path: Any) -> bool:
        """
        Check whether `path` resolves in `data`. Never raises.
        """
        try:
            self.fetch(data, path)
        except PathMapError:
            return False
        return True

    def validate_path(self, data: Mapping, path: list | tuple) -> None:
        """
        Check that `path` can be walked in `data`.

        Returns `None` on success and raises exactly what `fetch` would raise
        otherwise.
        """
        self.fetch(data, path)

    def valid_path(self, data: Any, path: Any) -> bool:
        """
        Boolean form of `validate_path`. Never raises.
        """
        try:
            self.validate_path(data, path)
        except PathMapError:
            return False
        return True

    def put(self, data: Mapping, path: list | tuple, value: Any) -> Any:
        """
        Strictly replace the value at `path`, returning a new root.

        Every key of `path`, the last one included, must already exist.
        `data` is never modified; ancestors along `path` are rebuilt and the
        rest of the tree is shared with the result.

        Args:
            data: Root mapping.
            path: List or tuple of keys. An empty path replaces the whole root.
            value: Value to store.

        Returns:
            The new root (`value` itself when `path` is empty).

        Raises:
            NotAMapError: If the walk meets a non-mapping.
            InvalidPathError: If `path` is malformed.
            MissingError: If any key of `path` does not exist.

        Examples:
            >>> pathmap.put({"a": {"b": 1}}, ["a", "b"], 2)
            {'a': {'b': 2}}
            >>> pathmap.put({}, ["a", "b"], 1)
            Traceback (most recent call last):
            ...
            pathmap.errors.MissingError: Key path ['a'] does not exist.
        """
        return run(data, path, PutPolicy(self._options, value))

    def put_auto(self, data: Mapping, path: list | tuple, value: Any) -> Any:
        """
        Store `value` at `path`, creating missing intermediate mappings.

        Raises:
            NotAMapError: If the walk meets an existing non-mapping.
            InvalidPathError: If `path` is malformed.

        Examples:
            >>> pathmap.put_auto({}, ["a", "b"], 1)
            {'a': {'b': 1}}
        """
        return run(data, path, PutAutoPolicy(self._options, value))

    def put_new(self, data: Mapping, path: list | tuple, value: Any) -> Mapping:
        """
        Store `value` at `path` only if nothing is there yet.

        Intermediate keys must exist. An empty path always fails, since the
        root already exists.

        Raises:
            NotAMapError: If the walk meets a non-mapping.
            InvalidPathError: If `path` is malformed.
            MissingError: If an intermediate key does not exist.
            AlreadyExistsError: If the last key already holds a value, or
                `path` is empty.
        """
        return run(data, path, PutNewPolicy(self._options, value))

    def put_new_auto(
        self, data: Mapping, path: list | tuple, value: Any
    ) -> Mapping:
        """
        Like `put_new`, but creates missing intermediate mappings.
        """
        return run(data, path, PutNewAutoPolicy(self._options, value))

    def ensure(
        self, data: Mapping, path: list | tuple, initializer: Callable[[], Any]
    ) -> Mapping:
        """
        Initialize the value at `path` with `initializer()` if it is missing.

        `initializer` is only called when the last key is absent. Intermediate
        keys must exist. An empty path returns `data` unchanged.

        Args:
            data: Root mapping.
            path: List or tuple of keys.
            initializer: Zero-argument callable producing the initial value.

        Returns:
            The new root, or `data` itself when nothing had to be initialized.

        Raises:
            NotAMapError: If the walk meets a non-mapping.
            InvalidPathError: If `path` is malformed.
            InvalidInitializerError: If `initializer` is not a zero-argument
                callable.
            MissingError: If an intermediate key does not exist.

        Examples:
            >>> pathmap.ensure({"a": {}}, ["a", "b"], list)
            {'a': {'b': []}}
        """
        return run(data, path, EnsurePolicy(self._options, initializer))

    def update(
        self,
        data: Mapping,
        path: list | tuple,
        function: Callable[[Any], Any],
        default: Any = _UNSET,
    ) -> Any:
        """
        Replace the value at `path` with `function(value)`.

        Without `default`, a missing last key raises `LeafMissingError`. With
        `default`, a missing last key is set to `default` as is and `function`
        is not called. Intermediate keys must exist either way. An empty path
        applies `function` to the whole root.

        Args:
            data: Root mapping.
            path: List or tuple of keys.
            function: One-argument callable.
            default: Value stored when the last key is missing.

        Returns:
            The new root.

        Raises:
            NotAMapError: If the walk meets a non-mapping.
            InvalidPathError: If `path` is malformed.
            InvalidFunctionError: If `function` does not take one argument.
            MissingError: If an intermediate key does not exist.
            LeafMissingError: If the last key is missing and no `default`
                was given.

        Examples:
            >>> pathmap.update({"a": {"b": 1}}, ["a", "b"], lambda v: v + 1)
            {'a': {'b': 2}}
            >>> pathmap.update({"a": {}}, ["a", "b"], lambda v: v + 1, default=0)
            {'a': {'b': 0}}
        """
        if default is _UNSET:
            policy = UpdatePolicy(self._options, function)
        else:
            policy = UpdateDefaultPolicy(self._options, function, default)
        return run(data, path, policy)

    def update_auto(
        self,
        data: Mapping,
        path: list | tuple,
        default: Any,
        function: Callable[[Any], Any],
    ) -> Any:
        """
        Replace the value at `path` with `function(value)`, creating missing
        intermediate mappings. A missing last key becomes `function(default)`.

        Examples:
            >>> pathmap.update_auto({}, ["hits", "home"], 0, lambda v: v + 1)
            {'hits': {'home': 1}}
        """
        return run(data, path, UpdateAutoPolicy(self._options, function, default))


def resolve_pathmap(preference: str | None = None) -> tuple[str, PathMap]:
    options = resolve_options(preference)
    return options.rebuild, PathMap(options)
