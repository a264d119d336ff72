import os
from collections.abc import Callable, MutableMapping
from dataclasses import dataclass

REBUILD_ENV_VAR = "PATHMAP_REBUILD"
_VALID_REBUILDS = {"copy", "dict"}


@dataclass(kw_only=True, frozen=True)
class PathMapOptions:
    rebuild: str = "copy"
    vivify_factory: Callable[[], MutableMapping] = dict

    def __post_init__(self):
        _validate_rebuild(self.rebuild)


def _validate_rebuild(rebuild: str) -> None:
    if rebuild not in _VALID_REBUILDS:
        valid_options = ", ".join(sorted(_VALID_REBUILDS))
        raise ValueError(
            f"Invalid rebuild strategy '{rebuild}'. Expected one of: {valid_options}."
        )


def resolve_options(preference: str | None = None) -> PathMapOptions:
    requested = (preference or os.getenv(REBUILD_ENV_VAR, "copy")).strip().lower()
    _validate_rebuild(requested)
    return PathMapOptions(rebuild=requested)
