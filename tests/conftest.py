import os
from collections.abc import Iterator
from typing import Any

import pytest

from pathmap import PathMap, PathMapOptions


def _discover_engines() -> list[tuple[str, PathMap]]:
    available: dict[str, PathMap] = {
        "copy": PathMap(PathMapOptions(rebuild="copy")),
        "dict": PathMap(PathMapOptions(rebuild="dict")),
    }

    requested = os.getenv("PATHMAP_TEST_REBUILDS")
    if requested is None:
        return list(available.items())

    requested_ids = [item.strip() for item in requested.split(",") if item.strip()]
    missing = [engine_id for engine_id in requested_ids if engine_id not in available]
    if missing:
        raise RuntimeError(
            "Requested rebuild strategies are unknown: "
            f"{', '.join(missing)}. Available: {', '.join(available)}"
        )

    return [(engine_id, available[engine_id]) for engine_id in requested_ids]


_ENGINES = _discover_engines()


@pytest.fixture(scope="session", params=_ENGINES, ids=lambda engine: engine[0])
def engine_pair(request: pytest.FixtureRequest) -> tuple[str, PathMap]:
    return request.param


@pytest.fixture
def rebuild_name(engine_pair: tuple[str, PathMap]) -> str:
    return engine_pair[0]


@pytest.fixture(autouse=True)
def _inject_engine_pathmap(
    request: pytest.FixtureRequest, engine_pair: tuple[str, PathMap]
) -> Iterator[None]:
    _, engine = engine_pair
    module = request.module

    if module is None or not hasattr(module, "pathmap"):
        yield
        return

    with pytest.MonkeyPatch.context() as monkeypatch:
        monkeypatch.setattr(module, "pathmap", engine, raising=False)
        yield


@pytest.fixture
def nested() -> dict[str, Any]:
    return {"a": {"b": {"c": 1}}, "x": {"y": 2}}
