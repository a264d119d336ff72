from benchbro import Case
from pathmap import pathmap

fetch_case = Case(
    name="fetch",
    case_type="cpu",
    metric_type="time",
    tags=["pathmap", "fetch"],
    warmup_iterations=5,
    min_iterations=50,
    repeats=10,
)

write_case = Case(
    name="write",
    case_type="cpu",
    metric_type="time",
    tags=["pathmap", "put_auto", "update"],
    warmup_iterations=5,
    min_iterations=50,
    repeats=10,
)

DEEP_PATH = ["a", "b", "c", "d", "e", "f", "g", "h", "i", "j"]


@fetch_case.benchmark()
def simple_path():
    data = {"a": {"b": {"c": 1}}}

    pathmap.fetch(data, ["a", "b", "c"])


@fetch_case.benchmark()
def deep_nested_path():
    data = {"a": {"b": {"c": {"d": {"e": {"f": {"g": {"h": {"i": {"j": 1}}}}}}}}}}

    pathmap.fetch(data, DEEP_PATH)


@write_case.benchmark()
def put_auto_deep_path_from_empty():
    pathmap.put_auto({}, DEEP_PATH, 1)


@write_case.benchmark()
def update_wide_sibling_tree():
    data = {f"key_{i}": {"count": i} for i in range(500)}

    pathmap.update(data, ["key_250", "count"], lambda value: value + 1)
