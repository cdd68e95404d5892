from techblog.repository import KeyedBatchLoader


def test_load_groups_values_and_defaults_missing_keys() -> None:
    calls = []

    def fetch(keys):
        calls.append(list(keys))
        return [(1, "a"), (3, "c"), (1, "b")]

    loaded = KeyedBatchLoader(fetch).load([1, 2, 3])

    assert loaded == {1: ["a", "b"], 2: [], 3: ["c"]}
    assert calls == [[1, 2, 3]]


def test_load_deduplicates_keys_preserving_order() -> None:
    calls = []

    def fetch(keys):
        calls.append(list(keys))
        return []

    loaded = KeyedBatchLoader(fetch).load([5, 2, 5, 2])

    assert list(loaded) == [5, 2]
    assert calls == [[5, 2]]


def test_load_ignores_rows_for_unrequested_keys() -> None:
    loaded = KeyedBatchLoader(lambda keys: [(9, "stray"), (1, "x")]).load([1])

    assert loaded == {1: ["x"]}


def test_load_without_keys_never_fetches() -> None:
    def fetch(keys):
        raise AssertionError("fetch should not be called")

    assert KeyedBatchLoader(fetch).load([]) == {}


def test_loaded_lists_are_independent() -> None:
    loader = KeyedBatchLoader(lambda keys: [(1, "x")])

    first = loader.load([1])
    first[1].append("mutated")

    assert loader.load([1]) == {1: ["x"]}
