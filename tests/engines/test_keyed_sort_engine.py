#!filepath: tests/engines/test_keyed_sort_engine.py
from collections import Counter

import pytest

from series_sort.engines.keyed_sort_engine import KeyedSortEngine
from series_sort.engines.transform_runner import TransformRunner
from series_sort.observability.instrumentation import Instrumentation
from series_sort.utils.errors import (
    InconsistentOrInvalidKeyTypeError,
    NotAnEntityCollectionError,
    NotATransformError,
)


def last_value(s):
    return s.most_recent_value()


@pytest.fixture
def three(series):
    return [
        series("c", [(1, 30)]),
        series("a", [(1, 10)]),
        series("b", [(1, 20)]),
    ]


def test_orders_by_integer_key_in_place(three):
    entities = list(three)
    out = KeyedSortEngine().execute(entities, last_value)

    assert out is entities
    assert [e.identity().name for e in out] == ["a", "b", "c"]


def test_output_is_permutation(series):
    entities = [series(str(i), [(i, (i * 7) % 5)]) for i in range(12)]
    before = Counter(id(e) for e in entities)

    out = KeyedSortEngine().execute(list(entities), last_value)

    assert Counter(id(e) for e in out) == before
    keys = [e.most_recent_value() for e in out]
    assert keys == sorted(keys)


def test_tuple_input_returns_new_list(three):
    entities = tuple(three)
    out = KeyedSortEngine().execute(entities, last_value)

    assert isinstance(out, list)
    assert entities == tuple(three)
    assert [e.identity().name for e in out] == ["a", "b", "c"]


def test_float_and_text_keys(series):
    floats = [series("x", [(1, 2.5)]), series("y", [(1, -1.0)])]
    assert [e.identity().name for e in KeyedSortEngine().execute(floats, last_value)] == ["y", "x"]

    texts = [series("x", [(1, "b")]), series("y", [(1, "B")]), series("z", [(1, "a")])]
    out = KeyedSortEngine().execute(texts, last_value)
    assert [e.most_recent_value() for e in out] == ["B", "a", "b"]


def test_ties_keep_input_order(series):
    entities = [series(n, [(1, 1)]) for n in ("q", "p", "r")]
    out = KeyedSortEngine().execute(list(entities), lambda s: 0)

    assert out is not entities
    assert [id(e) for e in out] == [id(e) for e in entities]


def test_transform_called_once_per_entity_in_input_order_before_sorting(three):
    calls = []

    def transform(s):
        calls.append(s.identity().name)
        return s.most_recent_value()

    KeyedSortEngine().execute(three, transform)

    assert calls == ["c", "a", "b"]


def test_extraction_completes_before_any_comparison(three, monkeypatch):
    import series_sort.engines.keyed_sort_engine as kse

    events = []
    real = kse.key_sort_function

    def recording_key_function(kind):
        fn = real(kind)

        def wrapped(value):
            events.append("key")
            return fn(value)

        return wrapped

    class RecordingRunner(TransformRunner):
        def run(self, transform, entity):
            events.append("run")
            return transform(entity)

    monkeypatch.setattr(kse, "key_sort_function", recording_key_function)
    KeyedSortEngine(runner=RecordingRunner()).execute(three, last_value)

    assert events == ["run", "run", "run", "key", "key", "key"]


def test_empty_input_does_not_run_transform():
    def transform(s):
        raise AssertionError("must not be called")

    assert KeyedSortEngine().execute([], transform) == []


@pytest.mark.parametrize("bad", [None, True, False, [1], {"a": 1}, b"x"])
def test_invalid_key_rejected(series, bad):
    entities = [series("a", [(1, 1)])]
    with pytest.raises(InconsistentOrInvalidKeyTypeError, match="consistently typed"):
        KeyedSortEngine().execute(entities, lambda s: bad)


def test_boolean_keys_rejected_even_though_last_value_accepts_them(series):
    entities = [series("a", [(1, True)]), series("b", [(1, False)])]

    with pytest.raises(InconsistentOrInvalidKeyTypeError) as exc:
        KeyedSortEngine().execute(entities, last_value)

    assert exc.value.index == 0
    assert exc.value.value is True


def test_mixed_kinds_fail_without_reordering(series):
    entities = [series("b", [(1, 2)]), series("a", [(1, 1)]), series("c", [(1, 1.5)])]
    snapshot = list(entities)
    calls = []

    def transform(s):
        calls.append(s.identity().name)
        return s.most_recent_value()

    with pytest.raises(InconsistentOrInvalidKeyTypeError) as exc:
        KeyedSortEngine().execute(entities, transform)

    assert entities == snapshot
    assert calls == ["b", "a", "c"]
    assert exc.value.index == 2
    assert exc.value.expected.value == "INTEGER"


def test_error_is_a_type_error(series):
    with pytest.raises(TypeError):
        KeyedSortEngine().execute([series("a", [(1, 1)])], lambda s: None)


@pytest.mark.parametrize("bad", ["not a list", 42, {"a": 1}])
def test_not_a_sequence(bad):
    with pytest.raises(NotAnEntityCollectionError, match="not an Entity collection"):
        KeyedSortEngine().execute(bad, last_value)


def test_non_entity_member_rejected_before_transform(series):
    calls = []

    def transform(s):
        calls.append(s)
        return 1

    with pytest.raises(NotAnEntityCollectionError):
        KeyedSortEngine().execute([series("a", [(1, 1)]), "oops"], transform)

    assert calls == []


def test_non_callable_transform_rejected(three):
    with pytest.raises(NotATransformError):
        KeyedSortEngine().execute(three, "DUP")


def test_transform_failure_propagates_and_keeps_side_effects(three):
    seen = []

    def transform(s):
        seen.append(s.identity().name)
        if len(seen) == 2:
            raise RuntimeError("boom")
        return 1

    snapshot = list(three)
    with pytest.raises(RuntimeError, match="boom"):
        KeyedSortEngine().execute(three, transform)

    assert seen == ["c", "a"]
    assert three == snapshot


def test_each_call_revalidates_from_scratch(series):
    engine = KeyedSortEngine()
    engine.execute([series("a", [(1, 1)])], last_value)

    out = engine.execute([series("b", [(1, "text")])], last_value)
    assert out[0].most_recent_value() == "text"


def test_instrumentation_records_phases(three):
    inst = Instrumentation(enabled=True)
    KeyedSortEngine(instrumentation=inst).execute(three, last_value)

    assert list(inst.timeline) == ["keyed_sort.extract", "keyed_sort.order"]
    assert inst.metrics.metrics["keyed_sort.entities"] == 3
    assert inst.metrics.metrics["keyed_sort.key_kind"] == "INTEGER"
    assert inst.metrics.metrics["keyed_sort.transform_calls"] == 3


def test_transform_calls_counted_up_to_failure(series):
    inst = Instrumentation(enabled=True)
    entities = [series("a", [(1, 1)]), series("b", [(1, "x")]), series("c", [(1, 2)])]

    with pytest.raises(InconsistentOrInvalidKeyTypeError):
        KeyedSortEngine(instrumentation=inst).execute(entities, last_value)

    assert inst.metrics.metrics["keyed_sort.transform_calls"] == 2
