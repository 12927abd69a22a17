"""Properties every algorithm has to satisfy when driven step by step."""

from collections import Counter

import pytest

from stepsorter import Algorithm, SortEngine, StepEvent, is_ordered
from stepsorter.bars import generate_bars

ALL = list(Algorithm)

INPUTS = {
    "empty":      [],
    "single":     [5],
    "pair":       [2, 1],
    "sorted":     [1, 2, 3, 4, 5, 6],
    "reversed":   [9, 7, 5, 3, 1, 0],
    "duplicates": [7, 7, 7, 7, 7],
    "mixed_dups": [2, 1, 2, 1, 3, 1, 2],
    "signed":     [3, -1, 0, -5, 2, -5],
    "odd":        [5, 1, 4, 2, 3],
    "random":     generate_bars(61, 10, 700, seed=7),
}


def worst_case(algo, n):
    """Upper bound on events before termination."""
    levels = (n - 1).bit_length() if n > 1 else 0
    bounds = {
        Algorithm.BUBBLE:    n * (n - 1) // 2,
        Algorithm.INSERTION: n * (n - 1) // 2 + n,
        Algorithm.SELECTION: n * (n - 1) // 2 + n,
        Algorithm.QUICK:     n * (n + 1) // 2 + n,
        Algorithm.MERGE:     n * levels + n,
    }
    return max(1, bounds[algo])


def drive(engine, arr, limit):
    events = []
    while True:
        event = engine.step(arr)
        if event is None:
            return events
        events.append(event)
        assert len(events) <= limit, "engine did not terminate in time"


@pytest.mark.parametrize("algo", ALL, ids=lambda a: a.key)
@pytest.mark.parametrize("name", list(INPUTS))
class TestRunToCompletion:

    def test_terminates_ordered(self, algo, name):
        arr = list(INPUTS[name])
        engine = SortEngine(algo)
        drive(engine, arr, worst_case(algo, len(arr)))
        assert engine.finished
        assert is_ordered(arr)

    def test_permutation(self, algo, name):
        arr = list(INPUTS[name])
        before = Counter(arr)
        drive(SortEngine(algo), arr, worst_case(algo, len(arr)))
        assert Counter(arr) == before
        assert arr == sorted(INPUTS[name])

    def test_noop_after_termination(self, algo, name):
        arr = list(INPUTS[name])
        engine = SortEngine(algo)
        drive(engine, arr, worst_case(algo, len(arr)))
        snapshot = list(arr)
        for _ in range(5):
            assert engine.step(arr) is None
        assert arr == snapshot

    def test_events_in_range(self, algo, name):
        arr = list(INPUTS[name])
        events = drive(SortEngine(algo), arr, worst_case(algo, len(arr)))
        for event in events:
            for i in event.indices:
                assert 0 <= i < len(arr)

    def test_swapped_means_array_changed(self, algo, name):
        arr = list(INPUTS[name])
        engine = SortEngine(algo)
        limit = worst_case(algo, len(arr))
        for _ in range(limit):
            before = list(arr)
            event = engine.step(arr)
            if event is None:
                break
            assert event.swapped == (arr != before)
        assert engine.finished

    def test_step_counter(self, algo, name):
        arr = list(INPUTS[name])
        engine = SortEngine(algo)
        events = drive(engine, arr, worst_case(algo, len(arr)))
        assert engine.steps == len(events)


@pytest.mark.parametrize("algo", ALL, ids=lambda a: a.key)
class TestTrivialInputs:

    def test_empty_is_terminal(self, algo):
        engine = SortEngine(algo)
        assert engine.step([]) is None
        assert engine.finished
        assert engine.step([]) is None

    def test_single_element(self, algo):
        arr = [42]
        engine = SortEngine(algo)
        assert engine.step(arr) == StepEvent((None, None), False)
        assert engine.step(arr) is None
        assert arr == [42]

    def test_sorted_takes_one_confirming_pass(self, algo):
        arr = [1, 2, 3, 4, 5]
        engine = SortEngine(algo)
        events = drive(engine, arr, 10)
        assert [e.compared for e in events] == [(0, 1), (1, 2), (2, 3), (3, 4)]
        assert not any(e.swapped for e in events)
        assert arr == [1, 2, 3, 4, 5]

    def test_equal_elements_never_swap(self, algo):
        arr = [3, 3, 3]
        events = drive(SortEngine(algo), arr, 10)
        assert not any(e.swapped for e in events)

    def test_length_change_fails_loudly(self, algo):
        engine = SortEngine(algo)
        engine.step([3, 1, 2])
        with pytest.raises(ValueError):
            engine.step([1, 2])


class TestBubbleScenario:

    def test_three_one_two(self):
        arr = [3, 1, 2]
        engine = SortEngine(Algorithm.BUBBLE)

        assert engine.step(arr) == StepEvent((0, 1), True)
        assert arr == [1, 3, 2]
        assert engine.step(arr) == StepEvent((1, 2), True)
        assert arr == [1, 2, 3]
        # Confirming pass
        assert engine.step(arr) == StepEvent((0, 1), False)
        assert engine.step(arr) is None
        assert is_ordered(arr)
        assert engine.step(arr) is None

    def test_early_exit(self):
        arr = [1, 3, 2, 4]
        events = drive(SortEngine(Algorithm.BUBBLE), arr, 10)
        assert [e.compared for e in events] == [(0, 1), (1, 2), (2, 3), (0, 1), (1, 2)]
        assert arr == [1, 2, 3, 4]


class TestIsOrdered:

    @pytest.mark.parametrize("arr", [[], [1], [1, 1, 2], [-3, 0, 0, 8]])
    def test_ordered(self, arr):
        assert is_ordered(arr)

    @pytest.mark.parametrize("arr", [[2, 1], [1, 3, 2], [0, 0, -1]])
    def test_unordered(self, arr):
        assert not is_ordered(arr)

    def test_pure(self):
        arr = [3, 1, 2]
        is_ordered(arr)
        assert arr == [3, 1, 2]


class TestStepEvent:

    def test_indices_drop_missing(self):
        assert StepEvent((None, None)).indices == []
        assert StepEvent((4, None)).indices == [4]
        assert StepEvent((1, 2), True).indices == [1, 2]

    def test_frozen(self):
        event = StepEvent((0, 1))
        with pytest.raises(AttributeError):
            event.swapped = True
