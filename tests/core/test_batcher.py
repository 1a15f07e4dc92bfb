"""Tests for the batch partitioner."""

import math

import pytest

from schemabus.application.services.batcher import DEFAULT_MAX_BATCH_SIZE, partition


class TestPartition:
    @pytest.mark.parametrize("count", [0, 1, 9, 10, 11, 20, 25, 101])
    def test_batch_count_and_order(self, count):
        items = list(range(count))

        batches = list(partition(items, 10))

        assert len(batches) == math.ceil(count / 10)
        assert all(1 <= len(b) <= 10 for b in batches)
        assert [i for b in batches for i in b] == items

    def test_empty_input_yields_no_batches(self):
        assert list(partition([], 10)) == []

    def test_closes_batch_at_ceiling(self):
        assert [len(b) for b in partition(list(range(25)), 10)] == [10, 10, 5]

    def test_default_ceiling_is_ten(self):
        assert DEFAULT_MAX_BATCH_SIZE == 10
        assert [len(b) for b in partition(list(range(12)))] == [10, 2]

    def test_is_restartable(self):
        batches = partition(["a", "b", "c"], 2)
        assert list(batches) == [["a", "b"], ["c"]]
        assert list(batches) == [["a", "b"], ["c"]]

    def test_len(self):
        assert len(partition(list(range(21)), 10)) == 3
        assert len(partition([], 10)) == 0

    def test_is_lazy(self):
        batches = iter(partition(list(range(30)), 10))
        assert next(batches) == list(range(10))

    def test_invalid_ceiling_raises(self):
        with pytest.raises(ValueError):
            partition([1], 0)
