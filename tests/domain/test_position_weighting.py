"""Tests for position-based chunk attribution weights."""

import math

import pytest

from knowledge_chat.domain.models import WeightedChunk
from knowledge_chat.domain.services.position_weighting import calculate_chunk_weights


def make_chunks(n: int) -> list[WeightedChunk]:
    return [WeightedChunk(chunk_id=f"c{i}") for i in range(n)]


def test_empty_input_returns_empty_list():
    assert calculate_chunk_weights([]) == []


def test_single_chunk_gets_exactly_one():
    weights = calculate_chunk_weights(make_chunks(1))
    assert weights == [1.0]


def test_two_chunks_split_two_thirds_one_third():
    weights = calculate_chunk_weights(make_chunks(2))
    assert weights[0] == pytest.approx(2 / 3)
    assert weights[1] == pytest.approx(1 / 3)


def test_three_chunks_match_normalized_harmonic_series():
    weights = calculate_chunk_weights(make_chunks(3))
    assert weights == pytest.approx([0.5455, 0.2727, 0.1818], abs=1e-4)
    assert weights == pytest.approx([6 / 11, 3 / 11, 2 / 11])


@pytest.mark.parametrize("n", [1, 2, 3, 5, 10, 50, 200, 1000])
def test_weights_sum_to_one(n: int):
    weights = calculate_chunk_weights(make_chunks(n))
    assert len(weights) == n
    assert math.isclose(sum(weights), 1.0, abs_tol=1e-9)


@pytest.mark.parametrize("n", [2, 3, 7, 100])
def test_weights_strictly_decreasing(n: int):
    weights = calculate_chunk_weights(make_chunks(n))
    assert all(a > b for a, b in zip(weights, weights[1:]))


def test_weights_ignore_chunk_payload():
    """Same positions give the same weights whatever the chunks contain."""
    plain = calculate_chunk_weights(make_chunks(4))
    rich = calculate_chunk_weights(
        [WeightedChunk(chunk_id=f"x{i}", extra={"score": 0.1 * i}) for i in range(4)]
    )
    assert plain == rich
    assert calculate_chunk_weights(["a", {"chunk_id": "b"}, 3, None]) == plain


def test_accepts_any_sequence_type():
    assert calculate_chunk_weights(("a", "b")) == calculate_chunk_weights(["a", "b"])
