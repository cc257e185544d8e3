# knowledge_chat/domain/services/position_weighting.py
# Pure domain services: no I/O, deterministic, no external libraries.
from __future__ import annotations

from collections.abc import Sequence
from typing import Any


def calculate_chunk_weights(chunks: Sequence[Any]) -> list[float]:
    """
    Position-based attribution weights for rank-ordered chunks.

    Chunk i (0-based) gets raw weight 1/(i+1); raw weights are normalized by
    their sum so the result sums to 1.0. Only the position is read, chunk
    payloads are ignored.

    >>> [round(w, 4) for w in calculate_chunk_weights(["a", "b", "c"])]
    [0.5455, 0.2727, 0.1818]
    """
    if not chunks:
        return []
    if len(chunks) == 1:
        return [1.0]

    raw = [1.0 / (i + 1) for i in range(len(chunks))]
    # normalize with the unrounded sum
    total = sum(raw)
    return [w / total for w in raw]
