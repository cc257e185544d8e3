from __future__ import annotations

from collections.abc import Sequence

from knowledge_chat.domain.models import ChunkAttribution, WeightedChunk
from knowledge_chat.domain.services.position_weighting import calculate_chunk_weights


class AttributeChunks:
    """Pair rank-ordered chunks with their position weights."""

    def execute(self, chunks: Sequence[WeightedChunk]) -> list[ChunkAttribution]:
        weights = calculate_chunk_weights(chunks)
        return [
            ChunkAttribution(chunk_id=c.chunk_id, rank=i + 1, weight=w, extra=c.extra)
            for i, (c, w) in enumerate(zip(chunks, weights, strict=True))
        ]
