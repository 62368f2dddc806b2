"""
Vector similarity scoring.

Dependencies: math (stdlib)
System role: Semantic tier scoring function
"""

import math
from collections.abc import Sequence


def cosine_similarity(vec_a: Sequence[float], vec_b: Sequence[float]) -> float:
    """
    Compute cosine similarity between two vectors.

    Vectors of different lengths come from incompatible embedding models and
    score 0.0 rather than raising. Empty and zero-norm vectors also score 0.0.

    Args:
        vec_a: First vector
        vec_b: Second vector

    Returns:
        float: Similarity in [-1, 1]
    """
    if len(vec_a) != len(vec_b) or not vec_a:
        return 0.0

    dot = 0.0
    norm_a = 0.0
    norm_b = 0.0
    for a, b in zip(vec_a, vec_b):
        dot += a * b
        norm_a += a * a
        norm_b += b * b

    if norm_a == 0.0 or norm_b == 0.0:
        return 0.0
    return dot / (math.sqrt(norm_a) * math.sqrt(norm_b))
