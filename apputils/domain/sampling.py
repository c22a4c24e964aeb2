"""Weighted and uniform element selection driven by a seeded generator."""

from typing import List, Optional, Sequence

from .types import RandomSource, T, WeightOf


def total_weight(elements: Sequence[T], weight_of: WeightOf[T]) -> int:
    """
    Sum the weights of all elements.

    Raises:
        ValueError: If any element reports a negative weight
    """
    total = 0
    for element in elements:
        weight = weight_of(element)
        if weight < 0:
            raise ValueError(f"Weights must be non-negative, got {weight} for {element!r}")
        total += weight
    return total


def weighted_random_element(rng: RandomSource, elements: Sequence[T], weight_of: WeightOf[T],
                            total: Optional[int] = None) -> Optional[T]:
    """
    Choose a random element with probability proportional to its weight.

    Args:
        rng: Generator to draw from
        elements: Candidates, in the order that defines the cumulative boundaries
        weight_of: Maps an element to its non-negative integer weight
        total: Precomputed total weight (computed from `elements` if None)

    Returns:
        The chosen element, or None if there are no elements or the total weight is 0
    """
    if len(elements) == 0:
        return None

    if total is None:
        total = total_weight(elements, weight_of)
    if total <= 0:
        return None

    draw = rng.uniform_int(0, total)

    # First element whose cumulative weight exceeds the draw
    cumulative = 0
    for element in elements:
        cumulative += weight_of(element)
        if draw < cumulative:
            return element

    return None


def weighted_random_elements(rng: RandomSource, elements: Sequence[T], weight_of: WeightOf[T],
                             count: int) -> Optional[List[T]]:
    """
    Draw `count` elements independently (with replacement) by weight.

    The total weight is computed once up front; every draw sees the full collection.

    Returns:
        The drawn elements, or None if there are no elements or any draw fails

    Raises:
        ValueError: If count is negative
    """
    if count < 0:
        raise ValueError(f"Count must be non-negative, got {count}")
    if len(elements) == 0:
        return None

    total = total_weight(elements, weight_of)
    result = []

    for _ in range(count):
        chosen = weighted_random_element(rng, elements, weight_of, total=total)
        if chosen is None:
            return None
        result.append(chosen)

    return result


def random_element(rng: RandomSource, elements: Sequence[T]) -> Optional[T]:
    """Choose an element uniformly, or None if the sequence is empty."""
    if len(elements) == 0:
        return None
    return elements[rng.uniform_int(0, len(elements))]
