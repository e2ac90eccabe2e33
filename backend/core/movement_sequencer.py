"""
Movement Pattern Sequencer.

Recommends the next movement pattern for a session so that generated
workouts rotate through push/pull/squat/hinge/core/... instead of stacking
the same pattern. Least-recently-used policy over a canonical ordering:
never-used patterns come first (in canonical order), then the pattern whose
last appearance is oldest.
"""

from typing import Dict, Sequence, Tuple

from domain.models.adaptive import SequenceRecommendation, SequenceValidation
from domain.models.exercise import MovementPattern


CANONICAL_PATTERN_ORDER: Tuple[MovementPattern, ...] = (
    MovementPattern.PUSH,
    MovementPattern.PULL,
    MovementPattern.SQUAT,
    MovementPattern.HINGE,
    MovementPattern.CORE,
    MovementPattern.ROTATION,
    MovementPattern.GAIT,
    MovementPattern.ISOLATION,
)


class MovementPatternSequencer:
    """
    Stateless pattern rotation.

    Usage:
        >>> sequencer = MovementPatternSequencer()
        >>> sequencer.next_pattern([]).next_pattern
        <MovementPattern.PUSH: 'push'>
        >>> sequencer.next_pattern([MovementPattern.PUSH]).next_pattern
        <MovementPattern.PULL: 'pull'>
    """

    OPTIMAL_SCORE_THRESHOLD = 0.8

    def __init__(self, order: Sequence[MovementPattern] = CANONICAL_PATTERN_ORDER):
        if not order:
            raise ValueError("Pattern order must not be empty")
        if len(set(order)) != len(order):
            raise ValueError("Pattern order must not contain duplicates")
        self._order: Tuple[MovementPattern, ...] = tuple(order)

    @property
    def order(self) -> Tuple[MovementPattern, ...]:
        return self._order

    def next_pattern(self, used_patterns: Sequence[MovementPattern]) -> SequenceRecommendation:
        """
        Recommend the least recently used pattern.

        Args:
            used_patterns: Patterns already chosen this session, in order

        Returns:
            SequenceRecommendation; ties broken by canonical order
        """
        if not used_patterns:
            return SequenceRecommendation(
                next_pattern=self._order[0],
                confidence=1.0,
                reasoning="Starting with first pattern in canonical order",
            )

        last_seen: Dict[MovementPattern, int] = {}
        for index, pattern in enumerate(used_patterns):
            last_seen[pattern] = index

        # min() keeps the first of equal keys, i.e. canonical order on ties
        next_pattern = min(self._order, key=lambda p: last_seen.get(p, -1))

        if next_pattern not in last_seen:
            return SequenceRecommendation(
                next_pattern=next_pattern,
                confidence=0.9,
                reasoning=f"{next_pattern.value} not used yet this session",
            )

        return SequenceRecommendation(
            next_pattern=next_pattern,
            confidence=0.7,
            reasoning=(
                f"All patterns used; {next_pattern.value} is the least recently used "
                f"(last at position {last_seen[next_pattern] + 1})"
            ),
        )

    def validate_sequence(self, sequence: Sequence[MovementPattern]) -> SequenceValidation:
        """
        Score a sequence against the canonical rotation.

        score = share of positions i where sequence[i] == order[i % len(order)].
        An empty sequence is optimal with score 1.0.
        """
        if not sequence:
            return SequenceValidation(is_optimal=True, score=1.0)

        matches = sum(
            1
            for i, pattern in enumerate(sequence)
            if pattern == self._order[i % len(self._order)]
        )
        score = matches / len(sequence)
        return SequenceValidation(
            is_optimal=score >= self.OPTIMAL_SCORE_THRESHOLD,
            score=score,
        )
