"""
Unit tests for backend/core/movement_sequencer.py
"""

import pytest

from backend.core.movement_sequencer import CANONICAL_PATTERN_ORDER, MovementPatternSequencer
from domain.models import MovementPattern as P


@pytest.fixture
def sequencer():
    return MovementPatternSequencer()


@pytest.mark.unit
class TestNextPattern:
    """Least-recently-used rotation."""

    def test_empty_session_starts_with_push(self, sequencer):
        rec = sequencer.next_pattern([])
        assert rec.next_pattern == P.PUSH
        assert rec.confidence == 1.0

    def test_advances_through_canonical_order(self, sequencer):
        used = []
        for expected in CANONICAL_PATTERN_ORDER:
            rec = sequencer.next_pattern(used)
            assert rec.next_pattern == expected
            used.append(rec.next_pattern)

    def test_unused_pattern_has_high_confidence(self, sequencer):
        rec = sequencer.next_pattern([P.PUSH])
        assert rec.next_pattern == P.PULL
        assert rec.confidence == 0.9

    def test_skips_patterns_already_used_out_of_order(self, sequencer):
        rec = sequencer.next_pattern([P.SQUAT, P.PUSH])
        assert rec.next_pattern == P.PULL

    def test_recycles_least_recently_used(self, sequencer):
        used = [P.PULL, P.PUSH, P.SQUAT, P.HINGE, P.CORE, P.ROTATION, P.GAIT, P.ISOLATION]
        rec = sequencer.next_pattern(used)
        assert rec.next_pattern == P.PULL
        assert rec.confidence == 0.7

    def test_last_occurrence_counts(self, sequencer):
        used = list(CANONICAL_PATTERN_ORDER) + [P.PUSH]
        assert sequencer.next_pattern(used).next_pattern == P.PULL

    def test_custom_order(self):
        sequencer = MovementPatternSequencer(order=[P.SQUAT, P.PUSH])
        assert sequencer.next_pattern([]).next_pattern == P.SQUAT
        assert sequencer.next_pattern([P.SQUAT]).next_pattern == P.PUSH
        assert sequencer.next_pattern([P.SQUAT, P.PUSH]).next_pattern == P.SQUAT

    def test_invalid_orders_rejected(self):
        with pytest.raises(ValueError):
            MovementPatternSequencer(order=[])
        with pytest.raises(ValueError):
            MovementPatternSequencer(order=[P.PUSH, P.PUSH])


@pytest.mark.unit
class TestValidateSequence:
    """Scoring against the canonical rotation."""

    def test_empty_is_optimal(self, sequencer):
        result = sequencer.validate_sequence([])
        assert result.is_optimal
        assert result.score == 1.0

    def test_canonical_sequence_scores_full(self, sequencer):
        result = sequencer.validate_sequence(list(CANONICAL_PATTERN_ORDER) * 2)
        assert result.score == 1.0
        assert result.is_optimal

    def test_partial_match(self, sequencer):
        result = sequencer.validate_sequence([P.PUSH, P.PUSH, P.SQUAT, P.PUSH, P.CORE])
        assert result.score == pytest.approx(0.6)
        assert not result.is_optimal

    def test_threshold_is_inclusive(self, sequencer):
        result = sequencer.validate_sequence([P.PUSH, P.PULL, P.SQUAT, P.HINGE, P.PUSH])
        assert result.score == pytest.approx(0.8)
        assert result.is_optimal
