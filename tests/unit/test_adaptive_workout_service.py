"""
Unit tests for backend/core/adaptive_workout_service.py
"""

import pytest

from backend.core.adaptive_workout_service import (
    AdaptiveWorkoutService,
    filter_by_available_equipment,
    find_equipment_for,
    rank_substitutes,
)
from backend.core.engine_config import AdaptiveEngineConfig
from domain.models import (
    AdaptiveWorkoutRequest,
    ExerciseType,
    MovementPattern,
    MuscleGroup,
    SubstitutionError,
    WorkoutGenerationError,
)
from tests.fakes import create_catalog, make_candidate, make_equipment, make_exercise


@pytest.fixture
def service():
    return AdaptiveWorkoutService()


@pytest.fixture
def catalog():
    return create_catalog()


@pytest.fixture
def all_equipment():
    return [make_equipment(f"{t.value}-1", t) for t in ExerciseType]


def request_for(duration, equipment, volume_needs=None):
    return AdaptiveWorkoutRequest(
        target_duration_minutes=duration,
        available_equipment=equipment,
        volume_needs=volume_needs,
    )


def by_id(catalog, exercise_id):
    return next(e for e in catalog if e.exercise.id == exercise_id)


# =============================================================================
# Equipment Filter
# =============================================================================


@pytest.mark.unit
class TestEquipmentFilter:
    """Catalog filtering by available equipment."""

    def test_keeps_matching_types_in_catalog_order(self, catalog):
        equipment = [make_equipment("cable-1", ExerciseType.CABLE)]
        kept = filter_by_available_equipment(catalog, equipment)
        assert [e.exercise.id for e in kept] == ["cable-row", "cable-crunch"]

    def test_unavailable_instances_ignored(self, catalog):
        equipment = [make_equipment("cable-1", ExerciseType.CABLE, is_available=False)]
        assert filter_by_available_equipment(catalog, equipment) == []

    def test_find_equipment_skips_unavailable(self):
        equipment = [
            make_equipment("db-a", ExerciseType.DUMBBELLS, floor="floor-3", is_available=False),
            make_equipment("db-b", ExerciseType.DUMBBELLS, floor="floor-1"),
        ]
        assert find_equipment_for(ExerciseType.DUMBBELLS, equipment).id == "db-b"
        assert find_equipment_for(ExerciseType.CABLE, equipment) is None


# =============================================================================
# Generation
# =============================================================================


@pytest.mark.unit
class TestGenerateWorkout:
    """generate_workout() end to end."""

    def test_three_dumbbell_exercises(self, service):
        catalog = [
            make_exercise("db-press", ExerciseType.DUMBBELLS, MovementPattern.PUSH),
            make_exercise("db-row", ExerciseType.DUMBBELLS, MovementPattern.PULL),
            make_exercise("db-squat", ExerciseType.DUMBBELLS, MovementPattern.SQUAT),
        ]
        equipment = [make_equipment("db-1", ExerciseType.DUMBBELLS)]

        result = service.generate_workout(request_for(60, equipment), catalog)

        assert result.success
        assert result.workout.exercise_ids == ["db-press", "db-row", "db-squat"]
        assert result.workout.estimated_duration_minutes == 24
        assert result.workout.floor_switches == 0

    def test_no_available_equipment(self, service):
        catalog = [
            make_exercise("bb-bench", ExerciseType.BARBELL, MovementPattern.PUSH),
            make_exercise("bb-row", ExerciseType.BARBELL, MovementPattern.PULL),
        ]
        equipment = [make_equipment("db-1", ExerciseType.DUMBBELLS)]

        result = service.generate_workout(request_for(60, equipment), catalog)

        assert not result.success
        assert result.error == WorkoutGenerationError.NO_AVAILABLE_EQUIPMENT
        assert result.workout is None

    def test_empty_catalog(self, service, all_equipment):
        result = service.generate_workout(request_for(60, all_equipment), [])
        assert result.error == WorkoutGenerationError.NO_AVAILABLE_EQUIPMENT

    def test_short_duration_is_insufficient(self, service, catalog, all_equipment):
        result = service.generate_workout(request_for(20, all_equipment), catalog)
        assert not result.success
        assert result.error == WorkoutGenerationError.INSUFFICIENT_EXERCISES

    def test_short_duration_reported_separately_when_enabled(self, catalog, all_equipment):
        service = AdaptiveWorkoutService(
            config=AdaptiveEngineConfig(distinguish_duration_failures=True)
        )
        result = service.generate_workout(request_for(20, all_equipment), catalog)
        assert result.error == WorkoutGenerationError.DURATION_CONSTRAINT_FAILED

    def test_small_catalog_is_insufficient(self, all_equipment):
        service = AdaptiveWorkoutService(
            config=AdaptiveEngineConfig(distinguish_duration_failures=True)
        )
        catalog = [
            make_exercise("db-press", ExerciseType.DUMBBELLS, MovementPattern.PUSH),
            make_exercise("db-row", ExerciseType.DUMBBELLS, MovementPattern.PULL),
        ]
        result = service.generate_workout(request_for(60, all_equipment), catalog)
        assert result.error == WorkoutGenerationError.INSUFFICIENT_EXERCISES

    def test_follows_pattern_rotation(self, service, catalog, all_equipment):
        result = service.generate_workout(request_for(40, all_equipment), catalog)

        assert result.success
        assert result.workout.exercise_ids == [
            "db-bench-press",
            "cable-row",
            "goblet-squat",
            "bb-deadlift",
            "cable-crunch",
        ]
        assert result.workout.movement_patterns == [
            MovementPattern.PUSH,
            MovementPattern.PULL,
            MovementPattern.SQUAT,
            MovementPattern.HINGE,
            MovementPattern.CORE,
        ]
        assert result.workout.estimated_duration_minutes == 40

    def test_falls_back_to_any_pattern(self, service, catalog, all_equipment):
        result = service.generate_workout(request_for(80, all_equipment), catalog)

        assert result.workout.exercise_ids == [
            "db-bench-press",
            "cable-row",
            "goblet-squat",
            "bb-deadlift",
            "cable-crunch",
            "db-shoulder-press",
            "push-up",
            "db-row",
            "bb-back-squat",
            "machine-chest-press",
        ]

    def test_stops_when_catalog_exhausted(self, service, catalog, all_equipment):
        result = service.generate_workout(request_for(600, all_equipment), catalog)
        assert len(result.workout.session) == len(catalog)

    @pytest.mark.parametrize("duration", [24, 40, 64, 120])
    def test_session_invariants(self, service, catalog, duration):
        equipment = [
            make_equipment("db-1", ExerciseType.DUMBBELLS),
            make_equipment("bb-1", ExerciseType.BARBELL),
            make_equipment("machine-1", ExerciseType.MACHINE, is_available=False),
        ]
        result = service.generate_workout(request_for(duration, equipment), catalog)

        assert result.success
        ids = result.workout.exercise_ids
        assert len(ids) >= 3
        assert len(ids) == len(set(ids))
        assert len(ids) <= duration // 8
        for slot in result.workout.session:
            assert slot.exercise.type in {ExerciseType.DUMBBELLS, ExerciseType.BARBELL}

    def test_records_equipment_and_order(self, service, catalog, all_equipment):
        result = service.generate_workout(request_for(40, all_equipment), catalog)

        first = result.workout.session[0]
        assert first.order_index == 0
        assert first.equipment_id == "dumbbells-1"
        assert first.gym_floor_id == "floor-1"
        assert [s.order_index for s in result.workout.session] == list(range(5))


# =============================================================================
# Scoring
# =============================================================================


@pytest.mark.unit
class TestScoring:
    """score_exercise() and select_best_exercise()."""

    def test_score_components(self, service, catalog, all_equipment):
        bench = by_id(catalog, "db-bench-press")
        # pecs 60% at rank weight 1 + dumbbells 3 * 10 + availability 5
        score = service.score_exercise(bench, [MuscleGroup.QUADS, MuscleGroup.PECS], all_equipment)
        assert score == pytest.approx(95)

    def test_no_availability_bonus_without_instance(self, service, catalog):
        bench = by_id(catalog, "db-bench-press")
        equipment = [make_equipment("cable-1", ExerciseType.CABLE)]
        assert service.score_exercise(bench, [], equipment) == pytest.approx(30)

    def test_volume_priority_changes_choice(self, service, catalog, all_equipment):
        candidates = [by_id(catalog, "db-shoulder-press"), by_id(catalog, "machine-chest-press")]

        without = service.select_best_exercise(candidates, [], all_equipment)
        with_needs = service.select_best_exercise(candidates, [MuscleGroup.PECS], all_equipment)

        assert without.exercise.id == "db-shoulder-press"
        assert with_needs.exercise.id == "machine-chest-press"

    def test_ties_keep_catalog_order(self, service, all_equipment):
        first = make_exercise("row-a", ExerciseType.CABLE, MovementPattern.PULL)
        second = make_exercise("row-b", ExerciseType.CABLE, MovementPattern.PULL)

        assert service.select_best_exercise([first, second], [], all_equipment) is first
        assert service.select_best_exercise([second, first], [], all_equipment) is second

    def test_volume_needs_flow_into_generation(self, service, all_equipment):
        catalog = [
            make_exercise("cable-fly", ExerciseType.CABLE, MovementPattern.PUSH,
                          {MuscleGroup.PECS: 100}),
            make_exercise("db-press", ExerciseType.DUMBBELLS, MovementPattern.PUSH,
                          {MuscleGroup.DELTS: 100}),
            make_exercise("cable-row", ExerciseType.CABLE, MovementPattern.PULL),
            make_exercise("goblet-squat", ExerciseType.DUMBBELLS, MovementPattern.SQUAT),
        ]
        needs = {MuscleGroup.DELTS: 10, MuscleGroup.PECS: 0}

        result = service.generate_workout(request_for(24, all_equipment, needs), catalog)

        assert result.workout.exercise_ids[0] == "db-press"


# =============================================================================
# Alternatives & Logistics
# =============================================================================


@pytest.mark.unit
class TestAlternativesAndLogistics:
    """Alternatives, floor switches and duration."""

    def test_alternatives_same_pattern_catalog_order(self, service, catalog, all_equipment):
        result = service.generate_workout(request_for(40, all_equipment), catalog)
        alternatives = result.workout.alternatives

        assert [e.id for e in alternatives["db-bench-press"]] == [
            "db-shoulder-press",
            "machine-chest-press",
            "push-up",
        ]
        assert [e.id for e in alternatives["cable-row"]] == ["db-row"]
        assert alternatives["bb-deadlift"] == []

    def test_alternatives_respect_equipment(self, service, catalog):
        equipment = [
            make_equipment("db-1", ExerciseType.DUMBBELLS),
            make_equipment("cable-1", ExerciseType.CABLE),
            make_equipment("bb-1", ExerciseType.BARBELL),
        ]
        result = service.generate_workout(request_for(40, equipment), catalog)
        assert [e.id for e in result.workout.alternatives["db-bench-press"]] == [
            "db-shoulder-press"
        ]

    def test_alternatives_capped(self, catalog, all_equipment):
        service = AdaptiveWorkoutService(config=AdaptiveEngineConfig(max_alternatives=1))
        result = service.generate_workout(request_for(40, all_equipment), catalog)
        assert [e.id for e in result.workout.alternatives["db-bench-press"]] == [
            "db-shoulder-press"
        ]

    def test_floor_switches_counted(self, service, catalog):
        equipment = [
            make_equipment("dumbbells-1", ExerciseType.DUMBBELLS, floor="floor-1"),
            make_equipment("cable-1", ExerciseType.CABLE, floor="floor-2"),
            make_equipment("barbell-1", ExerciseType.BARBELL, floor="floor-1"),
        ]
        result = service.generate_workout(request_for(40, equipment), catalog)

        # dumbbells(1) -> cable(2) -> dumbbells(1) -> barbell(1) -> cable(2)
        assert result.workout.floor_switches == 3
        assert [s.gym_floor_id for s in result.workout.session] == [
            "floor-1", "floor-2", "floor-1", "floor-1", "floor-2",
        ]

    def test_first_exercise_never_counts(self, service):
        selected = [make_exercise("cable-row", ExerciseType.CABLE, MovementPattern.PULL)]
        equipment = [make_equipment("cable-1", ExerciseType.CABLE, floor="floor-2")]
        assert service.calculate_floor_switches(selected, equipment) == 0

    def test_estimate_duration(self, service, catalog):
        assert service.estimate_duration(catalog[:4]) == 32


# =============================================================================
# Substitution
# =============================================================================


@pytest.mark.unit
class TestReplaceExercise:
    """replace_exercise() and substitute ranking."""

    @pytest.fixture
    def dumbbells(self):
        return [make_equipment("db-1", ExerciseType.DUMBBELLS)]

    def test_no_substitutes(self, service, dumbbells):
        result = service.replace_exercise("bb-bench", [], dumbbells)
        assert not result.success
        assert result.error == SubstitutionError.NO_SUITABLE_SUBSTITUTES

    def test_self_reference_is_not_a_substitute(self, service, dumbbells):
        same = make_exercise("db-press", ExerciseType.DUMBBELLS, MovementPattern.PUSH)
        result = service.replace_exercise("db-press", [make_candidate(same)], dumbbells)
        assert result.error == SubstitutionError.NO_SUITABLE_SUBSTITUTES

    def test_equipment_unavailable(self, service, dumbbells):
        candidates = [
            make_candidate(make_exercise("cable-fly", ExerciseType.CABLE, MovementPattern.PUSH)),
            make_candidate(make_exercise("machine-press", ExerciseType.MACHINE, MovementPattern.PUSH)),
        ]
        result = service.replace_exercise("bb-bench", candidates, dumbbells)
        assert result.error == SubstitutionError.EQUIPMENT_UNAVAILABLE

    def test_best_available_candidate(self, service, dumbbells):
        cable = make_exercise("cable-fly", ExerciseType.CABLE, MovementPattern.PUSH)
        db_press = make_exercise("db-press", ExerciseType.DUMBBELLS, MovementPattern.PUSH)
        db_fly = make_exercise("db-fly", ExerciseType.DUMBBELLS, MovementPattern.PUSH)
        candidates = [
            make_candidate(cable, similarity=0.95),
            make_candidate(db_fly, similarity=0.75),
            make_candidate(db_press, similarity=0.9),
        ]

        result = service.replace_exercise("bb-bench", candidates, dumbbells)

        assert result.success
        assert result.exercise.id == "db-press"
        assert result.candidate.similarity_score == 0.9

    def test_ranking_tie_breaks(self):
        a = make_exercise("a", ExerciseType.DUMBBELLS, MovementPattern.PUSH)
        b = make_exercise("b", ExerciseType.DUMBBELLS, MovementPattern.PUSH)
        c = make_exercise("c", ExerciseType.DUMBBELLS, MovementPattern.PUSH)
        d = make_exercise("d", ExerciseType.DUMBBELLS, MovementPattern.PUSH)
        e = make_exercise("e", ExerciseType.DUMBBELLS, MovementPattern.PUSH)
        candidates = [
            make_candidate(a, similarity=0.8, overlap=85, difficulty_delta=2),
            make_candidate(b, similarity=0.8, overlap=90, difficulty_delta=3),
            make_candidate(c, similarity=0.8, overlap=85, difficulty_delta=-1),
            make_candidate(d, similarity=0.9, overlap=80, difficulty_delta=5),
            make_candidate(e, similarity=0.8, overlap=85, difficulty_delta=-1),
        ]

        ranked = [c.exercise.exercise.id for c in rank_substitutes(candidates)]

        assert ranked == ["d", "b", "c", "e", "a"]
