"""
Unit tests for domain/services/custom_sets.py
"""

import pytest

from domain.models import CustomSet, Exercise, ExerciseMode
from domain.services.custom_sets import (
    DEFAULT_SET_COUNT,
    add_set,
    calculate_custom_volume,
    convert_custom_to_quick,
    convert_quick_to_custom,
    create_default_custom_sets,
    custom_sets_display_text,
    remove_set,
    update_set,
    validate_custom_sets,
)


@pytest.fixture
def mixed_sets():
    return [
        CustomSet(reps="12", weight="60"),
        CustomSet(reps="10", weight="65"),
        CustomSet(reps="8", weight="70"),
    ]


@pytest.mark.unit
class TestModeConversion:
    def test_default_sets(self):
        sets = create_default_custom_sets()
        assert len(sets) == DEFAULT_SET_COUNT
        assert all(s.reps == "12" and s.weight == "60" for s in sets)

    def test_quick_to_custom_expands_each_set(self):
        exercise = Exercise(name="Bench", sets=4, reps=8, weight=80)
        custom = convert_quick_to_custom(exercise)

        assert custom.exercise_mode == ExerciseMode.CUSTOM
        assert len(custom.custom_sets) == 4
        assert custom.custom_sets[0] == CustomSet(reps="8", weight="80")

    def test_custom_to_quick_uses_first_set(self, mixed_sets):
        exercise = Exercise(
            name="Bench", exercise_mode=ExerciseMode.CUSTOM, custom_sets=mixed_sets
        )
        quick = convert_custom_to_quick(exercise)

        assert quick.exercise_mode == ExerciseMode.QUICK
        assert quick.sets == 3
        assert quick.reps == 12
        assert quick.weight == 60

    def test_custom_to_quick_without_sets_uses_defaults(self):
        exercise = Exercise(name="Bench", exercise_mode=ExerciseMode.CUSTOM)
        quick = convert_custom_to_quick(exercise)
        assert (quick.sets, quick.reps, quick.weight) == (3, 12, 60)


@pytest.mark.unit
class TestVolumeAndDisplay:
    def test_volume(self, mixed_sets):
        assert calculate_custom_volume(mixed_sets) == 12 * 60 + 10 * 65 + 8 * 70

    def test_volume_ignores_unparseable_values(self):
        assert calculate_custom_volume([CustomSet(reps="x", weight="60")]) == 0
        assert calculate_custom_volume([]) == 0

    def test_display_identical_sets(self):
        sets = [CustomSet(reps="10", weight="60")] * 3
        assert custom_sets_display_text(sets) == "3 sets • 10 reps • 60 kg"

    def test_display_mixed_sets(self, mixed_sets):
        assert custom_sets_display_text(mixed_sets, "lbs") == "3 sets • 8-12 reps • 60-70 lbs"

    def test_display_empty(self):
        assert custom_sets_display_text([]) == ""


@pytest.mark.unit
class TestValidation:
    def test_valid(self, mixed_sets):
        assert validate_custom_sets(mixed_sets).valid is True

    def test_requires_a_set(self):
        result = validate_custom_sets([])
        assert result.valid is False
        assert result.error == "At least one set is required"

    def test_reps_must_be_positive(self):
        result = validate_custom_sets([CustomSet(reps="10"), CustomSet(reps="0")])
        assert result.error == "Set 2: Reps must be a positive number"

    def test_weight_must_be_numeric(self):
        result = validate_custom_sets([CustomSet(reps="10", weight="heavy")])
        assert result.error == "Set 1: Weight must be a valid number"

    def test_blank_weight_is_allowed(self):
        assert validate_custom_sets([CustomSet(reps="10", weight="")]).valid is True


@pytest.mark.unit
class TestEditing:
    def test_add_set_repeats_last(self, mixed_sets):
        sets = add_set(mixed_sets)
        assert len(sets) == 4
        assert sets[-1] == CustomSet(reps="8", weight="70")
        assert len(mixed_sets) == 3

    def test_add_explicit_set(self):
        assert add_set([], CustomSet(reps="5", weight="100")) == [CustomSet(reps="5", weight="100")]

    def test_remove_set(self, mixed_sets):
        sets = remove_set(mixed_sets, 1)
        assert [s.reps for s in sets] == ["12", "8"]

    def test_remove_out_of_range_is_noop(self, mixed_sets):
        assert remove_set(mixed_sets, 7) == mixed_sets

    def test_update_set(self, mixed_sets):
        sets = update_set(mixed_sets, 0, weight="62.5")
        assert sets[0] == CustomSet(reps="12", weight="62.5")
        assert mixed_sets[0].weight == "60"


@pytest.mark.unit
class TestPackageExports:
    def test_helpers_are_exported_from_domain_services(self):
        import domain.services as services
        from domain.services import custom_sets

        for name in (
            "add_set",
            "calculate_custom_volume",
            "convert_custom_to_quick",
            "convert_quick_to_custom",
            "create_default_custom_sets",
            "custom_sets_display_text",
            "remove_set",
            "update_set",
            "validate_custom_sets",
        ):
            assert name in services.__all__
            assert getattr(services, name) is getattr(custom_sets, name)
