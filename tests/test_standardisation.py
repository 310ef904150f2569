"""
Unit tests for ASB component standardisation and cognitive readiness.
"""

import pytest

from models import UnknownComponentError, UnknownIdentifierError
from standardisation import (
    cognitive_readiness, cognitive_readiness_from_raw, component_max, component_names,
    profile_readiness, standardize, standardize_profile,
)


class TestStandardize:
    """Tests for raw component score -> 1..5."""

    @pytest.mark.parametrize("component, raw, expected", [
        ("Gestalt", 90, 4),
        ("Gestalt", 35, 1),
        ("Gestalt", 36, 2),
        ("Gestalt", 100, 5),
        ("Visual Perception", 5, 1),
        ("Visual Perception", 8, 3),
        ("Spatial", 3, 2),
        ("Reasoning", 9, 4),
        ("Numerical", 8, 4),
        ("Co-ordination", 24, 3),
        ("Memory", 0, 1),
        ("Verbal Comprehension", 18, 5),
    ])
    def test_standardize_when_in_range_then_published_score(self, component, raw, expected):
        assert standardize(component, raw) == expected

    @pytest.mark.parametrize("raw", [101, -1, "abc", None, "", 12.5])
    def test_standardize_when_no_range_fits_then_zero(self, raw):
        """0 is the "not entered" score, never an error."""
        assert standardize("Gestalt", raw) == 0

    def test_standardize_when_string_score_then_coerced(self):
        assert standardize("Gestalt", " 90 ") == 4

    def test_standardize_when_unknown_component_then_raises(self):
        with pytest.raises(UnknownComponentError, match="Unknown assessment component"):
            standardize("Handwriting", 5)

    def test_component_when_case_differs_then_unknown(self):
        with pytest.raises(UnknownIdentifierError):
            standardize("gestalt", 90)

    def test_components_when_listed_then_profile_order(self):
        assert component_names() == [
            "Visual Perception", "Spatial", "Reasoning", "Numerical",
            "Gestalt", "Co-ordination", "Memory", "Verbal Comprehension",
        ]

    @pytest.mark.parametrize("component, expected", [
        ("Gestalt", 100), ("Co-ordination", 30), ("Verbal Comprehension", 20), ("Memory", 10),
    ])
    def test_component_max_when_looked_up_then_top_of_last_range(self, component, expected):
        assert component_max(component) == expected


class TestProfile:
    """Tests for whole-profile standardisation."""

    def test_profile_when_partial_then_only_given_components_in_order(self):
        profile = standardize_profile({"Gestalt": 90, "Reasoning": 9, "Numerical": 8})
        assert list(profile) == ["Reasoning", "Numerical", "Gestalt"]
        assert profile == {"Reasoning": 4, "Numerical": 4, "Gestalt": 4}

    def test_profile_when_unknown_key_then_raises(self):
        with pytest.raises(UnknownComponentError):
            standardize_profile({"Gestalt": 90, "Handwriting": 3})

    def test_profile_readiness_when_worked_example_then_level_four(self):
        """4 + 4 + 4 = 12 sits in 11..12."""
        profile = standardize_profile({"Reasoning": 9, "Numerical": 8, "Gestalt": 90})
        assert profile_readiness(profile) == 4

    def test_profile_readiness_when_component_missing_then_zero(self):
        assert profile_readiness({"Reasoning": 4, "Numerical": 4}) == 0


class TestCognitiveReadiness:
    """Tests for Table 9.2."""

    @pytest.mark.parametrize("scores, expected", [
        ((1, 1, 1), 1),
        ((2, 2, 1), 1),
        ((2, 2, 2), 2),
        ((3, 3, 2), 3),
        ((4, 4, 2), 3),
        ((4, 4, 3), 4),
        ((5, 4, 4), 5),
        ((5, 5, 5), 5),
    ])
    def test_readiness_when_standard_scores_then_level(self, scores, expected):
        assert cognitive_readiness(*scores) == expected

    @pytest.mark.parametrize("scores", [(0, 3, 3), (3, 6, 3), (3, 3, None), (3, True, 3), (3, 3.0, 3)])
    def test_readiness_when_score_not_one_to_five_then_zero(self, scores):
        assert cognitive_readiness(*scores) == 0

    def test_readiness_from_raw_when_worked_example_then_level_four(self):
        assert cognitive_readiness_from_raw(9, 8, 90) == 4

    def test_readiness_from_raw_when_one_blank_then_zero(self):
        assert cognitive_readiness_from_raw(9, "", 90) == 0
