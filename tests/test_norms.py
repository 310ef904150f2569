"""
Norm table integrity.

Every published table must cover its raw score domain with no gaps, ages must
never go down as the raw score goes up, and the out-of-range sentinels must
sit exactly one score beyond each end.
"""

import pytest

from academic_age import list_tests, lookup_academic_age, parse_age, total_months
from audit_tables import audit, audit_age_table
from models import AgeLookupKind, AgeTable, Encoding, INVALID_SCORE
from norms import AGE_TABLES, STANDARDISATION_RANGES, TESTS

TEST_NAMES = list_tests()


class TestCatalogue:
    """Tests for the named test catalogue."""

    def test_catalogue_when_listed_then_has_sixteen_tests(self):
        """All A/B variants of the sixteen tests are listed."""
        assert len(TEST_NAMES) == 16

    def test_families_when_grouped_then_match_subjects(self):
        """Numeracy, reading and spelling split as on the assessment types screen."""
        assert len(list_tests("numeracy")) == 5
        assert len(list_tests("reading")) == 8
        assert len(list_tests("spelling")) == 3

    @pytest.mark.parametrize("name, encoding", [
        ("YOUNG Maths A Assessment", Encoding.TENTHS),
        ("SPAR Reading Assessment B", Encoding.TENTHS),
        ("Basic Number Screening Test 5th Edition Test A", Encoding.MONTHS),
        ("Vernon Graded Arithmetic Mathematics Test", Encoding.MONTHS),
        ("Schonell Spelling A", Encoding.MONTHS),
        ("Schonell Reading Test", Encoding.MONTHS),
    ])
    def test_encoding_when_defined_then_tagged_per_test(self, name, encoding):
        """Each test's table declares the encoding it emits."""
        assert TESTS[name].encoding is encoding


class TestTableCoverage:
    """Every score in the published domain has its own entry."""

    @pytest.mark.parametrize("name", TEST_NAMES)
    def test_domain_when_every_score_looked_up_then_no_sentinels(self, name):
        definition = TESTS[name]
        for score in range(definition.min_score, definition.max_score + 1):
            found = lookup_academic_age(name, score)
            assert found.kind is AgeLookupKind.VALUE, (name, score, found.text)
            assert found.age is not None

    @pytest.mark.parametrize("name", TEST_NAMES)
    def test_domain_when_ages_read_in_order_then_never_decrease(self, name):
        definition = TESTS[name]
        months = [
            total_months(lookup_academic_age(name, s).age)
            for s in range(definition.min_score, definition.max_score + 1)
        ]
        assert months == sorted(months)

    def test_audit_when_run_on_shipped_tables_then_clean(self):
        """audit_tables.py reports nothing for the published tables."""
        assert audit() == []

    def test_audit_when_gap_and_reversal_then_reports_both(self):
        table = AgeTable("broken", Encoding.MONTHS, {1: "6.0", 2: "6.5", 4: "6.3"})
        problems = audit_age_table(table)
        assert any("no entry for raw score(s) [3]" in p for p in problems)
        assert any("younger than 2" in p for p in problems)

    def test_audit_when_entry_has_wrong_shape_then_reported(self):
        table = AgeTable("broken", Encoding.TENTHS, {1: "6.10"})
        assert audit_age_table(table) == ["broken: 1 -> '6.10' is not a tenths age"]


class TestBoundaries:
    """Out-of-range policy at both ends of each table."""

    @pytest.mark.parametrize("name", TEST_NAMES)
    def test_above_when_one_past_max_then_above_sentinel(self, name):
        definition = TESTS[name]
        found = lookup_academic_age(name, definition.max_score + 1)
        assert found.kind is AgeLookupKind.ABOVE
        assert found.text == definition.table.above

    @pytest.mark.parametrize("name", [n for n in TEST_NAMES if TESTS[n].min_score > 0])
    def test_below_when_one_under_min_then_below_sentinel(self, name):
        definition = TESTS[name]
        found = lookup_academic_age(name, definition.min_score - 1)
        assert found.kind is AgeLookupKind.BELOW
        assert found.text == definition.table.below

    @pytest.mark.parametrize("table", [
        t for t in AGE_TABLES if t.below_label is None and t.above_label is None
    ], ids=lambda t: t.key)
    def test_default_labels_when_no_override_then_quote_table_ends(self, table):
        assert table.below == f"< {table.entries[table.min_score]}"
        assert table.above == f"> {table.entries[table.max_score]}"

    @pytest.mark.parametrize("name", TEST_NAMES)
    def test_bounds_when_exactly_min_or_max_then_table_values(self, name):
        definition = TESTS[name]
        entries = definition.table.entries
        assert lookup_academic_age(name, definition.min_score).text == entries[definition.min_score]
        assert lookup_academic_age(name, definition.max_score).text == entries[definition.max_score]

    @pytest.mark.parametrize("name", TEST_NAMES)
    def test_negative_when_looked_up_then_invalid(self, name):
        assert lookup_academic_age(name, -1).text == INVALID_SCORE


class TestPublishedValues:
    """Spot checks against the printed norm sheets."""

    @pytest.mark.parametrize("name, score, expected", [
        ("YOUNG Maths A Assessment", 14, "6.0"),
        ("YOUNG Maths B Assessment", 56, "10.1"),
        ("YOUNG Maths A Assessment", 5, "< 5.5"),
        ("SPAR Reading Assessment A", 40, "10.0"),
        ("Basic Number Screening Test 5th Edition Test A", 9, "6.10"),
        ("Basic Number Screening Test 5th Edition Test B", 49, "> 14.8"),
        ("Burt Word Reading Test", 110, "14.3"),
        ("Daniels & Daick Graded Test of Reading Experience", 44, "11.2"),
        ("Daniels & Daick Graded Test of Reading Experience", 50, "14.0+"),
        ("Daniels & Daick Graded Test of Reading Experience", 9, "< 6.0"),
        ("Daniels & Daick Graded Spelling Test", 0, "5.0"),
        ("Daniels & Daick Graded Spelling Test", 41, "> 12.3"),
        ("Vernon Graded Arithmetic Mathematics Test", 43, "11.5"),
        ("Schonell Reading Test", 0, "< 5.00"),
        ("Schonell Reading Test", 1, "5.01"),
        ("Schonell Reading Test", 37, "8.08"),
        ("Schonell Reading Test", 99, "14.11"),
        ("Schonell Reading Test", 100, "> 14.11"),
        ("One-Minute Reading Test", 120, "13.10"),
        ("Young's Group Reading Test B", 44, "12.0"),
        ("Schonell Spelling A", 2, "< 6.0"),
        ("Schonell Spelling B", 50, "9.10"),
    ])
    def test_lookup_when_published_score_then_published_age(self, name, score, expected):
        assert lookup_academic_age(name, score).text == expected

    def test_spar_when_months_table_requested_then_months_values(self):
        found = lookup_academic_age("SPAR Reading Assessment A", 42, encoding="months")
        assert found.text == "10.10"
        assert found.encoding is Encoding.MONTHS
        assert lookup_academic_age("SPAR Reading Assessment A", 5, encoding=Encoding.MONTHS).text == "< 5.11"


class TestStandardisationRanges:
    """ASB component ranges are contiguous from 0."""

    @pytest.mark.parametrize("component", list(STANDARDISATION_RANGES))
    def test_ranges_when_walked_then_contiguous_and_ordered(self, component):
        ranges = STANDARDISATION_RANGES[component]
        assert [r.standard_score for r in ranges] == [1, 2, 3, 4, 5]
        assert ranges[0].min == 0
        for lower, upper in zip(ranges, ranges[1:]):
            assert upper.min == lower.max + 1

    def test_months_entries_when_parsed_then_within_calendar(self):
        """No months table prints more than 11 months."""
        for table in AGE_TABLES:
            for text in table.entries.values():
                assert parse_age(text, table.encoding) is not None, (table.key, text)
