# audit_tables.py
"""Check every norm table for gaps and for ages that go backwards.

Run after editing norms.py:  python audit_tables.py
"""
import logging
import sys

from academic_age import parse_age, total_months
from norms import AGE_TABLES, STANDARDISATION_RANGES

logger = logging.getLogger(__name__)


def audit_age_table(table):
    problems = []
    keys = list(table.entries)
    expected = list(range(table.min_score, table.max_score + 1))
    missing = sorted(set(expected) - set(keys))
    if missing:
        problems.append(f"{table.key}: no entry for raw score(s) {missing}")

    previous = None
    for score, text in table.entries.items():
        age = parse_age(text, table.encoding)
        if age is None:
            problems.append(f"{table.key}: {score} -> {text!r} is not a {table.encoding.value} age")
            continue
        months = total_months(age)
        if previous is not None and months < previous[1]:
            problems.append(f"{table.key}: {score} -> {text} is younger than {previous[0]}")
        previous = (score, months)
    return problems


def audit_standardisation(component, ranges):
    problems = []
    if ranges[0].min != 0:
        problems.append(f"{component}: ranges start at {ranges[0].min}, not 0")
    for lower, upper in zip(ranges, ranges[1:]):
        if upper.min != lower.max + 1:
            problems.append(f"{component}: gap/overlap between {lower.max} and {upper.min}")
        if upper.standard_score != lower.standard_score + 1:
            problems.append(f"{component}: standard scores not consecutive at {upper.min}")
    return problems


def audit():
    problems = []
    for table in AGE_TABLES:
        problems.extend(audit_age_table(table))
    for component, ranges in STANDARDISATION_RANGES.items():
        problems.extend(audit_standardisation(component, ranges))
    return problems


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    found = audit()
    for p in found:
        logger.error(p)
    logger.info(
        "Audited %s age tables and %s ASB components: %s problem(s).",
        len(AGE_TABLES), len(STANDARDISATION_RANGES), len(found),
    )
    sys.exit(1 if found else 0)
