# academic_age.py
"""Raw score -> academic age, chronological age, and the comparison between them.

Ages travel as strings (that is how they are displayed and stored), in one
of two encodings:

* tenths: ``Y.T`` where T is a non-linear tenth of a year (see
  ``norms.TENTHS_TO_MONTHS``)
* months: ``Y.M`` where M is 0..11 calendar months

Values produced here carry their encoding explicitly (``AgeLookup.encoding``,
the ``encoding`` argument of ``chronological_age``). Callers should pass
that tag back in when formatting or comparing. The string-shape guess in
``parse_age`` is only for untagged strings read back from storage.
"""
import logging
import math
from datetime import date, datetime
from typing import Optional

from models import (
    ABOVE_PREFIX, BELOW_PREFIX, CANNOT_CALCULATE, INVALID_SCORE,
    Age, AgeLookup, AgeLookupKind, AssessmentResult, DeficitStatus, Encoding,
    UnknownTestError, coerce_raw_score,
)
from norms import MONTHS_TO_TENTHS, TENTHS_TO_MONTHS, TESTS

logger = logging.getLogger(__name__)

DAYS_PER_YEAR = 365.25


# ---------- Test catalogue ----------

def get_test_definition(test_name: str):
    definition = TESTS.get((test_name or "").strip())
    if definition is None:
        logger.warning("No academic age table for test %r", test_name)
        raise UnknownTestError(test_name)
    return definition


def list_tests(family=None):
    if family is None:
        return list(TESTS)
    return [name for name, d in TESTS.items() if d.family == family]


# ---------- Raw score -> academic age ----------

def lookup_academic_age(test_name: str, raw_score, encoding=None) -> AgeLookup:
    """Look up a raw score in the test's norm table.

    Scores below/above the table give the "< min"/"> max" sentinels;
    negative or non-numeric scores give "Invalid score". `encoding` picks
    an alternate published table (SPAR has one in months).
    """
    table = get_test_definition(test_name).table_for(encoding)
    score = coerce_raw_score(raw_score)

    if score is None:
        logger.debug("%s: raw score %r is not a valid score", test_name, raw_score)
        return AgeLookup(INVALID_SCORE, table.encoding, AgeLookupKind.INVALID)
    if score < table.min_score:
        return AgeLookup(table.below, table.encoding, AgeLookupKind.BELOW)
    if score > table.max_score:
        return AgeLookup(table.above, table.encoding, AgeLookupKind.ABOVE)

    text = table.entries.get(score)
    if text is None:
        # tables are contiguous; audit_tables.py checks this
        logger.debug("%s: no entry for raw score %s", test_name, score)
        return AgeLookup(INVALID_SCORE, table.encoding, AgeLookupKind.INVALID)
    return AgeLookup(text, table.encoding, AgeLookupKind.VALUE, parse_age(text, table.encoding))


def convert_to_academic_age(test_name: str, raw_score, encoding=None) -> str:
    return lookup_academic_age(test_name, raw_score, encoding).text


# ---------- Parsing & unit conversion ----------

def is_sentinel(value) -> bool:
    s = (value or "").strip()
    return s.startswith(BELOW_PREFIX) or s.startswith(ABOVE_PREFIX) or s == INVALID_SCORE


def detect_encoding(value: str) -> Optional[Encoding]:
    """Guess the encoding of an untagged ``Y.x`` string.

    Two-digit fraction, or a fraction above 9, means months; otherwise tenths.
    """
    parts = (value or "").strip().split(".")
    if len(parts) != 2 or not parts[1].isdecimal():
        return None
    frac = parts[1]
    if len(frac) == 2 or int(frac) > 9:
        return Encoding.MONTHS
    return Encoding.TENTHS


def parse_age(value, encoding=None) -> Optional[Age]:
    """Parse ``Y.T``/``Y.M`` into an Age, or None if it is not an age string."""
    s = (value or "").strip()
    parts = s.split(".")
    if len(parts) != 2:
        return None
    years, frac = parts
    if not years.isdecimal() or not frac.isdecimal():
        return None

    encoding = Encoding.coerce(encoding) if encoding is not None else detect_encoding(s)
    if encoding is Encoding.TENTHS and len(frac) != 1:
        return None
    try:
        return Age(int(years), int(frac), encoding)
    except ValueError:
        return None


def total_months(age: Age) -> int:
    if age.encoding is Encoding.TENTHS:
        return age.years * 12 + TENTHS_TO_MONTHS[age.subunit]
    return age.years * 12 + age.subunit


def format_age(age: Age) -> str:
    if age.encoding is Encoding.MONTHS:
        return f"{age.years}.{age.subunit:02d}"
    return f"{age.years}.{age.subunit}"


def months_to_tenth(months: int) -> int:
    return MONTHS_TO_TENTHS[months]


# ---------- Chronological age ----------

def _as_date(value):
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value).strip()[:10])


def chronological_age(date_of_birth, test_date, encoding=Encoding.TENTHS) -> str:
    """Age at test date as ``Y.T`` (tenths) or zero-padded ``Y.MM`` (months).

    Elapsed days / 365.25 gives fractional years; whole years and whole
    months are both floored.
    """
    encoding = Encoding.coerce(encoding)
    if not date_of_birth or not test_date:
        return ""
    try:
        dob, tested = _as_date(date_of_birth), _as_date(test_date)
    except ValueError:
        logger.debug("Unparseable dates: dob=%r test=%r", date_of_birth, test_date)
        return CANNOT_CALCULATE

    days = (tested - dob).days
    if days < 0:
        return CANNOT_CALCULATE

    fractional = days / DAYS_PER_YEAR
    years = math.floor(fractional)
    months = min(math.floor((fractional - years) * 12), 11)

    if encoding is Encoding.MONTHS:
        return format_age(Age(years, months, Encoding.MONTHS))
    return format_age(Age(years, months_to_tenth(months), Encoding.TENTHS))


# ---------- Display ----------

def to_years_months(value: str, encoding=None) -> str:
    """"7.10" -> "7 years 10 months"; "< 6.0" -> "< 6 years".

    Sentinels keep their prefix, "Invalid score" and anything that is not
    an age string come back unchanged.
    """
    if not value:
        return value
    s = value.strip()
    if s.startswith(BELOW_PREFIX) or s.startswith(ABOVE_PREFIX):
        rest = s[1:].strip()
        if not rest:
            return value
        return f"{s[0]} {to_years_months(rest, encoding)}"
    if s == INVALID_SCORE:
        return s

    age = parse_age(s, encoding)
    if age is None:
        return value
    years, months = divmod(total_months(age), 12)
    if months == 0:
        return f"{years} years"
    return f"{years} years {months} months"


def format_chronological_age(value: str) -> str:
    """"8.05" -> "8.5": drop the pad for compact table cells."""
    if not value or value == "N/A":
        return value
    parts = value.split(".")
    if len(parts) != 2 or not parts[0].isdecimal() or not parts[1].isdecimal():
        return value
    return f"{int(parts[0])}.{int(parts[1])}"


def format_age_difference(difference: str) -> str:
    """"-1.03" -> "-1y 3m", "0.05" -> "+5m", "0.00" -> "0"."""
    if not difference or difference == CANNOT_CALCULATE:
        return difference
    negative = difference.startswith("-")
    parts = difference.lstrip("-").split(".")
    if len(parts) != 2 or not parts[0].isdecimal() or not parts[1].isdecimal():
        return difference

    years, months = int(parts[0]), int(parts[1])
    if years == 0 and months == 0:
        return "0"
    bits = []
    if years:
        bits.append(f"{years}y")
    if months:
        bits.append(f"{months}m")
    return ("-" if negative else "+") + " ".join(bits)


# ---------- Comparison ----------

def _comparable_months(value, encoding) -> Optional[int]:
    if not value or is_sentinel(value):
        return None
    age = parse_age(value, encoding)
    return total_months(age) if age is not None else None


def age_difference(academic_age: str, chronological: str,
                   academic_encoding=None, chronological_encoding=None) -> str:
    """Signed academic - chronological as ``[-]Y.MM``.

    Both sides are converted to total months first; mixed encodings are
    never subtracted as decimals.
    """
    a = _comparable_months(academic_age, academic_encoding)
    c = _comparable_months(chronological, chronological_encoding)
    if a is None or c is None:
        return CANNOT_CALCULATE

    diff = a - c
    years, months = divmod(abs(diff), 12)
    sign = "-" if diff < 0 else ""
    return f"{sign}{years}.{months:02d}"


def deficit_status(academic_age: str, chronological: str,
                   academic_encoding=None, chronological_encoding=None) -> DeficitStatus:
    a = _comparable_months(academic_age, academic_encoding)
    c = _comparable_months(chronological, chronological_encoding)
    if a is None or c is None:
        return DeficitStatus.UNKNOWN
    return DeficitStatus.DEFICIT if a < c else DeficitStatus.NO_DEFICIT


def is_deficit(academic_age: str, chronological: str,
               academic_encoding=None, chronological_encoding=None) -> bool:
    """True iff academic age trails chronological age.

    Uncomputable comparisons are reported as no deficit; use
    ``deficit_status`` to tell the two apart.
    """
    status = deficit_status(academic_age, chronological, academic_encoding, chronological_encoding)
    return status is DeficitStatus.DEFICIT


# ---------- Pipeline ----------

def assess(test_name: str, raw_score, date_of_birth, test_date) -> AssessmentResult:
    """Run one pupil's raw score through the whole chain.

    A blank raw score means "not yet entered": ages that depend on it stay
    empty rather than becoming sentinels.
    """
    definition = get_test_definition(test_name)
    chrono = chronological_age(date_of_birth, test_date, Encoding.TENTHS)
    chrono_months = chronological_age(date_of_birth, test_date, Encoding.MONTHS)

    if raw_score is None or str(raw_score).strip() == "":
        return AssessmentResult(
            test_name=definition.name,
            raw_score=None,
            academic_age="",
            academic_age_display="",
            chronological_age=chrono,
            chronological_age_months=chrono_months,
            age_difference="",
            is_deficit=False,
            deficit_status=DeficitStatus.UNKNOWN,
        )

    found = lookup_academic_age(definition.name, raw_score)
    args = (found.text, chrono_months, found.encoding, Encoding.MONTHS)
    return AssessmentResult(
        test_name=definition.name,
        raw_score=raw_score,
        academic_age=found.text,
        academic_age_display=to_years_months(found.text, found.encoding),
        chronological_age=chrono,
        chronological_age_months=chrono_months,
        age_difference=age_difference(*args),
        is_deficit=is_deficit(*args),
        deficit_status=deficit_status(*args),
    )
