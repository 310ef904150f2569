# models.py
from dataclasses import dataclass, asdict
from enum import Enum
from types import MappingProxyType
from typing import Mapping, Optional


# ----- Errors -----

class UnknownIdentifierError(LookupError):
    """A component, test or encoding name the engine has no table for.

    This is a caller/configuration bug, not a user input problem, so it is
    raised rather than returned as a sentinel string.
    """

    kind = "identifier"

    def __init__(self, name):
        self.name = name
        super().__init__(f"Unknown {self.kind}: {name!r}")


class UnknownComponentError(UnknownIdentifierError):
    kind = "assessment component"


class UnknownTestError(UnknownIdentifierError):
    kind = "academic age test"


class UnknownEncodingError(UnknownIdentifierError):
    kind = "age encoding"


# ----- Sentinels -----

INVALID_SCORE = "Invalid score"
CANNOT_CALCULATE = "Cannot calculate"
BELOW_PREFIX = "<"
ABOVE_PREFIX = ">"


# ----- Encodings & ages -----

class Encoding(str, Enum):
    TENTHS = "tenths"   # Y.T, non-linear tenth of a year
    MONTHS = "months"   # Y.M, calendar months 0..11

    @classmethod
    def coerce(cls, value) -> "Encoding":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value or "").strip().lower())
        except ValueError:
            raise UnknownEncodingError(value) from None


class Family(str, Enum):
    NUMERACY = "numeracy"
    READING = "reading"
    SPELLING = "spelling"


class DeficitStatus(str, Enum):
    DEFICIT = "deficit"
    NO_DEFICIT = "no_deficit"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class Age:
    """An age value tagged with the encoding its subunit is expressed in."""
    years: int
    subunit: int
    encoding: Encoding

    def __post_init__(self):
        limit = 9 if self.encoding is Encoding.TENTHS else 11
        if self.years < 0 or not 0 <= self.subunit <= limit:
            raise ValueError(f"{self.subunit} is not a valid {self.encoding.value} subunit")


class AgeLookupKind(str, Enum):
    VALUE = "value"
    BELOW = "below"
    ABOVE = "above"
    INVALID = "invalid"


@dataclass(frozen=True)
class AgeLookup:
    text: str
    encoding: Encoding
    kind: AgeLookupKind
    age: Optional[Age] = None

    @property
    def is_sentinel(self) -> bool:
        return self.kind is not AgeLookupKind.VALUE


# ----- Norm tables -----

@dataclass(frozen=True)
class ScoreRange:
    min: int
    max: int
    standard_score: int

    def contains(self, raw_score) -> bool:
        return self.min <= raw_score <= self.max


@dataclass(frozen=True)
class AgeTable:
    """One published raw score -> age-equivalent table.

    `entries` holds one literal string per raw score in the valid domain.
    `below_label`/`above_label` are set only where the norm sheet prints its
    own out-of-range label; otherwise the sentinels default to "< min"/"> max".
    """
    key: str
    encoding: Encoding
    entries: Mapping[int, str]
    below_label: Optional[str] = None
    above_label: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "entries", MappingProxyType(dict(sorted(self.entries.items()))))

    @property
    def min_score(self) -> int:
        return next(iter(self.entries))

    @property
    def max_score(self) -> int:
        return next(reversed(self.entries))

    @property
    def below(self) -> str:
        return self.below_label or f"{BELOW_PREFIX} {self.entries[self.min_score]}"

    @property
    def above(self) -> str:
        return self.above_label or f"{ABOVE_PREFIX} {self.entries[self.max_score]}"


@dataclass(frozen=True)
class TestDefinition:
    name: str
    family: Family
    table: AgeTable
    alternates: tuple = ()   # extra AgeTables published in other encodings

    # pytest collects classes named Test*; this one is data
    __test__ = False

    @property
    def encoding(self) -> Encoding:
        return self.table.encoding

    @property
    def min_score(self) -> int:
        return self.table.min_score

    @property
    def max_score(self) -> int:
        return self.table.max_score

    def table_for(self, encoding=None) -> AgeTable:
        if encoding is None:
            return self.table
        encoding = Encoding.coerce(encoding)
        for t in (self.table,) + tuple(self.alternates):
            if t.encoding is encoding:
                return t
        raise UnknownTestError(f"{self.name} ({encoding.value})")

    def to_dict(self):
        return {
            "name": self.name,
            "family": self.family.value,
            "min_score": self.min_score,
            "max_score": self.max_score,
            "encoding": self.encoding.value,
            "encodings": [t.encoding.value for t in (self.table,) + tuple(self.alternates)],
        }


# ----- Pipeline result -----

@dataclass(frozen=True)
class AssessmentResult:
    test_name: str
    raw_score: object
    academic_age: str
    academic_age_display: str
    chronological_age: str          # tenths encoding
    chronological_age_months: str   # months encoding, stored form
    age_difference: str
    is_deficit: bool
    deficit_status: DeficitStatus

    def to_dict(self):
        out = asdict(self)
        out["deficit_status"] = self.deficit_status.value
        return out


# ----- Input coercion -----

def coerce_raw_score(value) -> Optional[int]:
    """Return a non-negative int for anything that looks like a whole raw score, else None."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        score = value
    elif isinstance(value, float):
        if not value.is_integer():
            return None
        score = int(value)
    else:
        s = str(value).strip()
        try:
            score = int(s)
        except ValueError:
            try:
                f = float(s)
            except ValueError:
                return None
            if not f.is_integer():
                return None
            score = int(f)
    return score if score >= 0 else None
