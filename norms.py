# norms.py
"""Published norm tables.

Every entry below is copied from the publisher's norm sheet. The tables are
not proportional and must not be smoothed or interpolated.
"""
from models import AgeTable, Encoding, Family, ScoreRange, TestDefinition


# ----- ASB component standardisation (raw -> 1..5) -----

STANDARDISATION_RANGES = {
    "Visual Perception": (
        ScoreRange(0, 5, 1),
        ScoreRange(6, 7, 2),
        ScoreRange(8, 8, 3),
        ScoreRange(9, 9, 4),
        ScoreRange(10, 10, 5),
    ),
    "Spatial": (
        ScoreRange(0, 1, 1),
        ScoreRange(2, 3, 2),
        ScoreRange(4, 6, 3),
        ScoreRange(7, 9, 4),
        ScoreRange(10, 10, 5),
    ),
    "Reasoning": (
        ScoreRange(0, 2, 1),
        ScoreRange(3, 6, 2),
        ScoreRange(7, 8, 3),
        ScoreRange(9, 9, 4),
        ScoreRange(10, 10, 5),
    ),
    "Numerical": (
        ScoreRange(0, 2, 1),
        ScoreRange(3, 4, 2),
        ScoreRange(5, 7, 3),
        ScoreRange(8, 9, 4),
        ScoreRange(10, 10, 5),
    ),
    "Gestalt": (
        ScoreRange(0, 35, 1),
        ScoreRange(36, 62, 2),
        ScoreRange(63, 86, 3),
        ScoreRange(87, 98, 4),
        ScoreRange(99, 100, 5),
    ),
    "Co-ordination": (
        ScoreRange(0, 8, 1),
        ScoreRange(9, 17, 2),
        ScoreRange(18, 24, 3),
        ScoreRange(25, 28, 4),
        ScoreRange(29, 30, 5),
    ),
    "Memory": (
        ScoreRange(0, 1, 1),
        ScoreRange(2, 7, 2),
        ScoreRange(8, 8, 3),
        ScoreRange(9, 9, 4),
        ScoreRange(10, 10, 5),
    ),
    "Verbal Comprehension": (
        ScoreRange(0, 7, 1),
        ScoreRange(8, 11, 2),
        ScoreRange(12, 14, 3),
        ScoreRange(15, 17, 4),
        ScoreRange(18, 20, 5),
    ),
}

# Table 9.2: sum of Reasoning + Numerical + Gestalt standard scores -> level
COGNITIVE_READINESS_RANGES = (
    ScoreRange(3, 5, 1),
    ScoreRange(6, 7, 2),
    ScoreRange(8, 10, 3),
    ScoreRange(11, 12, 4),
    ScoreRange(13, 15, 5),
)


# ----- Tenths <-> months (non-linear, as printed on the tenths sheets) -----

MONTHS_TO_TENTHS = {
    0: 0, 1: 1, 2: 2, 3: 3, 4: 3, 5: 4,
    6: 5, 7: 6, 8: 7, 9: 8, 10: 9, 11: 9,
}

TENTHS_TO_MONTHS = {
    0: 0, 1: 1, 2: 2, 3: 4, 4: 5,
    5: 6, 6: 7, 7: 8, 8: 10, 9: 11,
}


# ----- Numeracy -----

YOUNG_MATHS = AgeTable("young_maths", Encoding.TENTHS, {
    6: "5.5", 7: "5.6", 8: "5.6", 9: "5.7", 10: "5.8",
    11: "5.8", 12: "5.9", 13: "5.9", 14: "6.0", 15: "6.1",
    16: "6.1", 17: "6.2", 18: "6.3", 19: "6.4", 20: "6.4",
    21: "6.5", 22: "6.6", 23: "6.7", 24: "6.7", 25: "6.8",
    26: "6.9", 27: "7.0", 28: "7.1", 29: "7.1", 30: "7.2",
    31: "7.3", 32: "7.4", 33: "7.5", 34: "7.5", 35: "7.6",
    36: "7.7", 37: "7.8", 38: "7.9", 39: "7.9", 40: "8.0",
    41: "8.1", 42: "8.2", 43: "8.3", 44: "8.3", 45: "8.4",
    46: "8.5", 47: "8.6", 48: "8.7", 49: "8.8", 50: "8.9",
    51: "9.0", 52: "9.1", 53: "9.3", 54: "9.5", 55: "9.7",
    56: "10.1",
})

# BNST 5th Edition, Table D. Scores 49-50 are printed as ">14.8".
BNST = AgeTable("bnst", Encoding.MONTHS, {
    1: "6.0", 2: "6.1", 3: "6.2", 4: "6.3", 5: "6.5",
    6: "6.6", 7: "6.7", 8: "6.8", 9: "6.10", 10: "6.11",
    11: "7.0", 12: "7.1", 13: "7.2", 14: "7.4", 15: "7.5",
    16: "7.7", 17: "7.8", 18: "7.9", 19: "7.10", 20: "8.0",
    21: "8.1", 22: "8.2", 23: "8.4", 24: "8.5", 25: "8.7",
    26: "8.9", 27: "8.11", 28: "9.0", 29: "9.2", 30: "9.3",
    31: "9.5", 32: "9.7", 33: "9.9", 34: "10.1", 35: "10.2",
    36: "10.4", 37: "10.6", 38: "10.8", 39: "10.10", 40: "11.0",
    41: "11.4", 42: "11.8", 43: "12.0", 44: "12.3", 45: "12.9",
    46: "13.3", 47: "14.0", 48: "14.8",
})

# Canadian norms
VERNON_MATHS = AgeTable("vernon_maths", Encoding.MONTHS, {
    3: "6.0", 4: "6.1", 5: "6.3", 6: "6.5", 7: "6.7",
    8: "6.10", 9: "7.0", 10: "7.2", 11: "7.4", 12: "7.6",
    13: "7.8", 14: "7.10", 15: "8.0", 16: "8.2", 17: "8.3",
    18: "8.5", 19: "8.6", 20: "8.8", 21: "8.10", 22: "8.11",
    23: "9.1", 24: "9.2", 25: "9.4", 26: "9.5", 27: "9.6",
    28: "9.8", 29: "9.9", 30: "9.11", 31: "10.0", 32: "10.2",
    33: "10.3", 34: "10.5", 35: "10.6", 36: "10.8", 37: "10.9",
    38: "10.11", 39: "11.0", 40: "11.2", 41: "11.4", 42: "11.5",
    43: "11.5", 44: "11.6", 45: "11.9", 46: "11.10", 47: "12.0",
    48: "12.2", 49: "12.4", 50: "12.5", 51: "12.7", 52: "12.8",
    53: "13.0",
})


# ----- Reading -----

SPAR_READING = AgeTable("spar_reading", Encoding.TENTHS, {
    6: "5.9", 7: "6.1", 8: "6.2", 9: "6.3", 10: "6.4",
    11: "6.6", 12: "6.7", 13: "6.8", 14: "6.9", 15: "7.0",
    16: "7.1", 17: "7.2", 18: "7.3", 19: "7.4", 20: "7.5",
    21: "7.6", 22: "7.7", 23: "7.7", 24: "7.8", 25: "7.9",
    26: "8.0", 27: "8.1", 28: "8.2", 29: "8.3", 30: "8.4",
    31: "8.5", 32: "8.6", 33: "8.7", 34: "8.8", 35: "8.9",
    36: "9.1", 37: "9.3", 38: "9.5", 39: "9.7", 40: "10.0",
    41: "10.4", 42: "10.8",
})

SPAR_READING_MONTHS = AgeTable("spar_reading_months", Encoding.MONTHS, {
    6: "5.11", 7: "6.1", 8: "6.2", 9: "6.4", 10: "6.5",
    11: "6.7", 12: "6.8", 13: "6.10", 14: "6.11", 15: "7.0",
    16: "7.1", 17: "7.2", 18: "7.4", 19: "7.5", 20: "7.6",
    21: "7.7", 22: "7.8", 23: "7.8", 24: "7.10", 25: "7.11",
    26: "8.0", 27: "8.1", 28: "8.2", 29: "8.4", 30: "8.5",
    31: "8.6", 32: "8.7", 33: "8.8", 34: "8.10", 35: "8.11",
    36: "9.1", 37: "9.3", 38: "9.6", 39: "9.8", 40: "10.0",
    41: "10.5", 42: "10.10",
})

BURT_READING = AgeTable("burt_reading", Encoding.MONTHS, {
    2: "5.3", 3: "5.3", 4: "5.4", 5: "5.5", 6: "5.5",
    7: "5.6", 8: "5.6", 9: "5.7", 10: "5.7", 11: "5.8",
    12: "5.9", 13: "5.9", 14: "5.10", 15: "5.11", 16: "5.11",
    17: "6.0", 18: "6.1", 19: "6.1", 20: "6.2", 21: "6.2",
    22: "6.3", 23: "6.4", 24: "6.5", 25: "6.5", 26: "6.6",
    27: "6.7", 28: "6.8", 29: "6.9", 30: "6.9", 31: "6.9",
    32: "6.10", 33: "6.11", 34: "7.0", 35: "7.1", 36: "7.2",
    37: "7.3", 38: "7.4", 39: "7.5", 40: "7.5", 41: "7.6",
    42: "7.7", 43: "7.8", 44: "7.9", 45: "7.10", 46: "7.11",
    47: "8.0", 48: "8.1", 49: "8.2", 50: "8.3", 51: "8.4",
    52: "8.5", 53: "8.6", 54: "8.7", 55: "8.8", 56: "8.9",
    57: "8.10", 58: "9.0", 59: "9.1", 60: "9.2", 61: "9.3",
    62: "9.4", 63: "9.6", 64: "9.7", 65: "9.8", 66: "9.9",
    67: "9.10", 68: "10.0", 69: "10.1", 70: "10.2", 71: "10.3",
    72: "10.4", 73: "10.6", 74: "10.7", 75: "10.9", 76: "10.10",
    77: "10.11", 78: "11.0", 79: "11.1", 80: "11.3", 81: "11.4",
    82: "11.5", 83: "11.6", 84: "11.7", 85: "11.9", 86: "11.10",
    87: "11.11", 88: "12.0", 89: "12.1", 90: "12.3", 91: "12.4",
    92: "12.5", 93: "12.6", 94: "12.7", 95: "12.9", 96: "12.10",
    97: "12.11", 98: "13.0", 99: "13.1", 100: "13.3", 101: "13.4",
    102: "13.6", 103: "13.6", 104: "13.7", 105: "13.9", 106: "13.10",
    107: "13.11", 108: "14.0", 109: "14.1", 110: "14.3",
})

# Scores 0-9 are dashes on the sheet; 50 and over prints "14.0+".
DANIELS_DAICK_READING = AgeTable("daniels_daick_reading", Encoding.MONTHS, {
    10: "6.0", 11: "6.1", 12: "6.2", 13: "6.3", 14: "6.4",
    15: "6.5", 16: "6.6", 17: "6.7", 18: "6.8", 19: "6.9",
    20: "7.0", 21: "7.1", 22: "7.2", 23: "7.4", 24: "7.5",
    25: "7.6", 26: "7.7", 27: "7.8", 28: "7.9", 29: "8.0",
    30: "8.2", 31: "8.3", 32: "8.4", 33: "8.6", 34: "8.7",
    35: "8.8", 36: "9.0", 37: "9.1", 38: "9.2", 39: "9.3",
    40: "9.7", 41: "10.0", 42: "10.3", 43: "10.7", 44: "11.2",
    45: "11.6", 46: "12.1", 47: "12.6", 48: "13.1", 49: "13.7",
}, above_label="14.0+")

# Printed as a 10x10 grid: row = tens of the raw score, column = units.
_SCHONELL_READING_GRID = (
    ("5.00", "5.01", "5.02", "5.04", "5.05", "5.06", "5.07", "5.08", "5.10", "5.11"),
    ("6.00", "6.01", "6.02", "6.04", "6.05", "6.06", "6.07", "6.08", "6.10", "6.11"),
    ("7.00", "7.01", "7.02", "7.04", "7.05", "7.06", "7.07", "7.08", "7.10", "7.11"),
    ("8.00", "8.01", "8.02", "8.04", "8.05", "8.06", "8.07", "8.08", "8.10", "8.11"),
    ("9.00", "9.01", "9.02", "9.04", "9.05", "9.06", "9.07", "9.08", "9.10", "9.11"),
    ("10.00", "10.01", "10.02", "10.04", "10.05", "10.06", "10.07", "10.08", "10.10", "10.11"),
    ("11.00", "11.01", "11.02", "11.04", "11.05", "11.06", "11.07", "11.08", "11.10", "11.11"),
    ("12.00", "12.01", "12.02", "12.04", "12.05", "12.06", "12.07", "12.08", "12.10", "12.11"),
    ("13.00", "13.01", "13.02", "13.04", "13.05", "13.06", "13.07", "13.08", "13.10", "13.11"),
    ("14.00", "14.01", "14.02", "14.04", "14.05", "14.06", "14.07", "14.08", "14.10", "14.11"),
)

# A raw score of 0 is the "< 5.00" cell, so the valid domain starts at 1.
SCHONELL_READING = AgeTable(
    "schonell_reading",
    Encoding.MONTHS,
    {
        tens * 10 + units: cell
        for tens, row in enumerate(_SCHONELL_READING_GRID)
        for units, cell in enumerate(row)
        if tens * 10 + units > 0
    },
    below_label="< 5.00",
)

ONE_MINUTE_READING = AgeTable("one_minute_reading", Encoding.MONTHS, {
    31: "6.6", 32: "6.7", 33: "6.9", 34: "6.11", 35: "7.0", 36: "7.2", 37: "7.4", 38: "7.5", 39: "7.6",
    40: "7.6", 41: "7.7", 42: "7.7", 43: "7.8", 44: "7.8", 45: "7.9", 46: "7.10", 47: "7.10", 48: "7.11", 49: "7.11",
    50: "8.0", 51: "8.1", 52: "8.1", 53: "8.2", 54: "8.2", 55: "8.3", 56: "8.4", 57: "8.4", 58: "8.5", 59: "8.5",
    60: "8.6", 61: "8.7", 62: "8.7", 63: "8.8", 64: "8.8", 65: "8.9", 66: "8.10", 67: "8.10", 68: "8.11", 69: "8.11",
    70: "9.0", 71: "9.1", 72: "9.2", 73: "9.4", 74: "9.5", 75: "9.6", 76: "9.7", 77: "9.8", 78: "9.10", 79: "9.11",
    80: "10.1", 81: "10.1", 82: "10.2", 83: "10.3", 84: "10.4", 85: "10.5", 86: "10.6", 87: "10.7", 88: "10.8", 89: "10.9",
    90: "10.10", 91: "10.11", 92: "11.0", 93: "11.1", 94: "11.2", 95: "11.4", 96: "11.5", 97: "11.6", 98: "11.7", 99: "11.8",
    100: "11.10", 101: "11.11", 102: "12.0", 103: "12.1", 104: "12.2", 105: "12.3", 106: "12.4", 107: "12.5", 108: "12.6", 109: "12.7",
    110: "12.8", 111: "12.8", 112: "12.9", 113: "12.10", 114: "12.11", 115: "13.0", 116: "13.2", 117: "13.4", 118: "13.6", 119: "13.8",
    120: "13.10",
})

YOUNGS_GROUP_READING = AgeTable("youngs_group_reading", Encoding.MONTHS, {
    5: "5.6", 6: "5.8", 7: "5.10", 8: "6.0", 9: "6.2",
    10: "6.4", 11: "6.6", 12: "6.8", 13: "6.10", 14: "7.0",
    15: "7.2", 16: "7.4", 17: "7.6", 18: "7.8", 19: "7.10",
    20: "8.0", 21: "8.2", 22: "8.4", 23: "8.6", 24: "8.8",
    25: "8.10", 26: "9.0", 27: "9.2", 28: "9.4", 29: "9.6",
    30: "9.8", 31: "9.10", 32: "10.0", 33: "10.2", 34: "10.4",
    35: "10.6", 36: "10.8", 37: "10.10", 38: "11.0", 39: "11.2",
    40: "11.4", 41: "11.6", 42: "11.8", 43: "11.10", 44: "12.0",
})


# ----- Spelling -----

SCHONELL_SPELLING = AgeTable("schonell_spelling", Encoding.MONTHS, {
    3: "6.0", 4: "6.1", 5: "6.1", 6: "6.2", 7: "6.2",
    8: "6.3", 9: "6.4", 10: "6.5", 11: "6.6", 12: "6.6",
    13: "6.7", 14: "6.7", 15: "6.8", 16: "6.9", 17: "6.10",
    18: "6.10", 19: "6.11", 20: "7.0", 21: "7.1", 22: "7.2",
    23: "7.3", 24: "7.4", 25: "7.5", 26: "7.6", 27: "7.7",
    28: "7.8", 29: "7.9", 30: "7.10", 31: "7.11", 32: "8.0",
    33: "8.1", 34: "8.2", 35: "8.3", 36: "8.4", 37: "8.5",
    38: "8.6", 39: "8.7", 40: "8.8", 41: "8.9", 42: "8.10",
    43: "8.11", 44: "9.0", 45: "9.1", 46: "9.2", 47: "9.3",
    48: "9.4", 49: "9.5", 50: "9.10", 51: "9.11", 52: "10.0",
    53: "10.1", 54: "10.2", 55: "10.3", 56: "10.4", 57: "10.5",
    58: "10.6", 59: "10.7", 60: "10.8", 61: "10.9", 62: "10.10",
    63: "10.11", 64: "11.0", 65: "11.1", 66: "11.3", 67: "11.5",
    68: "11.7", 69: "11.9", 70: "11.11", 71: "12.1", 72: "12.3",
    73: "12.5", 74: "12.7", 75: "12.9", 76: "12.11", 77: "13.1",
    78: "13.3", 79: "13.5", 80: "13.7",
})

DANIELS_DAICK_SPELLING = AgeTable("daniels_daick_spelling", Encoding.MONTHS, {
    0: "5.0", 1: "5.2", 2: "5.3", 3: "5.4", 4: "5.5",
    5: "5.6", 6: "5.7", 7: "5.8", 8: "5.9", 9: "6.0",
    10: "6.1", 11: "6.2", 12: "6.3", 13: "6.4", 14: "6.5",
    15: "6.6", 16: "6.7", 17: "6.8", 18: "7.0", 19: "7.1",
    20: "7.2", 21: "7.3", 22: "7.5", 23: "7.6", 24: "7.7",
    25: "7.8", 26: "7.9", 27: "8.1", 28: "8.2", 29: "8.3",
    30: "8.5", 31: "8.7", 32: "9.0", 33: "9.2", 34: "9.5",
    35: "9.8", 36: "10.2", 37: "10.5", 38: "11.0", 39: "11.6",
    40: "12.3",
})


# ----- Test catalogue -----

def _tests():
    defs = [
        ("YOUNG Maths A Assessment", Family.NUMERACY, YOUNG_MATHS),
        ("YOUNG Maths B Assessment", Family.NUMERACY, YOUNG_MATHS),
        ("Basic Number Screening Test 5th Edition Test A", Family.NUMERACY, BNST),
        ("Basic Number Screening Test 5th Edition Test B", Family.NUMERACY, BNST),
        ("Vernon Graded Arithmetic Mathematics Test", Family.NUMERACY, VERNON_MATHS),
        ("SPAR Reading Assessment A", Family.READING, SPAR_READING),
        ("SPAR Reading Assessment B", Family.READING, SPAR_READING),
        ("Burt Word Reading Test", Family.READING, BURT_READING),
        ("Daniels & Daick Graded Test of Reading Experience", Family.READING, DANIELS_DAICK_READING),
        ("Schonell Reading Test", Family.READING, SCHONELL_READING),
        ("One-Minute Reading Test", Family.READING, ONE_MINUTE_READING),
        ("Young's Group Reading Test A", Family.READING, YOUNGS_GROUP_READING),
        ("Young's Group Reading Test B", Family.READING, YOUNGS_GROUP_READING),
        ("Schonell Spelling A", Family.SPELLING, SCHONELL_SPELLING),
        ("Schonell Spelling B", Family.SPELLING, SCHONELL_SPELLING),
        ("Daniels & Daick Graded Spelling Test", Family.SPELLING, DANIELS_DAICK_SPELLING),
    ]
    alternates = {SPAR_READING.key: (SPAR_READING_MONTHS,)}
    return {
        name: TestDefinition(name, family, table, alternates.get(table.key, ()))
        for name, family, table in defs
    }


TESTS = _tests()

AGE_TABLES = (
    YOUNG_MATHS, BNST, VERNON_MATHS,
    SPAR_READING, SPAR_READING_MONTHS, BURT_READING, DANIELS_DAICK_READING,
    SCHONELL_READING, ONE_MINUTE_READING, YOUNGS_GROUP_READING,
    SCHONELL_SPELLING, DANIELS_DAICK_SPELLING,
)
