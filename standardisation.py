# standardisation.py
"""ASB profile: raw component scores -> 1..5 standard scores."""
import logging

from models import UnknownComponentError, coerce_raw_score
from norms import COGNITIVE_READINESS_RANGES, STANDARDISATION_RANGES

logger = logging.getLogger(__name__)

READINESS_COMPONENTS = ("Reasoning", "Numerical", "Gestalt")


def component_names():
    return list(STANDARDISATION_RANGES)


def _ranges_for(component_name: str):
    ranges = STANDARDISATION_RANGES.get(component_name)
    if ranges is None:
        logger.warning("No conversion table defined for component %r", component_name)
        raise UnknownComponentError(component_name)
    return ranges


def component_max(component_name: str) -> int:
    return _ranges_for(component_name)[-1].max


def standardize(component_name: str, raw_score) -> int:
    """Standard score 1..5 for a raw component score; 0 if it fits no range.

    0 means "not yet entered" to the profile screens.
    """
    ranges = _ranges_for(component_name)
    score = coerce_raw_score(raw_score)
    if score is None:
        return 0
    for r in ranges:
        if r.contains(score):
            return r.standard_score
    return 0


def standardize_profile(raw_scores: dict) -> dict:
    """{component: raw} -> {component: standard score}, in form order."""
    for name in raw_scores:
        _ranges_for(name)
    return {
        name: standardize(name, raw_scores[name])
        for name in STANDARDISATION_RANGES
        if name in raw_scores
    }


def cognitive_readiness(reasoning: int, numerical: int, gestalt: int) -> int:
    """Level of Cognitive Readiness in Language of Assessment (Table 9.2).

    Takes standard scores, not raw ones. Any score outside 1..5 (including
    the 0 "not entered" score) gives 0.
    """
    scores = (reasoning, numerical, gestalt)
    if any(not isinstance(s, int) or isinstance(s, bool) or not 1 <= s <= 5 for s in scores):
        return 0
    total = sum(scores)
    for r in COGNITIVE_READINESS_RANGES:
        if r.contains(total):
            return r.standard_score
    return 0


def cognitive_readiness_from_raw(reasoning_raw, numerical_raw, gestalt_raw) -> int:
    return cognitive_readiness(
        standardize("Reasoning", reasoning_raw),
        standardize("Numerical", numerical_raw),
        standardize("Gestalt", gestalt_raw),
    )


def profile_readiness(standard_scores: dict) -> int:
    """Readiness level from a standardized profile; 0 if a component is missing."""
    return cognitive_readiness(*(standard_scores.get(name, 0) for name in READINESS_COMPONENTS))
