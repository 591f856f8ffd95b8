import math
from typing import Dict, Iterable

from config import PURE_BASELINE
from models.state import AURA_TYPES, MadraType


def clamp01(x: float) -> float:
    if math.isnan(x):
        return 0.0
    return max(0.0, min(1.0, x))


def normalize_composition(comp: Dict) -> Dict:
    """
    Rescales the weights so they sum to 1, keeping key order.
    A mapping that sums to zero (or less) has no preference and is returned as is.
    """
    total = sum(v for v in comp.values() if math.isfinite(v))
    if total <= 0:
        return comp
    return {k: (v / total if math.isfinite(v) else 0.0) for k, v in comp.items()}


def compute_match_score(env_comp: Dict, core_types: Iterable[MadraType]) -> float:
    """
    Compatibility score: sum of environment aura weights matching the path's non-Pure
    types, plus a small baseline for Pure madra (since Pure aura does not exist).
    """
    score = 0.0
    for t in core_types:
        if t == MadraType.PURE:
            score += PURE_BASELINE  # neutral baseline, never "perfect"
        else:
            weight = env_comp.get(t, 0.0)
            score += weight if math.isfinite(weight) else 0.0
    return clamp01(score)


def blank_composition() -> Dict[MadraType, float]:
    return {t: 0.0 for t in AURA_TYPES}


def set_aura_weight(comp: Dict[MadraType, float], aura: MadraType, value: float) -> Dict[MadraType, float]:
    """Writes one weight into a copy of the composition and re-normalizes it."""
    updated = dict(comp)
    updated[aura] = value
    return normalize_composition(updated)
