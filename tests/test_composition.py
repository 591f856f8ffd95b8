import math

import pytest

from models.state import AURA_TYPES, MadraType
from simulation.composition import normalize_composition, compute_match_score, blank_composition, set_aura_weight
from simulation.catalog import ENVS, get_environment


def test_normalized_weights_sum_to_one():
    comp = {MadraType.EARTH: 3, MadraType.WIND: 1, MadraType.FIRE: 4}
    out = normalize_composition(comp)
    assert sum(out.values()) == pytest.approx(1.0)
    assert out[MadraType.FIRE] == pytest.approx(0.5)
    assert list(out) == list(comp)


def test_normalize_is_idempotent():
    once = normalize_composition({MadraType.SHADOW: 0.3, MadraType.DREAM: 0.1, MadraType.WIND: 0.6})
    twice = normalize_composition(once)
    for k in once:
        assert twice[k] == pytest.approx(once[k])


def test_all_zero_composition_passes_through():
    comp = blank_composition()
    out = normalize_composition(comp)
    assert out == comp
    assert not any(math.isnan(v) for v in out.values())


def test_non_finite_weights_count_as_zero():
    out = normalize_composition({MadraType.FIRE: 1.0, MadraType.WATER: float("nan"), MadraType.EARTH: float("inf")})
    assert out[MadraType.FIRE] == pytest.approx(1.0)
    assert out[MadraType.WATER] == 0.0
    assert out[MadraType.EARTH] == 0.0


def test_pure_only_path_gets_baseline():
    for env in ENVS:
        assert compute_match_score(env.composition, [MadraType.PURE]) == pytest.approx(0.05)
    assert compute_match_score({}, [MadraType.PURE]) == pytest.approx(0.05)


def test_match_sums_matching_weights():
    wilds = get_environment("average-wilds")
    assert compute_match_score(wilds.composition, [MadraType.FIRE, MadraType.DESTRUCTION]) == pytest.approx(0.15)
    assert compute_match_score(wilds.composition, [MadraType.PURE, MadraType.FIRE]) == pytest.approx(0.2)
    assert compute_match_score(wilds.composition, [MadraType.SWORD]) == 0.0


def test_match_is_order_independent_and_clamped():
    comp = {MadraType.SHADOW: 0.7, MadraType.DREAM: 0.6}
    assert compute_match_score(comp, [MadraType.SHADOW, MadraType.DREAM]) == 1.0
    night = get_environment("night-wheel").composition
    assert compute_match_score(night, [MadraType.SHADOW, MadraType.DREAM]) == pytest.approx(
        compute_match_score(night, [MadraType.DREAM, MadraType.SHADOW]))


@pytest.mark.parametrize("env_id", ["sacred-valley", "night-wheel", "average-wilds"])
def test_match_bounds_over_catalog(env_id):
    comp = get_environment(env_id).composition
    for core in ([t] for t in AURA_TYPES):
        assert 0.0 <= compute_match_score(comp, core) <= 1.0
    assert 0.0 <= compute_match_score(comp, list(AURA_TYPES) + [MadraType.PURE]) <= 1.0


def test_set_aura_weight_renormalizes_copy():
    comp = blank_composition()
    out = set_aura_weight(comp, MadraType.FIRE, 0.4)
    assert out[MadraType.FIRE] == pytest.approx(1.0)
    assert comp[MadraType.FIRE] == 0.0
    out = set_aura_weight(out, MadraType.WATER, 1.0)
    assert out[MadraType.FIRE] == pytest.approx(0.5)
    assert sum(out.values()) == pytest.approx(1.0)


def test_non_finite_weights_never_count_towards_match():
    comp = normalize_composition({MadraType.FIRE: float("nan")})
    assert compute_match_score(comp, [MadraType.FIRE]) == 0.0
    assert compute_match_score({MadraType.FIRE: float("inf")}, [MadraType.FIRE, MadraType.PURE]) == pytest.approx(0.05)
