import math
from typing import List

import simpy

from config import (
    BASE_INTAKE, LOSS_RATE, TIME_EPSILON, DIRECTION_MULTIPLIERS, CONTEXT_UPTIME,
    EASE_UPTIME_BASE, EASE_UPTIME_SLOPE, EASE_CEILING_SLOPE, MATCH_FLOOR, MATCH_SLOPE
)
from models.state import RegenRates, SimPoint, SimulationParams
from simulation.composition import clamp01


def derive_rates(params: SimulationParams) -> RegenRates:
    """Computes the multipliers that stay constant for a whole run."""
    direction_mult = DIRECTION_MULTIPLIERS[params.direction]
    context_uptime = CONTEXT_UPTIME[params.context]

    e = clamp01(params.ease)
    ease_uptime = EASE_UPTIME_BASE + EASE_UPTIME_SLOPE * e
    uptime = clamp01(context_uptime * ease_uptime)

    match_eff = MATCH_FLOOR + MATCH_SLOPE * clamp01(params.match)
    ease_ceiling_mult = 1 - EASE_CEILING_SLOPE * e

    ceiling = BASE_INTAKE * clamp01(params.density) * match_eff * direction_mult * ease_ceiling_mult
    return RegenRates(direction_mult=direction_mult, uptime=uptime, match_eff=match_eff, ceiling=ceiling)


def reserve_process(env, params, rates, capacity, reserve, points):
    """
    Records a sample, then advances the reserve one explicit Euler step per dt.
    Stops once the clock has passed duration_min by more than TIME_EPSILON.
    """
    while env.now <= params.duration_min + TIME_EPSILON:
        # v0.1: capacity is fixed and strain is a placeholder output
        points.append(SimPoint(t=env.now, reserve=reserve, capacity=capacity, strain=0.0))

        fullness = reserve / capacity if capacity > 0 else 0.0

        # Regen slows near full
        regen = rates.uptime * rates.ceiling * max(0.0, 1 - fullness)
        # Passive loss so it doesn't asymptote to exactly K
        loss = LOSS_RATE * reserve

        reserve = max(0.0, min(capacity, reserve + (regen - loss) * params.dt_min))
        yield env.timeout(params.dt_min)


def simulate(params: SimulationParams) -> List[SimPoint]:
    """
    Runs the reserve model from t=0 to duration_min inclusive and returns every sample.
    The first sample is always the initial condition. A non-positive dt or a negative
    duration yields just that initial sample.
    """
    capacity = max(1.0, params.initial_capacity)
    reserve = max(0.0, min(capacity, clamp01(params.initial_reserve_pct) * capacity))
    rates = derive_rates(params)
    points: List[SimPoint] = []

    duration, dt = params.duration_min, params.dt_min
    if not (dt > 0 and math.isfinite(dt)) or not (duration >= 0 and math.isfinite(duration)):
        points.append(SimPoint(t=0.0, reserve=reserve, capacity=capacity, strain=0.0))
        return points

    env = simpy.Environment()
    env.process(reserve_process(env, params, rates, capacity, reserve, points))
    env.run()
    return points
