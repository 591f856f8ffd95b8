from typing import List, Dict, Any

from config import LOSS_RATE
from models.state import RunSummary, SimPoint, SimulationParams
from simulation.processes import derive_rates


def series(points: List[SimPoint], field: str) -> List[float]:
    return [getattr(p, field) for p in points]


def summarize(points: List[SimPoint]) -> RunSummary:
    """Final state of a run plus the reserve range, as shown on the output cards."""
    final = points[-1]
    reserves = series(points, "reserve")
    return RunSummary(
        final_reserve=final.reserve,
        final_capacity=final.capacity,
        final_strain=final.strain,
        fullness=final.reserve / final.capacity if final.capacity > 0 else 0.0,
        reserve_min=min(reserves),
        reserve_max=max(reserves),
        sample_count=len(points),
    )


def equilibrium_reserve(params: SimulationParams) -> float:
    """
    Fixed point of the reserve model, where uptime * ceiling * (1 - M/K) == LOSS_RATE * M.
    Lies strictly below capacity whenever the ceiling is positive.
    """
    rates = derive_rates(params)
    capacity = max(1.0, params.initial_capacity)
    drive = rates.uptime * rates.ceiling
    return drive / (drive / capacity + LOSS_RATE)


def detect_milestones(points: List[SimPoint], thresholds: List[float]) -> List[Dict[str, Any]]:
    """Reports the first sample at which reserve fullness reaches each threshold."""
    milestones = []
    pending = sorted(thresholds)
    for p in points:
        fullness = p.reserve / p.capacity if p.capacity > 0 else 0.0
        while pending and fullness >= pending[0]:
            milestones.append({"t": p.t, "fullness": pending.pop(0), "reserve": p.reserve})
    return milestones
