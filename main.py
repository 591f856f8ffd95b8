import os
import json
import datetime
from dotenv import load_dotenv

from models.state import AURA_TYPES, ExplorerState, SimulationParams, EnvMode, Direction, Context, MadraType
from simulation.catalog import get_path, effective_environment
from simulation.composition import compute_match_score, blank_composition, set_aura_weight
from simulation.processes import simulate, derive_rates
from simulation.analysis import summarize, series, equilibrium_reserve, detect_milestones
from config import (
    DEFAULT_SCENARIO, CUSTOM_COMPOSITION, MILESTONE_FULLNESS,
    WRITE_OUTPUT_FILES, SPARKLINE_WIDTH
)
from utils import log_event, format_pct, format1, render_sparkline

FLOAT_KEYS = {"initial_reserve_pct", "initial_capacity", "ease", "duration_min", "dt_min", "custom_density"}

def load_scenario():
    """Starts from DEFAULT_SCENARIO and applies any MADRA_<KEY> overrides from the environment/.env."""
    load_dotenv()
    scenario = dict(DEFAULT_SCENARIO)
    for key in FLOAT_KEYS | {"path_id", "env_mode", "env_id", "direction", "context"}:
        raw = os.getenv(f"MADRA_{key.upper()}")
        if raw is None:
            continue
        scenario[key] = float(raw) if key in FLOAT_KEYS else raw

    scenario["custom_weights"] = dict(scenario["custom_weights"])
    for aura in AURA_TYPES:
        raw = os.getenv(f"MADRA_CUSTOM_{aura.value.upper()}")
        if raw is not None:
            scenario["custom_weights"][aura] = float(raw)
    return scenario

def parse_choice(enum_cls, value):
    try:
        return enum_cls(value)
    except ValueError:
        options = ", ".join(m.value for m in enum_cls)
        raise ValueError(f"Invalid {enum_cls.__name__} in config: {value!r} (expected one of {options})")

def custom_composition(weights):
    """Applies each per-aura override to the default custom composition, re-normalizing after every edit."""
    comp = {**blank_composition(), **CUSTOM_COMPOSITION}
    for aura, value in weights.items():
        comp = set_aura_weight(comp, MadraType(aura), value)
    return comp

def build_state(scenario) -> ExplorerState:
    path = get_path(scenario["path_id"])
    env_mode = parse_choice(EnvMode, scenario["env_mode"])
    env = effective_environment(
        env_mode, scenario["env_id"], scenario["custom_density"], custom_composition(scenario["custom_weights"])
    )
    match = compute_match_score(env.composition, path.core_types)

    params = SimulationParams(
        duration_min=scenario["duration_min"],
        dt_min=scenario["dt_min"],
        initial_reserve_pct=scenario["initial_reserve_pct"],
        initial_capacity=scenario["initial_capacity"],
        direction=parse_choice(Direction, scenario["direction"]),
        ease=scenario["ease"],
        density=env.density,
        match=match,
        context=parse_choice(Context, scenario["context"]),
    )
    labels = {"path": path.name, "core_types": [t.value for t in path.core_types], "environment": env.name}
    return ExplorerState(params=params, labels=labels)

def main():
    state = build_state(load_scenario())
    params = state.params

    log_event(state, "SIM_START", "SIM_CORE", {"message": f"{state.labels['path']} in {state.labels['environment']}."})
    log_event(state, "MATCH", "SIM_CORE", {
        "message": f"Environment match: {format_pct(params.match)} · Aura density: {format_pct(params.density)}",
        "core_types": state.labels["core_types"],
    })

    points = simulate(params)
    rates = derive_rates(params)
    log_event(state, "RATES", "SIM_CORE", rates.model_dump())

    for milestone in detect_milestones(points, MILESTONE_FULLNESS):
        state.current_min = milestone["t"]
        log_event(state, "MILESTONE", "SIM_CORE", {"message": f"Reserve reached {format_pct(milestone['fullness'])} fullness.", **milestone})

    summary = summarize(points)
    state.current_min = points[-1].t
    log_event(state, "SIM_END", "SIM_CORE", {"message": f"Simulation ended at minute {state.current_min:.2f}."})

    print("\n--- Results ---")
    print(f"Final reserve: {format1(summary.final_reserve)} (Fullness: {format_pct(summary.fullness)})")
    print(f"Capacity: {format1(summary.final_capacity)} (Fixed in v0.1)")
    print(f"Strain: {format1(summary.final_strain)} (Not modeled in v0.1)")
    print(f"Equilibrium reserve: {format1(equilibrium_reserve(params))}\n")
    print(render_sparkline(series(points, "reserve"), "Reserve (M) over time", SPARKLINE_WIDTH))
    print(render_sparkline(series(points, "capacity"), "Capacity (K) over time", SPARKLINE_WIDTH))
    print(render_sparkline(series(points, "strain"), "Strain (D) over time", SPARKLINE_WIDTH))

    if not WRITE_OUTPUT_FILES:
        return

    # --- Create timestamped log files ---
    timestamp_str = datetime.datetime.now().strftime("%Y%m%d_%H%M%S")
    trajectory_filename = f"trajectory_{timestamp_str}.json"
    event_log_filename = f"simulation_log_{timestamp_str}.json"

    with open(trajectory_filename, 'w') as f:
        json.dump({
            "params": params.model_dump(mode="json"),
            "summary": summary.model_dump(),
            "points": [p.model_dump() for p in points],
        }, f, indent=2)
    print(f"\nTrajectory saved to {trajectory_filename}")

    with open(event_log_filename, 'w') as f:
        json.dump(state.event_log, f, indent=2)
    print(f"Event log saved to {event_log_filename}")


if __name__ == "__main__":
    main()
