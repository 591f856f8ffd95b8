import datetime

from models.state import Context, Direction, MadraType

# --- Simulation Configuration ---
SIMULATION_START_TIME = datetime.datetime(2025, 1, 15, 6, 0)

# Loop runs while t <= duration + TIME_EPSILON so the final boundary sample
# survives floating-point step accumulation.
TIME_EPSILON = 1e-9

# --- Tunable constants (arb units/min) ---
BASE_INTAKE = 10.0
LOSS_RATE = 0.01

# Pure aura does not exist, so Pure madra only ever gets a neutral baseline.
PURE_BASELINE = 0.05

# --- Multiplier Tables ---
# Reserve-focused cycling
DIRECTION_MULTIPLIERS = {
    Direction.INWARD: 1.0,
    Direction.BALANCED: 0.7,
    Direction.OUTWARD: 0.4,
}

# How much of the time you can actually cycle
CONTEXT_UPTIME = {
    Context.RESTING: 1.0,
    Context.MOVING: 0.7,
    Context.FIGHTING: 0.45,
}

# Ease: easy = higher uptime, lower ceiling
EASE_UPTIME_BASE = 0.35
EASE_UPTIME_SLOPE = 0.65
EASE_CEILING_SLOPE = 0.7

# A match score of 0 still yields some effect
MATCH_FLOOR = 0.15
MATCH_SLOPE = 0.85

# --- Output Switches ---
# Set to False to only print the summary without writing JSON logs.
WRITE_OUTPUT_FILES = True
SPARKLINE_WIDTH = 60

# Fullness fractions reported as milestones when first reached
MILESTONE_FULLNESS = [0.5, 0.75, 0.9]

# --- Path Catalog ---
PATH_PRESETS = [
    {"id": "twin-stars", "name": "Twin Stars (Pure + Destruction)", "core_types": [MadraType.PURE, MadraType.DESTRUCTION]},
    {"id": "blackflame", "name": "Blackflame (Fire + Destruction)", "core_types": [MadraType.FIRE, MadraType.DESTRUCTION]},
    {"id": "shadow", "name": "Shadow Path (Shadow)", "core_types": [MadraType.SHADOW]},
    {"id": "sword", "name": "Sword Path (Sword)", "core_types": [MadraType.SWORD]},
]

# --- Environment Catalog (weights sum ~ 1) ---
ENV_PRESETS = [
    {
        "id": "sacred-valley",
        "name": "Sacred Valley (Low density)",
        "density": 0.15,
        "composition": {MadraType.EARTH: 0.35, MadraType.WIND: 0.25, MadraType.WATER: 0.2, MadraType.LIGHT: 0.2},
    },
    {
        "id": "night-wheel",
        "name": "Night Wheel Valley (High shadow density)",
        "density": 0.85,
        "composition": {MadraType.SHADOW: 0.7, MadraType.DREAM: 0.2, MadraType.WIND: 0.1},
    },
    {
        "id": "average-wilds",
        "name": "Average wilderness",
        "density": 0.5,
        "composition": {MadraType.EARTH: 0.3, MadraType.WIND: 0.25, MadraType.WATER: 0.2, MadraType.FIRE: 0.15, MadraType.LIGHT: 0.1},
    },
]

CUSTOM_ENV_NAME = "Custom environment"
CUSTOM_DENSITY = 0.5
CUSTOM_COMPOSITION = {
    MadraType.EARTH: 0.3,
    MadraType.WIND: 0.25,
    MadraType.WATER: 0.2,
    MadraType.FIRE: 0.15,
    MadraType.LIGHT: 0.1,
}

# --- Default Scenario ---
# Every key can be overridden with a MADRA_<KEY> environment variable (or .env entry).
DEFAULT_SCENARIO = {
    "path_id": "twin-stars",
    "env_mode": "preset",
    "env_id": "sacred-valley",
    "initial_reserve_pct": 0.35,
    "initial_capacity": 100.0,
    "direction": "Inward",
    "ease": 0.6,
    "context": "Resting",
    "duration_min": 120.0,
    "dt_min": 0.5,
    # Only used in custom mode; per-aura weights come from MADRA_CUSTOM_<AURA> (e.g. MADRA_CUSTOM_FIRE)
    "custom_density": CUSTOM_DENSITY,
    "custom_weights": {},
}
