from enum import Enum
from pydantic import BaseModel, Field
from typing import List, Dict, Any

class MadraType(str, Enum):
    FIRE = "Fire"
    WATER = "Water"
    EARTH = "Earth"
    WIND = "Wind"
    SHADOW = "Shadow"
    LIGHT = "Light"
    SWORD = "Sword"
    FORCE = "Force"
    DREAM = "Dream"
    DESTRUCTION = "Destruction"
    DEATH = "Death"
    # Madra only: there is no Pure aura in any environment
    PURE = "Pure"

AURA_TYPES = [t for t in MadraType if t is not MadraType.PURE]

class Direction(str, Enum):
    INWARD = "Inward"
    BALANCED = "Balanced"
    OUTWARD = "Outward"

class Context(str, Enum):
    RESTING = "Resting"
    MOVING = "Moving"
    FIGHTING = "Fighting"

class EnvMode(str, Enum):
    PRESET = "preset"
    CUSTOM = "custom"

class PathPreset(BaseModel):
    id: str
    name: str
    core_types: List[MadraType]

class EnvPreset(BaseModel):
    id: str
    name: str
    density: float
    composition: Dict[MadraType, float] = Field(default_factory=dict)

class SimulationParams(BaseModel):
    # No range validation here: the simulator clamps, it never rejects.
    duration_min: float = 120.0
    dt_min: float = 0.5
    initial_reserve_pct: float = 0.35
    initial_capacity: float = 100.0
    direction: Direction = Direction.INWARD
    ease: float = 0.6
    density: float = 0.5
    match: float = 0.0
    context: Context = Context.RESTING

class SimPoint(BaseModel):
    t: float
    reserve: float
    capacity: float
    strain: float = 0.0

class RegenRates(BaseModel):
    direction_mult: float
    uptime: float
    match_eff: float
    ceiling: float

class RunSummary(BaseModel):
    final_reserve: float
    final_capacity: float
    final_strain: float
    fullness: float
    reserve_min: float
    reserve_max: float
    sample_count: int

class ExplorerState(BaseModel):
    current_min: float = 0.0
    params: SimulationParams = Field(default_factory=SimulationParams)
    event_log: List = Field(default_factory=list)
    # Resolved scenario labels (path name, environment name, ...)
    labels: Dict[str, Any] = Field(default_factory=dict)
