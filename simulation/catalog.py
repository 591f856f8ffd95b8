from typing import Dict, List

from config import PATH_PRESETS, ENV_PRESETS, CUSTOM_ENV_NAME
from models.state import AURA_TYPES, EnvMode, EnvPreset, MadraType, PathPreset
from simulation.composition import normalize_composition

PATHS: List[PathPreset] = [PathPreset(**p) for p in PATH_PRESETS]
ENVS: List[EnvPreset] = [EnvPreset(**e) for e in ENV_PRESETS]


def get_path(path_id: str) -> PathPreset:
    """Looks up a path preset, falling back to the first one for unknown ids."""
    return next((p for p in PATHS if p.id == path_id), PATHS[0])


def get_environment(env_id: str) -> EnvPreset:
    """Looks up an environment preset, falling back to the first one for unknown ids."""
    return next((e for e in ENVS if e.id == env_id), ENVS[0])


def effective_environment(mode: EnvMode, env_id: str, custom_density: float, custom_comp: Dict[MadraType, float]) -> EnvPreset:
    """
    Resolves the environment a run should use.
    Presets are returned as they are; a custom composition is snapshotted, normalized,
    and filled out so every aura type has an entry.
    """
    if EnvMode(mode) == EnvMode.PRESET:
        return get_environment(env_id)

    comp_norm = normalize_composition(dict(custom_comp))
    composition = {t: comp_norm.get(t, 0.0) for t in AURA_TYPES}
    return EnvPreset(id="custom", name=CUSTOM_ENV_NAME, density=custom_density, composition=composition)
