from .config import SimulationConfig
from .simulation import Circle, GameSimulation, Phase, circle_size, time_to_next_circle

__all__ = [
    "SimulationConfig",
    "Circle",
    "GameSimulation",
    "Phase",
    "circle_size",
    "time_to_next_circle",
]
