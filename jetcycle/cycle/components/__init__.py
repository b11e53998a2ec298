"""Stage models for the cycle pipeline.

Each stage is a pure function returning a frozen result dataclass.
"""

from jetcycle.cycle.components.base import StageTrace, StationState
from jetcycle.cycle.components.combustor import CombustionResult, burn
from jetcycle.cycle.components.compressor import CompressionResult, compress
from jetcycle.cycle.components.inlet import InletResult, analyze_inlet
from jetcycle.cycle.components.mixer import MixerResult, mix
from jetcycle.cycle.components.nozzle import NozzleResult, expand_nozzle
from jetcycle.cycle.components.turbine import TurbineResult, expand

__all__ = [
    "CombustionResult",
    "CompressionResult",
    "InletResult",
    "MixerResult",
    "NozzleResult",
    "StageTrace",
    "StationState",
    "TurbineResult",
    "analyze_inlet",
    "burn",
    "compress",
    "expand",
    "expand_nozzle",
    "mix",
]
