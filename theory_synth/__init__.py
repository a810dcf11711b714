"""
Theory Synthesizer

Unstructured content in. Thesis, phenomena, formulas, system models,
parameters, inference trace and experiments out. Deterministic.
"""

from theory_synth.records import (
    Concept,
    Formula,
    InvalidInputError,
    Medium,
    ParameterEntry,
    SignalProfile,
    SourceDescriptor,
    SystemModel,
    TheorySynthesis,
)
from theory_synth.stages.stages import synthesize

__version__ = "0.1.0"
