"""Narrative rendering — thesis, inference steps, experiments."""

from theory_synth.narrative.narrative import (
    compose_thesis, narrate_inference, recommend_experiments,
)
