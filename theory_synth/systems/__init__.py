"""System Model Selector — Jaccard-scored archetypes with a declared default."""

from theory_synth.systems.systems import (
    select_models, archetype_score, ModelChoice, Archetype,
    ARCHETYPE_CATALOG, DEFAULT_ARCHETYPE,
)
