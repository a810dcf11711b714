"""Stage orchestration — Normalize → Concepts → Metrics → ... → Experiments."""

from theory_synth.stages.stages import synthesize
