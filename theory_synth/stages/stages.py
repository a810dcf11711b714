"""
Stage Orchestrator — content in, TheorySynthesis out.

  1. Normalize       → tokens, sentences, seed
  2. Concepts        → top-K ranked terms
  3. Metrics         → complexity, coherence
  4. Phenomena       → adjacent-concept statements
  5. Formulas        → catalog templates per concept
  6. System models   → 1-2 archetypes
  7. Parameters      → glossary of symbols used in 5 and 6
  8. Inference       → five-step trace
  9. Experiments     → model × phenomenon suggestions

Synchronous, single pass, no I/O. The only failure is InvalidInputError,
raised before stage 1 runs. Everything else resolves to fallbacks, so
either a complete artifact comes back or nothing does.
"""

from theory_synth.concepts.extractor import extract_concepts
from theory_synth.formulas.formulas import synthesize_formulas
from theory_synth.metrics.metrics import compute_metrics
from theory_synth.narrative.narrative import (
    compose_thesis,
    narrate_inference,
    recommend_experiments,
)
from theory_synth.normalizer import normalize
from theory_synth.parameters import build_parameter_table
from theory_synth.phenomena import identify_phenomena
from theory_synth.records import (
    InvalidInputError,
    SignalProfile,
    SourceDescriptor,
    TheorySynthesis,
)
from theory_synth.systems.systems import select_models


def synthesize(content: str, descriptor: SourceDescriptor) -> TheorySynthesis:
    """Run the full synthesis pipeline on one piece of content.

    Args:
        content: Plain text (typed, extracted from a PDF, or derived from
            audio metadata upstream).
        descriptor: Source metadata; only echoed into signal_profile.

    Returns:
        A fully populated TheorySynthesis.

    Raises:
        InvalidInputError: content is empty or whitespace-only.
    """
    if not isinstance(content, str) or not content.strip():
        raise InvalidInputError("content is empty or whitespace-only")

    normalized = normalize(content)
    concepts = extract_concepts(normalized.tokens)
    metrics = compute_metrics(normalized.tokens, normalized.sentences, concepts)
    phenomena = identify_phenomena(concepts, seed=normalized.seed)

    formula_choices = synthesize_formulas(concepts, seed=normalized.seed)
    model_choices = select_models(concepts)
    formulas = [fc.formula for fc in formula_choices]
    models = [mc.model for mc in model_choices]

    parameters = build_parameter_table(formula_choices, model_choices, concepts)

    steps = narrate_inference(normalized, concepts, metrics, formulas, models, parameters)
    experiments = recommend_experiments(models, phenomena, concepts)

    return TheorySynthesis(
        core_thesis=compose_thesis(normalized, concepts, models),
        phenomena=tuple(phenomena),
        derived_formulas=tuple(formulas),
        system_models=tuple(models),
        parameter_table=tuple(parameters),
        complexity_score=metrics.complexity,
        coherence=metrics.coherence,
        signal_profile=SignalProfile(
            medium=descriptor.medium,
            length=descriptor.length,
            context_tag=descriptor.context_tag,
            notes=descriptor.additional_notes,
        ),
        inference_steps=tuple(steps),
        recommended_experiments=tuple(experiments),
        concepts=tuple(concepts),
    )
