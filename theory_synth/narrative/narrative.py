"""
Narrative — thesis, inference trace and experiment suggestions.

Pure rendering of state the earlier stages already computed. Nothing
here scores, ranks or selects; it only formats.
"""

from theory_synth.config import ENGINE
from theory_synth.metrics.metrics import MetricReport
from theory_synth.normalizer import NormalizedText
from theory_synth.records import Concept, Formula, ParameterEntry, SystemModel

EXPERIMENT_TEMPLATE = "Investigar experimentalmente {focus} observando {phenomenon}"

CONTROL_TEMPLATE = (
    "Repetir a medição de {focus} variando apenas {term} "
    "como condição de controle"
)

# Experiments combine each model with this many leading phenomena
PHENOMENA_PER_MODEL = 2


def _excerpt(sentence: str, limit: int = ENGINE["excerpt_chars"]) -> str:
    if len(sentence) <= limit:
        return sentence
    return sentence[:limit].rstrip() + "…"


def _lower_first(text: str) -> str:
    return text[:1].lower() + text[1:]


def _join_terms(terms: list[str]) -> str:
    if len(terms) == 1:
        return terms[0]
    return ", ".join(terms[:-1]) + " e " + terms[-1]


def compose_thesis(
    normalized: NormalizedText,
    concepts: list[Concept],
    models: list[SystemModel],
) -> str:
    """One-paragraph thesis citing the lead concepts and the first model."""
    leading = concepts[:2]
    verb = "forma" if len(leading) == 1 else "formam"
    excerpt = _excerpt(normalized.sentences[0])
    return (
        f"A teoria propõe que {_join_terms([c.term for c in leading])} {verb} "
        f"o núcleo do modelo {models[0].name}, cuja dinâmica é guiada por "
        f"{models[0].focus}. Trecho de origem: \"{excerpt}\""
    )


def narrate_inference(
    normalized: NormalizedText,
    concepts: list[Concept],
    metrics: MetricReport,
    formulas: list[Formula],
    models: list[SystemModel],
    parameters: list[ParameterEntry],
) -> list[str]:
    """Exactly five steps, in pipeline order."""
    truncation = " (conteúdo truncado)" if normalized.truncated else ""
    baseline = " (valores de referência por falta de tokens)" if metrics.baseline else ""
    terms = ", ".join(c.term for c in concepts)

    return [
        f"Normalização: {len(normalized.tokens)} tokens em "
        f"{len(normalized.sentences)} sentença(s){truncation}.",
        f"Extração: {len(concepts)} conceito(s) dominante(s) identificados ({terms}).",
        f"Métricas: complexidade {metrics.complexity:.0%} e coerência "
        f"{metrics.coherence:.0%}{baseline}.",
        f"Seleção de modelos: {', '.join(m.name for m in models)}.",
        f"Síntese formal: {len(formulas)} fórmula(s) derivada(s) e "
        f"{len(parameters)} parâmetro(s) catalogado(s).",
    ]


def recommend_experiments(
    models: list[SystemModel],
    phenomena: list[str],
    concepts: list[Concept],
) -> list[str]:
    """2-4 suggestions, model first, then phenomenon."""
    experiments = [
        EXPERIMENT_TEMPLATE.format(focus=m.focus, phenomenon=_lower_first(p))
        for m in models
        for p in phenomena[:PHENOMENA_PER_MODEL]
    ][: ENGINE["max_experiments"]]

    if len(experiments) < 2:
        experiments.append(CONTROL_TEMPLATE.format(
            focus=models[0].focus,
            term=concepts[0].term,
        ))

    return experiments
