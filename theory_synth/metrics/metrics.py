"""
Metric Engine — bounded complexity and coherence from text statistics.

complexity = w_r·richness + w_s·asl/(asl + scale) + w_d·density
coherence  = 1 − cv²/(1 + cv²),  cv² = var(weights) / mean(weights)²

Both are clamped to [0, 1]. Each is monotonic in its inputs: richer
vocabulary, longer sentences or denser concepts raise complexity; more
spread in concept weights lowers coherence. A single token (or none)
carries no statistics, so both scores fall back to fixed baselines.

The core contract is boundedness and no NaN, not the exact numbers.
"""

from dataclasses import dataclass

import numpy as np

from theory_synth.config import SCORING
from theory_synth.records import Concept


@dataclass(frozen=True)
class MetricReport:
    vocabulary_richness: float
    average_sentence_length: float
    concept_density: float
    weight_variance: float
    complexity: float
    coherence: float
    baseline: bool = False   # True when fallback values were substituted


def clamp(value: float, low: float = 0.0, high: float = 1.0) -> float:
    if np.isnan(value):
        return low
    return float(min(high, max(low, value)))


def normalize_sentence_length(asl: float, scale: float = SCORING["sentence_scale"]) -> float:
    """Saturating map [0, inf) → [0, 1)."""
    if asl <= 0:
        return 0.0
    return asl / (asl + scale)


def complexity_score(richness: float, asl: float, density: float) -> float:
    raw = (
        SCORING["w_richness"] * richness
        + SCORING["w_sentence"] * normalize_sentence_length(asl)
        + SCORING["w_density"] * density
    )
    return clamp(raw)


def coherence_score(weights) -> tuple[float, float]:
    """Return (coherence, variance) for a set of concept weights."""
    w = np.asarray(weights, dtype=float)
    if w.size == 0:
        return SCORING["baseline_coherence"], 0.0

    variance = float(np.var(w))
    mean = float(np.mean(w))
    if mean <= 0:
        return SCORING["baseline_coherence"], variance

    cv2 = variance / (mean ** 2)
    return clamp(1.0 - cv2 / (1.0 + cv2)), variance


def _baseline_report() -> MetricReport:
    return MetricReport(
        vocabulary_richness=0.0,
        average_sentence_length=0.0,
        concept_density=0.0,
        weight_variance=0.0,
        complexity=SCORING["baseline_complexity"],
        coherence=SCORING["baseline_coherence"],
        baseline=True,
    )


def compute_metrics(tokens, sentences, concepts: list[Concept]) -> MetricReport:
    """Compute the metric report for one normalized text."""
    total = len(tokens)
    if total <= 1:
        return _baseline_report()

    richness = len(set(tokens)) / total
    asl = total / max(len(sentences), 1)
    density = min(1.0, len(concepts) / total)

    complexity = complexity_score(richness, asl, density)
    coherence, variance = coherence_score([c.weight for c in concepts])

    return MetricReport(
        vocabulary_richness=float(richness),
        average_sentence_length=float(asl),
        concept_density=float(density),
        weight_variance=variance,
        complexity=complexity,
        coherence=coherence,
    )
