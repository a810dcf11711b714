"""Metric Engine — complexity and coherence, always in [0, 1]."""

from theory_synth.metrics.metrics import compute_metrics, MetricReport, clamp
