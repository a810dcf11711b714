"""Concept extraction — stopword filter, suffix stripping, positional ranking."""

from theory_synth.concepts.extractor import extract_concepts, stem, STOPWORDS
