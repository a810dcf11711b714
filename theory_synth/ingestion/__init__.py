"""Ingestion adapter — text, extracted PDF text, audio metadata."""

from theory_synth.ingestion.ingestion import (
    from_text, from_pdf_text, from_audio_metadata, describe_audio,
    load_source, IngestionError,
)
