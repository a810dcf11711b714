"""
Ingestion — turns an upload into (content, SourceDescriptor).

Binary decoding is upstream: a PDF arrives as already-extracted text,
an audio file arrives as its metadata (duration, bitrate, sample rate).
This module only normalizes what it is handed and builds the descriptor
the core expects. Error messages are user-facing and stay in Portuguese.
"""

import json
import logging
import math
import re
from pathlib import Path
from typing import Optional

import yaml

from theory_synth.config import ENGINE
from theory_synth.records import Medium, SourceDescriptor

logger = logging.getLogger("theory_synth.ingestion")

AUDIO_BASE = "Transcrição analítica baseada em metadados do arquivo de áudio carregado."
AUDIO_NO_METRICS = " Parâmetros técnicos não fornecidos pelo arquivo."
AUDIO_CLOSING = (
    " A narrativa sugere investigar correlações fenomenológicas "
    "a partir do sinal capturado."
)
AUDIO_NOTE = "Transcrição sintética gerada via metadados."
READ_FAILURE = "Falha ao processar a entrada. Verifique o arquivo ou tente novamente."


class IngestionError(Exception):
    """Raised when an upload cannot become content. Message is user-facing."""


def _warn_if_truncated(content: str, label: str) -> None:
    if len(content.strip()) > ENGINE["max_chars"]:
        logger.warning(
            "%s has %d characters; only the first %d will be analyzed",
            label, len(content), ENGINE["max_chars"],
        )


def from_text(raw: Optional[str]) -> tuple[str, SourceDescriptor]:
    if not raw or not isinstance(raw, str):
        raise IngestionError("Texto não fornecido.")
    _warn_if_truncated(raw, "Text")
    return raw, SourceDescriptor(medium=Medium.TEXT, length=len(raw))


def from_pdf_text(extracted: Optional[str], filename: Optional[str] = None) -> tuple[str, SourceDescriptor]:
    """Collapse the whitespace PDF extractors leave behind."""
    content = re.sub(r'\s+', ' ', extracted or "").strip()
    if not content:
        logger.warning("PDF %s produced no text", filename or "<unnamed>")
        raise IngestionError("Nenhum conteúdo pôde ser extraído.")
    _warn_if_truncated(content, f"PDF {filename or '<unnamed>'}")
    return content, SourceDescriptor(
        medium=Medium.PDF,
        length=len(content),
        context_tag=filename,
    )


def describe_audio(
    duration_s: Optional[float] = None,
    bitrate_bps: Optional[float] = None,
    sample_rate_hz: Optional[int] = None,
) -> str:
    """Technical description of an audio signal from its metadata.

    Missing or zero values are left out. With nothing known, the
    description says so instead of inventing numbers.
    """
    description = []
    if duration_s:
        description.append(f"duração aproximada {duration_s:.2f}s")
    if sample_rate_hz:
        description.append(f"taxa de amostragem {sample_rate_hz} Hz")
    if bitrate_bps:
        description.append(f"bitrate {bitrate_bps / 1000:.1f} kbps")

    if description:
        metrics = f" O sinal apresenta {', '.join(description)}."
    else:
        metrics = AUDIO_NO_METRICS

    return f"{AUDIO_BASE}{metrics}{AUDIO_CLOSING}"


def from_audio_metadata(metadata: Optional[dict], filename: Optional[str] = None) -> tuple[str, SourceDescriptor]:
    """Accepts keys duration / bitrate / sample_rate (aliases: sampleRate)."""
    if metadata is None:
        raise IngestionError("Arquivo de áudio não encontrado.")

    raw = {
        "duration": metadata.get("duration"),
        "bitrate": metadata.get("bitrate"),
        "sample_rate": metadata.get("sample_rate", metadata.get("sampleRate")),
    }
    try:
        values = {
            key: None if value is None else float(value)
            for key, value in raw.items()
        }
        if not all(math.isfinite(v) for v in values.values() if v is not None):
            raise ValueError("non-finite value")
    except (TypeError, ValueError) as e:
        logger.warning("Non-numeric audio metadata %s: %s", raw, e)
        raise IngestionError("Metadados de áudio inválidos.") from e

    sample_rate = values["sample_rate"]
    content = describe_audio(
        duration_s=values["duration"],
        bitrate_bps=values["bitrate"],
        sample_rate_hz=int(sample_rate) if sample_rate is not None else None,
    )
    return content, SourceDescriptor(
        medium=Medium.AUDIO,
        length=len(content),
        context_tag=filename,
        additional_notes=(AUDIO_NOTE,),
    )


def _read_utf8(path: Path) -> str:
    try:
        return path.read_text(encoding="utf-8")
    except (UnicodeDecodeError, OSError) as e:
        logger.warning("Could not read %s: %s", path, e)
        raise IngestionError(READ_FAILURE) from e


def _read_metadata_file(path: Path) -> dict:
    text = _read_utf8(path)
    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        logger.warning("Could not parse audio metadata %s: %s", path, e)
        raise IngestionError("Metadados de áudio inválidos.") from e
    if not isinstance(data, dict):
        raise IngestionError("Metadados de áudio inválidos.")
    return data


def load_source(path: str, medium: str) -> tuple[str, SourceDescriptor]:
    """Load a file for the CLI.

    text  → UTF-8 text file
    pdf   → UTF-8 text already extracted from the PDF
    audio → YAML or JSON file with duration / bitrate / sample_rate
    """
    try:
        medium = Medium(medium)
    except ValueError:
        raise IngestionError("Tipo de entrada não suportado.") from None

    source = Path(path)
    if not source.is_file():
        missing = {
            Medium.TEXT: "Texto não fornecido.",
            Medium.PDF: "Arquivo PDF não encontrado.",
            Medium.AUDIO: "Arquivo de áudio não encontrado.",
        }[medium]
        raise IngestionError(missing)

    if medium is Medium.AUDIO:
        metadata = _read_metadata_file(source)
        original = metadata.pop("filename", None) or source.name
        return from_audio_metadata(metadata, filename=original)

    text = _read_utf8(source)
    if medium is Medium.PDF:
        return from_pdf_text(text, filename=source.name)

    content, descriptor = from_text(text)
    return content, SourceDescriptor(
        medium=descriptor.medium,
        length=descriptor.length,
        context_tag=source.name,
    )
