"""
Export — the presentation side of a TheorySynthesis.

1. Markdown document — thesis, phenomena, formulas, models, parameters
2. JSON-ready dict — every field, machine-readable
3. Console summary — what a reader scans first

save_synthesis() writes the markdown (and optionally the JSON) to disk.
The core never calls any of this.
"""

import json
from dataclasses import asdict
from pathlib import Path

from theory_synth.config import MEDIUM_LABELS
from theory_synth.records import TheorySynthesis

DEFAULT_EXPORT_NAME = "sintese-teorica"


def theory_to_markdown(theory: TheorySynthesis) -> str:
    lines = []
    lines.append("# Núcleo Teórico")
    lines.append(theory.core_thesis)
    lines.append("")
    lines.append("## Fenômenos Principais")
    lines.extend(f"- {item}" for item in theory.phenomena)
    lines.append("")
    lines.append("## Fórmulas Derivadas")
    for formula in theory.derived_formulas:
        lines.append(f"### {formula.title}")
        lines.append(f"- Expressão: {formula.expression}")
        lines.append(f"- Explicação: {formula.explanation}")
    lines.append("")
    lines.append("## Modelos de Sistema")
    for model in theory.system_models:
        lines.append(f"- **{model.name}**: {model.governing_equation}")
        lines.append(f"  - Foco: {model.focus}")
    lines.append("")
    lines.append("## Parâmetros")
    for item in theory.parameter_table:
        lines.append(f"- {item.label}: {item.description}")

    return "\n".join(lines)


def theory_to_dict(theory: TheorySynthesis) -> dict:
    """asdict(), with the medium enum flattened to its string value."""
    data = asdict(theory)
    data["signal_profile"]["medium"] = theory.signal_profile.medium.value
    return data


def format_human_summary(theory: TheorySynthesis) -> str:
    lines = []

    lines.append("=" * 60)
    lines.append("SÍNTESE TEÓRICA")
    lines.append("=" * 60)
    lines.append("")

    profile = theory.signal_profile
    lines.append(f"Mídia: {MEDIUM_LABELS.get(profile.medium.value, profile.medium.value)}")
    if profile.context_tag:
        lines.append(f"Origem: {profile.context_tag}")
    lines.append(f"Complexidade: {theory.complexity_score * 100:.0f}%")
    lines.append(f"Coerência: {theory.coherence * 100:.0f}%")
    lines.append("")

    lines.append("NÚCLEO TEÓRICO:")
    lines.append(f"  {theory.core_thesis}")
    lines.append("")

    lines.append("FENÔMENOS:")
    for p in theory.phenomena:
        lines.append(f"  - {p}")
    lines.append("")

    lines.append("FÓRMULAS:")
    for f in theory.derived_formulas:
        lines.append(f"  {f.title}")
        lines.append(f"     {f.expression}")
    lines.append("")

    lines.append("MODELOS DE SISTEMA:")
    for m in theory.system_models:
        lines.append(f"  {m.name}: {m.governing_equation}")
    lines.append("")

    lines.append("INFERÊNCIA:")
    for i, step in enumerate(theory.inference_steps, 1):
        lines.append(f"  {i}. {step}")
    lines.append("")

    lines.append("EXPERIMENTOS SUGERIDOS:")
    for e in theory.recommended_experiments:
        lines.append(f"  - {e}")
    lines.append("")
    lines.append("=" * 60)

    return "\n".join(lines)


def save_synthesis(
    theory: TheorySynthesis,
    output_dir: str = "runs",
    name: str = DEFAULT_EXPORT_NAME,
    include_json: bool = True,
) -> dict:
    """Write the synthesis to disk.

    Creates:
    - {name}.md — markdown export
    - {name}.json — full machine-readable record (optional)

    Returns dict with file paths.
    """
    output_path = Path(output_dir)
    output_path.mkdir(parents=True, exist_ok=True)

    md_path = output_path / f"{name}.md"
    with open(md_path, "w", encoding="utf-8") as f:
        f.write(theory_to_markdown(theory))

    paths = {"markdown": str(md_path)}

    if include_json:
        json_path = output_path / f"{name}.json"
        with open(json_path, "w", encoding="utf-8") as f:
            json.dump(theory_to_dict(theory), f, indent=2, ensure_ascii=False)
        paths["json"] = str(json_path)

    return paths
