"""
Theory Synthesizer — Engine Registry

The fixed constants every stage reads. These are not user settings:
changing any of them changes the output for the same input, so tests
pin the invariants (weights sum to 1, caps) rather than exact scores.

CLI settings (runs dir, default medium) live in load_cli_settings().
"""

import os
from pathlib import Path
from typing import Optional

import yaml

ENGINE = {
    "max_chars": 20000,        # Truncation before any stage runs
    "top_k": 6,                # Concepts kept after ranking
    "position_bonus": 0.5,     # Extra weight for a term seen at token 0
    "max_formulas": 5,
    "max_models": 2,
    "max_phenomena": 4,
    "max_experiments": 4,
    "excerpt_chars": 160,      # Thesis excerpt length
    "fallback_concept": "sinal",
}

# complexity = w_richness·richness + w_sentence·norm(asl) + w_density·density
SCORING = {
    "w_richness": 0.45,
    "w_sentence": 0.35,
    "w_density": 0.20,
    "sentence_scale": 20.0,    # asl / (asl + scale), half-saturates at 20 tokens
    "baseline_complexity": 0.15,
    "baseline_coherence": 0.5,
}

MEDIUM_LABELS = {
    "text": "Texto",
    "pdf": "PDF",
    "audio": "Áudio",
}

# CLI defaults: overridden by env, then YAML, then flags
CLI_DEFAULTS = {
    "runs_dir": "runs",
    "default_medium": "text",
    "save_json": True,
}

ENV_KEYS = {
    "runs_dir": "THEORY_SYNTH_RUNS_DIR",
    "default_medium": "THEORY_SYNTH_MEDIUM",
}


def load_cli_settings(config_path: Optional[str] = None) -> dict:
    """Merge CLI settings: defaults < environment < YAML file.

    Unknown YAML keys are ignored. A missing config file raises
    FileNotFoundError.
    """
    settings = dict(CLI_DEFAULTS)

    for key, env_var in ENV_KEYS.items():
        val = os.environ.get(env_var, "").strip()
        if val:
            settings[key] = val

    if config_path:
        path = Path(config_path)
        with open(path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        for key in CLI_DEFAULTS:
            if key in data:
                settings[key] = data[key]

    if settings["default_medium"] not in MEDIUM_LABELS:
        raise ValueError(f"Unsupported default medium: {settings['default_medium']}")

    if not isinstance(settings["save_json"], bool):
        raise ValueError(f"save_json must be true or false, got {settings['save_json']!r}")

    return settings
