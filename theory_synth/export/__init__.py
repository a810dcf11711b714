"""Export — markdown, JSON dict, console summary, save to disk."""

from theory_synth.export.export import (
    theory_to_markdown, theory_to_dict, format_human_summary, save_synthesis,
)
