"""Formula Synthesizer — keyword-tagged symbolic templates with a linear fallback."""

from theory_synth.formulas.formulas import (
    synthesize_formulas, FormulaChoice, FormulaTemplate,
    FORMULA_CATALOG, LINEAR_FALLBACK,
)
