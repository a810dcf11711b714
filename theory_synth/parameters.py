"""
Parameter Table Builder — one glossary entry per symbol actually used.

Scans formula expressions, then governing equations, for identifiers in
reading order. Concept symbols and declared template constants become
entries; operators (d, dt, sin, Σ_j) are skipped. Because labels come
from the scanned text itself, every label appears literally in some
expression or equation.
"""

import re

from theory_synth.formulas.formulas import FormulaChoice
from theory_synth.records import Concept, ParameterEntry
from theory_synth.systems.systems import ModelChoice

# Identifier: a letter (any script) followed by word characters
_IDENTIFIER_RE = re.compile(r'[^\W\d]\w*')

CONCEPT_DESCRIPTION = "Variável que representa {term}"


def scan_identifiers(expression: str) -> list[str]:
    return _IDENTIFIER_RE.findall(expression)


def build_parameter_table(
    formula_choices: list[FormulaChoice],
    model_choices: list[ModelChoice],
    concepts: list[Concept],
) -> list[ParameterEntry]:
    """Deduplicated glossary in first-appearance order."""
    symbols = {c.symbol: c for c in concepts}

    sources = [(fc.formula.expression, dict(fc.template.constants)) for fc in formula_choices]
    sources += [(mc.model.governing_equation, dict(mc.archetype.constants)) for mc in model_choices]

    entries = []
    seen = set()
    for expression, constants in sources:
        for ident in scan_identifiers(expression):
            if ident in seen:
                continue
            if ident in symbols:
                description = CONCEPT_DESCRIPTION.format(term=symbols[ident].term)
            elif ident in constants:
                description = constants[ident]
            else:
                continue
            seen.add(ident)
            entries.append(ParameterEntry(label=ident, description=description))

    return entries
