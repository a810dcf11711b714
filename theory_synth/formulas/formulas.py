"""
Formula Synthesizer — concepts onto a fixed catalog of symbolic templates.

Each catalog entry is tagged with keyword stems. A concept matches a
keyword when the keyword is a substring of the concept term, so
"energia", "energy" and "energético" all hit the "energ" stem.

Assignment, concept by concept in rank order (at most 5):
  1. Among unused entries, take the best keyword overlap.
     Ties go to declaration order.
  2. No overlap → the first unused entry in seed-rotated order.
  3. Catalog exhausted → the generic linear fallback.

Every entry is used at most once, so no template+concept pair repeats.
Expressions contain the concept symbol verbatim; every other identifier
is either a declared constant or an operator (d, dt, ∂t).
"""

from dataclasses import dataclass

from theory_synth.config import ENGINE
from theory_synth.records import Concept, Formula


@dataclass(frozen=True)
class FormulaTemplate:
    key: str
    keywords: tuple
    title: str           # {term}
    expression: str      # {s} = concept symbol
    explanation: str     # {term}, {s}
    constants: tuple     # (label, description) pairs appearing in expression


FORMULA_CATALOG: tuple = (
    FormulaTemplate(
        key="energia",
        keywords=(
            "energ", "potenc", "cinétic", "kinetic", "calor", "heat",
            "trabalh", "work", "forç", "forc", "mass", "moviment", "motion",
            "inérc", "inerti", "mecânic", "mechanic",
        ),
        title="Balanço energético de {term}",
        expression="E_tot = (1/2)·μ·(d({s})/dt)^2 + (1/2)·k_e·({s})^2",
        explanation=(
            "Trata {term} como coordenada generalizada: a energia total soma "
            "um termo cinético e um termo potencial quadrático em {s}."
        ),
        constants=(
            ("E_tot", "Energia total armazenada no sistema"),
            ("μ", "Inércia efetiva associada à variação"),
            ("k_e", "Rigidez do potencial de confinamento"),
        ),
    ),
    FormulaTemplate(
        key="taxa",
        keywords=(
            "taxa", "rate", "veloc", "cresc", "growth", "decai", "decay",
            "tempo", "time", "ritm", "flux", "flow", "dinâm", "dynam",
            "mudanç", "change", "evolu",
        ),
        title="Taxa de variação de {term}",
        expression="d({s})/dt = r·{s}·(1 − {s}/K)",
        explanation=(
            "Crescimento logístico: {s} evolui à taxa intrínseca r até "
            "saturar na capacidade K."
        ),
        constants=(
            ("r", "Taxa intrínseca de variação"),
            ("K", "Capacidade de saturação"),
        ),
    ),
    FormulaTemplate(
        key="campo",
        keywords=(
            "campo", "field", "onda", "wave", "luz", "light", "elétr",
            "eletr", "electr", "magnet", "gravit", "espaç", "space",
            "propag", "radia",
        ),
        title="Campo de {term}",
        expression="∇^2({s}) − (1/c^2)·∂^2({s})/∂t^2 = ρ",
        explanation=(
            "{term} é tratado como um campo que se propaga com velocidade c "
            "a partir de uma densidade de fonte ρ."
        ),
        constants=(
            ("c", "Velocidade de propagação"),
            ("ρ", "Densidade de fonte"),
        ),
    ),
    FormulaTemplate(
        key="rede",
        keywords=(
            "rede", "network", "conex", "connect", "grafo", "graph",
            "social", "comunic", "interaç", "interac", "acopl", "coupl",
            "sistem", "system", "relaç",
        ),
        title="Difusão em rede de {term}",
        expression="d({s})/dt = λ·Σ_j A_ij·(x_j − {s})",
        explanation=(
            "Cada nó relaxa {s} em direção aos vizinhos; λ mede a "
            "intensidade do acoplamento ao longo da rede A_ij."
        ),
        constants=(
            ("λ", "Intensidade de acoplamento"),
            ("A_ij", "Matriz de adjacência da rede"),
            ("x_j", "Estado do nó vizinho j"),
        ),
    ),
)

LINEAR_FALLBACK = FormulaTemplate(
    key="linear",
    keywords=(),
    title="Relação linear para {term}",
    expression="{s} = α + β·χ",
    explanation=(
        "Aproximação de primeira ordem: {s} responde linearmente a um "
        "controle externo χ a partir de um nível basal α."
    ),
    constants=(
        ("α", "Nível basal (intercepto)"),
        ("β", "Sensibilidade linear"),
        ("χ", "Variável de controle externo"),
    ),
)


@dataclass(frozen=True)
class FormulaChoice:
    """A rendered formula plus what produced it."""
    formula: Formula
    template: FormulaTemplate
    concept: Concept
    overlap: int = 0


def keyword_overlap(term: str, keywords) -> int:
    """Number of keyword stems contained in the term."""
    return sum(1 for kw in keywords if kw in term)


def render_formula(template: FormulaTemplate, concept: Concept) -> Formula:
    return Formula(
        title=template.title.format(term=concept.term),
        expression=template.expression.format(s=concept.symbol),
        explanation=template.explanation.format(term=concept.term, s=concept.symbol),
    )


def _pick_template(concept: Concept, used: set, seed: int) -> tuple:
    """Return (template, overlap) for one concept."""
    n = len(FORMULA_CATALOG)
    best_idx, best_score = None, 0
    for idx, template in enumerate(FORMULA_CATALOG):
        if idx in used:
            continue
        score = keyword_overlap(concept.term, template.keywords)
        if score > best_score:
            best_idx, best_score = idx, score

    if best_idx is None:
        for j in range(n):
            idx = (seed + j) % n
            if idx not in used:
                best_idx = idx
                break

    if best_idx is None:
        return LINEAR_FALLBACK, 0

    used.add(best_idx)
    return FORMULA_CATALOG[best_idx], best_score


def synthesize_formulas(concepts: list[Concept], seed: int = 0) -> list[FormulaChoice]:
    """Map the top concepts onto formula templates, in rank order."""
    used: set[int] = set()
    choices = []
    for concept in concepts[: ENGINE["max_formulas"]]:
        template, overlap = _pick_template(concept, used, seed)
        choices.append(FormulaChoice(
            formula=render_formula(template, concept),
            template=template,
            concept=concept,
            overlap=overlap,
        ))
    return choices
