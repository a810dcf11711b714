"""
System Model Selector — scores a fixed catalog of archetypes against concepts.

Score = Jaccard-style overlap between an archetype's keyword stems and
the extracted concept terms:

    matched = concept terms containing any of the archetype's stems
    score   = matched / (|keywords| + |terms| − matched)

Top two positive scores win, ties to declaration order. With no
overlap at all the declared default archetype is returned alone.
"""

from dataclasses import dataclass

from theory_synth.config import ENGINE
from theory_synth.records import Concept, SystemModel


@dataclass(frozen=True)
class Archetype:
    key: str
    name: str
    keywords: tuple
    equation: str        # {s} = symbol of the best-matching concept
    focus: str
    constants: tuple     # (label, description)


ARCHETYPE_CATALOG: tuple = (
    Archetype(
        key="osciladores_acoplados",
        name="Osciladores acoplados",
        keywords=(
            "oscil", "vibra", "ciclo", "cycle", "frequên", "frequen",
            "ritm", "rhythm", "sincron", "synchron", "fase", "phase",
            "som", "sound", "áudio", "audio", "resson",
        ),
        equation="d({s})/dt = ω + (κ/N)·Σ_j sin(θ_j − {s})",
        focus="a sincronização de fase entre componentes oscilantes",
        constants=(
            ("ω", "Frequência natural do oscilador"),
            ("κ", "Constante de acoplamento entre osciladores"),
            ("N", "Número de osciladores na população"),
            ("θ_j", "Fase do oscilador j"),
        ),
    ),
    Archetype(
        key="difusivo",
        name="Sistema difusivo",
        keywords=(
            "difus", "diffus", "espalh", "spread", "calor", "heat",
            "concentr", "gradient", "transport", "flux", "flow",
            "propag", "dispers", "mistur", "mix",
        ),
        equation="∂({s})/∂t = D·∇^2({s}) − γ·{s}",
        focus="o transporte difusivo e o decaimento ao longo do meio",
        constants=(
            ("D", "Coeficiente de difusão"),
            ("γ", "Taxa de decaimento local"),
        ),
    ),
    Archetype(
        key="rede_adaptativa",
        name="Rede adaptativa",
        keywords=(
            "rede", "network", "adapt", "aprend", "learn", "conex",
            "connect", "social", "interaç", "interac", "feedback",
            "retroal", "evolu", "organiz", "sistem", "system",
        ),
        equation="d({s})/dt = −η·{s} + Σ_j W_ij·f(x_j)",
        focus="a reorganização adaptativa das conexões do sistema",
        constants=(
            ("η", "Taxa de relaxamento do estado"),
            ("W_ij", "Peso adaptativo da conexão entre i e j"),
            ("f", "Função de ativação dos nós"),
            ("x_j", "Estado do nó vizinho j"),
        ),
    ),
    Archetype(
        key="dissipativo",
        name="Sistema dissipativo",
        keywords=(
            "energ", "entrop", "atrit", "friction", "dissip", "termo",
            "thermo", "calor", "heat", "perd", "loss", "equilíbr",
            "equilibr", "irrevers",
        ),
        equation="d(E_s)/dt = P_in − Γ·({s})^2",
        focus="o balanço entre injeção e dissipação de energia",
        constants=(
            ("E_s", "Energia armazenada no sistema"),
            ("P_in", "Potência injetada"),
            ("Γ", "Coeficiente de dissipação"),
        ),
    ),
    Archetype(
        key="estocastico",
        name="Processo estocástico",
        keywords=(
            "ruíd", "noise", "aleat", "random", "probab", "incert",
            "uncertain", "sinal", "signal", "dado", "data", "inform",
            "estoc", "stochast", "variab",
        ),
        equation="d({s}) = μ_s·{s}·dt + σ·{s}·dW",
        focus="as flutuações estocásticas e a deriva do sinal",
        constants=(
            ("μ_s", "Deriva média do processo"),
            ("σ", "Intensidade do ruído"),
            ("dW", "Incremento de Wiener"),
        ),
    ),
)

DEFAULT_ARCHETYPE = "rede_adaptativa"


@dataclass(frozen=True)
class ModelChoice:
    """A rendered system model plus what produced it."""
    model: SystemModel
    archetype: Archetype
    score: float
    concept: Concept


def _matches(term: str, keywords) -> bool:
    return any(kw in term for kw in keywords)


def archetype_score(archetype: Archetype, terms: list[str]) -> float:
    """Jaccard-style overlap between keyword stems and concept terms."""
    if not terms:
        return 0.0
    matched = sum(1 for t in terms if _matches(t, archetype.keywords))
    union = len(archetype.keywords) + len(terms) - matched
    return matched / union if union > 0 else 0.0


def _anchor_concept(archetype: Archetype, concepts: list[Concept]) -> Concept:
    """First concept, in rank order, that the archetype matches."""
    for concept in concepts:
        if _matches(concept.term, archetype.keywords):
            return concept
    return concepts[0]


def render_model(archetype: Archetype, concept: Concept) -> SystemModel:
    return SystemModel(
        name=archetype.name,
        governing_equation=archetype.equation.format(s=concept.symbol),
        focus=archetype.focus,
    )


def get_archetype(key: str) -> Archetype:
    for archetype in ARCHETYPE_CATALOG:
        if archetype.key == key:
            return archetype
    raise KeyError(key)


def select_models(concepts: list[Concept]) -> list[ModelChoice]:
    """Pick 1-2 archetypes for a ranked concept list (non-empty)."""
    terms = [c.term for c in concepts]
    scored = [
        (archetype_score(a, terms), idx, a)
        for idx, a in enumerate(ARCHETYPE_CATALOG)
    ]
    positive = [s for s in scored if s[0] > 0]
    positive.sort(key=lambda x: (-x[0], x[1]))

    if not positive:
        default = get_archetype(DEFAULT_ARCHETYPE)
        return [ModelChoice(
            model=render_model(default, concepts[0]),
            archetype=default,
            score=0.0,
            concept=concepts[0],
        )]

    choices = []
    for score, _, archetype in positive[: ENGINE["max_models"]]:
        anchor = _anchor_concept(archetype, concepts)
        choices.append(ModelChoice(
            model=render_model(archetype, anchor),
            archetype=archetype,
            score=score,
            concept=anchor,
        ))
    return choices
