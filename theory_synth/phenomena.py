"""
Phenomenon Identifier — ranked concepts into phenomenon statements.

Adjacent concepts in rank order are paired (c0·c1, c1·c2, ...). The
last concept, when it has no successor, is rendered alone. Output
length is min(concept_count, 4). Phrase choice rotates with the
content seed, so the same text always reads the same way.
"""

from theory_synth.config import ENGINE
from theory_synth.records import Concept

PAIR_TEMPLATES = (
    "Interação dinâmica entre {a} e {b}",
    "Acoplamento de {a} com {b} modulando o comportamento global",
    "Transferência de intensidade de {a} para {b}",
    "Retroalimentação entre {a} e {b} sustentando o regime observado",
)

SINGLE_TEMPLATES = (
    "Propriedade emergente associada a {a}",
    "Persistência estrutural de {a} ao longo do sinal",
)


def identify_phenomena(concepts: list[Concept], seed: int = 0) -> list[str]:
    n = len(concepts)
    phenomena = []
    for i in range(min(n, ENGINE["max_phenomena"])):
        if i + 1 < n:
            template = PAIR_TEMPLATES[(i + seed) % len(PAIR_TEMPLATES)]
            phenomena.append(template.format(a=concepts[i].term, b=concepts[i + 1].term))
        else:
            template = SINGLE_TEMPLATES[(i + seed) % len(SINGLE_TEMPLATES)]
            phenomena.append(template.format(a=concepts[i].term))
    return phenomena
