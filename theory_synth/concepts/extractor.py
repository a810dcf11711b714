"""
Concept Extractor — ranks salient terms from normalized tokens.

weight = frequency × positional boost, where the boost falls linearly
from 1 + POSITION_BONUS (first token) to 1 (last token). Earlier
mentions are favored: the opening of a text usually names its subject.

Ranking is a total order — descending weight, then first occurrence,
then the term itself — so the same tokens always yield the same list.

Pure Python. No NLP libraries. A stopword set and a suffix table.
"""

from dataclasses import dataclass

from theory_synth.config import ENGINE
from theory_synth.records import Concept

# Portuguese + English function words. Lowercase, accented forms included.
STOPWORDS = frozenset({
    # Portuguese
    "a", "à", "ao", "aos", "as", "às", "até", "com", "como", "da", "das",
    "de", "del", "dela", "dele", "deles", "depois", "do", "dos", "e", "é",
    "ela", "elas", "ele", "eles", "em", "entre", "era", "essa", "essas",
    "esse", "esses", "esta", "está", "estas", "este", "estes", "eu", "foi",
    "for", "foram", "há", "isso", "isto", "já", "lhe", "mais", "mas",
    "me", "mesmo", "meu", "minha", "muito", "na", "nas", "não", "nem",
    "no", "nos", "nós", "num", "numa", "o", "os", "ou", "para", "pela",
    "pelas", "pelo", "pelos", "por", "qual", "quando", "que", "quem",
    "se", "sem", "ser", "seu", "seus", "só", "sua", "suas", "também",
    "te", "tem", "têm", "ter", "um", "uma", "umas", "uns", "você", "são",
    "sobre", "sob", "cada", "onde", "assim", "pode", "podem", "seja",
    # English
    "about", "after", "all", "also", "an", "and", "any", "are", "as",
    "at", "be", "been", "but", "by", "can", "could", "did", "do", "does",
    "each", "from", "had", "has", "have", "he", "her", "his", "how", "i",
    "if", "in", "into", "is", "it", "its", "may", "more", "most", "not",
    "of", "on", "one", "or", "our", "she", "should", "so", "some", "such",
    "than", "that", "the", "their", "them", "then", "there", "these",
    "they", "this", "those", "through", "to", "too", "under", "up", "very",
    "was", "we", "were", "what", "when", "where", "which", "while", "who",
    "will", "with", "would", "you", "your",
})

# (suffix, replacement): first match wins, longest suffixes first.
# Merges plural/singular only; no derivational stemming.
SUFFIX_RULES: list[tuple[str, str]] = [
    ("ções", "ção"),
    ("sões", "são"),
    ("ões", "ão"),
    ("ães", "ão"),
    ("ais", "al"),
    ("éis", "el"),
    ("óis", "ol"),
    ("ores", "or"),
    ("ies", "y"),
    ("sses", "ss"),
]

# A bare trailing "s" is not stripped after these endings
_KEEP_S_ENDINGS = ("ss", "us", "is", "ís", "ós")

MIN_STEM_LENGTH = 3


def stem(token: str) -> str:
    """Light suffix stripping so "oscilações" and "oscilação" merge."""
    for suffix, replacement in SUFFIX_RULES:
        if token.endswith(suffix) and len(token) - len(suffix) >= MIN_STEM_LENGTH - 1:
            return token[: -len(suffix)] + replacement
    if (
        token.endswith("s")
        and len(token) > MIN_STEM_LENGTH + 1
        and not token.endswith(_KEEP_S_ENDINGS)
    ):
        return token[:-1]
    return token


def is_candidate(token: str) -> bool:
    """Stopwords and single characters are never concepts."""
    if len(token) < 2:
        return False
    return token not in STOPWORDS


@dataclass
class _Candidate:
    term: str
    first_index: int
    count: int = 0


def positional_boost(first_index: int, total_tokens: int) -> float:
    """1 + bonus at index 0, decreasing linearly toward 1."""
    if total_tokens <= 0:
        return 1.0
    return 1.0 + ENGINE["position_bonus"] * (1.0 - first_index / total_tokens)


def rank_key(concept: Concept) -> tuple:
    return (-concept.weight, concept.first_index, concept.term)


def extract_concepts(tokens, top_k: int = ENGINE["top_k"]) -> list[Concept]:
    """Rank the top_k concepts of a token sequence.

    Returns at least one concept for any input: when every token is a
    stopword (or there are no tokens), a synthetic fallback concept.
    """
    total = len(tokens)
    candidates: dict[str, _Candidate] = {}

    for idx, token in enumerate(tokens):
        if not is_candidate(token):
            continue
        term = stem(token)
        if term in STOPWORDS:
            continue
        cand = candidates.get(term)
        if cand is None:
            cand = _Candidate(term=term, first_index=idx)
            candidates[term] = cand
        cand.count += 1

    if not candidates:
        return [Concept(
            term=ENGINE["fallback_concept"],
            weight=1.0,
            occurrences=0,
            first_index=0,
        )]

    concepts = [
        Concept(
            term=c.term,
            weight=c.count * positional_boost(c.first_index, total),
            occurrences=c.count,
            first_index=c.first_index,
        )
        for c in candidates.values()
    ]
    concepts.sort(key=rank_key)
    return concepts[:top_k]
