"""
Tests for thesis, inference trace and experiment rendering.
"""

from theory_synth.config import ENGINE
from theory_synth.metrics.metrics import MetricReport
from theory_synth.narrative.narrative import (
    CONTROL_TEMPLATE,
    compose_thesis,
    narrate_inference,
    recommend_experiments,
)
from theory_synth.normalizer import normalize
from theory_synth.records import Concept, Formula, ParameterEntry, SystemModel


def _concepts(*terms) -> list[Concept]:
    return [Concept(term=t, weight=10.0 - i, first_index=i) for i, t in enumerate(terms)]


def _model(name="Sistema dissipativo", focus="o balanço de energia"):
    return SystemModel(name=name, governing_equation="d(E_s)/dt = P_in", focus=focus)


def _metrics(baseline=False):
    return MetricReport(
        vocabulary_richness=0.8,
        average_sentence_length=6.0,
        concept_density=0.3,
        weight_variance=0.1,
        complexity=0.42,
        coherence=0.87,
        baseline=baseline,
    )


# ── Thesis ──

class TestComposeThesis:
    def test_opening_and_terms(self):
        thesis = compose_thesis(
            normalize("Energia cinética se dissipa."),
            _concepts("energia", "cinética"),
            [_model()],
        )
        assert thesis.startswith("A teoria propõe que energia e cinética formam")
        assert "Sistema dissipativo" in thesis

    def test_single_concept_agreement(self):
        thesis = compose_thesis(normalize("energia"), _concepts("energia"), [_model()])
        assert "energia forma o núcleo" in thesis

    def test_excerpt_from_first_sentence(self):
        thesis = compose_thesis(
            normalize("Primeira frase aqui. Segunda frase ali."),
            _concepts("frase"),
            [_model()],
        )
        assert "\"Primeira frase aqui.\"" in thesis
        assert "Segunda" not in thesis

    def test_long_sentence_excerpt_capped(self):
        text = "palavra " * 200
        thesis = compose_thesis(normalize(text), _concepts("palavra"), [_model()])
        excerpt = thesis.split("Trecho de origem: ")[1]
        assert len(excerpt) <= ENGINE["excerpt_chars"] + 3
        assert excerpt.endswith("…\"")


# ── Inference ──

class TestNarrateInference:
    def _steps(self, text="Energia cinética se dissipa.", baseline=False):
        concepts = _concepts("energia", "cinética")
        return narrate_inference(
            normalize(text),
            concepts,
            _metrics(baseline),
            [Formula("t", "e", "x")],
            [_model()],
            [ParameterEntry("E_s", "Energia")],
        )

    def test_exactly_five_steps(self):
        assert len(self._steps()) == 5

    def test_step_order(self):
        prefixes = [s.split(":")[0] for s in self._steps()]
        assert prefixes == [
            "Normalização", "Extração", "Métricas", "Seleção de modelos", "Síntese formal",
        ]

    def test_metric_percentages(self):
        assert "complexidade 42%" in self._steps()[2]
        assert "coerência 87%" in self._steps()[2]

    def test_baseline_flagged(self):
        assert "referência" in self._steps(baseline=True)[2]
        assert "referência" not in self._steps()[2]

    def test_truncation_flagged(self):
        long_text = "a" * (ENGINE["max_chars"] + 10)
        assert "truncado" in self._steps(text=long_text)[0]
        assert "truncado" not in self._steps()[0]

    def test_model_names_listed(self):
        assert self._steps()[3] == "Seleção de modelos: Sistema dissipativo."


# ── Experiments ──

class TestRecommendExperiments:
    def test_one_model_one_phenomenon_adds_control(self):
        experiments = recommend_experiments(
            [_model()], ["Propriedade emergente associada a energia"], _concepts("energia"),
        )
        assert len(experiments) == 2
        assert experiments[0] == (
            "Investigar experimentalmente o balanço de energia observando "
            "propriedade emergente associada a energia"
        )
        assert experiments[1] == CONTROL_TEMPLATE.format(
            focus="o balanço de energia", term="energia",
        )

    def test_one_model_two_phenomena(self):
        experiments = recommend_experiments([_model()], ["A x", "B y", "C z"], _concepts("x"))
        assert len(experiments) == 2

    def test_two_models_capped_at_four(self):
        models = [_model(), _model("Rede adaptativa", "a reorganização")]
        experiments = recommend_experiments(models, ["A", "B", "C", "D"], _concepts("x"))
        assert len(experiments) == 4

    def test_model_first_then_phenomenon(self):
        models = [_model("M1", "foco um"), _model("M2", "foco dois")]
        experiments = recommend_experiments(models, ["P1", "P2"], _concepts("x"))
        assert ["foco um" in e for e in experiments] == [True, True, False, False]
        assert experiments[0].endswith("p1")
        assert experiments[1].endswith("p2")
