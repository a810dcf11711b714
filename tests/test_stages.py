"""
Tests for the Stage Orchestrator.

End-to-end properties of synthesize(): determinism, score bounds,
non-emptiness, symbol closure, medium pass-through, output caps and the
single error kind.
"""

import math

import pytest

from theory_synth import InvalidInputError, Medium, SourceDescriptor, TheorySynthesis, synthesize
from theory_synth.config import ENGINE, SCORING
from theory_synth.parameters import scan_identifiers


PARAGRAPH = (
    "Osciladores acoplados trocam energia através de uma rede adaptativa. "
    "A fase de cada nó responde ao ruído do sinal e ao calor dissipado; "
    "com o tempo a população sincroniza e o fluxo se estabiliza."
)


def _text(length=0):
    return SourceDescriptor(medium=Medium.TEXT, length=length)


@pytest.fixture
def theory() -> TheorySynthesis:
    return synthesize(PARAGRAPH, _text(len(PARAGRAPH)))


# ── Properties ──

class TestProperties:
    def test_deterministic(self):
        assert synthesize(PARAGRAPH, _text()) == synthesize(PARAGRAPH, _text())

    @pytest.mark.parametrize("length", [1, 7, 100, 5_000, 100_000])
    def test_scores_bounded(self, length):
        content = (PARAGRAPH * (length // len(PARAGRAPH) + 1))[:length]
        if not content.strip():
            content = "o"
        result = synthesize(content, _text())
        for value in (result.complexity_score, result.coherence):
            assert not math.isnan(value)
            assert 0.0 <= value <= 1.0

    def test_non_empty_sections(self, theory):
        for name in (
            "phenomena", "derived_formulas", "system_models",
            "parameter_table", "inference_steps", "recommended_experiments",
        ):
            assert len(getattr(theory, name)) > 0, name

    def test_symbol_closure(self, theory):
        texts = [f.expression for f in theory.derived_formulas]
        texts += [m.governing_equation for m in theory.system_models]
        identifiers = set()
        for text in texts:
            identifiers.update(scan_identifiers(text))
        for entry in theory.parameter_table:
            assert entry.label in identifiers, entry.label

    def test_parameter_labels_unique(self, theory):
        labels = [p.label for p in theory.parameter_table]
        assert len(labels) == len(set(labels))

    @pytest.mark.parametrize("medium", list(Medium))
    def test_medium_pass_through(self, medium):
        result = synthesize(PARAGRAPH, SourceDescriptor(medium=medium))
        assert result.signal_profile.medium == medium

    def test_descriptor_fields_echoed(self):
        descriptor = SourceDescriptor(
            medium="pdf", length=42, context_tag="artigo.pdf", additional_notes=["nota"],
        )
        profile = synthesize(PARAGRAPH, descriptor).signal_profile
        assert profile.length == 42
        assert profile.context_tag == "artigo.pdf"
        assert profile.notes == ("nota",)

    def test_caps(self, theory):
        assert 1 <= len(theory.derived_formulas) <= ENGINE["max_formulas"]
        assert 1 <= len(theory.system_models) <= ENGINE["max_models"]
        assert len(theory.phenomena) <= ENGINE["max_phenomena"]
        assert len(theory.concepts) <= ENGINE["top_k"]

    def test_five_inference_steps(self, theory):
        assert len(theory.inference_steps) == 5

    def test_experiment_count(self, theory):
        assert 2 <= len(theory.recommended_experiments) <= ENGINE["max_experiments"]

    def test_thesis_opening(self, theory):
        assert theory.core_thesis.startswith("A teoria propõe que")

    def test_inference_cites_model_names(self, theory):
        for model in theory.system_models:
            assert model.name in theory.inference_steps[3]


VARIED_INPUTS = [
    "energia",
    "2024 1999 2024",
    "3d 4k campo",
    "½½ ¾ energia",
    "αβγ δ λμ σ ω",
    "..???!!",
    "x",
    "dt d sin sin dt",
    "Ondas ondas ONDAS oscilações oscilação",
    "rede_neural e campo-onda; fluxo/calor!",
    "数据 网络 信号",
    PARAGRAPH,
]


class TestPropertiesOverVariedInputs:
    @pytest.mark.parametrize("content", VARIED_INPUTS)
    def test_symbol_closure(self, content):
        result = synthesize(content, _text())
        identifiers = set()
        for text in [f.expression for f in result.derived_formulas] + [
            m.governing_equation for m in result.system_models
        ]:
            identifiers.update(scan_identifiers(text))
        for entry in result.parameter_table:
            assert entry.label in identifiers, (content, entry.label)

    @pytest.mark.parametrize("content", VARIED_INPUTS)
    def test_non_empty_and_bounded(self, content):
        result = synthesize(content, _text())
        assert result.phenomena
        assert result.derived_formulas
        assert result.system_models
        assert result.parameter_table
        assert len(result.inference_steps) == 5
        assert 2 <= len(result.recommended_experiments) <= ENGINE["max_experiments"]
        assert 0.0 <= result.complexity_score <= 1.0
        assert 0.0 <= result.coherence <= 1.0

    @pytest.mark.parametrize("content", VARIED_INPUTS)
    def test_parameter_labels_unique(self, content):
        labels = [p.label for p in synthesize(content, _text()).parameter_table]
        assert len(labels) == len(set(labels))


# ── Scenarios ──

class TestScenarios:
    def test_single_word(self):
        result = synthesize("energia", _text())
        assert len(result.phenomena) >= 1
        assert len(result.derived_formulas) >= 1
        assert 0.0 <= result.complexity_score <= 1.0
        assert 0.0 <= result.coherence <= 1.0

    def test_same_text_different_medium(self):
        as_text = synthesize("energia cinética", SourceDescriptor(medium="text"))
        as_pdf = synthesize("energia cinética", SourceDescriptor(medium="pdf"))
        assert as_text.phenomena == as_pdf.phenomena
        assert as_text.derived_formulas == as_pdf.derived_formulas
        assert as_text.complexity_score == as_pdf.complexity_score
        assert as_text.coherence == as_pdf.coherence
        assert as_text.signal_profile.medium == Medium.TEXT
        assert as_pdf.signal_profile.medium == Medium.PDF

    def test_energy_example_model(self):
        result = synthesize("energia cinética", _text())
        assert [m.name for m in result.system_models] == ["Sistema dissipativo"]

    def test_repeated_paragraph(self):
        content = " ".join([PARAGRAPH] * 1000)
        result = synthesize(content, _text(len(content)))
        assert len(result.derived_formulas) <= ENGINE["max_formulas"]
        assert len(result.system_models) <= ENGINE["max_models"]
        assert "truncado" in result.inference_steps[0]

    @pytest.mark.parametrize("content", ["", "   ", "\n\t "])
    def test_empty_content_raises(self, content):
        with pytest.raises(InvalidInputError):
            synthesize(content, _text())

    def test_non_string_raises(self):
        with pytest.raises(InvalidInputError):
            synthesize(None, _text())

    def test_punctuation_only(self):
        result = synthesize("..???!!", _text())
        assert [c.term for c in result.concepts] == [ENGINE["fallback_concept"]]
        assert result.complexity_score == SCORING["baseline_complexity"]
        assert result.coherence == SCORING["baseline_coherence"]
        assert result.derived_formulas
        assert result.system_models
        assert len(result.recommended_experiments) >= 2

    def test_numbers_become_concepts(self):
        result = synthesize("2024 1999 2024", _text())
        assert [c.term for c in result.concepts] == ["2024", "1999"]
        assert "x_2024" in [p.label for p in result.parameter_table]

    def test_unmatched_vocabulary_uses_default_model(self):
        result = synthesize("maçã banana laranja", _text())
        assert [m.name for m in result.system_models] == ["Rede adaptativa"]

    def test_two_models_for_mixed_vocabulary(self):
        result = synthesize("oscilações de fase sincronizam a rede neural", _text())
        assert [m.name for m in result.system_models] == [
            "Osciladores acoplados", "Rede adaptativa",
        ]
