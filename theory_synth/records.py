"""
Records — the immutable inputs and outputs of a synthesis.

Everything here is a frozen dataclass with tuple sequences. A
TheorySynthesis is allocated fresh per call and never mutated after
construction; two calls on the same input compare equal field-for-field.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class InvalidInputError(ValueError):
    """Raised when content is empty or whitespace-only."""


class Medium(str, Enum):
    TEXT = "text"
    PDF = "pdf"
    AUDIO = "audio"


@dataclass(frozen=True)
class SourceDescriptor:
    """Where the content came from. Built once by the caller."""
    medium: Medium
    length: int = 0
    context_tag: Optional[str] = None      # e.g. original filename
    additional_notes: tuple = ()

    def __post_init__(self):
        # Accept plain strings ("pdf") from callers and freeze note lists
        object.__setattr__(self, "medium", Medium(self.medium))
        object.__setattr__(self, "additional_notes", tuple(self.additional_notes))
        if self.length < 0:
            raise ValueError(f"length must be non-negative, got {self.length}")


@dataclass(frozen=True)
class Concept:
    """A salient term. Rank is implied by list position."""
    term: str
    weight: float
    occurrences: int = 1
    first_index: int = 0

    @property
    def symbol(self) -> str:
        """Identifier used inside formulas. Never starts with a digit."""
        return self.term if not self.term[0].isdigit() else f"x_{self.term}"


@dataclass(frozen=True)
class Formula:
    title: str
    expression: str
    explanation: str


@dataclass(frozen=True)
class SystemModel:
    name: str
    governing_equation: str
    focus: str


@dataclass(frozen=True)
class ParameterEntry:
    label: str
    description: str


@dataclass(frozen=True)
class SignalProfile:
    medium: Medium
    length: int = 0
    context_tag: Optional[str] = None
    notes: tuple = ()


@dataclass(frozen=True)
class TheorySynthesis:
    """The complete theory artifact. The only thing synthesize() returns."""
    core_thesis: str
    phenomena: tuple
    derived_formulas: tuple            # 1-5 Formula
    system_models: tuple               # 1-2 SystemModel
    parameter_table: tuple             # ParameterEntry, unique labels
    complexity_score: float            # [0, 1]
    coherence: float                   # [0, 1]
    signal_profile: SignalProfile
    inference_steps: tuple
    recommended_experiments: tuple     # 2-4
    concepts: tuple = field(default=())
