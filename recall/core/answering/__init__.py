"""Answer synthesis."""

from recall.core.answering.synthesizer import (
    NO_RELEVANT_CONTENT_ANSWER,
    AnswerSynthesizer,
)

__all__ = ["AnswerSynthesizer", "NO_RELEVANT_CONTENT_ANSWER"]
