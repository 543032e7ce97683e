"""Free-text question -> record store path translation with a local model."""

from __future__ import annotations

import logging

from transformers import pipeline

from .guardrails import clean_path
from .prompts import build_path_prompt
from .settings import get_settings

_generator = None


class TranslationError(RuntimeError):
    """Raised when the model cannot be loaded or fails to generate."""


def load_model() -> None:
    """Load the text2text-generation pipeline once (CPU only)."""
    global _generator
    if _generator is None:
        model_name = get_settings().model_name
        logging.info("Loading translation model %s", model_name)
        _generator = pipeline(
            "text2text-generation",
            model=model_name,
            tokenizer=model_name,
            device=-1,  # CPU
        )


def translate_question(question: str) -> str:
    """Return the model's query path for ``question``.

    The result is not validated: unrelated questions come back as free text
    and must be rejected by ``validate_path``.
    """
    try:
        load_model()
        generation = _generator(
            build_path_prompt(question), max_length=256, num_return_sequences=1
        )
        raw_path = generation[0]["generated_text"]
    except Exception as exc:
        logging.error("Path generation failed: %s", exc)
        raise TranslationError("Failed to generate a query path") from exc
    return clean_path(raw_path)
