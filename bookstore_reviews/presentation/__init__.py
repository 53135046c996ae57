# Presentation Layer
# ==================
# Terminal interaction: prompts, re-prompting on bad input, repeat question.

from .prompt_loop import (
    InputFormatError,
    LoopOutcome,
    PromptLoop,
    PromptState,
    parse_rating,
    parse_review_date,
)

__all__ = [
    "InputFormatError",
    "LoopOutcome",
    "PromptLoop",
    "PromptState",
    "parse_rating",
    "parse_review_date",
]
