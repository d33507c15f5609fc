"""
AI text-improvement request boundary.

The rewrite itself happens in an injected async provider (an LLM client in
the host application). This module turns one request into an explicit
pending / success / error state and never raises for provider failures.
Rewritten text re-enters the scoring engine only as part of a new document
snapshot.
"""

import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Awaitable, Callable, Optional

from ats_engine.config import Settings, get_settings

logger = logging.getLogger(__name__)


class ImprovementAction(str, Enum):
    IMPROVE = "improve"
    QUANTIFY = "quantify"
    FIX = "fix"
    SHORTEN = "shorten"


class ImprovementStatus(str, Enum):
    PENDING = "pending"
    SUCCESS = "success"
    ERROR = "error"


Provider = Callable[["ImprovementAction", str], Awaitable[str]]

ACTION_PROMPTS = {
    ImprovementAction.IMPROVE: (
        "Improve this resume bullet point to be more impactful and professional.\n"
        "Use stronger action verbs and clearer language."
    ),
    ImprovementAction.QUANTIFY: (
        "Add quantifiable metrics to this resume bullet point.\n"
        "If numbers aren't available, suggest realistic placeholder metrics."
    ),
    ImprovementAction.FIX: (
        "Fix any grammar, spelling, or punctuation errors in this text.\n"
        "Also improve clarity without changing the meaning."
    ),
    ImprovementAction.SHORTEN: (
        "Make this resume bullet point more concise while keeping the impact.\n"
        "Remove unnecessary words and keep the core message."
    ),
}

EMPTY_INPUT_MESSAGE = "Please enter some text to improve"
RATE_LIMIT_MESSAGE = "Rate limit exceeded. Please try again in a moment."
CREDITS_MESSAGE = "AI credits exhausted. Please add credits to continue."
TIMEOUT_MESSAGE = "The improvement request timed out."
NO_RESULT_MESSAGE = "No improvement suggestions available."
GENERIC_ERROR_MESSAGE = "Failed to improve text. Please try again."


@dataclass(frozen=True)
class ImprovementState:
    action: ImprovementAction
    original: str
    status: ImprovementStatus
    improved: Optional[str] = None
    error: Optional[str] = None

    @property
    def is_pending(self) -> bool:
        return self.status == ImprovementStatus.PENDING


def build_prompt(action: ImprovementAction, text: str) -> str:
    """Prompt text a provider can send to its model."""
    return f"{ACTION_PROMPTS[action]}\nOriginal: {text}\nReturn ONLY the resulting text, nothing else."


def pending_state(action: ImprovementAction, text: str) -> ImprovementState:
    return ImprovementState(action=action, original=text, status=ImprovementStatus.PENDING)


def error_message(exc: BaseException) -> str:
    """User-facing message for a provider failure."""
    detail = str(exc).lower()
    if "429" in detail or "rate limit" in detail:
        return RATE_LIMIT_MESSAGE
    if "402" in detail:
        return CREDITS_MESSAGE
    return GENERIC_ERROR_MESSAGE


def _failed(action: ImprovementAction, text: str, message: str) -> ImprovementState:
    return ImprovementState(
        action=action, original=text, status=ImprovementStatus.ERROR, error=message
    )


async def improve_text(
    provider: Provider,
    action: ImprovementAction,
    text: str,
    settings: Optional[Settings] = None,
) -> ImprovementState:
    """
    Request a rewrite of one piece of text.

    Args:
        provider: Async callable producing the rewritten text
        action: Kind of rewrite requested
        text: Original text
        settings: Source of the request timeout

    Returns:
        ImprovementState with status success or error
    """
    settings = settings or get_settings()
    action = ImprovementAction(action)

    if not text or not text.strip():
        return _failed(action, text, EMPTY_INPUT_MESSAGE)

    try:
        improved = await asyncio.wait_for(
            provider(action, text), timeout=settings.improvement_timeout_seconds
        )
    except asyncio.TimeoutError:
        logger.warning(f"Text improvement ({action.value}) timed out")
        return _failed(action, text, TIMEOUT_MESSAGE)
    except Exception as e:
        logger.warning(f"Text improvement ({action.value}) failed: {e}")
        return _failed(action, text, error_message(e))

    if not isinstance(improved, str) or not improved.strip():
        logger.warning(f"Text improvement ({action.value}) returned no text")
        return _failed(action, text, NO_RESULT_MESSAGE)

    return ImprovementState(
        action=action,
        original=text,
        status=ImprovementStatus.SUCCESS,
        improved=improved.strip(),
    )
