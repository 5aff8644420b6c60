"""Interactive questions asked while assembling events."""

import logging
import math
from collections.abc import Callable
from typing import TypeVar

from .models import AnimeRecord

logger = logging.getLogger(__name__)

T = TypeVar("T")

MANUAL_MODE_QUESTION = "是否手动输入番剧集数：(y/N) "
INVALID_EPISODE_COUNT_MSG = "请输入一个大于等于 1 的正整数。"
INVALID_CONFIRMATION_MSG = "请输入 y 或 n。"

YES_ANSWERS = {"y", "yes"}
NO_ANSWERS = {"n", "no"}


class PromptError(Exception):
    """Raised when the input channel fails more often than allowed."""


def parse_episode_count(answer: str) -> int | None:
    """Parse a remaining-episode answer.

    Returns:
        The count if the answer is a whole number >= 1, otherwise None
    """
    text = answer.strip()
    try:
        value = int(text)
    except ValueError:
        try:
            number = float(text)
        except ValueError:
            return None
        if not math.isfinite(number) or not number.is_integer():
            return None
        value = int(number)

    if value < 1:
        return None
    return value


def parse_confirmation(answer: str, default: bool = False) -> bool | None:
    """Parse a yes/no answer; an empty answer means the default."""
    text = answer.strip().lower()
    if not text:
        return default
    if text in YES_ANSWERS:
        return True
    if text in NO_ANSWERS:
        return False
    return None


class EpisodeCountPrompt:
    """Asks a human for answers, re-asking until one is valid."""

    def __init__(
        self,
        input_func: Callable[[str], str] = input,
        output_func: Callable[[str], None] = print,
        max_failures: int | None = None,
    ):
        """Initialize prompt.

        Args:
            input_func: Shows a question and returns the typed answer
            output_func: Shows validation messages
            max_failures: Input failures allowed per question before giving
                up with PromptError; None retries forever
        """
        self.input_func = input_func
        self.output_func = output_func
        self.max_failures = max_failures

    def confirm_manual_mode(self) -> bool:
        """Ask whether episode counts should be entered by hand."""
        return self._ask_until_valid(
            MANUAL_MODE_QUESTION, parse_confirmation, INVALID_CONFIRMATION_MSG
        )

    def ask(self, anime: AnimeRecord) -> int:
        """Ask how many episodes of an anime are still to air."""
        return self._ask_until_valid(
            f"{anime.title} 有多少集未播出：",
            parse_episode_count,
            INVALID_EPISODE_COUNT_MSG,
        )

    def _ask_until_valid(
        self, question: str, parse: Callable[[str], T | None], invalid_msg: str
    ) -> T:
        failures = 0
        while True:
            try:
                answer = self.input_func(question)
            except Exception as e:
                failures += 1
                logger.error(f"Prompt failed ({failures} so far): {e}")
                if self.max_failures is not None and failures >= self.max_failures:
                    raise PromptError(
                        f"Giving up after {failures} failed prompts"
                    ) from e
                continue

            value = parse(answer)
            if value is not None:
                return value
            self.output_func(invalid_msg)
