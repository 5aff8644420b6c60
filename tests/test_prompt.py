from unittest.mock import Mock

import pytest

from bangumical.prompt import (
    INVALID_CONFIRMATION_MSG,
    INVALID_EPISODE_COUNT_MSG,
    EpisodeCountPrompt,
    PromptError,
    parse_confirmation,
    parse_episode_count,
)


def test_parse_episode_count():
    """Test episode count validation."""
    assert parse_episode_count("1") == 1
    assert parse_episode_count("12") == 12
    assert parse_episode_count(" 12 ") == 12
    assert parse_episode_count("12.0") == 12

    assert parse_episode_count("0") is None
    assert parse_episode_count("-1") is None
    assert parse_episode_count("2.5") is None
    assert parse_episode_count("abc") is None
    assert parse_episode_count("") is None
    assert parse_episode_count("nan") is None
    assert parse_episode_count("inf") is None


def test_parse_confirmation():
    assert parse_confirmation("y") is True
    assert parse_confirmation("YES") is True
    assert parse_confirmation("n") is False
    assert parse_confirmation("No ") is False
    assert parse_confirmation("") is False
    assert parse_confirmation("", default=True) is True
    assert parse_confirmation("maybe") is None


def test_ask_reprompts_until_valid(make_anime):
    """Test that invalid answers re-prompt with a validation message."""
    input_func = Mock(side_effect=["0", "-1", "2.5", "abc", "12"])
    output_func = Mock()
    prompt = EpisodeCountPrompt(input_func, output_func)

    assert prompt.ask(make_anime(title="Frieren")) == 12

    assert input_func.call_count == 5
    assert "Frieren" in input_func.call_args.args[0]
    assert output_func.call_count == 4
    output_func.assert_called_with(INVALID_EPISODE_COUNT_MSG)


def test_ask_accepts_one(make_anime):
    input_func = Mock(return_value="1")
    output_func = Mock()
    prompt = EpisodeCountPrompt(input_func, output_func)

    assert prompt.ask(make_anime()) == 1
    output_func.assert_not_called()


def test_ask_retries_after_input_failure(make_anime):
    """Test that a failing input channel is logged and asked again."""
    input_func = Mock(side_effect=[EOFError("closed"), OSError("tty"), "3"])
    prompt = EpisodeCountPrompt(input_func, Mock())

    assert prompt.ask(make_anime()) == 3
    assert input_func.call_count == 3


def test_ask_gives_up_after_max_failures(make_anime):
    """Test that repeated input failures raise once the limit is reached."""
    input_func = Mock(side_effect=EOFError("closed"))
    prompt = EpisodeCountPrompt(input_func, Mock(), max_failures=3)

    with pytest.raises(PromptError) as exc_info:
        prompt.ask(make_anime())

    assert input_func.call_count == 3
    assert isinstance(exc_info.value.__cause__, EOFError)


def test_validation_failures_do_not_count_towards_limit(make_anime):
    input_func = Mock(side_effect=["x", "x", "x", EOFError(), "x", "4"])
    prompt = EpisodeCountPrompt(input_func, Mock(), max_failures=2)

    assert prompt.ask(make_anime()) == 4


def test_keyboard_interrupt_propagates(make_anime):
    prompt = EpisodeCountPrompt(Mock(side_effect=KeyboardInterrupt), Mock())

    with pytest.raises(KeyboardInterrupt):
        prompt.ask(make_anime())


def test_confirm_manual_mode():
    """Test the batch question re-prompts on unclear answers."""
    output_func = Mock()
    prompt = EpisodeCountPrompt(Mock(side_effect=["maybe", "y"]), output_func)

    assert prompt.confirm_manual_mode() is True
    output_func.assert_called_once_with(INVALID_CONFIRMATION_MSG)


def test_confirm_manual_mode_defaults_to_no():
    prompt = EpisodeCountPrompt(Mock(return_value=""), Mock())

    assert prompt.confirm_manual_mode() is False
