"""Domain enum tests: member values, string equality, truthiness and member counts."""

from __future__ import annotations

import pytest

from hello_renderer.domain.enums import DisplayOutcome, OutputFormat, RendererState

# ======================== OutputFormat ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "expected_value"),
    [
        (OutputFormat.HUMAN, "human"),
        (OutputFormat.JSON, "json"),
    ],
)
def test_output_format_member_values(member: OutputFormat, expected_value: str) -> None:
    """Each OutputFormat member must have the expected string value."""
    assert member.value == expected_value
    assert member == expected_value


@pytest.mark.os_agnostic
def test_output_format_member_count() -> None:
    """OutputFormat must have exactly 2 members."""
    assert len(OutputFormat) == 2


# ======================== DisplayOutcome ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "expected_value"),
    [
        (DisplayOutcome.DISPLAYED, "displayed"),
        (DisplayOutcome.TARGET_NOT_FOUND, "target-not-found"),
    ],
)
def test_display_outcome_member_values(member: DisplayOutcome, expected_value: str) -> None:
    """Each DisplayOutcome member must have the expected string value."""
    assert member.value == expected_value
    assert member == expected_value


@pytest.mark.os_agnostic
def test_displayed_outcome_is_truthy() -> None:
    """Only a written sink counts as success in a boolean context."""
    assert DisplayOutcome.DISPLAYED


@pytest.mark.os_agnostic
def test_target_not_found_outcome_is_falsy() -> None:
    """A missing target must not read as success."""
    assert not DisplayOutcome.TARGET_NOT_FOUND


@pytest.mark.os_agnostic
def test_display_outcome_member_count() -> None:
    """DisplayOutcome must have exactly 2 members."""
    assert len(DisplayOutcome) == 2


# ======================== RendererState ========================


@pytest.mark.os_agnostic
@pytest.mark.parametrize(
    ("member", "expected_value"),
    [
        (RendererState.IDLE, "idle"),
        (RendererState.DONE, "done"),
    ],
)
def test_renderer_state_member_values(member: RendererState, expected_value: str) -> None:
    """Each RendererState member must have the expected string value."""
    assert member.value == expected_value


@pytest.mark.os_agnostic
def test_renderer_state_member_count() -> None:
    """RendererState must have exactly 2 members."""
    assert len(RendererState) == 2
