"""Ten-pin bowling score keeping."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator

__all__ = ["GameError", "InvalidRollError", "Frame", "BowlingGame"]

log = logging.getLogger(__name__)

PINS = 10
FRAMES = 10


class GameError(Exception):
    """The recorded rolls do not form a valid game."""


class InvalidRollError(GameError, ValueError):
    """A single roll knocked down an impossible number of pins."""


@dataclass
class Frame:
    """One frame of a game; ``third`` is only used in the tenth frame."""

    first: int = 0
    second: int = 0
    third: int = 0
    is_strike: bool = False
    is_spare: bool = False
    is_tenth: bool = False

    @property
    def pins(self) -> int:
        """Pins knocked down in this frame alone."""
        return self.first + self.second + (self.third if self.is_tenth else 0)


def _tenth_frame(rolls: Iterator[int]) -> Frame:
    first = next(rolls)
    second = next(rolls, None)
    if second is None:
        raise GameError("Incomplete 10th frame: second roll missing.")

    frame = Frame(first=first, second=second, is_tenth=True)
    frame.is_strike = first == PINS
    frame.is_spare = not frame.is_strike and first + second == PINS

    if frame.is_strike or frame.is_spare:
        third = next(rolls, None)
        if third is None:
            raise GameError("10th frame bonus roll missing.")
        frame.third = third

    if next(rolls, None) is not None:
        raise GameError("Unexpected extra rolls after valid 10th frame.")
    return frame


def _strike_bonus(following: list[Frame]) -> int:
    if not following:
        return 0
    nxt = following[0]
    if nxt.is_strike and len(following) > 1:
        return nxt.first + following[1].first
    return nxt.first + nxt.second


def _spare_bonus(following: list[Frame]) -> int:
    return following[0].first if following else 0


class BowlingGame:
    """Records rolls and computes the score of a (possibly partial) game."""

    def __init__(self) -> None:
        self._rolls: list[int] = []

    def roll(self, pins: int) -> None:
        """Record a roll that knocked down ``pins`` pins."""
        if not 0 <= pins <= PINS:
            raise InvalidRollError(
                f"Invalid number of pins ({pins}). Must be between 0 and 10."
            )
        self._rolls.append(pins)

    def score(self) -> int:
        """Return the total score of the rolls recorded so far."""
        frames = self._build_frames()
        total = 0
        for index, frame in enumerate(frames):
            following = frames[index + 1 : index + 3]
            if frame.is_strike:
                total += PINS + (
                    frame.second + frame.third
                    if frame.is_tenth
                    else _strike_bonus(following)
                )
            elif frame.is_spare:
                total += PINS + (
                    frame.third if frame.is_tenth else _spare_bonus(following)
                )
            else:
                total += frame.first + frame.second
            log.debug(
                "Frame %d: Current Frame score = %d; Total Score so far = %d",
                index + 1,
                frame.pins,
                total,
            )
        return total

    def _build_frames(self) -> list[Frame]:
        frames: list[Frame] = []
        rolls = iter(self._rolls)
        leftover = False

        for first in rolls:
            if len(frames) == FRAMES - 1:
                frames.append(_tenth_frame(_prepend(first, rolls)))
                break
            if first == PINS:
                frames.append(Frame(first=first, is_strike=True))
                continue
            second = next(rolls, None)
            if second is None:
                raise GameError("Incomplete frame: second roll missing.")
            if first + second > PINS:
                raise GameError("Frame cannot have more than 10 pins.")
            frames.append(
                Frame(first=first, second=second, is_spare=first + second == PINS)
            )
        else:
            leftover = False

        if len(frames) < FRAMES and leftover:
            raise GameError("Rolls remaining but less than 10 frames built.")
        return frames


def _prepend(first: int, rest: Iterator[int]) -> Iterator[int]:
    yield first
    yield from rest