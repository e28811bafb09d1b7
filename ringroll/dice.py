"""Die faces and the draw-to-face resolver.

Two die types exist:

  ring   six equally weighted faces, "1".."6"
  skill  twelve table slots where faces repeat: [1,1,3,3,3,6,6,8,8,10,11,12]

A uniform draw in [0, 1) picks a slot by ``floor(draw * len(table))``.
Duplicate slots give their face a proportionally higher probability.

Labels render as ``d6-<face>`` / ``d12-<face>`` and parse back, so a caller
holding only strings can still tell which table to reapply on a reroll.
"""

from __future__ import annotations

import enum
import math
from dataclasses import dataclass


class DiceError(ValueError):
    """Raised when a die, draw, label or pool position is invalid."""


class DieType(str, enum.Enum):
    """Kind of die being rolled."""

    ring = "ring"
    skill = "skill"


RING_FACES: tuple[str, ...] = ("1", "2", "3", "4", "5", "6")
SKILL_FACES: tuple[str, ...] = ("1", "1", "3", "3", "3", "6", "6", "8", "8", "10", "11", "12")

FACE_TABLES: dict[DieType, tuple[str, ...]] = {
    DieType.ring: RING_FACES,
    DieType.skill: SKILL_FACES,
}

_LABEL_PREFIXES: dict[DieType, str] = {
    DieType.ring: "d6",
    DieType.skill: "d12",
}
_PREFIX_TYPES: dict[str, DieType] = {prefix: die for die, prefix in _LABEL_PREFIXES.items()}


@dataclass(frozen=True)
class FaceLabel:
    """A resolved face, tagged with the die type that produced it."""

    die_type: DieType
    face: str

    def __str__(self) -> str:
        return f"{_LABEL_PREFIXES[self.die_type]}-{self.face}"

    @classmethod
    def parse(cls, label: str) -> FaceLabel:
        """Parse a label such as ``"d12-8"`` back into a FaceLabel.

        Raises:
            DiceError: If the prefix is unknown or the face is not on that die.
        """
        prefix, sep, face = label.partition("-")
        die_type = _PREFIX_TYPES.get(prefix)
        if not sep or die_type is None or face not in FACE_TABLES[die_type]:
            raise DiceError(f"Invalid face label: {label!r}")
        return cls(die_type, face)


def face_index(draw: float, table_size: int) -> int:
    """Map a draw in [0, 1) to a slot index in ``[0, table_size - 1]``.

    The clamp keeps draws that round up to ``table_size`` on the last slot.
    """
    return min(table_size - 1, max(0, math.floor(draw * table_size)))


def resolve_face(draw: float, die_type: DieType) -> FaceLabel:
    """Resolve a single draw into a face of the given die type.

    Args:
        draw: Uniform random value in [0, 1).
        die_type: Which face table to read.

    Returns:
        The FaceLabel at ``floor(draw * table_size)``.

    Raises:
        DiceError: If the draw is outside [0, 1).
    """
    if not 0.0 <= draw < 1.0:
        raise DiceError(f"Draw out of range [0, 1): {draw!r}")
    table = FACE_TABLES[die_type]
    return FaceLabel(die_type, table[face_index(draw, len(table))])


def resolve_faces(draws: list[float], die_type: DieType) -> list[FaceLabel]:
    """Resolve each draw in order."""
    return [resolve_face(d, die_type) for d in draws]
