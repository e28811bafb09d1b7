"""Roll operations over a caller-held result.

The caller owns the ``RollResult`` and passes it in on every call; nothing is
kept here between calls. Each operation fetches one entropy batch per die
type and resolves the draws in order.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field

from ringroll.dice import DiceError, DieType, FaceLabel, resolve_face, resolve_faces
from ringroll.entropy import get_draws

logger = logging.getLogger(__name__)


class Pool(str, enum.Enum):
    """Which result sequence an operation addresses."""

    primary = "primary"
    bonus = "bonus"


@dataclass
class RollRequest:
    ring_count: int
    skill_count: int
    networked: bool = False


@dataclass
class RollResult:
    """Primary and bonus dice, each addressable by position."""

    primary: list[FaceLabel] = field(default_factory=list)
    bonus: list[FaceLabel] = field(default_factory=list)

    def pool(self, pool: Pool) -> list[FaceLabel]:
        return self.primary if pool is Pool.primary else self.bonus

    def to_dict(self) -> dict[str, list[str]]:
        return {
            "primary": [str(label) for label in self.primary],
            "bonus": [str(label) for label in self.bonus],
        }

    @classmethod
    def from_dict(cls, data: dict) -> RollResult:
        """Rebuild a result from :meth:`to_dict` output.

        Raises:
            DiceError: If any stored label is invalid.
        """
        return cls(
            primary=[FaceLabel.parse(s) for s in data.get("primary", [])],
            bonus=[FaceLabel.parse(s) for s in data.get("bonus", [])],
        )


async def roll_main(result: RollResult, request: RollRequest) -> RollResult:
    """Roll a fresh primary pool and discard any bonus dice.

    Ring dice are drawn as one batch, then skill dice as a second batch. The
    new primary pool lists ring faces first, then skill faces.

    Raises:
        DiceError: If either count is negative.
    """
    if request.ring_count < 0 or request.skill_count < 0:
        raise DiceError(
            f"Dice counts must be non-negative: ring={request.ring_count}, "
            f"skill={request.skill_count}"
        )
    ring = resolve_faces(await get_draws(request.ring_count, request.networked), DieType.ring)
    skill = resolve_faces(await get_draws(request.skill_count, request.networked), DieType.skill)
    result.primary = ring + skill
    result.bonus = []
    logger.debug("Rolled %d ring and %d skill dice", len(ring), len(skill))
    return result


async def add_bonus_die(
    result: RollResult, die_type: DieType, networked: bool = False
) -> FaceLabel:
    """Roll one die of ``die_type`` and append it to the bonus pool."""
    (draw,) = await get_draws(1, networked)
    label = resolve_face(draw, die_type)
    result.bonus.append(label)
    logger.debug("Added bonus %s", label)
    return label


async def reroll_at(
    result: RollResult, pool: Pool, index: int, networked: bool = False
) -> FaceLabel:
    """Replace the die at ``index`` in ``pool`` with a fresh roll of the same type.

    Args:
        result: The caller's current dice.
        pool: Primary or bonus sequence.
        index: Zero-based position within that sequence.
        networked: Ask random.org first for the draw.

    Returns:
        The new label now stored at ``index``.

    Raises:
        DiceError: If index is outside the pool.
    """
    dice = result.pool(pool)
    if not 0 <= index < len(dice):
        raise DiceError(f"No {pool.value} die at position {index}")
    (draw,) = await get_draws(1, networked)
    label = resolve_face(draw, dice[index].die_type)
    dice[index] = label
    logger.debug("Rerolled %s die %d as %s", pool.value, index, label)
    return label
