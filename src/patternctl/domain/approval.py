"""Purchase approval chain (Chain of Responsibility).

Each tier owns the half-open range ``(lower_bound, upper_bound]`` of
amounts it may approve; the top tier may leave ``upper_bound`` open.
A submission walks the tiers in link order and stops at the first tier
whose range contains the amount.  When no tier matches the request is
rejected, and negative amounts are turned away before any tier is asked.

The links are a plain ordered tuple of ``(predicate, tier)`` pairs, so
"forward to the next handler" is the next iteration of a loop.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from enum import StrEnum

logger = logging.getLogger(__name__)

NOTHING_TO_APPROVE_MESSAGE = "Nothing to approve"
REJECTED_MESSAGE = "Request could not be approved."


class Outcome(StrEnum):
    """Terminal states of one submission."""

    APPROVED = "approved"
    REJECTED = "rejected"
    NOTHING_TO_APPROVE = "nothing_to_approve"


@dataclass(frozen=True)
class Tier:
    """One link of the chain, e.g. ``Manager`` for ``(1000, 5000]``."""

    name: str
    lower_bound: int
    upper_bound: int | None = None

    def matches(self, amount: int) -> bool:
        if amount <= self.lower_bound:
            return False
        return self.upper_bound is None or amount <= self.upper_bound

    @property
    def label(self) -> str:
        upper = "∞" if self.upper_bound is None else str(self.upper_bound)
        return f"({self.lower_bound}, {upper}]"


@dataclass(frozen=True)
class ApprovalOutcome:
    """Result of a single :meth:`ApprovalChain.submit` call.

    Attributes:
        outcome: Terminal state reached.
        amount: The submitted amount, unchanged.
        tier: Name of the approving tier (approved outcomes only).
        tier_index: Position of the approving tier in the chain.
        consulted: Number of tiers that looked at the request.
    """

    outcome: Outcome
    amount: int
    tier: str | None = None
    tier_index: int | None = None
    consulted: int = 0

    @property
    def message(self) -> str:
        if self.outcome is Outcome.APPROVED:
            return f"{self.tier} approves purchase of ${self.amount}"
        if self.outcome is Outcome.NOTHING_TO_APPROVE:
            return NOTHING_TO_APPROVE_MESSAGE
        return REJECTED_MESSAGE

    def to_dict(self) -> dict[str, object]:
        return {
            "amount": self.amount,
            "outcome": self.outcome.value,
            "tier": self.tier,
            "tier_index": self.tier_index,
            "consulted": self.consulted,
            "message": self.message,
        }


def build_tiers(specs: Iterable[tuple[str, int | None]]) -> tuple[Tier, ...]:
    """Turn ``(name, upper_bound)`` pairs into contiguous tiers starting at 0.

    Raises:
        ValueError: No tiers, a bound that does not increase, or an
            open-ended tier that is not the last one.
    """
    tiers: list[Tier] = []
    lower = 0
    for name, upper in specs:
        if tiers and tiers[-1].upper_bound is None:
            msg = f"Tier {tiers[-1].name!r} is open-ended and must be the last tier"
            raise ValueError(msg)
        if upper is not None and upper <= lower:
            msg = f"Tier {name!r} upper bound {upper} must be greater than {lower}"
            raise ValueError(msg)
        tiers.append(Tier(name=name, lower_bound=lower, upper_bound=upper))
        if upper is not None:
            lower = upper
    if not tiers:
        raise ValueError("An approval chain needs at least one tier")
    return tuple(tiers)


def _check_contiguous(tiers: Sequence[Tier]) -> None:
    if not tiers:
        raise ValueError("An approval chain needs at least one tier")
    expected_lower = 0
    for position, tier in enumerate(tiers):
        if tier.lower_bound != expected_lower:
            msg = (
                f"Tier {tier.name!r} starts at {tier.lower_bound}, "
                f"expected {expected_lower} to keep the chain contiguous"
            )
            raise ValueError(msg)
        if tier.upper_bound is None:
            if position != len(tiers) - 1:
                msg = f"Tier {tier.name!r} is open-ended and must be the last tier"
                raise ValueError(msg)
            return
        if tier.upper_bound <= tier.lower_bound:
            msg = f"Tier {tier.name!r} has an empty range {tier.label}"
            raise ValueError(msg)
        expected_lower = tier.upper_bound


DEFAULT_TIERS: tuple[Tier, ...] = build_tiers(
    [("Supervisor", 1000), ("Manager", 5000), ("Director", None)]
)


class ApprovalChain:
    """Ordered, immutable chain of approval tiers."""

    def __init__(self, tiers: Sequence[Tier] = DEFAULT_TIERS) -> None:
        _check_contiguous(tiers)
        self._links: tuple[tuple[Callable[[int], bool], Tier], ...] = tuple(
            (tier.matches, tier) for tier in tiers
        )

    @classmethod
    def from_bounds(cls, specs: Iterable[tuple[str, int | None]]) -> ApprovalChain:
        return cls(build_tiers(specs))

    @property
    def tiers(self) -> tuple[Tier, ...]:
        return tuple(tier for _, tier in self._links)

    def __len__(self) -> int:
        return len(self._links)

    def submit(self, amount: int) -> ApprovalOutcome:
        """Route *amount* to the first tier whose range contains it."""
        if amount < 0:
            logger.debug("Refusing negative amount %s", amount)
            return ApprovalOutcome(Outcome.NOTHING_TO_APPROVE, amount)

        for index, (predicate, tier) in enumerate(self._links):
            if predicate(amount):
                logger.debug("%s approved %s", tier.name, amount)
                return ApprovalOutcome(
                    Outcome.APPROVED,
                    amount,
                    tier=tier.name,
                    tier_index=index,
                    consulted=index + 1,
                )
            logger.debug("%s forwards %s", tier.name, amount)

        logger.debug("No tier accepted %s", amount)
        return ApprovalOutcome(Outcome.REJECTED, amount, consulted=len(self._links))

    def submit_many(self, amounts: Iterable[int]) -> list[ApprovalOutcome]:
        return [self.submit(amount) for amount in amounts]
