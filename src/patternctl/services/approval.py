"""ApprovalService — purchase approvals through the configured chain."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from patternctl.domain.approval import ApprovalChain, Outcome
from patternctl.services.base import BaseService
from patternctl.services.result import ServiceResult
from patternctl.services.telemetry import trace_span, traced

logger = logging.getLogger(__name__)


class ApprovalService(BaseService):
    """Builds the chain from ``[approval]`` and submits amounts to it."""

    def _chain(self) -> ApprovalChain:
        tiers = self._settings.approval.tiers
        return ApprovalChain.from_bounds((t.name, t.upper) for t in tiers)

    @traced
    def submit(self, amounts: Iterable[int], *, op: str = "approve") -> ServiceResult:
        """Submit each amount independently, preserving input order."""
        amounts = list(amounts)
        if not amounts:
            return ServiceResult.failure(op, "NO_AMOUNTS", "Nothing was submitted")

        chain = self._chain()
        with trace_span("chain.walk") as span:
            outcomes = chain.submit_many(amounts)
            if span is not None:
                span.annotate("submissions", len(outcomes))

        counts = {o.value: 0 for o in Outcome}
        for outcome in outcomes:
            counts[outcome.outcome.value] += 1
        logger.debug("Submitted %d amount(s): %s", len(outcomes), counts)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "results": [o.to_dict() for o in outcomes],
                "counts": counts,
            },
        )

    def demo(self) -> ServiceResult:
        """Run the configured demo amounts (500, 3000, 7000 by default)."""
        return self.submit(self._settings.approval.demo_amounts, op="approve_demo")

    def list_tiers(self) -> ServiceResult:
        chain = self._chain()
        items = [
            {
                "position": index + 1,
                "name": tier.name,
                "lower_bound": tier.lower_bound,
                "upper_bound": tier.upper_bound,
                "range": tier.label,
            }
            for index, tier in enumerate(chain.tiers)
        ]
        open_ended = chain.tiers[-1].upper_bound is None
        warnings: list[str] = []
        if not open_ended:
            warnings.append(
                f"Amounts above {chain.tiers[-1].upper_bound} will be rejected (no open-ended tier)"
            )
        return ServiceResult(
            ok=True,
            op="list_tiers",
            data={"items": items, "count": len(items), "open_ended": open_ended},
            warnings=warnings,
        )
