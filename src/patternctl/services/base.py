"""BaseService — shared foundation for patternctl services.

Every service receives the frozen :class:`PatternSettings` at construction
time and builds its pattern objects from the relevant config section.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from patternctl.config.settings import PatternSettings


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ApprovalService(BaseService):
            def submit(self, amounts: list[int]) -> ServiceResult:
                chain = ApprovalChain.from_bounds(...)
                ...
    """

    def __init__(self, settings: PatternSettings) -> None:
        self._settings = settings
