"""BaseService — foundation for condperiod services.

Every service receives the resolved :class:`CondperiodSettings` at
construction time and reads the configured rule table through it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from condperiod.domain.collection import ConditionalCollection
from condperiod.services._helpers import NoRulesError

if TYPE_CHECKING:
    from condperiod.config.settings import CondperiodSettings

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class RuleService(BaseService):
            def find(self, value: str, rules: str | None = None) -> ServiceResult:
                collection = self._load(rules)
                ...
    """

    def __init__(self, settings: CondperiodSettings) -> None:
        self._settings = settings

    def _load(self, rules: str | None, *, from_json: bool = False) -> ConditionalCollection:
        """Parse *rules*, or fall back to the configured ``[rules] table``.

        Raises:
            NoRulesError: No rules given and none configured.
        """
        if rules is None:
            rules = self._settings.rules.table
            from_json = False
            if not rules:
                msg = "No rules given and no [rules] table configured"
                raise NoRulesError(msg)
            logger.debug("Using configured rule table")

        if from_json:
            collection = ConditionalCollection.from_json(rules)
        else:
            collection = ConditionalCollection.parse(rules)
        logger.debug("Loaded %d period(s) of kind %s", len(collection), collection.kind)
        return collection
