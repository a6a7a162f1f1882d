"""
Scoring context.

Bundles the collaborators the scoring services are configured with: the
approval predicate, the item status scheme and the quality band tables.
``ScoringContext.from_settings`` builds them from library settings.
"""

import datetime
from dataclasses import dataclass, field

from ctam.core.config import Settings, get_settings
from ctam.core.exceptions import ConfigurationError
from ctam.core.utils.logging import get_logger
from ctam.domain.enums.assessment_status import APPROVED_STATUSES, AssessmentStatus
from ctam.domain.services import CategoryPassEvaluator, CompositeScoreCalculator
from ctam.domain.utils.fiscal_year import DEFAULT_FISCAL_YEAR_START_MONTH, current_fiscal_year
from ctam.domain.value_objects import (
    PERCENT_TABLE,
    TEN_POINT_TABLE,
    TERNARY_SCHEME,
    QualityLevelTable,
    StatusScheme,
    get_quality_table,
    get_status_scheme,
)

logger = get_logger(__name__)


@dataclass(frozen=True)
class ScoringContext:
    """Configured scoring collaborators shared by the report use cases."""

    approved_statuses: frozenset[str] = APPROVED_STATUSES
    status_scheme: StatusScheme = TERNARY_SCHEME
    quality_table: QualityLevelTable = TEN_POINT_TABLE
    percent_table: QualityLevelTable = PERCENT_TABLE
    strict_score_range: bool = False
    fiscal_year_start_month: int = DEFAULT_FISCAL_YEAR_START_MONTH
    evaluator: CategoryPassEvaluator = field(init=False, repr=False, compare=False)
    calculator: CompositeScoreCalculator = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "approved_statuses", frozenset(self.approved_statuses))
        object.__setattr__(self, "evaluator", CategoryPassEvaluator(self.status_scheme))
        object.__setattr__(
            self,
            "calculator",
            CompositeScoreCalculator(
                quality_table=self.quality_table,
                percent_table=self.percent_table,
                strict=self.strict_score_range,
            ),
        )

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "ScoringContext":
        """
        Build a context from library settings.

        Args:
            settings: Settings to use, defaults to ``get_settings()``

        Returns:
            ScoringContext configured from the settings

        Raises:
            ConfigurationError: If the status scheme or quality table version
                is not registered
        """
        settings = settings or get_settings()

        try:
            status_scheme = get_status_scheme(settings.ITEM_STATUS_SCHEME)
            quality_table, percent_table = get_quality_table(settings.QUALITY_TABLE_VERSION)
        except ValueError as e:
            raise ConfigurationError(str(e)) from e

        logger.debug(
            "Scoring context: scheme=%s table=%s strict=%s approved=%s",
            status_scheme.name,
            quality_table.version,
            settings.STRICT_SCORE_RANGE,
            settings.APPROVED_ASSESSMENT_STATUSES,
        )
        return cls(
            approved_statuses=frozenset(settings.APPROVED_ASSESSMENT_STATUSES),
            status_scheme=status_scheme,
            quality_table=quality_table,
            percent_table=percent_table,
            strict_score_range=settings.STRICT_SCORE_RANGE,
            fiscal_year_start_month=settings.FISCAL_YEAR_START_MONTH,
        )

    def is_approved(self, status: str | None) -> bool:
        """Approval predicate over raw assessment status strings."""
        if isinstance(status, AssessmentStatus):
            status = status.value
        return status in self.approved_statuses

    def current_fiscal_year(self, today: datetime.date | None = None) -> int:
        return current_fiscal_year(today, self.fiscal_year_start_month)

