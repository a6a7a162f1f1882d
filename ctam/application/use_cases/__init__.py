"""Application use cases."""

from ctam.application.use_cases.drill_down_report import DrillDownReportUseCase

__all__ = ["DrillDownReportUseCase"]
