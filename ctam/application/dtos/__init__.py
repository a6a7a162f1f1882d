"""Application DTOs: store record adapters and report structures."""

from ctam.application.dtos.records import (
    AssessmentItemRecord,
    AssessmentRecord,
    CategoryRecord,
    HealthOfficeRecord,
    HealthRegionRecord,
    HospitalRecord,
    ImpactScoreRecord,
    ProvinceRecord,
    QualitativeScoreRecord,
    parse_records,
)
from ctam.application.dtos.report import DrillDownReport, UnitReportRow

__all__ = [
    "AssessmentItemRecord",
    "AssessmentRecord",
    "CategoryRecord",
    "DrillDownReport",
    "HealthOfficeRecord",
    "HealthRegionRecord",
    "HospitalRecord",
    "ImpactScoreRecord",
    "ProvinceRecord",
    "QualitativeScoreRecord",
    "UnitReportRow",
    "parse_records",
]
