"""
Record adapters.

Pydantic models for rows as delivered by the backing store. The store returns
numeric columns as text and nullable columns as None; these models coerce
them into the numeric, defaulted domain entities the scoring services expect.
"""

from collections.abc import Iterable
from datetime import datetime
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError, model_validator

from ctam.core.exceptions import RecordValidationError
from ctam.domain.entities import (
    Assessment,
    AssessmentItem,
    Category,
    HealthOffice,
    HealthRegion,
    Hospital,
    ImpactScore,
    Province,
    QualitativeScore,
)
from ctam.domain.enums import ItemStatus

E = TypeVar("E")


class RecordModel(BaseModel, Generic[E]):
    """Base model for store rows."""

    model_config = ConfigDict(
        extra="ignore",
        frozen=True,
        coerce_numbers_to_str=True,
        use_enum_values=False,
    )

    def to_entity(self) -> E:  # pragma: no cover - abstract
        raise NotImplementedError


class CategoryRecord(RecordModel[Category]):
    id: str
    code: str
    order_number: int
    name_th: str
    name_en: str
    max_score: float = 1.0

    def to_entity(self) -> Category:
        return Category(
            id=self.id,
            code=self.code,
            order_number=self.order_number,
            name_th=self.name_th,
            name_en=self.name_en,
            max_score=self.max_score,
        )


class AssessmentItemRecord(RecordModel[AssessmentItem]):
    id: str
    assessment_id: str
    category_id: str
    status: ItemStatus
    score: float | None = None

    def to_entity(self) -> AssessmentItem:
        return AssessmentItem(
            id=self.id,
            assessment_id=self.assessment_id,
            category_id=self.category_id,
            status=self.status,
            score=self.score,
        )


class AssessmentRecord(RecordModel[Assessment]):
    id: str
    status: str
    fiscal_year: int
    hospital_id: str | None = None
    health_office_id: str | None = None
    quantitative_score: float | None = None
    assessment_period: str | None = None
    created_at: datetime | None = None

    @model_validator(mode="after")
    def check_single_unit(self) -> "AssessmentRecord":
        """An assessment belongs to a hospital or a health office, not both."""
        if self.hospital_id and self.health_office_id:
            raise ValueError("Assessment cannot reference both a hospital and a health office")
        return self

    def to_entity(self) -> Assessment:
        return Assessment(
            id=self.id,
            status=self.status,
            fiscal_year=self.fiscal_year,
            hospital_id=self.hospital_id,
            health_office_id=self.health_office_id,
            quantitative_score=self.quantitative_score,
            assessment_period=self.assessment_period,
            created_at=self.created_at,
        )


class QualitativeScoreRecord(RecordModel[QualitativeScore]):
    assessment_id: str
    leadership_score: float | None = None
    sustainable_score: float | None = None
    total_score: float | None = None

    def to_entity(self) -> QualitativeScore:
        return QualitativeScore(
            assessment_id=self.assessment_id,
            leadership_score=self.leadership_score or 0.0,
            sustainable_score=self.sustainable_score or 0.0,
            total_score=self.total_score or 0.0,
        )


class ImpactScoreRecord(RecordModel[ImpactScore]):
    assessment_id: str
    had_incident: bool = False
    incident_score: float | None = None
    had_data_breach: bool = False
    breach_score: float | None = None
    total_score: float | None = Field(None, description="Raw 0-15; absent means full score")

    def to_entity(self) -> ImpactScore:
        return ImpactScore(
            assessment_id=self.assessment_id,
            had_incident=self.had_incident,
            incident_score=self.incident_score or 0.0,
            had_data_breach=self.had_data_breach,
            breach_score=self.breach_score or 0.0,
            total_score=15.0 if self.total_score is None else self.total_score,
        )


class HealthRegionRecord(RecordModel[HealthRegion]):
    id: str
    region_number: int
    name: str | None = None

    def to_entity(self) -> HealthRegion:
        return HealthRegion(id=self.id, region_number=self.region_number, name=self.name)


class ProvinceRecord(RecordModel[Province]):
    id: str
    name: str
    health_region_id: str

    def to_entity(self) -> Province:
        return Province(id=self.id, name=self.name, health_region_id=self.health_region_id)


class HospitalRecord(RecordModel[Hospital]):
    id: str
    name: str
    province_id: str

    def to_entity(self) -> Hospital:
        return Hospital(id=self.id, name=self.name, province_id=self.province_id)


class HealthOfficeRecord(RecordModel[HealthOffice]):
    id: str
    name: str
    health_region_id: str
    province_id: str | None = None

    def to_entity(self) -> HealthOffice:
        return HealthOffice(
            id=self.id,
            name=self.name,
            health_region_id=self.health_region_id,
            province_id=self.province_id,
        )


def parse_records(model: type[RecordModel[E]], rows: Iterable[dict[str, Any]]) -> list[E]:
    """
    Validate store rows and convert them to domain entities.

    Args:
        model: Record model describing the rows
        rows: Raw rows (dicts) from the store

    Returns:
        Domain entities in row order

    Raises:
        RecordValidationError: If any row fails validation
    """
    entities: list[E] = []
    for index, row in enumerate(rows):
        try:
            record = model.model_validate(row)
        except ValidationError as e:
            raise RecordValidationError(model.__name__, index, e.errors()) from e
        entities.append(record.to_entity())
    return entities
