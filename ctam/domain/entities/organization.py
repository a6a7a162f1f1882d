"""
Organisation hierarchy entities.

Health regions contain provinces; provinces contain hospitals. Health offices
belong to a region and usually, but not always, to a province as well
(regional health offices have no province).
"""

from collections.abc import Iterable
from dataclasses import dataclass, field

from ctam.domain.enums import AreaLevel, UnitType
from ctam.domain.value_objects.area import AreaScope


@dataclass(frozen=True)
class HealthRegion:
    id: str
    region_number: int
    name: str | None = None

    @property
    def display_name(self) -> str:
        return self.name or f"เขตสุขภาพที่ {self.region_number}"


@dataclass(frozen=True)
class Province:
    id: str
    name: str
    health_region_id: str


@dataclass(frozen=True)
class Hospital:
    id: str
    name: str
    province_id: str


@dataclass(frozen=True)
class HealthOffice:
    id: str
    name: str
    health_region_id: str
    province_id: str | None = None


@dataclass(frozen=True)
class OrganizationHierarchy:
    """
    Read-only view over the region/province/unit tree.

    Scopes produced here are the unit-id sets the aggregator rolls up. Unit
    ids keep hospital-then-health-office order within each scope.
    """

    regions: tuple[HealthRegion, ...] = ()
    provinces: tuple[Province, ...] = ()
    hospitals: tuple[Hospital, ...] = ()
    health_offices: tuple[HealthOffice, ...] = ()
    _province_region: dict[str, str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "_province_region",
            {province.id: province.health_region_id for province in self.provinces},
        )

    @classmethod
    def build(
        cls,
        regions: Iterable[HealthRegion] = (),
        provinces: Iterable[Province] = (),
        hospitals: Iterable[Hospital] = (),
        health_offices: Iterable[HealthOffice] = (),
    ) -> "OrganizationHierarchy":
        """Create a hierarchy from any iterables, ordering regions by number."""
        return cls(
            regions=tuple(sorted(regions, key=lambda r: r.region_number)),
            provinces=tuple(provinces),
            hospitals=tuple(hospitals),
            health_offices=tuple(health_offices),
        )

    def get_region(self, region_id: str) -> HealthRegion | None:
        return next((r for r in self.regions if r.id == region_id), None)

    def get_province(self, province_id: str) -> Province | None:
        return next((p for p in self.provinces if p.id == province_id), None)

    def provinces_in_region(self, region_id: str) -> list[Province]:
        return [p for p in self.provinces if p.health_region_id == region_id]

    def hospitals_in_province(self, province_id: str) -> list[Hospital]:
        return [h for h in self.hospitals if h.province_id == province_id]

    def health_offices_in_province(self, province_id: str) -> list[HealthOffice]:
        return [o for o in self.health_offices if o.province_id == province_id]

    def regional_health_offices(self, region_id: str) -> list[HealthOffice]:
        """Health offices attached to the region but to none of its provinces."""
        return [
            o
            for o in self.health_offices
            if o.health_region_id == region_id
            and (o.province_id is None or self._province_region.get(o.province_id) != region_id)
        ]

    def unit_name(self, unit_id: str) -> str | None:
        for unit in (*self.hospitals, *self.health_offices):
            if unit.id == unit_id:
                return unit.name
        return None

    def unit_type(self, unit_id: str) -> UnitType | None:
        if any(h.id == unit_id for h in self.hospitals):
            return UnitType.HOSPITAL
        if any(o.id == unit_id for o in self.health_offices):
            return UnitType.HEALTH_OFFICE
        return None

    def province_scope(self, province_id: str) -> AreaScope:
        """Hospitals and health offices located in one province."""
        province = self.get_province(province_id)
        hospital_ids = tuple(h.id for h in self.hospitals_in_province(province_id))
        office_ids = tuple(o.id for o in self.health_offices_in_province(province_id))
        return AreaScope(
            area_id=province_id,
            name=province.name if province else province_id,
            level=AreaLevel.PROVINCE,
            unit_ids=hospital_ids + office_ids,
        )

    def region_province_scopes(self, region_id: str) -> list[AreaScope]:
        return [self.province_scope(p.id) for p in self.provinces_in_region(region_id)]

    def regional_office_scope(self, region_id: str) -> AreaScope:
        """Scope holding only the region-level health offices."""
        region = self.get_region(region_id)
        return AreaScope(
            area_id=region_id,
            name=region.display_name if region else region_id,
            level=AreaLevel.REGION,
            unit_ids=tuple(o.id for o in self.regional_health_offices(region_id)),
        )
