from pydantic import BaseModel, Field, ConfigDict, field_validator
from typing import Optional, List, Any, Iterable, Mapping, Union


class WardrobeItemAttributes(BaseModel):
    """Immutable snapshot of a wardrobe item's semantic attributes."""
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    id: Optional[str] = None
    name: Optional[str] = None
    category: Optional[str] = None
    subcategory: Optional[str] = None
    color: Optional[str] = None
    silhouette: Optional[str] = None
    style: Optional[str] = None
    material: Optional[str] = None
    pattern: Optional[str] = None
    neckline: Optional[str] = None
    sleeves: Optional[str] = None
    heel_height: Optional[str] = Field(None, alias="heelHeight")
    boot_height: Optional[str] = Field(None, alias="bootHeight")
    rise: Optional[str] = None
    length: Optional[str] = None
    seasons: List[str] = Field(default_factory=list)

    @field_validator("seasons", mode="before")
    @classmethod
    def _seasons_list(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, str):
            return [v]
        return v

    @property
    def display_name(self) -> str:
        if self.name:
            return self.name
        parts = [p for p in (self.color, self.subcategory or self.category) if p]
        return " ".join(parts) if parts else "Unnamed item"


class CoverageEntry(BaseModel):
    """One row of wardrobe gap analysis for a scenario/category/season."""
    model_config = ConfigDict(populate_by_name=True, frozen=True, extra="ignore")

    scenario_name: str = Field("", alias="scenarioName")
    category: Optional[str] = None
    season: Optional[str] = None
    subcategory_name: Optional[str] = Field(None, alias="subcategoryName")
    gap_type: Optional[str] = Field(None, alias="gapType")
    coverage_percent: Optional[float] = Field(None, alias="coveragePercent")
    gap_count: Optional[int] = Field(None, alias="gapCount")
    description: Optional[str] = None

    @field_validator("scenario_name", mode="before")
    @classmethod
    def _scenario_name_str(cls, v: Any) -> Any:
        return v or ""

    @property
    def dedup_key(self) -> tuple:
        return (self.scenario_name, self.category, self.season, self.subcategory_name)


class OutfitCombination(BaseModel):
    """Outfits that can be built with the candidate item for one season/scenario."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    season: Optional[str] = None
    scenario: Optional[str] = None
    outfits: List[Any] = Field(default_factory=list)


class OutfitUtilityData(BaseModel):
    """How many complete outfits the candidate item could participate in."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    total_outfits: int = Field(0, alias="totalOutfits", description="-1 means outfit analysis does not apply")
    coverage_gaps_with_no_outfits: List[CoverageEntry] = Field(
        default_factory=list, alias="coverageGapsWithNoOutfits"
    )

    @property
    def applicable(self) -> bool:
        return self.total_outfits >= 0


ItemLike = Union[WardrobeItemAttributes, Mapping[str, Any]]
CoverageLike = Union[CoverageEntry, Mapping[str, Any]]


def as_item(item: ItemLike) -> WardrobeItemAttributes:
    if isinstance(item, WardrobeItemAttributes):
        return item
    return WardrobeItemAttributes.model_validate(item)


def as_items(items: Optional[Iterable[ItemLike]]) -> List[WardrobeItemAttributes]:
    return [as_item(i) for i in items or []]


def as_coverage(entries: Optional[Iterable[CoverageLike]]) -> List[CoverageEntry]:
    out: List[CoverageEntry] = []
    for e in entries or []:
        out.append(e if isinstance(e, CoverageEntry) else CoverageEntry.model_validate(e))
    return out
