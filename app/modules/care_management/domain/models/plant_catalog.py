# 📄 File: app/modules/care_management/domain/models/plant_catalog.py
# 🧭 Purpose (Layman Explanation):
# The encyclopedia page for a plant species: how hard it is to grow, how much light and water it likes, whether it is safe around pets
# 🧪 Purpose (Technical Summary):
# Read-only PlantCatalogEntry species record with its descriptive enumerations; supplies default care frequencies for new plant instances
# 🔗 Dependencies:
# pydantic, enum, re, reminder.py (CareFrequency)
# 🔄 Connected Modules / Calls From:
# plant_instance.py (create_from_catalog), plant catalog repository, register_plant handler

import re
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from app.modules.care_management.domain.models.reminder import CareFrequency

NPK_RATIO_PATTERN = re.compile(r"^\d{1,2}-\d{1,2}-\d{1,2}$")


class PlantCategory(str, Enum):
    SUCCULENT = "succulent"
    HERBS = "herbs"
    VEGETABLES = "vegetables"
    FLOWERS = "flowers"
    FOLIAGE = "foliage"
    CACTI = "cacti"
    ORCHIDS = "orchids"
    FERNS = "ferns"
    TREES = "trees"
    SHRUBS = "shrubs"
    VINES = "vines"
    MOSS = "moss"
    OTHER = "other"


class DifficultyLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class LightLevel(str, Enum):
    FULL_SUN = "full_sun"
    PARTIAL_SUN = "partial_sun"
    PARTIAL_SHADE = "partial_shade"
    FULL_SHADE = "full_shade"
    INDIRECT = "indirect"


class HumidityLevel(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"
    VERY_HIGH = "very_high"


class SoilType(str, Enum):
    POTTING_MIX = "potting_mix"
    CACTUS_SOIL = "cactus_soil"
    PEAT_MOSS = "peat_moss"
    LOAMY = "loamy"
    SANDY = "sandy"
    CLAY = "clay"
    WELL_DRAINING = "well_draining"


class GrowthRate(str, Enum):
    SLOW = "slow"
    MODERATE = "moderate"
    FAST = "fast"
    VERY_FAST = "very_fast"


class ToxicityLevel(str, Enum):
    NON_TOXIC = "non_toxic"
    MILDLY_TOXIC = "mildly_toxic"
    TOXIC = "toxic"
    HIGHLY_TOXIC = "highly_toxic"


class PropagationMethod(str, Enum):
    SEEDS = "seeds"
    CUTTINGS = "cuttings"
    DIVISION = "division"
    LAYERING = "layering"
    OFFSETS = "offsets"
    SPORES = "spores"


class TemperatureUnit(str, Enum):
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"


class TemperatureRange(BaseModel):
    """Comfortable temperature range for a species"""
    model_config = ConfigDict(frozen=True)

    min: float
    max: float
    unit: TemperatureUnit = TemperatureUnit.CELSIUS

    @model_validator(mode="after")
    def validate_bounds(self) -> "TemperatureRange":
        if self.min > self.max:
            raise ValueError("Temperature min cannot exceed max")
        return self


class FertilizerInfo(BaseModel):
    """Recommended fertilizer and feeding frequency"""
    model_config = ConfigDict(frozen=True)

    type: str
    npk_ratio: str  # e.g. "10-10-10"
    frequency: CareFrequency
    notes: Optional[str] = None

    @field_validator("npk_ratio")
    @classmethod
    def validate_npk_ratio(cls, v: str) -> str:
        v = v.strip()
        if not NPK_RATIO_PATTERN.match(v):
            raise ValueError("NPK ratio must look like N-P-K, e.g. 10-10-10")
        return v


class PlantCatalogEntry(BaseModel):
    """
    A plant species in the catalog.

    Catalog content is curated elsewhere; the care engine only reads the
    watering frequency and the fertilizer frequency to seed reminders.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str = Field(..., min_length=1, max_length=200)
    scientific_name: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    category: PlantCategory
    difficulty: DifficultyLevel
    watering_frequency: CareFrequency
    light_requirement: LightLevel
    temperature: TemperatureRange
    humidity: HumidityLevel
    soil_type: SoilType
    fertilizer: Optional[FertilizerInfo] = None
    growth_rate: GrowthRate
    toxicity: Optional[ToxicityLevel] = None
    pet_friendly: bool = False
    child_friendly: bool = False
    common_problems: List[str] = Field(default_factory=list)
    propagation_methods: List[PropagationMethod] = Field(default_factory=list)

    @property
    def fertilizing_frequency(self) -> Optional[CareFrequency]:
        return self.fertilizer.frequency if self.fertilizer else None
