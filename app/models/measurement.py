from enum import Enum

from pydantic import BaseModel

from app.utils.units import inches_to_cm, lbs_to_kg


class HeightUnit(str, Enum):
    CM = "cm"
    IN = "in"


class WeightUnit(str, Enum):
    KG = "kg"
    LBS = "lbs"


class Height(BaseModel):
    value: float
    unit: HeightUnit = HeightUnit.CM

    def to_cm(self) -> float:
        """Normalize the height to centimeters."""
        if self.unit == HeightUnit.IN:
            return inches_to_cm(self.value)
        return self.value


class Weight(BaseModel):
    value: float
    unit: WeightUnit = WeightUnit.KG

    def to_kg(self) -> float:
        """Normalize the weight to kilograms."""
        if self.unit == WeightUnit.LBS:
            return lbs_to_kg(self.value)
        return self.value


# Dropdown choices, base unit first
HEIGHT_UNITS = [unit.value for unit in HeightUnit]
WEIGHT_UNITS = [unit.value for unit in WeightUnit]
