"""
Household Energy Estimator

Rough monthly generation, savings and payback for a small rooftop solar
array and a small wind turbine, from a location's UV index and daily wind
speed. Uses a 30-day month throughout.
"""

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from core.models import DailyClimate

DAYS_PER_MONTH = 30
AIR_DENSITY = 1.225  # kg/m³ at sea level


@dataclass
class HouseholdInputs:
    """User-adjustable installation and tariff figures."""
    panel_area_m2: float = 10.0
    rotor_radius_m: float = 2.0
    monthly_consumption_kwh: float = 150.0
    cost_per_kwh: float = 0.75
    solar_install_cost: float = 20000.0
    wind_install_cost: float = 25000.0


@dataclass
class TechnologyEstimate:
    """Monthly figures for one technology."""
    monthly_kwh: float
    monthly_savings: float
    install_cost: float
    payback_months: Optional[float]
    coverage_pct: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "monthly_kwh": self.monthly_kwh,
            "monthly_savings": self.monthly_savings,
            "install_cost": self.install_cost,
            "payback_months": self.payback_months,
            "coverage_pct": self.coverage_pct,
        }


@dataclass
class EnergyEstimate:
    monthly_bill: float
    solar: TechnologyEstimate
    wind: TechnologyEstimate
    inputs: HouseholdInputs = field(default_factory=HouseholdInputs)


def solar_efficiency(uv_index: Optional[float]) -> float:
    """Panel efficiency assumed for a UV level."""
    if not uv_index:
        return 0.0
    if uv_index > 10:
        return 0.21
    if uv_index > 7:
        return 0.19
    if uv_index > 4:
        return 0.17
    return 0.15


def wind_efficiency(wind_speed_ms: Optional[float]) -> float:
    """Turbine efficiency assumed for a wind speed."""
    if not wind_speed_ms:
        return 0.0
    if wind_speed_ms > 10:
        return 0.45
    if wind_speed_ms > 6:
        return 0.40
    if wind_speed_ms > 3:
        return 0.35
    return 0.20


def solar_kwh(uv_index: Optional[float], area_m2: float) -> float:
    """Monthly solar generation, using the UV index as an irradiance proxy."""
    if not uv_index:
        return 0.0
    return uv_index * area_m2 * solar_efficiency(uv_index) * DAYS_PER_MONTH


def wind_kwh(wind_speed_ms: Optional[float], radius_m: float) -> float:
    """Monthly wind generation from swept-area kinetic power."""
    if not wind_speed_ms:
        return 0.0
    swept_area = math.pi * radius_m ** 2
    power_w = 0.5 * AIR_DENSITY * swept_area * wind_speed_ms ** 3 * wind_efficiency(wind_speed_ms)
    return power_w * 3600 * 24 * DAYS_PER_MONTH / 1_000_000


def _technology(kwh: float, install_cost: float, inputs: HouseholdInputs) -> TechnologyEstimate:
    savings = kwh * inputs.cost_per_kwh
    payback = install_cost / savings if savings > 0 else None
    if inputs.monthly_consumption_kwh > 0:
        coverage = min(100.0, kwh / inputs.monthly_consumption_kwh * 100)
    else:
        coverage = 100.0 if kwh > 0 else 0.0
    return TechnologyEstimate(
        monthly_kwh=kwh,
        monthly_savings=savings,
        install_cost=install_cost,
        payback_months=payback,
        coverage_pct=coverage,
    )


def estimate(climate: Optional[DailyClimate], inputs: Optional[HouseholdInputs] = None) -> EnergyEstimate:
    """
    Estimate both technologies for a location's climate.

    A missing climate reading gives zero generation and no payback.
    """
    inputs = inputs or HouseholdInputs()
    climate = climate or DailyClimate()

    solar = _technology(
        solar_kwh(climate.uv_index, inputs.panel_area_m2),
        inputs.solar_install_cost,
        inputs,
    )
    wind = _technology(
        wind_kwh(climate.wind_speed_ms, inputs.rotor_radius_m),
        inputs.wind_install_cost,
        inputs,
    )
    return EnergyEstimate(
        monthly_bill=inputs.monthly_consumption_kwh * inputs.cost_per_kwh,
        solar=solar,
        wind=wind,
        inputs=inputs,
    )
