"""Inputs, per-hour state and shared calculations of the simple hourly method.

The hourly method follows ISO 13790 Annex C. All quantities are expressed
per floor area (EUI), so intermediate results are in W/m2 rather than W.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, NamedTuple, Sequence, Tuple

from .building import Building, Lighting
from .hvac import Cooling, Heating

DIRECTIONS = 9
"""Surface directions: eight compass orientations plus the roof."""

HOURS_PER_DAY = 24
DAYS_PER_WEEK = 7

MONTH_START_HOURS = (0, 744, 1416, 2160, 2880, 3624, 4344, 5088, 5832,
                     6552, 7296, 8016, 8760)
"""Hour of the year at which each month starts, with the year's end last."""

INITIAL_TEMPERATURE = 20.0
"""Mass and air temperature (C) at the start of a simulation."""

_DIRECTIONAL_FIELDS = (
    "window_shading_device",
    "wall_area",
    "window_area",
    "wall_uniform",
    "window_uniform",
    "wall_solar_absorption",
    "window_shading_correction_factor",
    "window_normal_incidence_solar_energy_transmittance",
)


def _zeros() -> Tuple[float, ...]:
    return (0.0,) * DIRECTIONS


@dataclass(kw_only=True)
class Envelope:
    """Building geometry and envelope properties.

    Every per-direction sequence holds nine values: the eight facade
    orientations followed by the roof.
    """

    floor_area: float = 1.0
    """Conditioned floor area (m2)."""

    building_height: float = 0.0
    """Building height (m)."""

    interior_heat_capacity: float = 0.0
    """Interior heat capacity per floor area (J/K/m2)."""

    wall_heat_capacity: float = 0.0
    """Envelope heat capacity per wall area (J/K/m2)."""

    irradiance_for_max_shading_use: float = 500.0
    """Irradiance at which movable shading is fully used (W/m2)."""

    shading_factor_at_max_use: float = 0.5
    """Shading factor when movable shading is fully used (unitless)."""

    total_area_per_floor_area: float = 4.5
    """Ratio of all internal surface area to floor area (unitless)."""

    r_se: float = 0.04
    """External surface heat resistance (m2K/W)."""

    win_ff: float = 0.25
    """Window frame fraction (unitless)."""

    win_f_w: float = 0.9
    """Window non-perpendicular incidence correction (unitless)."""

    r_sc_ext: float = 0.04
    """External surface heat resistance used for shading (m2K/W)."""

    window_shading_device: Sequence[float] = field(default_factory=_zeros)
    """Window solar heat gain coefficient for each direction."""

    wall_area: Sequence[float] = field(default_factory=_zeros)
    """Opaque wall area for each direction (m2)."""

    window_area: Sequence[float] = field(default_factory=_zeros)
    """Window area for each direction (m2)."""

    wall_uniform: Sequence[float] = field(default_factory=_zeros)
    """Wall U-value for each direction (W/m2K)."""

    window_uniform: Sequence[float] = field(default_factory=_zeros)
    """Window U-value for each direction (W/m2K)."""

    wall_solar_absorption: Sequence[float] = field(default_factory=_zeros)
    """Wall solar absorption coefficient for each direction."""

    window_shading_correction_factor: Sequence[float] = field(default_factory=_zeros)
    """Window solar factor with movable shading for each direction."""

    window_normal_incidence_solar_energy_transmittance: Sequence[float] = field(
        default_factory=_zeros
    )
    """Window solar factor without shading for each direction."""

    def __post_init__(self) -> None:
        for name in _DIRECTIONAL_FIELDS:
            values = tuple(float(value) for value in getattr(self, name))
            if len(values) != DIRECTIONS:
                raise ValueError(
                    f"{name} needs {DIRECTIONS} values, got {len(values)}"
                )
            setattr(self, name, values)


@dataclass(kw_only=True)
class AirFlow:
    """Ventilation and infiltration parameters (ISO 15242)."""

    supply_rate: float = 0.0
    """Fresh air supply rate while occupied (L/s)."""

    heat_recovery_efficiency: float = 0.0
    """Heat recovery efficiency of the ventilation system (unitless)."""

    vent_preheat_deg_c: float = -50.0
    """Minimum supply air temperature from preheating (C)."""

    n50: float = 2.0
    """Air changes per hour at 50 Pa."""

    hzone: float = 39.0
    """Height of the zone used for stack effect (m)."""

    fan_control_factor: float = 0.0
    """Ratio of mechanical supply to exhaust (unitless)."""

    fan_power: float = 0.0
    """Specific fan power (W/(L/s))."""

    d_cp: float = 0.75
    """Wind pressure coefficient difference (unitless)."""

    p_exp: float = 0.65
    zone_frac: float = 0.7
    stack_exp: float = 0.667
    stack_coeff: float = 0.0146
    wind_exp: float = 0.667
    wind_coeff: float = 0.0769
    vent_rate_flag: int = 1
    h_ve: float = 0.0


@dataclass(kw_only=True)
class Occupancy:
    """Occupied days of the week and hours of the day, inclusive ranges."""

    days_start: float = 0.0
    days_end: float = 6.0
    hours_start: float = 0.0
    hours_end: float = 23.0


@dataclass(kw_only=True)
class SolverSettings:
    """Heat transfer constants and gain distribution fractions."""

    hci: float = 2.5
    """Convective internal heat transfer coefficient (W/m2K)."""

    hri: float = 5.5
    """Radiative internal heat transfer coefficient (W/m2K)."""

    phi_int_fraction_to_air_node: float = 0.5
    """Fraction of internal gains that heat the air node."""

    phi_sol_fraction_to_air_node: float = 0.0
    """Fraction of solar gains that heat the air node."""

    rho_cp_air: float = 1.22521 * 0.001012
    """Volumetric heat capacity of air (MJ/m3K)."""

    rho_cp_water: float = 4.1813
    """Volumetric heat capacity of water (MJ/m3K)."""


@dataclass(frozen=True)
class SurfaceTerms:
    """Area-weighted light, solar and heat loss terms of one direction."""

    nlams: float
    """Naturally lighted area with movable shading (m2)."""
    nla: float
    """Naturally lighted area (m2)."""
    sams: float
    """Effective solar collecting area with movable shading (m2)."""
    sa: float
    """Effective solar collecting area (m2)."""
    htot: float
    """Total transmission heat transfer coefficient (W/K)."""
    h_window: float
    """Window transmission heat transfer coefficient (W/K)."""


def surface_terms(shgc, wall_area, window_area, wall_u, window_u,
                  wall_solar_absorption, solar_factor_with,
                  solar_factor_without, r_se) -> SurfaceTerms:
    """Compute the light, solar and heat loss terms of one surface direction."""
    window_transmittance = shgc / 0.87
    natural_light = window_area * window_transmittance
    wall_solar = wall_area * (wall_solar_absorption * wall_u * r_se)
    window_h = window_area * window_u
    return SurfaceTerms(
        nlams=natural_light,
        nla=natural_light,
        sams=wall_solar + window_area * solar_factor_with,
        sa=wall_solar + window_area * solar_factor_without,
        htot=wall_area * wall_u + window_h,
        h_window=window_h,
    )


def sum_hours_by_month(hourly_data: Sequence[float]) -> List[float]:
    """Sum a year of hourly values into twelve monthly totals."""
    if len(hourly_data) < MONTH_START_HOURS[-1]:
        raise ValueError(
            f"expected {MONTH_START_HOURS[-1]} hourly values, got {len(hourly_data)}"
        )
    return [
        sum(hourly_data[start:end], 0.0)
        for start, end in zip(MONTH_START_HOURS, MONTH_START_HOURS[1:])
    ]


class _ScheduleHour(NamedTuple):
    ventilation: float
    exterior_equipment: float
    interior_equipment: float
    exterior_lighting: float
    interior_lighting: float
    heating_setpoint: float
    cooling_setpoint: float


Grid = Tuple[Tuple[float, ...], ...]


@dataclass(frozen=True)
class Schedules:
    """Fixed weekly schedules, each indexed ``[hour_of_day][day_of_week]``."""

    ventilation: Grid
    exterior_equipment: Grid
    interior_equipment: Grid
    exterior_lighting: Grid
    interior_lighting: Grid
    heating_setpoint: Grid
    cooling_setpoint: Grid

    def at(self, hour_of_day: int, day_of_week: int) -> _ScheduleHour:
        """Return every schedule's value for one hour of the week."""
        if not 0 <= hour_of_day < HOURS_PER_DAY:
            raise IndexError(f"hour of day {hour_of_day} outside 0..23")
        if not 0 <= day_of_week < DAYS_PER_WEEK:
            raise IndexError(f"day of week {day_of_week} outside 0..6")
        return _ScheduleHour(
            *(grid[hour_of_day][day_of_week] for grid in (
                self.ventilation,
                self.exterior_equipment,
                self.interior_equipment,
                self.exterior_lighting,
                self.interior_lighting,
                self.heating_setpoint,
                self.cooling_setpoint,
            ))
        )


def build_schedules(building: Building, lighting: Lighting, heating: Heating,
                    cooling: Cooling, air_flow: AirFlow,
                    occupancy: Occupancy) -> Schedules:
    """Build the fixed weekly schedules from the occupancy ranges."""
    day_start = int(occupancy.days_start)
    day_end = int(occupancy.days_end)
    hour_start = int(occupancy.hours_start)
    hour_end = int(occupancy.hours_end)

    def grid(value_for) -> Grid:
        return tuple(
            tuple(
                value_for(hour_start <= hour <= hour_end,
                          day_start <= day <= day_end)
                for day in range(DAYS_PER_WEEK)
            )
            for hour in range(HOURS_PER_DAY)
        )

    def occupied(on: float, off: float):
        return lambda hour_on, day_on: on if hour_on and day_on else off

    return Schedules(
        ventilation=grid(
            lambda hour_on, _day_on: air_flow.supply_rate if hour_on else 0.0
        ),
        exterior_equipment=grid(lambda _h, _d: building.external_equipment),
        interior_equipment=grid(occupied(
            building.electric_appliance_heat_gain_occupied,
            building.electric_appliance_heat_gain_unoccupied,
        )),
        # Exterior lights only switch on while the sun is down.
        exterior_lighting=grid(lambda _h, _d: 1.0),
        interior_lighting=grid(occupied(
            lighting.power_density_occupied,
            lighting.power_density_unoccupied,
        )),
        heating_setpoint=grid(occupied(
            heating.temperature_set_point_occupied,
            heating.temperature_set_point_unoccupied,
        )),
        cooling_setpoint=grid(occupied(
            cooling.temperature_set_point_occupied,
            cooling.temperature_set_point_unoccupied,
        )),
    )


@dataclass
class HourResults:
    """Energy use of one hour, per floor area (W/m2)."""

    q_need_ht: float = 0.0
    q_need_cl: float = 0.0
    q_illum_tot: float = 0.0
    q_illum_ext_tot: float = 0.0
    q_fan_tot: float = 0.0
    q_pump_tot: float = 0.0
    phi_plug: float = 0.0
    external_equipment_energy_wperm2: float = 0.0
    q_dhw: float = 0.0


@dataclass
class ThermalState:
    """Temperatures carried from one hour to the next.

    ``tmt1`` is the mass temperature at the end of the previous hour and
    ``ti_heat_cool`` the previous hour's air temperature, both in C.
    """

    tmt1: float = INITIAL_TEMPERATURE
    ti_heat_cool: float = INITIAL_TEMPERATURE


@dataclass(frozen=True)
class WeatherHour:
    """Timing and weather of one hour of the year.

    ``solar_radiation`` holds nine values: the eight facade orientations
    followed by global horizontal radiation on the roof (W/m2).
    """

    hour_of_year: int
    month: int
    day_of_week: int
    hour_of_day: int
    wind_mps: float
    temperature: float
    solar_radiation: Tuple[float, ...]

    def __post_init__(self) -> None:
        radiation = tuple(float(value) for value in self.solar_radiation)
        if len(radiation) != DIRECTIONS:
            raise ValueError(
                f"solar radiation needs {DIRECTIONS} values, got {len(radiation)}"
            )
        object.__setattr__(self, "solar_radiation", radiation)