"""Building-wide loads and lighting parameters for the ISO 13790 simulation."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(kw_only=True)
class Building:
    """Building-level appliance, lighting-control and management parameters.

    Power densities are in W/m2 and the external equipment power is in W.
    Lighting control multipliers are unitless and are 1 when there is no
    control (see ISO 15193 Annex F/G).
    """

    lighting_occupancy_sensor: float = 1.0
    """Lighting occupancy sensor dimming fraction (unitless)."""

    constant_illumination: float = 1.0
    """Constant illumination control multiplier (unitless)."""

    electric_appliance_heat_gain_occupied: float = 0.0
    """Electric appliance power density while occupied (W/m2)."""

    electric_appliance_heat_gain_unoccupied: float = 0.0
    """Electric appliance power density while unoccupied (W/m2)."""

    gas_appliance_heat_gain_occupied: float = 0.0
    """Gas appliance power density while occupied (W/m2)."""

    gas_appliance_heat_gain_unoccupied: float = 0.0
    """Gas appliance power density while unoccupied (W/m2)."""

    building_energy_management: float = 0.0
    """Energy management type: none (0), simple (1) or advanced (2)."""

    external_equipment: float = 0.0
    """External equipment energy use (W)."""

    # Not yet used by the simulations.
    electric_appliance_power_fixed_occupied: float = 0.0
    electric_appliance_power_fixed_unoccupied: float = 0.0
    gas_appliance_power_fixed_occupied: float = 0.0
    gas_appliance_power_fixed_unoccupied: float = 0.0


@dataclass(kw_only=True)
class Lighting:
    """Interior and exterior lighting parameters and lighting-control factors."""

    power_density_occupied: float = 0.0
    """Lighting power density while occupied (W/m2)."""

    power_density_unoccupied: float = 0.0
    """Lighting power density while unoccupied (W/m2)."""

    dimming_fraction: float = 1.0
    """Daylight sensor dimming fraction (unitless); 1 means no control."""

    exterior_energy: float = 0.0
    """Exterior lighting power (W)."""

    n_day_start: float = 7.0
    """Sunrise (24-hour time)."""

    n_day_end: float = 18.0
    """Sunset (24-hour time)."""

    n_weeks: float = 50.0
    """Number of occupied weeks for lighting purposes."""

    elec_internal_gains: float = 1.0
    """Fraction of electric lighting power that becomes internal gains."""

    perm_light_power_density: float = 0.0
    """Always-on lighting power density, e.g. emergency lights (W/m2)."""

    # Occupancy based lighting control use adjustment factors.
    presence_sensor_ad: float = 0.6
    automatic_ad: float = 0.8
    presence_auto_ad: float = 0.6
    manual_switch_ad: float = 1.0

    # Daylight based lighting control target lux levels.
    presence_sensor_lux: float = 500.0
    automatic_lux: float = 300.0
    presence_auto_lux: float = 300.0
    manual_switch_lux: float = 500.0

    naturally_lighted_area: float = 0.0
    """Area that uses natural lighting (m2)."""

    # Not yet used by the simulations.
    lighting_power_fixed_occupied: float = 0.0
    lighting_power_fixed_unoccupied: float = 0.0