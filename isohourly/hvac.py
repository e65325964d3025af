"""Heating and cooling system parameters for the ISO 13790 simulation."""

from __future__ import annotations

from dataclasses import dataclass

ELECTRIC = 1.0
"""Energy type code meaning the system runs on electricity."""


@dataclass(kw_only=True)
class Heating:
    """Heating and domestic hot water system parameters.

    Energy type codes: 1 means electric, anything else means gas.
    """

    temperature_set_point_occupied: float = 0.0
    """Heating setpoint while occupied (C)."""

    temperature_set_point_unoccupied: float = 0.0
    """Heating setpoint while unoccupied (C)."""

    hvac_loss_factor: float = 0.0
    """Heating HVAC loss factor, based on EN 15243 (unitless)."""

    hotcold_waste_factor: float = 0.0
    """Heating and cooling HVAC waste factor, based on EN 15243 (unitless)."""

    efficiency: float = 0.0
    """Heating system efficiency (unitless)."""

    energy_type: float = 0.0
    """Heating system energy type (1 electric, otherwise gas)."""

    pump_control_reduction: float = 0.0
    """Pump control reduction: 0 no pump, 0.5 auto controls, 1.0 otherwise."""

    hot_water_demand: float = 0.0
    """Domestic hot water demand (m3/yr)."""

    hot_water_distribution_efficiency: float = 0.0
    """Domestic hot water distribution efficiency (unitless)."""

    hot_water_system_efficiency: float = 0.0
    """Domestic hot water system efficiency (unitless)."""

    hot_water_energy_type: float = 0.0
    """Domestic hot water energy type (1 electric, otherwise gas)."""

    dt_supp_ht: float = 7.0
    """Temperature difference between supply air and room air (C)."""

    forced_air_heating: bool = True
    """Whether heat is delivered by air, so that fan power is calculated."""

    e_pumps: float = 0.25
    """Specific power of system pumps and controls (W/m2)."""

    t_ht_ctrl_flag: float = 1.0
    """Whether heating and its controls are turned on."""

    a_h0: float = 1.0
    """Reference dimensionless parameter for the heating constant a_H."""

    tau_h0: float = 15.0
    """Reference time constant for the heating constant a_H."""

    dh_yes_no: float = 0.0
    """Connected to district heating (0 no, 1 yes)."""

    eta_dh_network: float = 0.9
    """Efficiency of the district heating network."""

    eta_dh_sys: float = 0.87
    """Efficiency of the district heating system."""

    frac_dh_free: float = 0.0
    """Fraction of free heat source to district heating (0 to 1)."""

    dhw_tset: float = 60.0
    """Hot water set point (C)."""

    dhw_tsupply: float = 20.0
    """Hot water initial temperature (C)."""

    @property
    def electric(self) -> bool:
        """True when the heating system runs on electricity."""
        return self.energy_type == ELECTRIC

    @property
    def hot_water_electric(self) -> bool:
        """True when the hot water system runs on electricity."""
        return self.hot_water_energy_type == ELECTRIC


@dataclass(kw_only=True)
class Cooling:
    """Cooling system parameters."""

    temperature_set_point_occupied: float = 0.0
    """Cooling setpoint while occupied (C)."""

    temperature_set_point_unoccupied: float = 0.0
    """Cooling setpoint while unoccupied (C)."""

    cop: float = 0.0
    """Coefficient of performance (W/W)."""

    partial_load_value: float = 0.0
    """IPLV to COP ratio (unitless)."""

    hvac_loss_factor: float = 0.0
    """Cooling HVAC loss factor, based on EN 15243 (unitless)."""

    pump_control_reduction: float = 0.0
    """Pump control reduction: 0 no pump, 0.5 auto controls, 1.0 otherwise."""

    forced_air_cooling: bool = True
    """Whether cooling is delivered by air, so that fan power is calculated."""

    t_cl_ctrl_flag: float = 1.0
    """Whether cooling and its controls are turned on."""

    dt_supp_cl: float = 7.0
    """Temperature difference between room air and supply air (C)."""

    dc_yes_no: float = 0.0
    """Connected to district cooling (0 no, 1 yes)."""

    eta_dc_network: float = 0.9
    """Efficiency of the district cooling network."""

    eta_dc_cop: float = 5.5
    """COP of district cooling electric chillers."""

    eta_dc_frac_abs: float = 0.0
    """Fraction of district cooling chillers that are absorption chillers."""

    eta_dc_cop_abs: float = 1.0
    """COP of district cooling absorption chillers."""

    frac_dc_free: float = 0.0
    """Fraction of free heat source to absorption chillers (0 to 1)."""

    e_pumps: float = 0.25
    """Specific power of system pumps and controls (W/m2)."""