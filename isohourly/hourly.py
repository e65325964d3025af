"""Hourly building energy simulation following the ISO 13790 simple hourly method."""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Sequence, Tuple

from .building import Building, Lighting
from .end_uses import EndUse, EndUses
from .hourly_physics import (
    AirFlow,
    Envelope,
    HourResults,
    Occupancy,
    Schedules,
    SolverSettings,
    ThermalState,
    WeatherHour,
    build_schedules,
    sum_hours_by_month,
    surface_terms,
)
from .hvac import Cooling, Heating

_DBL_MIN = sys.float_info.min
_W_TO_KW = 1000.0


@dataclass(frozen=True)
class _Constants:
    """Quantities derived once from the model inputs before simulating."""

    max_ratio_electric_lighting: float
    elight_natural: float
    area_naturally_lighted_ratio: float
    natural_light_ratio: Tuple[float, ...]
    natural_light_shade_ratio_reduction: Tuple[float, ...]
    solar_ratio: Tuple[float, ...]
    solar_shade_ratio_reduction: Tuple[float, ...]
    shading_use_per_w_per_m2: float
    q4pa: float
    h_tris: float
    cm: float
    am: float
    hwindow: float
    prs_interior: float
    prs_solar: float
    prm_interior: float
    prm_solar: float
    h_ms_total: float
    hem: float
    wind_impact_hz: float
    wind_impact_supply_ratio: float


def _effective_mass_area(cm: float) -> float:
    """A_m from C_m using the defaults of ISO 13790 12.3.1.2 Table 12."""
    if cm > 370.0:
        return 3.5
    if cm > 260.0:
        return 3.0 + 0.5 * ((cm - 260) / 110)
    if cm > 165.0:
        return 2.5 + 0.5 * ((cm - 165) / 95)
    return 2.5


@dataclass(kw_only=True)
class HourlyModel:
    """Building description and the hourly EUI calculation over it.

    Everything is expressed per floor area, so intermediate results are
    in W/m2 and the end results are in kWh/m2.
    """

    building: Building = field(default_factory=Building)
    lighting: Lighting = field(default_factory=Lighting)
    heating: Heating = field(default_factory=Heating)
    cooling: Cooling = field(default_factory=Cooling)
    envelope: Envelope = field(default_factory=Envelope)
    air_flow: AirFlow = field(default_factory=AirFlow)
    occupancy: Occupancy = field(default_factory=Occupancy)
    settings: SolverSettings = field(default_factory=SolverSettings)

    def _lighting_controls(self) -> Tuple[float, float]:
        occupancy_sensor = self.building.lighting_occupancy_sensor < 1.0
        daylight_sensor = self.lighting.dimming_fraction < 1.0
        lights = self.lighting
        if occupancy_sensor and daylight_sensor:
            return lights.presence_auto_ad, lights.presence_auto_lux
        if occupancy_sensor:
            return lights.presence_sensor_ad, lights.presence_sensor_lux
        if daylight_sensor:
            return lights.automatic_ad, lights.automatic_lux
        return lights.manual_switch_ad, lights.manual_switch_lux

    def _constants(self) -> _Constants:
        env = self.envelope
        settings = self.settings
        floor_area = env.floor_area

        max_ratio, elight_natural = self._lighting_controls()
        area_ratio = max(0.0001, self.lighting.naturally_lighted_area) / floor_area

        terms = [
            surface_terms(*values, env.r_se)
            for values in zip(
                env.window_shading_device,
                env.wall_area,
                env.window_area,
                env.wall_uniform,
                env.window_uniform,
                env.wall_solar_absorption,
                env.window_shading_correction_factor,
                env.window_normal_incidence_solar_energy_transmittance,
            )
        ]
        natural_light_ratio = tuple(t.nla / floor_area for t in terms)
        natural_light_reduction = tuple(
            t.nlams / floor_area - t.nla / floor_area for t in terms
        )
        solar_ratio = tuple(t.sa / floor_area for t in terms)
        solar_reduction = tuple(
            t.sams / floor_area - t.sa / floor_area for t in terms
        )

        building_v8 = 0.19 * (self.air_flow.n50 * (floor_area * env.building_height))
        q4pa = max(0.000001, building_v8 / floor_area)

        h_ms = settings.hci + settings.hri * 1.2
        h_is = 1 / (1 / settings.hci - 1 / h_ms)
        area_ratio_total = env.total_area_per_floor_area
        h_tris = h_is * area_ratio_total

        cm_int = env.interior_heat_capacity / 1000.0
        cm_env = (env.wall_heat_capacity * sum(env.wall_area) / floor_area) / 1000.0
        cm = cm_int + cm_env
        am = _effective_mass_area(cm)

        h_wind = sum(t.h_window for t in terms)
        h_wall = sum(t.htot - t.h_window for t in terms)
        hwindow = h_wind / floor_area

        to_air_int = settings.phi_int_fraction_to_air_node
        to_air_sol = settings.phi_sol_fraction_to_air_node
        prs = (area_ratio_total - am - hwindow / h_ms) / area_ratio_total
        prm = am / area_ratio_total

        h_ms_total = h_ms * am
        h_opaque = max(h_wall / floor_area, 0.000001)
        hem = 1 / (1 / h_opaque - 1 / h_ms_total)

        return _Constants(
            max_ratio_electric_lighting=max_ratio,
            elight_natural=elight_natural,
            area_naturally_lighted_ratio=area_ratio,
            natural_light_ratio=natural_light_ratio,
            natural_light_shade_ratio_reduction=natural_light_reduction,
            solar_ratio=solar_ratio,
            solar_shade_ratio_reduction=solar_reduction,
            shading_use_per_w_per_m2=(
                env.shading_factor_at_max_use / env.irradiance_for_max_shading_use
            ),
            q4pa=q4pa,
            h_tris=h_tris,
            cm=cm,
            am=am,
            hwindow=hwindow,
            prs_interior=(1 - to_air_int) * prs,
            prs_solar=(1 - to_air_sol) * prs,
            prm_interior=(1 - to_air_int) * prm,
            prm_solar=(1 - to_air_sol) * prm,
            h_ms_total=h_ms_total,
            hem=hem,
            wind_impact_hz=max(0.1, self.air_flow.hzone),
            wind_impact_supply_ratio=max(0.00001, self.air_flow.fan_control_factor),
        )

    def _schedules(self) -> Schedules:
        return build_schedules(self.building, self.lighting, self.heating,
                               self.cooling, self.air_flow, self.occupancy)

    def _step(self, c: _Constants, schedules: Schedules, hour: WeatherHour,
              state: ThermalState) -> Tuple[HourResults, ThermalState]:
        env = self.envelope
        floor_area = env.floor_area
        temperature = hour.temperature
        wind = hour.wind_mps
        radiation = hour.solar_radiation
        tmt1 = state.tmt1
        ti_prev = state.ti_heat_cool

        sched = schedules.at(hour.hour_of_day, hour.day_of_week)
        # Ventilation from L/s to m3/h per floor area.
        vent_exhaust = sched.ventilation * 3.6 / floor_area

        results = HourResults()
        results.external_equipment_energy_wperm2 = sched.exterior_equipment / floor_area
        # \Phi_{int,A}, ISO 13790 10.4.2.
        results.phi_plug = sched.interior_equipment

        max_use = env.irradiance_for_max_shading_use
        shading = c.shading_use_per_w_per_m2
        ratio = c.area_naturally_lighted_ratio
        lighting_level = sum(
            53 / ratio * r * (nl + shading * red * min(max_use, r))
            for r, nl, red in zip(radiation, c.natural_light_ratio,
                                  c.natural_light_shade_ratio_reduction)
        )
        electric_natural = max(
            0.0, c.max_ratio_electric_lighting * (1 - lighting_level / c.elight_natural)
        )
        electric_total = (electric_natural * ratio
                          + (1 - ratio) * c.max_ratio_electric_lighting)

        # \Phi_{int,L}, ISO 13790 10.4.3.
        phi_illum = (electric_total * sched.interior_lighting
                     * self.lighting.elec_internal_gains)
        results.q_illum_tot = electric_total * sched.interior_lighting
        # \Phi_{int}, ISO 13790 10.2.2 eq. 35.
        phi_int = results.phi_plug + phi_illum

        # \Phi_{sol}, ISO 13790 11.2.2 eq. 41 with graded movable shading.
        q_solar = sum(
            r * (sr + red * shading * min(r, max_use))
            for r, sr, red in zip(radiation, c.solar_ratio,
                                  c.solar_shade_ratio_reduction)
        )
        settings = self.settings
        # \Phi_{ia}, ISO 13790 C.2 eq. C.1.
        phii = (settings.phi_sol_fraction_to_air_node * q_solar
                + settings.phi_int_fraction_to_air_node * phi_int)
        phii10 = phii + 10

        # Ventilation and infiltration, ISO 15242.
        air = self.air_flow
        q_supply = vent_exhaust * c.wind_impact_supply_ratio
        exhaust_supply = -(q_supply - vent_exhaust)
        recovery = air.heat_recovery_efficiency
        t_after_exchange = (1 - recovery) * temperature + recovery * 20
        t_supplied_air = max(air.vent_preheat_deg_c, t_after_exchange)
        q_wind = 0.0769 * c.q4pa * (air.d_cp * wind * wind) ** 0.667
        q_stack = 0.0146 * c.q4pa * (
            0.5 * c.wind_impact_hz * max(0.00001, abs(temperature - ti_prev))
        ) ** 0.667
        q_exfiltration = max(
            0.0,
            max(q_stack, q_wind) - abs(exhaust_supply)
            * (0.5 * q_stack + 0.667 * q_wind / (q_stack + q_wind)),
        )
        q_envelope = max(0.0, exhaust_supply) + q_exfiltration
        q_entering = q_envelope + q_supply

        # \theta_{sup}, ISO 13790 9.3.
        t_sup = (temperature * q_envelope + t_supplied_air * q_supply) / q_entering
        hei = 0.34 * q_entering
        # H_{tr,1}, H_{tr,2}, H_{tr,3}: ISO 13790 C.3 eq. C.6, C.7, C.9.
        h1 = 1 / (1 / hei + 1 / c.h_tris)
        h2 = h1 + c.hwindow
        h3 = 1 / (1 / h2 + 1 / c.h_ms_total)

        # \Phi_{st} and \Phi_{m}, ISO 13790 C.2 eq. C.3 and C.2.
        phis = c.prs_solar * q_solar + c.prs_interior * phi_int
        phim = c.prm_solar * q_solar + c.prm_interior * phi_int

        cm36 = c.cm / 3.6
        half = 0.5 * (h3 + c.hem)

        def node_temperatures(phi_air: float) -> Tuple[float, float]:
            """Next mass temperature and air temperature for an air-node gain."""
            # ISO 13790 C.3 eq. C.5, C.4, C.9, C.10, C.11.
            phim_total = (phim + c.hem * temperature
                          + h3 * (phis + c.hwindow * temperature
                                  + h1 * (phi_air / hei + t_sup)) / h2)
            tmt_next = (tmt1 * (cm36 - half) + phim_total) / (cm36 + half)
            tm = 0.5 * (tmt1 + tmt_next)
            ts = ((c.h_ms_total * tm + phis + c.hwindow * temperature
                   + h1 * (t_sup + phi_air / hei))
                  / (c.h_ms_total + c.hwindow + h1))
            ti = (c.h_tris * ts + hei * t_sup + phi_air) / (c.h_tris + hei)
            return tmt_next, ti

        # Free-floating and +10 W/m2 conditions, ISO 13790 C.4.2.
        _, ti_phi10 = node_temperatures(phii10)
        _, ti_phi0 = node_temperatures(phii)
        phi_cooling = 10 * (sched.cooling_setpoint - ti_phi0) / (ti_phi10 - ti_phi0)
        phi_heating = 10 * (sched.heating_setpoint - ti_phi0) / (ti_phi10 - ti_phi0)
        phi_actual = max(0.0, phi_heating) + min(phi_cooling, 0.0)
        results.q_need_cl = max(0.0, -phi_actual)
        results.q_need_ht = max(0.0, phi_actual)

        # Fan power.
        heating = self.heating
        cooling = self.cooling
        rho_cp = settings.rho_cp_air
        t_sup_ht = heating.temperature_set_point_occupied + heating.dt_supp_ht
        t_sup_cl = cooling.temperature_set_point_occupied - cooling.dt_supp_cl
        vair_ht = (
            results.q_need_ht / (((t_sup_ht - ti_prev) * rho_cp * 277.777778) + _DBL_MIN)
            if heating.forced_air_heating else 0.0
        )
        vair_cl = (
            results.q_need_cl / (((ti_prev - t_sup_cl) * rho_cp * 277.777778) + _DBL_MIN)
            if cooling.forced_air_cooling else 0.0
        )
        vair_tot = max(vair_ht + vair_cl, vent_exhaust)
        results.q_fan_tot = vair_tot * air.fan_power * 1000.0 / 3600.0

        if results.q_need_cl > 0.0:
            results.q_pump_tot = cooling.e_pumps * cooling.pump_control_reduction
        elif results.q_need_ht > 0.0:
            results.q_pump_tot = heating.e_pumps * heating.pump_control_reduction
        else:
            results.q_pump_tot = 0.0

        # Exterior lights only while the sun is down (no roof radiation).
        if radiation[8] > 0:
            results.q_illum_ext_tot = 0.0
        else:
            results.q_illum_ext_tot = (self.lighting.exterior_energy
                                       * sched.exterior_lighting / floor_area)

        results.q_dhw = 0.0

        tmt_next, ti_next = node_temperatures(phi_actual + phii)
        return results, ThermalState(tmt1=tmt_next, ti_heat_cool=ti_next)

    def calculate_hour(self, weather_hour: WeatherHour,
                       state: ThermalState) -> Tuple[HourResults, ThermalState]:
        """Energy use of one hour and the thermal state for the next hour."""
        return self._step(self._constants(), self._schedules(), weather_hour, state)

    def simulate(self, weather: Iterable[WeatherHour],
                 aggregate_by_month: bool = False) -> List[EndUses]:
        """Run the hourly method over ``weather`` and return EUI in kWh/m2.

        With ``aggregate_by_month`` the hours, which must then cover a whole
        year, are summed into twelve monthly results.
        """
        constants = self._constants()
        schedules = self._schedules()
        state = ThermalState()
        hours: List[HourResults] = []
        for hour in weather:
            result, state = self._step(constants, schedules, hour, state)
            hours.append(result)

        need_ht = [h.q_need_ht for h in hours]
        need_cl = [h.q_need_cl for h in hours]
        need_ht_yr = sum(need_ht, 0.0)
        need_cl_yr = sum(need_cl, 0.0)
        need_total = need_ht_yr + need_cl_yr
        heating_share = need_ht_yr / need_total if need_total else float("nan")
        f_dem_ht = max(heating_share, 0.1)
        f_dem_cl = max(1.0 - f_dem_ht, 0.1)

        heating = self.heating
        cooling = self.cooling
        waste = heating.hotcold_waste_factor
        eta_dist_ht = 1.0 / (1.0 + heating.hvac_loss_factor + waste / f_dem_ht)
        eta_dist_cl = 1.0 / (1.0 + cooling.hvac_loss_factor + waste / f_dem_cl)

        heating_system = [need / eta_dist_ht / heating.efficiency for need in need_ht]
        cooling_system = [need / eta_dist_cl / cooling.cop for need in need_cl]
        zeroes = [0.0] * len(hours)

        series: Dict[EndUse, Sequence[float]] = {
            EndUse.ELEC_HEAT: heating_system if heating.electric else zeroes,
            EndUse.ELEC_COOL: cooling_system,
            EndUse.ELEC_INT_LIGHTS: [h.q_illum_tot for h in hours],
            EndUse.ELEC_EXT_LIGHTS: [h.q_illum_ext_tot for h in hours],
            EndUse.ELEC_FANS: [h.q_fan_tot for h in hours],
            EndUse.ELEC_PUMP: [h.q_pump_tot for h in hours],
            EndUse.ELEC_EQUIP_INT: [h.phi_plug for h in hours],
            EndUse.ELEC_EQUIP_EXT: [h.external_equipment_energy_wperm2 for h in hours],
            EndUse.ELEC_DHW: [h.q_dhw for h in hours],
            EndUse.GAS_HEAT: zeroes if heating.electric else heating_system,
            EndUse.GAS_COOL: zeroes,
            EndUse.GAS_EQUIP: zeroes,
            EndUse.GAS_DHW: zeroes,
        }
        converted = {
            use: [value / _W_TO_KW for value in values]
            for use, values in series.items()
        }
        if aggregate_by_month:
            converted = {use: sum_hours_by_month(values)
                         for use, values in converted.items()}

        steps = 12 if aggregate_by_month else len(hours)
        results = []
        for index in range(steps):
            end_uses = EndUses()
            for use, values in converted.items():
                end_uses.add_end_use(use, values[index])
            results.append(end_uses)
        return results