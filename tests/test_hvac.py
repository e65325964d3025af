from dataclasses import replace

import pytest

from isohourly.hvac import Cooling, Heating


def test_heating_optional_defaults():
    heating = Heating()
    assert heating.forced_air_heating is True
    assert heating.dt_supp_ht == pytest.approx(7.0)
    assert heating.e_pumps == pytest.approx(0.25)
    assert heating.t_ht_ctrl_flag == pytest.approx(1)
    assert heating.a_h0 == pytest.approx(1)
    assert heating.tau_h0 == pytest.approx(15)
    assert heating.dh_yes_no == pytest.approx(0)
    assert heating.eta_dh_network == pytest.approx(0.9)
    assert heating.eta_dh_sys == pytest.approx(0.87)
    assert heating.frac_dh_free == pytest.approx(0.000)
    assert heating.dhw_tset == pytest.approx(60)
    assert heating.dhw_tsupply == pytest.approx(20)


def test_cooling_optional_defaults():
    cooling = Cooling()
    assert cooling.forced_air_cooling is True
    assert cooling.t_cl_ctrl_flag == pytest.approx(1)
    assert cooling.dt_supp_cl == pytest.approx(7.0)
    assert cooling.dc_yes_no == pytest.approx(0)
    assert cooling.eta_dc_network == pytest.approx(0.9)
    assert cooling.eta_dc_cop == pytest.approx(5.5)
    assert cooling.eta_dc_frac_abs == pytest.approx(0)
    assert cooling.eta_dc_cop_abs == pytest.approx(1)
    assert cooling.frac_dc_free == pytest.approx(0)
    assert cooling.e_pumps == pytest.approx(0.25)


def test_heating_overrides():
    heating = Heating(
        forced_air_heating=False,
        dt_supp_ht=8.0,
        t_ht_ctrl_flag=2.0,
        a_h0=2.0,
        tau_h0=16.0,
        dh_yes_no=1.0,
        eta_dh_network=1.9,
        eta_dh_sys=1.87,
        frac_dh_free=1.0,
        dhw_tset=61.0,
        dhw_tsupply=21.0,
    )
    assert heating.forced_air_heating is False
    assert heating.dt_supp_ht == 8.0
    assert heating.t_ht_ctrl_flag == 2.0
    assert heating.a_h0 == 2.0
    assert heating.tau_h0 == 16.0
    assert heating.dh_yes_no == 1.0
    assert heating.eta_dh_network == 1.9
    assert heating.eta_dh_sys == 1.87
    assert heating.frac_dh_free == 1.0
    assert heating.dhw_tset == 61.0
    assert heating.dhw_tsupply == 21.0


def test_cooling_overrides():
    cooling = Cooling(
        forced_air_cooling=False,
        t_cl_ctrl_flag=2.0,
        dt_supp_cl=8.0,
        dc_yes_no=1.0,
        eta_dc_network=1.9,
        eta_dc_cop=6.5,
        eta_dc_frac_abs=1.0,
        eta_dc_cop_abs=2.0,
        frac_dc_free=1.0,
        e_pumps=1.25,
    )
    assert cooling.forced_air_cooling is False
    assert cooling.t_cl_ctrl_flag == 2.0
    assert cooling.dt_supp_cl == 8.0
    assert cooling.dc_yes_no == 1.0
    assert cooling.eta_dc_network == 1.9
    assert cooling.eta_dc_cop == 6.5
    assert cooling.eta_dc_frac_abs == 1.0
    assert cooling.eta_dc_cop_abs == 2.0
    assert cooling.frac_dc_free == 1.0
    assert cooling.e_pumps == 1.25


def test_user_values_are_kept():
    heating = Heating(
        temperature_set_point_occupied=0.308476836073534,
        temperature_set_point_unoccupied=0.96115521837837,
        efficiency=0.710454137223511,
        energy_type=1,
        hvac_loss_factor=0.801121347575538,
        hotcold_waste_factor=0.287554068015519,
        pump_control_reduction=0.625403806654488,
        hot_water_demand=0.881916031629701,
        hot_water_system_efficiency=0.105230439331114,
        hot_water_distribution_efficiency=0.33038965168355,
        hot_water_energy_type=2,
    )
    cooling = Cooling(
        temperature_set_point_occupied=0.0182141291000549,
        temperature_set_point_unoccupied=0.47279017381788,
        cop=0.977647331541828,
        partial_load_value=0.86953551426846,
        hvac_loss_factor=0.919509843310335,
        pump_control_reduction=0.0184589116025784,
    )
    assert heating.temperature_set_point_occupied == 0.308476836073534
    assert heating.temperature_set_point_unoccupied == 0.96115521837837
    assert heating.efficiency == 0.710454137223511
    assert heating.hvac_loss_factor == 0.801121347575538
    assert heating.hotcold_waste_factor == 0.287554068015519
    assert heating.pump_control_reduction == 0.625403806654488
    assert heating.hot_water_demand == 0.881916031629701
    assert heating.hot_water_system_efficiency == 0.105230439331114
    assert heating.hot_water_distribution_efficiency == 0.33038965168355
    assert cooling.temperature_set_point_occupied == 0.0182141291000549
    assert cooling.temperature_set_point_unoccupied == 0.47279017381788
    assert cooling.cop == 0.977647331541828
    assert cooling.partial_load_value == 0.86953551426846
    assert cooling.hvac_loss_factor == 0.919509843310335
    assert cooling.pump_control_reduction == 0.0184589116025784


@pytest.mark.parametrize(
    ("energy_type", "electric"), [(1, True), (2, False), (0, False)]
)
def test_energy_type_selects_electric(energy_type, electric):
    heating = Heating(energy_type=energy_type, hot_water_energy_type=energy_type)
    assert heating.electric is electric
    assert heating.hot_water_electric is electric


def test_replace_keeps_other_fields():
    heating = Heating(efficiency=0.8)
    changed = replace(heating, dhw_tset=55.0)
    assert changed.efficiency == 0.8
    assert changed.dhw_tset == 55.0
    assert heating.dhw_tset == 60.0