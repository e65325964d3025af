from dataclasses import replace

import pytest

from isohourly.building import Building, Lighting


def test_building_external_equipment_default():
    assert Building().external_equipment == pytest.approx(0.0)


def test_building_external_equipment_override():
    building = Building(external_equipment=1.0)
    assert building.external_equipment == pytest.approx(1.0)


def test_building_appliance_values_round_trip():
    building = Building(
        electric_appliance_heat_gain_occupied=0.0159043563230605,
        electric_appliance_heat_gain_unoccupied=0.877197046873451,
        gas_appliance_heat_gain_occupied=0.413231779700794,
        gas_appliance_heat_gain_unoccupied=0.735954395099727,
        lighting_occupancy_sensor=0.191200546809349,
        constant_illumination=0.295905191092175,
        building_energy_management=3,
    )
    assert building.electric_appliance_heat_gain_occupied == 0.0159043563230605
    assert building.electric_appliance_heat_gain_unoccupied == 0.877197046873451
    assert building.gas_appliance_heat_gain_occupied == 0.413231779700794
    assert building.gas_appliance_heat_gain_unoccupied == 0.735954395099727
    assert building.lighting_occupancy_sensor == 0.191200546809349
    assert building.constant_illumination == 0.295905191092175
    assert building.building_energy_management == 3


def test_building_fields_are_keyword_only():
    with pytest.raises(TypeError):
        Building(0.5)


def test_lighting_defaults():
    lighting = Lighting()
    assert lighting.n_day_start == pytest.approx(7.0)
    assert lighting.n_day_end == pytest.approx(18.0)
    assert lighting.n_weeks == pytest.approx(50.0)
    assert lighting.elec_internal_gains == pytest.approx(1.0)
    assert lighting.perm_light_power_density == pytest.approx(0.0)
    assert lighting.presence_sensor_ad == pytest.approx(0.6)
    assert lighting.automatic_ad == pytest.approx(0.8)
    assert lighting.presence_auto_ad == pytest.approx(0.6)
    assert lighting.manual_switch_ad == pytest.approx(1.0)
    assert lighting.presence_sensor_lux == pytest.approx(500.0)
    assert lighting.automatic_lux == pytest.approx(300.0)
    assert lighting.presence_auto_lux == pytest.approx(300.0)
    assert lighting.manual_switch_lux == pytest.approx(500.0)
    assert lighting.naturally_lighted_area == pytest.approx(0.0)


def test_lighting_overrides():
    lighting = Lighting(
        n_day_start=8.0,
        n_day_end=19.0,
        n_weeks=51.0,
        elec_internal_gains=2.0,
        perm_light_power_density=1.0,
        presence_sensor_ad=1.6,
        automatic_ad=1.8,
        presence_auto_ad=1.6,
        manual_switch_ad=2.0,
        presence_sensor_lux=501.0,
        automatic_lux=301.0,
        presence_auto_lux=301.0,
        manual_switch_lux=501.0,
        naturally_lighted_area=1.0,
    )
    assert lighting.n_day_start == pytest.approx(8.0)
    assert lighting.n_day_end == pytest.approx(19.0)
    assert lighting.n_weeks == pytest.approx(51.0)
    assert lighting.elec_internal_gains == pytest.approx(2.0)
    assert lighting.perm_light_power_density == pytest.approx(1.0)
    assert lighting.presence_sensor_ad == pytest.approx(1.6)
    assert lighting.automatic_ad == pytest.approx(1.8)
    assert lighting.presence_auto_ad == pytest.approx(1.6)
    assert lighting.manual_switch_ad == pytest.approx(2.0)
    assert lighting.presence_sensor_lux == pytest.approx(501.0)
    assert lighting.automatic_lux == pytest.approx(301.0)
    assert lighting.presence_auto_lux == pytest.approx(301.0)
    assert lighting.manual_switch_lux == pytest.approx(501.0)
    assert lighting.naturally_lighted_area == pytest.approx(1.0)


def test_lighting_power_densities_round_trip():
    lighting = Lighting(
        power_density_occupied=0.827607402688993,
        power_density_unoccupied=0.210627783574828,
        exterior_energy=0.688613300586997,
        dimming_fraction=0.952066322499152,
    )
    assert lighting.power_density_occupied == 0.827607402688993
    assert lighting.power_density_unoccupied == 0.210627783574828
    assert lighting.exterior_energy == 0.688613300586997
    assert lighting.dimming_fraction == 0.952066322499152


def test_lighting_replace_keeps_other_fields():
    original = Lighting(power_density_occupied=0.827607402688993)
    changed = replace(original, n_weeks=51.0)
    assert changed.n_weeks == pytest.approx(51.0)
    assert changed.power_density_occupied == original.power_density_occupied
    assert changed != original