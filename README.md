# isohourly

A small library for estimating a building's energy use intensity (EUI,
kWh/m²) with the simple hourly method of ISO 13790 Annex C. All intermediate
quantities are expressed per unit floor area (W/m²), so the results come out
directly as EUI.

## Modules

- `isohourly.building` – `Building` (appliance gains, occupancy sensor,
  external equipment) and `Lighting` (power densities, lighting-control
  adjustment factors and target lux levels, naturally lighted area). Both are
  keyword-only dataclasses with defaults.
- `isohourly.hvac` – `Heating` and `Cooling` system parameters with their
  defaults (supply temperature differences, pump power, district heating and
  cooling efficiencies, hot water set points). `Heating.electric` and
  `Heating.hot_water_electric` are true when the energy type code is 1.
- `isohourly.location` – `Location`, holding a terrain class and an optional
  weather object.
- `isohourly.epw` – `EpwData`, a reader for EnergyPlus weather (`.epw`)
  files, and `Column`, naming the seven columns it keeps.
- `isohourly.hourly_physics` – the inputs and per-hour records of the
  calculation: `Envelope`, `AirFlow`, `Occupancy`, `SolverSettings`,
  `SurfaceTerms`, `Schedules`, `HourResults`, `ThermalState`, `WeatherHour`,
  and the helpers `surface_terms`, `build_schedules` and
  `sum_hours_by_month`.
- `isohourly.hourly` – `HourlyModel`, which runs the hour-by-hour
  simulation.
- `isohourly.end_uses` – `EndUses`, the per-timestep result record, the
  `EndUse` enumeration of its slots, and `total_energy_use`.

## Reading weather

```python
from isohourly.epw import EpwData, Column

epw = EpwData()
epw.load_file("ORD.epw")
print(epw.location, epw.station_id, epw.latitude, epw.longitude, epw.timezone)
dry_bulb = epw[Column.DBT]      # 8760 hourly values
wind = epw.data[Column.WSPD]
```

The first line of the file is read as the location header; data rows start
on line 9, and at most 8760 rows are read. Columns kept are dry bulb and dew
point temperature, relative humidity, global horizontal, direct normal and
diffuse horizontal radiation, and wind speed. Fields that do not start with a
number read as 0.

`EpwData.load_array(block_size, data)` fills the same structure from a flat
sequence: latitude, longitude and time zone first, then seven blocks of
`block_size` values, one block per column in `Column` order. It raises
`ValueError` when `block_size` is outside 0..8760 or the sequence is too
short.

## Running a simulation

An `HourlyModel` is built from its inputs, each of which has defaults:

```python
from isohourly.hourly import HourlyModel
from isohourly.building import Building, Lighting
from isohourly.hvac import Heating, Cooling
from isohourly.hourly_physics import Envelope, AirFlow, Occupancy, WeatherHour

model = HourlyModel(
    building=Building(electric_appliance_heat_gain_occupied=10.0),
    lighting=Lighting(power_density_occupied=8.0, power_density_unoccupied=1.0),
    heating=Heating(temperature_set_point_occupied=20.0,
                    temperature_set_point_unoccupied=15.0,
                    efficiency=0.9),
    cooling=Cooling(temperature_set_point_occupied=25.0,
                    temperature_set_point_unoccupied=28.0,
                    cop=3.0),
    envelope=Envelope(floor_area=500.0, building_height=6.0, ...),
    air_flow=AirFlow(supply_rate=400.0, fan_power=1.5),
    occupancy=Occupancy(days_start=0, days_end=4, hours_start=8, hours_end=17),
)
```

Every per-direction field of `Envelope` takes nine values: eight facade
orientations followed by the roof; any other count raises `ValueError`.

The weather is an iterable of `WeatherHour` records, each giving the hour of
the year, month, day of week (0–6), hour of day (0–23), wind speed,
outdoor dry bulb temperature and nine solar irradiance values – the eight
facades, then global horizontal radiation on the roof.

```python
results = model.simulate(weather, aggregate_by_month=True)
```

`simulate` returns one `EndUses` record per weather hour, or twelve records
when `aggregate_by_month` is true (the weather must then cover at least 8760
hours, otherwise `ValueError` is raised). Values are in kWh/m². Heating and
cooling needs are divided by distribution efficiencies derived from the
yearly heating/cooling split, and by the heating efficiency or cooling COP.
Heating goes to the electric or the gas slot depending on
`Heating.energy_type`. Hot water, gas cooling and gas equipment are always
zero.

Each record has thirteen used slots, named by `EndUse`:

| index | `EndUse` |
|------:|----------|
| 0 | `ELEC_HEAT` |
| 1 | `ELEC_COOL` |
| 2 | `ELEC_INT_LIGHTS` |
| 3 | `ELEC_EXT_LIGHTS` |
| 4 | `ELEC_FANS` |
| 5 | `ELEC_PUMP` |
| 6 | `ELEC_EQUIP_INT` |
| 7 | `ELEC_EQUIP_EXT` |
| 8 | `ELEC_DHW` |
| 9 | `GAS_HEAT` |
| 10 | `GAS_COOL` |
| 11 | `GAS_EQUIP` |
| 12 | `GAS_DHW` |

```python
from isohourly.end_uses import EndUse, total_energy_use

january_gas_heating = results[0].get_end_use(EndUse.GAS_HEAT)
print(total_energy_use(results))
```

`HourlyModel.calculate_hour(weather_hour, state)` runs a single hour and
returns its `HourResults` (in W/m², before any efficiency factors) together
with the `ThermalState` – mass and indoor air temperature – for the next
hour. A simulation starts from `ThermalState()`, 20 °C for both.

## What the package does not do

- It does not compute the irradiance on tilted or oriented surfaces from the
  weather file. `WeatherHour.solar_radiation` must be supplied by the caller;
  `EpwData` only provides the horizontal, direct normal and diffuse columns.
- It does not read building description files; the model inputs are built in
  Python.
- There is no monthly calculation method and no command-line program.

## Tests

```
pip install -e .[test]
pytest
```