"""Per-timestep energy end uses and totals across a simulation."""

from __future__ import annotations

from enum import IntEnum
from typing import Iterable, Iterator


class EndUse(IntEnum):
    """Slots of the end uses produced by the simulations, in result order."""

    ELEC_HEAT = 0
    ELEC_COOL = 1
    ELEC_INT_LIGHTS = 2
    ELEC_EXT_LIGHTS = 3
    ELEC_FANS = 4
    ELEC_PUMP = 5
    ELEC_EQUIP_INT = 6
    ELEC_EQUIP_EXT = 7
    ELEC_DHW = 8
    GAS_HEAT = 9
    GAS_COOL = 10
    GAS_EQUIP = 11
    GAS_DHW = 12


END_USE_SLOTS = 20
"""Number of end-use slots held by every :class:`EndUses`."""


class EndUses:
    """Energy use of one timestep, one value per end-use slot."""

    __slots__ = ("_data",)

    def __init__(self) -> None:
        self._data = [0.0] * END_USE_SLOTS

    @staticmethod
    def _slot(use: int) -> int:
        slot = int(use)
        if not 0 <= slot < END_USE_SLOTS:
            raise IndexError(f"end use {use!r} outside 0..{END_USE_SLOTS - 1}")
        return slot

    def add_end_use(self, use: int, value: float) -> None:
        """Set the energy of end use ``use`` to ``value``."""
        self._data[self._slot(use)] = float(value)

    def get_end_use(self, use: int) -> float:
        """Return the energy recorded for end use ``use``."""
        return self._data[self._slot(use)]

    def __iter__(self) -> Iterator[float]:
        return iter(self._data)

    def __len__(self) -> int:
        return END_USE_SLOTS

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, EndUses):
            return NotImplemented
        return self._data == other._data

    def __repr__(self) -> str:
        return f"EndUses({self._data!r})"


def total_energy_use(results: Iterable[EndUses]) -> float:
    """Sum the energy use of all end uses over all timesteps."""
    return sum((sum(result) for result in results), 0.0)