"""Site location: terrain class and the weather data for the site."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(kw_only=True)
class Location:
    """Where the building sits.

    ``terrain`` is the terrain class: urban/city 0.8, suburban/some
    shielding 0.9, country/open 1.0. ``weather`` holds the weather data
    extracted or computed from the site's weather file, if loaded.
    """

    terrain: float = 1.0
    weather: Optional[Any] = None