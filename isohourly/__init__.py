"""Simple hourly building energy model after ISO 13790 Annex C, with EPW weather reading."""

__version__ = "0.1.0"