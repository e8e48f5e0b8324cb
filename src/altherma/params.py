""" Parameter groups read from the heat pump. Each group is assembled from
    several independent reads; nothing here is decoded from the wire in one
    piece.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class TankParameters:
    """Domestic hot water tank state. Temperatures are in °C."""

    temperature: float
    setpoint_temperature: float
    enabled: bool
    powerful: bool


@dataclass
class HeatingParameters:
    """Space heating state. Temperatures are in °C."""

    indoor_temperature: float
    outdoor_temperature: float
    indoor_setpoint_temperature: float
    leaving_water_temperature: float
    enabled: bool
    on_holiday: bool


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
