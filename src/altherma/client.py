""" Named accessors for the parameters of a Daikin Altherma heat pump, as
    exposed by its LAN adapter. Every accessor is a thin composition of
    :class:`altherma.transport.RequestSession` transactions; any failure in
    one of those transactions is raised to the caller unchanged.
"""

from __future__ import annotations

import logging
from typing import Any, Optional, Union

from .protocol import fields
from .protocol.convert import Kind, convert
from .params import HeatingParameters, TankParameters
from .transport import RequestSession, Transport, WebSocketTransport


_LOGGER = logging.getLogger(__name__)

_DEFAULT = object()


# Extraction paths, relative to the root of a decoded response.

CONTENT_PATH = '/%s/%s/%s/%s' % (fields.RESPONSE, fields.CONTENT, fields.CONTENT_CONTAINER, fields.VALUE)
MODEL_PATH = '/%s/%s/%s/%s' % (fields.RESPONSE, fields.CONTENT, fields.DEVICE_INFO, fields.MODEL)
ACK_PATH = '/'

DEVICE_INFO = 'MNCSE-node/deviceInfo'


class Client:
    """ A client connected to the LAN adapter at *hostname*. The connection
        is opened immediately and kept open until :func:`close` is called;
        a :class:`Client` may also be used as a context manager.

        A prepared *transport* can be supplied instead of a hostname, which
        is mostly useful for testing. The *timeout* bounds the wait for each
        response; the default waits indefinitely unless configured via
        ``ALTHERMA_TIMEOUT``.

        A single :class:`Client` issues one request at a time. Concurrent
        calls from several threads are serialized, not interleaved.
    """

    def __init__(self, hostname: Optional[str] = None, timeout: Any = _DEFAULT, transport: Optional[Transport] = None):

        if transport is None:
            if hostname is None:
                raise ValueError('either a hostname or a transport must be specified')
            transport = WebSocketTransport(hostname)

        transport.open()
        self.hostname = hostname

        if timeout is _DEFAULT:
            self.session = RequestSession(transport)
        else:
            self.session = RequestSession(transport, timeout=timeout)

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self) -> None:
        self.session.close()

    # Generic access.

    def request_value(self, item: str, kind: Union[Kind, type]) -> Any:
        """ Read the heat pump *item* and return its current value read as
            *kind*, which is either a :class:`altherma.protocol.Kind` or one
            of int, float, str and bool.
        """

        raw = self.session.execute(item, extraction=CONTENT_PATH, prefix=fields.HEAT_PUMP)
        return convert(raw, kind)

    def set_value(self, item: str, value: Any) -> None:
        """ Write *value* to the heat pump *item*. The acknowledgment is
            required to be present, but its contents are not interpreted
            beyond the rejection check performed by the session.
        """

        _LOGGER.debug("Setting %s to %r", item, value)
        self.session.execute(item, value, extraction=ACK_PATH, prefix=fields.HEAT_PUMP)

    # Adapter.

    def get_adapter_model(self) -> str:
        """Return the model of the LAN adapter, for example BRP069A61."""

        raw = self.session.execute(DEVICE_INFO, extraction=MODEL_PATH)
        return convert(raw, Kind.TEXT)

    # Domestic hot water tank.

    def get_tank_parameters(self) -> TankParameters:

        temperature = self.request_value('2/Sensor/TankTemperature/la', float)
        setpoint_temperature = self.request_value('2/Operation/TargetTemperature/la', float)
        enabled = self.request_value('2/Operation/Power/la', str)
        powerful = self.request_value('2/Operation/Powerful/la', int)

        return TankParameters(
            temperature=temperature,
            setpoint_temperature=setpoint_temperature,
            enabled=enabled == 'on',
            powerful=powerful == 1,
        )

    def set_tank_enabled(self, enabled: bool) -> None:
        """Enable or disable heating of the tank."""

        self.set_value('2/Operation/Power', 'on' if enabled else 'off')

    def set_tank_powerful(self, powerful: bool) -> None:
        """Enable or disable the powerful (quick heating) mode of the tank."""

        self.set_value('2/Operation/Powerful', 1 if powerful else 0)

    # Space heating.

    def get_heating_parameters(self) -> HeatingParameters:

        indoor_temperature = self.request_value('1/Sensor/IndoorTemperature/la', float)
        outdoor_temperature = self.request_value('1/Sensor/OutdoorTemperature/la', float)
        indoor_setpoint_temperature = self.request_value('1/Operation/TargetTemperature/la', float)
        leaving_water_temperature = self.request_value('1/Sensor/LeavingWaterTemperatureCurrent/la', float)
        enabled = self.request_value('1/Operation/Power/la', str)
        on_holiday = self.request_value('1/Holiday/HolidayState/la', int)

        return HeatingParameters(
            indoor_temperature=indoor_temperature,
            outdoor_temperature=outdoor_temperature,
            indoor_setpoint_temperature=indoor_setpoint_temperature,
            leaving_water_temperature=leaving_water_temperature,
            enabled=enabled == 'on',
            on_holiday=on_holiday == 1,
        )

    def set_heating_setpoint_temperature(self, temperature: float) -> None:
        """Set the indoor setpoint (target) temperature, in °C."""

        self.set_value('1/Operation/TargetTemperature', float(temperature))

    def set_heating_enabled(self, enabled: bool) -> None:
        """ Enable or disable space heating. Disabling puts the heating in
            standby rather than switching it off.
        """

        self.set_value('1/Operation/Power', 'on' if enabled else 'standby')

    def is_holiday_mode(self) -> bool:
        return self.request_value('1/Holiday/HolidayState/la', int) == 1

    def set_holiday_mode(self, holiday_mode: bool) -> None:
        self.set_value('1/Holiday/HolidayState', 1 if holiday_mode else 0)


# vim: set expandtab tabstop=8 softtabstop=4 shiftwidth=4 autoindent:
