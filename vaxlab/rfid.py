"""RFID badge checks over a serial link to an Arduino reader."""

from __future__ import annotations

import logging
import sqlite3
from typing import Any, Callable, Iterable

import serial
from serial.tools import list_ports

logger = logging.getLogger(__name__)

UID_PREFIX = "UID reçu : "
RESPONSE_PREFIX = "Réponse reçue : "


def find_arduino_port(ports: Iterable[Any]) -> str | None:
    """Name of the first port that looks like an Arduino, or None.

    A port matches when its description or manufacturer mentions "Arduino",
    or its description mentions "USB", ignoring case.
    """
    for port in ports:
        description = (getattr(port, "description", None) or "").lower()
        manufacturer = (getattr(port, "manufacturer", None) or "").lower()
        logger.debug(
            "port found: %s description: %s manufacturer: %s",
            getattr(port, "device", ""),
            description,
            manufacturer,
        )
        if "arduino" in description or "arduino" in manufacturer or "usb" in description:
            return port.device
    return None


def open_serial(port_name: str | None = None) -> serial.Serial:
    """Open a port at 9600 baud, 8N1, no flow control.

    With no port name the first Arduino-like port is used; raises
    serial.SerialException when there is none.
    """
    if port_name is None:
        port_name = find_arduino_port(list_ports.comports())
        if port_name is None:
            raise serial.SerialException("no Arduino port detected")
    return serial.Serial(
        port=port_name,
        baudrate=9600,
        bytesize=serial.EIGHTBITS,
        parity=serial.PARITY_NONE,
        stopbits=serial.STOPBITS_ONE,
        xonxoff=False,
        rtscts=False,
        timeout=1,
    )


class RfidGate:
    """Checks UIDs read by the reader against the EMPLOYE table."""

    def __init__(self, connection: sqlite3.Connection, transport: Any) -> None:
        self.connection = connection
        self.transport = transport
        self.expecting_uid = True
        self.on_authorized: list[Callable[[str], None]] = []

    def send_message(self, message: str) -> bool:
        """Send one line to the reader; return False if the port is not open."""
        if self.transport is None or not getattr(self.transport, "is_open", True):
            logger.warning("serial port not open, message not sent: %s", message)
            return False
        self.transport.write((message + "\n").encode("utf-8"))
        self.transport.flush()
        return True

    def _lookup(self, uid: str) -> tuple[Any, Any] | None:
        try:
            return self.connection.execute(
                "SELECT ID_EMPLOYE, NOM FROM EMPLOYE WHERE RFID_UID = ?", (uid,)
            ).fetchone()
        except sqlite3.Error as exc:
            logger.warning("UID lookup failed: %s", exc)
            return None

    def handle_line(self, line: str) -> str | None:
        """Process one line from the reader; return the UID if it was authorised."""
        line = line.strip()
        if not self.expecting_uid:
            if line.startswith(RESPONSE_PREFIX):
                self.expecting_uid = True
            return None
        if not line.startswith(UID_PREFIX):
            return None

        uid = line[len(UID_PREFIX):]
        row = self._lookup(uid)
        if row is None:
            logger.info("invalid UID received: %s", uid)
            self.send_message("Refuse")
            self.expecting_uid = True
            return None

        employee_id, name = row
        self.send_message(f"Nom: {'' if name is None else name}")
        self.send_message(f"ID: {'' if employee_id is None else employee_id}")
        for callback in self.on_authorized:
            callback(uid)
        self.expecting_uid = False
        return uid

    def poll(self) -> str | None:
        """Read one line from the port, if any, and handle it."""
        raw = self.transport.readline()
        if not raw:
            return None
        return self.handle_line(raw.decode("utf-8", errors="replace"))