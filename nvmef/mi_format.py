"""Formatting helpers for NVMe-MI responses: hex dumps and decoded names."""

from __future__ import annotations

from typing import List

_ROW_LEN = 16
_HEX_WIDTH = _ROW_LEN * len("00 ")

_PORT_TYPES = {
    0x00: "inactive",
    0x01: "PCIe",
    0x02: "SMBus",
}

_SEC_PROTOS = {
    0x00: "Security protocol information",
    0xEA: "NVMe",
    0xEC: "JEDEC Universal Flash Storage",
    0xED: "SDCard TrustedFlash Security",
    0xEE: "IEEE 1667",
    0xEF: "ATA Device Server Password Security",
}

_SEC_HEADER_LEN = 6
_SEC_LIST_OFFSET = 8


def _printable(byte: int) -> str:
    return chr(byte) if 0x20 <= byte <= 0x7E else "."


def hexdump(data: bytes) -> str:
    """Return a hex dump of *data*, sixteen bytes per line.

    Each line holds the offset, the bytes in hex and the bytes as
    characters, with non-printable ones shown as ``.``.
    """
    lines = []
    for offset in range(0, len(data), _ROW_LEN):
        row = data[offset : offset + _ROW_LEN]
        hex_part = "".join(f"{byte:02x} " for byte in row)
        chars = "".join(_printable(byte) for byte in row)
        lines.append(f"{offset:08x}  {hex_part:<{_HEX_WIDTH}} |{chars}|\n")
    return "".join(lines)


def sec_proto_description(proto_id: int) -> str:
    """Describe a security protocol identifier."""
    name = _SEC_PROTOS.get(proto_id)
    if name is not None:
        return name
    if proto_id >= 0xF0:
        return "Vendor specific"
    return "unknown"


def port_type_name(port_type: int) -> str:
    """Name an MI port type, or ``INVALID`` for an unknown one."""
    return _PORT_TYPES.get(port_type, "INVALID")


def parse_security_protocols(data: bytes) -> List[int]:
    """Return the protocol identifiers of a Security Receive protocol list.

    The list length is a big-endian 16-bit value after six reserved bytes,
    followed by one byte per protocol. Raises ``ValueError`` on a short
    response.
    """
    if len(data) < _SEC_HEADER_LEN:
        raise ValueError(
            f"Short response in security receive command ({len(data)} bytes)"
        )
    if len(data) < _SEC_LIST_OFFSET:
        raise ValueError(
            f"Short response in security receive command ({len(data)} bytes), "
            "missing protocol count"
        )
    count = int.from_bytes(data[_SEC_HEADER_LEN:_SEC_LIST_OFFSET], "big")
    protocols = data[_SEC_LIST_OFFSET : _SEC_LIST_OFFSET + count]
    if len(data) < _SEC_HEADER_LEN + count or len(protocols) < count:
        raise ValueError(
            f"Short response in security receive command ({len(data)} bytes), "
            f"for {count} protocols"
        )
    return list(protocols)