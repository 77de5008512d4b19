"""Decoders for the fields of NVMe-oF discovery log page entries."""

from enum import IntEnum
from typing import Mapping

UNRECOGNIZED = "unrecognized"


class TransportType(IntEnum):
    """Transport type (TRTYPE)."""

    RDMA = 1
    FC = 2
    TCP = 3
    LOOP = 254


class AddressFamily(IntEnum):
    """Address family (ADRFAM)."""

    PCI = 0
    IP4 = 1
    IP6 = 2
    IB = 3
    FC = 4


class SubsystemType(IntEnum):
    """Subsystem type (SUBTYPE)."""

    DISC = 1
    NVME = 2
    CURR = 3


class TransportRequirement(IntEnum):
    """Transport requirements (TREQ)."""

    NOT_SPECIFIED = 0
    REQUIRED = 1
    NOT_REQUIRED = 2
    DISABLE_SQFLOW = 4


class EntryFlags(IntEnum):
    """Entry flags (EFLAGS)."""

    NONE = 0
    DUPRETINFO = 1 << 0
    EPCSD = 1 << 1
    BOTH = EPCSD | DUPRETINFO


class TcpSecurityType(IntEnum):
    """TCP security type (SECTYPE)."""

    NONE = 0
    TLS = 1
    TLS13 = 2


class RdmaProviderType(IntEnum):
    """RDMA provider type (PRTYPE)."""

    NOT_SPECIFIED = 1
    IB = 2
    ROCE = 3
    ROCEV2 = 4
    IWARP = 5


class RdmaQpType(IntEnum):
    """RDMA queue pair service type (QPTYPE)."""

    CONNECTED = 1
    DATAGRAM = 2


class RdmaCms(IntEnum):
    """RDMA connection management service (CMS)."""

    RDMA_CM = 1


_TRTYPES = {
    TransportType.RDMA: "rdma",
    TransportType.FC: "fc",
    TransportType.TCP: "tcp",
    TransportType.LOOP: "loop",
}

_ADRFAMS = {
    AddressFamily.PCI: "pci",
    AddressFamily.IP4: "ipv4",
    AddressFamily.IP6: "ipv6",
    AddressFamily.IB: "infiniband",
    AddressFamily.FC: "fibre-channel",
}

_SUBTYPES = {
    SubsystemType.DISC: "discovery subsystem referral",
    SubsystemType.NVME: "nvme subsystem",
    SubsystemType.CURR: "current discovery subsystem",
}

_TREQS = {
    TransportRequirement.NOT_SPECIFIED: "not specified",
    TransportRequirement.REQUIRED: "required",
    TransportRequirement.NOT_REQUIRED: "not required",
    TransportRequirement.DISABLE_SQFLOW: (
        "not specified, sq flow control disable supported"
    ),
}

_EFLAGS = {
    EntryFlags.NONE: "not specified",
    EntryFlags.EPCSD: "explicit discovery connections",
    EntryFlags.DUPRETINFO: "duplicate discovery information",
    EntryFlags.BOTH: (
        "explicit discovery connections, duplicate discovery information"
    ),
}

_SECTYPES = {
    TcpSecurityType.NONE: "none",
    TcpSecurityType.TLS: "tls",
    TcpSecurityType.TLS13: "tls13",
}

_PRTYPES = {
    RdmaProviderType.NOT_SPECIFIED: "not specified",
    RdmaProviderType.IB: "infiniband",
    RdmaProviderType.ROCE: "roce",
    RdmaProviderType.ROCEV2: "roce-v2",
    RdmaProviderType.IWARP: "iwarp",
}

_QPTYPES = {
    RdmaQpType.CONNECTED: "connected",
    RdmaQpType.DATAGRAM: "datagram",
}

_CMS = {
    RdmaCms.RDMA_CM: "rdma-cm",
}


def _lookup(table: Mapping[int, str], value: int, bits: int) -> str:
    # Field widths are fixed on the wire; wider values wrap like the field does.
    return table.get(int(value) & ((1 << bits) - 1), UNRECOGNIZED)


def trtype_str(trtype: int) -> str:
    """Decode the transport type field."""
    return _lookup(_TRTYPES, trtype, 8)


def adrfam_str(adrfam: int) -> str:
    """Decode the address family field."""
    return _lookup(_ADRFAMS, adrfam, 8)


def subtype_str(subtype: int) -> str:
    """Decode the subsystem type field."""
    return _lookup(_SUBTYPES, subtype, 8)


def treq_str(treq: int) -> str:
    """Decode the transport requirements field."""
    return _lookup(_TREQS, treq, 8)


def eflags_str(eflags: int) -> str:
    """Decode the entry flags field."""
    return _lookup(_EFLAGS, eflags, 16)


def sectype_str(sectype: int) -> str:
    """Decode the TCP security type field."""
    return _lookup(_SECTYPES, sectype, 8)


def prtype_str(prtype: int) -> str:
    """Decode the RDMA provider type field."""
    return _lookup(_PRTYPES, prtype, 8)


def qptype_str(qptype: int) -> str:
    """Decode the RDMA queue pair service type field."""
    return _lookup(_QPTYPES, qptype, 8)


def cms_str(cm: int) -> str:
    """Decode the RDMA connection management service field."""
    return _lookup(_CMS, cm, 8)