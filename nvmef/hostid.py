"""Host NQN and host identifier discovery."""

from __future__ import annotations

import os
import re
import uuid
from typing import Optional

SYSCONFDIR = "/etc"
HOSTNQN_FILE = os.path.join(SYSCONFDIR, "nvme", "hostnqn")
HOSTID_FILE = os.path.join(SYSCONFDIR, "nvme", "hostid")

PATH_UUID_IBM = "proc/device-tree/ibm,partition-uuid"
PATH_DMI_ENTRIES = "sys/firmware/dmi/entries"
PATH_DMI_PROD_UUID = "sys/class/dmi/id/product_uuid"

NQN_PREFIX = "nqn.2014-08.org.nvmexpress:uuid:"

NQN_SIZE = 223
HOSTID_SIZE = 37
UUID_SIZE = 37  # 36 characters plus terminator

_DMI_READ_SIZE = 512
_SMBIOS_UUID_OFFSET = 8
_LEADING_INT = re.compile(rb"\s*([+-]?\d+)")


class UuidUnavailableError(LookupError):
    """No system UUID could be read from the given source."""


def _read_bytes(path: str, limit: int) -> Optional[bytes]:
    try:
        with open(path, "rb") as stream:
            return stream.read(limit)
    except OSError:
        return None


def _until_nul(data: bytes) -> bytes:
    return data.split(b"\0", 1)[0]


def uuid_from_product_uuid(path: str = "/" + PATH_DMI_PROD_UUID) -> str:
    """Read the system UUID from the DMI ``product_uuid`` file.

    The first line must hold exactly 36 characters and a newline.
    """
    try:
        with open(path, "r", encoding="latin-1", newline="") as stream:
            line = stream.readline()
    except OSError as exc:
        raise UuidUnavailableError(f"cannot read {path}") from exc
    if len(line) != UUID_SIZE:
        raise UuidUnavailableError(f"malformed UUID in {path}")
    return line[: UUID_SIZE - 1]


def uuid_from_dmi_entries(path: str = "/" + PATH_DMI_ENTRIES) -> str:
    """Read the system UUID from the SMBIOS type 1 entry under *path*."""
    try:
        names = sorted(os.listdir(path))
    except OSError as exc:
        raise UuidUnavailableError(f"cannot list {path}") from exc
    for name in names:
        if name.startswith("."):
            continue
        entry = os.path.join(path, name)
        type_data = _read_bytes(os.path.join(entry, "type"), _DMI_READ_SIZE)
        if type_data is None:
            continue
        match = _LEADING_INT.match(type_data)
        if not match or int(match.group(1)) != 1:
            continue
        raw = _read_bytes(os.path.join(entry, "raw"), _DMI_READ_SIZE)
        if raw is None:
            continue
        field = raw[_SMBIOS_UUID_OFFSET : _SMBIOS_UUID_OFFSET + 16]
        if len(field) < 16:
            continue
        # SMBIOS stores the first three UUID fields little-endian.
        return str(uuid.UUID(bytes_le=field))
    raise UuidUnavailableError(f"no system UUID entry in {path}")


def uuid_from_device_tree(path: str = "/" + PATH_UUID_IBM) -> str:
    """Read the partition UUID from the device tree."""
    data = _read_bytes(path, UUID_SIZE - 1)
    if data is None:
        raise UuidUnavailableError(f"cannot read {path}")
    text = _until_nul(data)
    if not text:
        raise UuidUnavailableError(f"empty UUID in {path}")
    return text.decode("latin-1")


def system_uuid(root: str = "/") -> str:
    """Return the machine UUID found below *root*.

    DMI ``product_uuid`` is tried first, then the DMI entries, then the
    device tree. Raises :class:`UuidUnavailableError` if none has one.
    """
    try:
        return uuid_from_product_uuid(os.path.join(root, PATH_DMI_PROD_UUID))
    except UuidUnavailableError:
        pass
    try:
        return uuid_from_dmi_entries(os.path.join(root, PATH_DMI_ENTRIES))
    except UuidUnavailableError:
        pass
    return uuid_from_device_tree(os.path.join(root, PATH_UUID_IBM))


def hostnqn_generate(root: str = "/") -> str:
    """Return a host NQN built from the machine UUID, or a random one."""
    try:
        ident = system_uuid(root)
    except UuidUnavailableError:
        ident = str(uuid.uuid4())
    return NQN_PREFIX + ident


def _read_first_line(path: str, size: int) -> Optional[str]:
    data = _read_bytes(path, size - 1)
    if data is None:
        return None
    text = _until_nul(data)
    if not text:
        return None
    return text.split(b"\n", 1)[0].decode("latin-1")


def hostnqn_from_file(path: str = HOSTNQN_FILE) -> Optional[str]:
    """Return the host NQN stored in *path*, or ``None`` if there is none."""
    return _read_first_line(path, NQN_SIZE)


def hostid_from_file(path: str = HOSTID_FILE) -> Optional[str]:
    """Return the host identifier stored in *path*, or ``None``."""
    return _read_first_line(path, HOSTID_SIZE)