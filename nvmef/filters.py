"""Recognise and list NVMe entries in sysfs directories."""

from __future__ import annotations

import os
import re
from typing import Callable, List

CTRL_SYSFS_DIR = "/sys/class/nvme"
NS_SYSFS_DIR = "/sys/block"
SUBSYS_SYSFS_DIR = "/sys/class/nvme-subsystem"

_INT = r"\s*[+-]?\d+"
_NAMESPACE = re.compile(rf"nvme{_INT}n{_INT}")
_PATH = re.compile(rf"nvme{_INT}c{_INT}n{_INT}")
_CTRL = re.compile(rf"nvme{_INT}")
_SUBSYS = re.compile(rf"nvme-subsys{_INT}")


def is_namespace(name: str) -> bool:
    """Tell whether *name* is a namespace such as ``nvme0n1``."""
    if name.startswith("."):
        return False
    return _NAMESPACE.match(name) is not None


def is_path(name: str) -> bool:
    """Tell whether *name* is a namespace path such as ``nvme0c1n1``."""
    if name.startswith("."):
        return False
    return _PATH.match(name) is not None


def is_ctrl(name: str) -> bool:
    """Tell whether *name* is a controller such as ``nvme0``."""
    if name.startswith("."):
        return False
    if _PATH.match(name) or _NAMESPACE.match(name):
        return False
    return _CTRL.match(name) is not None


def is_subsystem(name: str) -> bool:
    """Tell whether *name* is a subsystem such as ``nvme-subsys0``."""
    if name.startswith("."):
        return False
    return _SUBSYS.match(name) is not None


def _scan(directory: str, accept: Callable[[str], bool]) -> List[str]:
    return sorted(name for name in os.listdir(directory) if accept(name))


def scan_subsystems(sysfs_dir: str = SUBSYS_SYSFS_DIR) -> List[str]:
    """List the subsystems in *sysfs_dir*, sorted."""
    return _scan(sysfs_dir, is_subsystem)


def scan_namespaces(directory: str) -> List[str]:
    """List the namespaces in a subsystem or controller *directory*, sorted."""
    return _scan(directory, is_namespace)


def scan_ctrls(sysfs_dir: str = CTRL_SYSFS_DIR) -> List[str]:
    """List the controllers in *sysfs_dir*, sorted."""
    return _scan(sysfs_dir, is_ctrl)


def scan_paths(directory: str) -> List[str]:
    """List the namespace paths in a controller *directory*, sorted."""
    return _scan(directory, is_path)