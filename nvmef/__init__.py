"""NVMe over Fabrics helpers: field decoding, host identity, sysfs scanning and NVMe-MI formatting."""

__version__ = "1.0.0"

__all__ = [
    "fabrics_strings",
    "filters",
    "hostid",
    "mi_format",
    "strutil",
]