"""
Utilities for formatting sizes with binary unit suffixes.
"""
from typing import Optional

BINARY_UNITS = ["B", "KiB", "MiB", "GiB", "TiB", "PiB", "EiB", "ZiB", "YiB"]

MIB = 1024 * 1024


def format_binary_size(size: float) -> str:
    """
    Formats a size in bytes as a human-readable string, e.g. 134217728 -> '128MiB'.

    :param size: Size in bytes.
    :return: The size with four significant digits and a binary unit suffix.
    """
    unit = 0
    while size >= 1024 and unit < len(BINARY_UNITS) - 1:
        size = size / 1024.0
        unit += 1
    return "%.4g%s" % (size, BINARY_UNITS[unit])


def format_mib(size_mib: Optional[int]) -> Optional[str]:
    """
    Formats a size given in MiB, e.g. 1024 -> '1GiB'. None stays None.
    """
    if size_mib is None:
        return None
    return format_binary_size(size_mib * MIB)
