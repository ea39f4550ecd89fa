from typing import Union

from config.constants import BYTES_PER_GB

IEC_LABELS = ("B", "KiB", "MiB", "GiB", "TiB")
SI_LABELS = ("B", "KB", "MB", "GB", "TB")

def bytes_to_human(byte_count: Union[int, float, None], system: str = "IEC") -> str:
    """Render a byte count for display, e.g. ``1536 -> '1.50 KiB'``.

    ``system`` selects base 1024 ('IEC') or base 1000 ('SI').
    Missing or non-numeric input renders as 'N/A'; negatives clamp to zero.
    """
    if byte_count is None:
        return "N/A"
    try:
        value = max(float(byte_count), 0.0)
    except (ValueError, TypeError):
        return "N/A"
    if value == 0:
        return "0 B"

    if (system or "IEC").upper() == "SI":
        base, labels = 1000.0, SI_LABELS
    else:
        base, labels = 1024.0, IEC_LABELS

    idx = 0
    while value >= base and idx < len(labels) - 1:
        value /= base
        idx += 1
    return f"{value:.2f} {labels[idx]}"

def bytes_to_gb(byte_count: int) -> float:
    """Bytes expressed in the GB unit used by the data limit setting (1024^3)."""
    return byte_count / BYTES_PER_GB
