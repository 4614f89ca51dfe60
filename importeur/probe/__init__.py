"""Host probing package (registry keys, registry values, filesystem paths)."""

from .system_probe import Probe, key_exists, read_value, path_exists

__all__ = [
    "Probe",
    "key_exists",
    "read_value",
    "path_exists",
]
