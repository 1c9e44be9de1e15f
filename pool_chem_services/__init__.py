"""Motor de cumplimiento químico para piscinas (MAHC)."""

__version__ = "0.1.0"
