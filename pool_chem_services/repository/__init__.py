from .reading_repository import ChemicalSeries, ensure_schema, load_chemical_series, save_reading

__all__ = ["ChemicalSeries", "ensure_schema", "load_chemical_series", "save_reading"]
