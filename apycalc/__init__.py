"""APY calculator: compounding-interest projections served over Flask."""

__version__ = "1.0.0"
