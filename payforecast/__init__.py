"""Pay Forecast - multi-year compensation and tax projections."""

__version__ = "0.1.0"
