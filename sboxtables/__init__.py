"""Difference, linear and boomerang tables (DDT, LAT, FBCT, FBDT) for S-boxes."""

__version__ = "0.1.0"