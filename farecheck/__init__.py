"""Cheapest-fare selection and promo-code price verification for flight booking pages."""

__version__ = "1.0.0"
