"""Shared helpers."""

from .price_parser import parse_price, parse_discount, to_money, format_price

__all__ = ['parse_price', 'parse_discount', 'to_money', 'format_price']
