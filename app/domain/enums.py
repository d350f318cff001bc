"""Closed enumerations used by orders."""

from __future__ import annotations

from enum import Enum


class _ValidatedEnum(str, Enum):
    @classmethod
    def is_valid(cls, value: object) -> bool:
        try:
            cls(value)
        except ValueError:
            return False
        return True


class OrderStatus(_ValidatedEnum):
    PENDING = "PENDING"
    PAID = "PAID"
    SHIPPED = "SHIPPED"
    CANCELED = "CANCELED"


class PaymentMethod(_ValidatedEnum):
    COD = "COD"
    TAMARA = "TAMARA"
