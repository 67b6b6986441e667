"""Payment objects: shipping addresses, order information and invoices."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ShippingAddress:
    """A shipping address."""

    country_code: str = ""
    state: str = ""
    city: str = ""
    street_line1: str = ""
    street_line2: str = ""
    post_code: str = ""


@dataclass
class OrderInfo:
    """Information about an order."""

    name: str = ""
    phone_number: str = ""
    email: str = ""
    shipping_address: ShippingAddress | None = None


@dataclass
class Invoice:
    """Basic information about an invoice.

    ``total_amount`` is in the smallest units of the currency.
    """

    title: str = ""
    description: str = ""
    start_parameter: str = ""
    currency: str = ""
    total_amount: int = 0