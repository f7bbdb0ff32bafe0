"""
Currency conversion table used for derived product prices.
"""

import enum


class Currency(enum.Enum):
    """Supported currencies with their display name and rate from EUR."""

    EUR = ("Euro", 1.00)
    DOL = ("Dollar", 1.09)
    PES = ("Peso", 18.69)
    YEN = ("Yen", 160.69)

    def __init__(self, display_name: str, conversion_rate: float):
        self.display_name = display_name
        self.conversion_rate = conversion_rate

    def convert(self, amount: float) -> float:
        """Convert an amount in euros into this currency."""
        return round(amount * self.conversion_rate, 2)
