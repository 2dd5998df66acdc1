"""
Display helpers for the OCS01 client
"""

from decimal import Decimal


class Utils:
    """Helper utilities for formatting ledger values"""

    @staticmethod
    def format_balance(balance: Decimal, decimals: int = 6) -> str:
        """
        Format balance for display.

        Args:
            balance: Balance in whole coins
            decimals: Number of decimal places (default: 6)

        Example:
            >>> Utils.format_balance(Decimal("1.5"))
            '1.500000'
        """
        return f"{balance:.{decimals}f}"
