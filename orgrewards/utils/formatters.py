"""
Formatting utilities for currency, rates and reward reports.

Rounding happens only here; computed values keep full Decimal precision.
"""

from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING, Optional, Union

from orgrewards.utils.numbers import to_decimal


if TYPE_CHECKING:
    from orgrewards.core.models import RewardReport


def _round(value: Union[float, Decimal, int], decimals: int) -> Decimal:
    return to_decimal(value).quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)


def format_currency(
    amount: Union[float, Decimal],
    currency: str = "$",
    decimals: int = 2,
    thousands_separator: str = ",",
    decimal_separator: str = "."
) -> str:
    """
    Format an amount as currency.

    Args:
        amount: Amount to format
        currency: Currency symbol or code
        decimals: Digits after the decimal point
        thousands_separator: Thousands separator
        decimal_separator: Decimal separator

    Returns:
        Formatted string with currency

    Example:
        >>> format_currency(Decimal("1234.5"))
        '$ 1,234.50'
        >>> format_currency(1000, currency="USDT", decimals=0)
        '1,000 USDT'
    """
    formatted = f"{_round(amount, decimals):,.{decimals}f}"
    if thousands_separator != ",":
        formatted = formatted.replace(",", "TEMP").replace(".", decimal_separator).replace("TEMP", thousands_separator)
    elif decimal_separator != ".":
        formatted = formatted.replace(".", decimal_separator)

    if currency in ("$", "€", "₩"):
        return f"{currency} {formatted}"
    return f"{formatted} {currency}"


def format_percentage(
    value: Union[float, Decimal],
    decimals: Optional[int] = None,
) -> str:
    """
    Format a fraction as a percentage.

    Example:
        >>> format_percentage(Decimal("0.007"))
        '0.7%'
        >>> format_percentage(Decimal("0.1"), decimals=2)
        '10.00%'
    """
    percent = to_decimal(value) * 100
    if decimals is None:
        text = format(percent.normalize(), "f")
    else:
        text = f"{_round(percent, decimals):.{decimals}f}"
    return f"{text}%"


def format_rank(rank: str | None) -> str:
    """Format rank name, '-' for unranked nodes."""
    return rank or "-"


def format_reward_report(
    report: "RewardReport",
    currency: Optional[str] = None,
) -> str:
    """
    Format a reward report as a text table.

    Args:
        report: RewardReport object
        currency: Currency symbol; defaults to the configured symbol

    Returns:
        Multi-line table followed by the grand total
    """
    if currency is None:
        from orgrewards.config.settings import settings

        currency = settings.currency_symbol

    rate = format_percentage(report.mining_rate)
    header = (
        f"{'No.':>4}  {'Recommender':<14}{'Name':<16}{'Lv':>3} {'Rank':<5}"
        f"{'Mining (' + rate + ')':>18}{'Referral (10%)':>18}{'Community':>18}{'Total':>18}"
    )

    lines = [
        f"Rewards | mining {rate} | referral 10% | community: subtotal x {rate} x 10% x rank",
        header,
        "-" * len(header),
    ]
    for idx, entry in enumerate(report.entries, start=1):
        lines.append(
            f"{idx:>4}  {(entry.recommender or '-')[:13]:<14}{entry.name[:15]:<16}"
            f"{entry.level:>3} {format_rank(entry.rank):<5}"
            f"{format_currency(entry.mining, currency):>18}"
            f"{format_currency(entry.referral, currency):>18}"
            f"{format_currency(entry.community, currency):>18}"
            f"{format_currency(entry.total, currency):>18}"
        )

    lines.append("-" * len(header))
    lines.append(f"Total rewards: {format_currency(report.grand_total, currency)}")
    return "\n".join(lines)
