"""Human readable magnitudes for statistics and monetary display strings."""
from decimal import Decimal, ROUND_HALF_UP


def _round(value, places):
    quantum = Decimal(1).scaleb(-places)
    return Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)


def _plain(value):
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def format_count(value) -> str:
    """``1500000 -> "1.5M+"``, ``12345 -> "12K+"``, ``42 -> "42+"``."""
    value = value or 0
    if value >= 1_000_000:
        return f"{_round(value / 1_000_000, 1)}M+"
    if value >= 1_000:
        return f"{_round(value / 1_000, 0)}K+"
    return f"{_plain(value)}+"


def format_usd(amount) -> str:
    """Compact dollar amount derived from a numeric USD value."""
    amount = float(amount or 0)
    for threshold, suffix in ((1_000_000_000, "B"), (1_000_000, "M")):
        if amount >= threshold:
            scaled = _round(amount / threshold, 1)
            return f"${_plain(scaled)}{suffix}"
    if amount >= 1_000:
        return f"${_round(amount / 1_000, 0)}K"
    return f"${_plain(_round(amount, 0))}"
