"""US-dollar rendering of cent amounts."""


def usd(amount_cents: int) -> str:
    """Render cents as ``$D.00`` with thousands grouping.

    Only whole dollars are shown: the cent remainder is truncated, so
    12345 renders as ``$123.00``.
    """
    return f"${amount_cents // 100:,}.00"
