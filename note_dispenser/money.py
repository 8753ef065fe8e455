from decimal import Decimal, ROUND_HALF_UP, localcontext

CENT = Decimal("0.01")


def q2(x: Decimal) -> Decimal:
    return x.quantize(CENT, rounding=ROUND_HALF_UP)


def format_amount(amount) -> str:
    """Two-decimal dollar rendering, e.g. 125 -> "125.00", 5.5 -> "5.50"."""
    # floats round on their exact binary value: 1.005 -> "1.00"
    d = amount if isinstance(amount, Decimal) else Decimal(amount)
    with localcontext() as ctx:
        # quantize fails once the digit count exceeds the context precision
        ctx.prec = max(ctx.prec, d.adjusted() + 4)
        return str(q2(d))


def display_amount(amount) -> str:
    # integral floats render like ints: -130.0 -> "-130"
    if isinstance(amount, float) and amount.is_integer():
        return str(int(amount))
    return str(amount)
