def format_count(value: int) -> str:
    """Format a count with thousands grouping, e.g. 1234567 -> '1,234,567'."""
    return f"{int(value):,}"
