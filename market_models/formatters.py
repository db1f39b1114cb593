def ordinal(n: int) -> str:
    """
    Render a positive integer as an English ordinal.

    Args:
        n: Position, 1-based

    Returns:
        String such as '1st', '2nd', '3rd', '4th', '11th', '22nd'
    """
    # 11th, 12th, 13th (and 111th...) take 'th' regardless of the last digit
    if 11 <= n % 100 <= 13:
        suffix = 'th'
    else:
        suffix = {1: 'st', 2: 'nd', 3: 'rd'}.get(n % 10, 'th')
    return f"{n}{suffix}"
