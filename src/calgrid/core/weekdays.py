"""Week-start normalisation for weekday symbols and weekday offsets."""


def weekday_index(weekday: int, sunday_first: bool = False) -> int:
    """
    Column of a weekday in a grid row.

    `weekday` uses Monday=0 ... Sunday=6. With Monday-first weeks this is the
    weekday itself (Sunday lands in column 6); with Sunday-first weeks
    Sunday moves to column 0 and everything else shifts right by one.
    """
    if sunday_first:
        return (weekday + 1) % 7
    return weekday


def leading_count(first_of_month_weekday: int, sunday_first: bool = False) -> int:
    """Days borrowed from the previous month before the first of the month."""
    return weekday_index(first_of_month_weekday, sunday_first)


def rotate_left(items: list, count: int = 1) -> list:
    if not items:
        return []
    count %= len(items)
    return items[count:] + items[:count]


def weekday_symbols(native_symbols: list[str], sunday_first: bool = False) -> list[str]:
    """
    Order weekday symbols for the grid header.

    `native_symbols` starts on Sunday. Monday-first weeks move Sunday to
    the end, matching the column returned by `weekday_index`.
    """
    if sunday_first:
        return list(native_symbols)
    return rotate_left(list(native_symbols), 1)
