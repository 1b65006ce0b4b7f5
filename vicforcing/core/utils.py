import datetime


def date2doy(date: "datetime.date | str") -> int:
    """Day of year of the given date, 1 for the first of January.

    Examples
    --------
    >>> date2doy(datetime.date(2020, 3, 1))
    61
    >>> date2doy("1998-06-21")
    172
    """
    if isinstance(date, str):
        date = datetime.date.fromisoformat(date)
    return date.timetuple().tm_yday
