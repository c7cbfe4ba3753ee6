from datetime import date


def format_time(time: str) -> str:
    """'13:30' -> '1:30 PM'."""
    hour, minute = time.split(":")
    hour_num = int(hour)
    ampm = "PM" if hour_num >= 12 else "AM"
    if hour_num == 0:
        display_hour = 12
    elif hour_num > 12:
        display_hour = hour_num - 12
    else:
        display_hour = hour_num
    return f"{display_hour}:{minute} {ampm}"


def earliest_bookable_date(today: date | None = None) -> str:
    """Same day the service starts accepting: today."""
    return (today or date.today()).isoformat()
