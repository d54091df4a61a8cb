import math

def round_half_up(value: float) -> int:
    # round() in Python is banker's rounding; percentages here round .5 upwards
    return int(math.floor(value + 0.5))

def percentage(part: int, whole: int) -> int:
    if whole <= 0:
        return 0
    return round_half_up(part / whole * 100)
