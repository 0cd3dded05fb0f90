import math

def round_half_up(x: float) -> int:
    """Nearest integer, .5 rounds up (Python's round() rounds half to even)."""
    return int(math.floor(x + 0.5))
