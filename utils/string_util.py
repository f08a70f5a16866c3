import random
import time


def generate_random_six_digit_string():
    """Returns a random number in [0, 999999] as a zero-padded six-digit string."""
    return f"{random.randrange(1000000):06d}"


def generate_timestamp_string():
    """Returns the current time in milliseconds as a string of digits."""
    return str(time.time_ns() // 1_000_000)
