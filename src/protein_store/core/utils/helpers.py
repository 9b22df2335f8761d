import argparse


def positive_int(value: str) -> int:
    """Validate that a command-line value is a positive integer."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected an integer, got {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"Must be positive, got {number}")
    return number


def non_negative_int(value: str) -> int:
    """Validate that a command-line value is an integer >= 0."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected an integer, got {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"Must be non-negative, got {number}")
    return number


def non_negative_float(value: str) -> float:
    """Validate that a command-line value is a float >= 0."""
    try:
        number = float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"Expected a number, got {value!r}")
    if not number >= 0:
        raise argparse.ArgumentTypeError(f"Must be non-negative, got {value}")
    return number
