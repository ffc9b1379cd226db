"""
Imperial/metric helpers.

The studio UI speaks feet and inches; the model stores meters.
"""

FT_TO_M = 0.3048
IN_TO_M = 0.0254


def feet_to_meters(feet: float, inches: float = 0) -> float:
    """Convert feet (plus optional inches) to meters."""
    return feet * FT_TO_M + inches * IN_TO_M


def meters_to_feet_inches(meters: float) -> tuple[int, int]:
    """Split a length into whole feet and rounded inches."""
    total_in = meters / IN_TO_M
    feet = int(total_in // 12)
    inches = int(total_in - feet * 12 + 0.5)
    if inches == 12:
        feet, inches = feet + 1, 0
    return feet, inches


def format_feet_inches(meters: float) -> str:
    """Format a length as 12'-6\"."""
    feet, inches = meters_to_feet_inches(meters)
    return f"{feet}'-{inches}\""
