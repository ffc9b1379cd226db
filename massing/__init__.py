"""
Massing Studio.

Grid-snapped building massing with proxy estimates of embodied carbon,
solar exposure, daylight and heating/cooling energy.
"""

__version__ = "0.1.0"
