"""Shared numeric constants, standard colors and render settings."""

from raytrace.color import RGBColor

PI = 3.1415926535897932384
TWO_PI = 6.2831853071795864769
PI_ON_180 = 0.0174532925199432957
INV_PI = 0.3183098861837906715
INV_TWO_PI = 0.1591549430918953358

EPSILON = 0.0001
HUGE_VALUE = 1.0e10

BLACK = RGBColor(0.0)
WHITE = RGBColor(1.0)
GRAY = RGBColor(0.5, 0.5, 0.5)
RED = RGBColor(1.0, 0.0, 0.0)
GREEN = RGBColor(0.0, 1.0, 0.0)
BLUE = RGBColor(0.0, 0.0, 1.0)

# Render settings.
NPR = 100
BLUR = False
BRIGHTNESS_ADJUSTMENT = 8.0
TO_ACCELERATE = False
LIGHTING = True
SECONDARY_RAYS = True
RECURSIVE_CASTING_DEPTH = 5