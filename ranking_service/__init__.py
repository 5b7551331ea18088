"""Script Manifest ranking engine: placement scoring, tiers, badges and anti-gaming checks."""

__version__ = "1.0.0"
