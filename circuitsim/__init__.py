"""Event-driven digital logic circuit simulator: components, parser, simulator and command."""

__version__ = "1.0.0"