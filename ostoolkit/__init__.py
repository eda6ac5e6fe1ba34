"""Terminal calculator, calendar, file tools, games and a launcher menu."""

__version__ = "0.1.0"