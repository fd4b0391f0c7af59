"""Ten-pin bowling score keeping: a game scorer and a command to run it."""

__version__ = "0.1.0"