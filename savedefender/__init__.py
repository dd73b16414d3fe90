"""Tower defense game rules and state: waves, towers, targeting, combat, input and screen layouts."""

__version__ = "0.1.0"