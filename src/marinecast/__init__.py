"""MarineCast: simulated marine conditions, fishing spots, territorial-waters checks and route estimates."""

__version__ = "0.1.0"
