"""FloodWatch: recent water levels for UK flood-monitoring stations."""

__version__ = "0.1.0"
