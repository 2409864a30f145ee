# backeye/core/dependencies.py
"""Shared FastAPI dependencies."""
from ..services.hub import MeasurementsHub, measurements_hub

def get_measurements_hub() -> MeasurementsHub:
    return measurements_hub
