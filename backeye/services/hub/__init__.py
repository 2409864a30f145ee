from .measurements_hub import MeasurementsHub, measurements_hub

__all__ = ["MeasurementsHub", "measurements_hub"]
