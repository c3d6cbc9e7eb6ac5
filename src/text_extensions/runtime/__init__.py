"""Runtime services (logging, profiling) shared across the package."""

from . import telemetry

__all__ = ["telemetry"]
