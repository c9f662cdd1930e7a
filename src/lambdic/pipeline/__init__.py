from .engine import ComparisonResult, SimulatorEngine

__all__ = ["ComparisonResult", "SimulatorEngine"]
