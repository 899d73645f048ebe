from __future__ import annotations


class AppleModelsError(RuntimeError):
    """Base error for device identification."""


class SimulatorConfigurationError(AppleModelsError):
    """Simulator host did not export its model identifier."""


class CatalogError(AppleModelsError):
    """Literal model table is inconsistent (duplicate identifier)."""
