"""Re-export persistence protocols from core for convenience."""

from __future__ import annotations

from benefitcalc.core.protocols import ICacheBackend, IEmployeeRepository, IFeatureFlagStore

__all__ = ["ICacheBackend", "IEmployeeRepository", "IFeatureFlagStore"]
