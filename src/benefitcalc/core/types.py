"""Type aliases used across benefitcalc."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Any

from pydantic import PlainSerializer

JsonDict = dict[str, Any]
EmployeeId = int
DependentId = int
FlagName = str

# Exact Decimal in Python, plain JSON number on the wire.
Money = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]
