"""Config models and loader.

This module defines Pydantic models for file- and environment-based
configuration of the cache and its demonstration driver. JSON parsing prefers
`orjson` when available, falling back to the Python standard library's `json`
module.
"""

from __future__ import annotations

import json as _json
from pathlib import Path
from typing import Any, Callable, List, Literal, Optional

try:
    import orjson as _orjson_mod  # type: ignore[assignment]
except ImportError:  # pragma: no cover - optional dependency
    _orjson_mod = None  # type: ignore[assignment]
    _loads_orjson: Optional[Callable[[bytes], Any]] = None
else:

    def _loads_orjson(buf: bytes) -> Any:
        loader = getattr(_orjson_mod, "loads")  # type: ignore[assignment]
        return loader(buf)


from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CAPACITY = 5


class Operation(BaseModel):
    """Single scripted cache operation.

    Attributes
    ----------
    op: str
        One of ``"put"``, ``"get"`` or ``"print"``.
    key: Optional[int]
        Cache key; required for ``put`` and ``get``.
    value: Optional[int]
        Value to store; required for ``put``.
    """

    op: Literal["put", "get", "print"]
    key: Optional[int] = None
    value: Optional[int] = None

    @model_validator(mode="after")
    def _check_arguments(self) -> "Operation":
        if self.op in ("put", "get") and self.key is None:
            raise ValueError(f"'{self.op}' requires a key")
        if self.op == "put" and self.value is None:
            raise ValueError("'put' requires a value")
        return self


class DemoConfig(BaseModel):
    """Scripted demonstration run.

    Attributes
    ----------
    capacity: int
        Capacity of the cache the script runs against.
    operations: List[Operation]
        Operations executed in order.
    """

    capacity: int = Field(DEFAULT_CAPACITY, ge=1)
    operations: List[Operation] = Field(default_factory=list)

    @staticmethod
    def load(path: Path) -> "DemoConfig":
        """Load a demo script from a JSON file."""
        raw = path.read_bytes()
        if _loads_orjson is not None:
            data = _loads_orjson(raw)
        else:
            data = _json.loads(raw.decode("utf-8"))
        return DemoConfig.model_validate(data)

    @staticmethod
    def default(capacity: int = DEFAULT_CAPACITY) -> "DemoConfig":
        """Return the stock script: fill past capacity, print, get, print."""
        ops = [Operation(op="put", key=k, value=k) for k in range(2, 8)]
        ops += [
            Operation(op="print"),
            Operation(op="get", key=5),
            Operation(op="print"),
        ]
        return DemoConfig(capacity=capacity, operations=ops)


class CacheSettings(BaseSettings):
    """Environment-driven settings and .env support.

    Attributes
    ----------
    log_level: str
        Logging level name (e.g., "DEBUG", "INFO"). Defaults to "INFO".
    capacity: int
        Default cache capacity for the demo driver. Defaults to 5.
    """

    model_config = SettingsConfigDict(env_file=".env", env_prefix="LRUCACHE_")

    log_level: str = Field("INFO")
    capacity: int = Field(
        DEFAULT_CAPACITY,
        ge=1,
        description="Default cache capacity for the demo driver",
    )
