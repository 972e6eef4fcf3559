from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from typing import Any, Dict, Mapping, Optional

from ..domain.entities import DeleteMode, normalize_delete_mode

DEFAULT_API_URL = "http://127.0.0.1:8000"


@dataclass
class SettingsConfig:
    """Typed connection settings for the list API."""

    base_url: str = DEFAULT_API_URL
    request_timeout_s: int = 10
    retries: int = 2
    delete_mode: DeleteMode = "index"


class SettingsVM:
    """Keeps client settings state and validation, no I/O here."""

    def __init__(self, *, config: Optional[SettingsConfig] = None) -> None:
        self.config = config or SettingsConfig()

    # ------------------------------------------------------------------
    # Properties bridging to the typed config
    # ------------------------------------------------------------------
    @property
    def base_url(self) -> str:
        return self.config.base_url

    @base_url.setter
    def base_url(self, value: str) -> None:
        self.config = replace(self.config, base_url=self._coerce_url(value))

    @property
    def request_timeout_s(self) -> int:
        return self.config.request_timeout_s

    @request_timeout_s.setter
    def request_timeout_s(self, value: int) -> None:
        coerced = self._coerce_int("request_timeout_s", value, allow_negative=False)
        self.config = replace(self.config, request_timeout_s=coerced)

    @property
    def retries(self) -> int:
        return self.config.retries

    @retries.setter
    def retries(self, value: int) -> None:
        coerced = self._coerce_int("retries", value, allow_negative=False)
        self.config = replace(self.config, retries=coerced)

    @property
    def delete_mode(self) -> DeleteMode:
        return self.config.delete_mode

    @delete_mode.setter
    def delete_mode(self, value: str) -> None:
        self.config = replace(self.config, delete_mode=normalize_delete_mode(value))

    # ------------------------------------------------------------------
    def is_valid(self) -> bool:
        if not self.base_url.startswith(("http://", "https://")):
            return False
        return self.request_timeout_s > 0

    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply a flat settings mapping built from CLI args."""

        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        allowed_flat_keys = set(SettingsConfig.__annotations__.keys())
        unknown = set(payload.keys()) - allowed_flat_keys
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        updates: Dict[str, Any] = {}
        for cfg_key in SettingsConfig.__annotations__.keys():
            if cfg_key in payload:
                updates[cfg_key] = self._coerce_config_value(cfg_key, payload[cfg_key])

        if updates:
            self.config = replace(self.config, **updates)

    def to_dict(self) -> dict:
        return asdict(self.config)

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _coerce_config_value(self, key: str, raw: Any) -> Any:
        if key == "base_url":
            return self._coerce_url(raw)
        if key in {"request_timeout_s", "retries"}:
            return self._coerce_int(key, raw, allow_negative=False)
        if key == "delete_mode":
            return normalize_delete_mode(raw)
        raise ValueError(f"Unhandled config field: {key}")

    @staticmethod
    def _coerce_url(value: Any) -> str:
        if not isinstance(value, str):
            raise ValueError("base_url must be a string.")
        normalized = value.strip().rstrip("/")
        if not normalized:
            raise ValueError("base_url must not be empty.")
        return normalized

    @staticmethod
    def _coerce_int(name: str, value: Any, *, allow_negative: bool = True) -> int:
        if isinstance(value, bool):
            raise ValueError(f"{name} must be an integer.")
        if isinstance(value, (int, float)):
            coerced = int(value)
        elif isinstance(value, str):
            try:
                coerced = int(value.strip())
            except (TypeError, ValueError) as exc:
                raise ValueError(f"{name} must be an integer.") from exc
        else:
            raise ValueError(f"{name} must be an integer.")
        if not allow_negative and coerced < 0:
            raise ValueError(f"{name} must be non-negative.")
        return coerced
