from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass

from modelcaps.errors import ConfigurationError

CLOUD_API_HOST = "https://api.plandex.ai"


@dataclass(frozen=True)
class ModelcapsConfig:
    api_host: str = CLOUD_API_HOST
    timeout: float = 30.0  # seconds, per HTTP request

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> ModelcapsConfig:
        """Read MODELCAPS_API_HOST and MODELCAPS_TIMEOUT.

        Raises :class:`ConfigurationError` for values we cannot use.
        """
        env = os.environ if environ is None else environ

        api_host = env.get("MODELCAPS_API_HOST", "").strip().rstrip("/") or CLOUD_API_HOST
        if not api_host.startswith(("http://", "https://")):
            raise ConfigurationError(f"MODELCAPS_API_HOST must be an http(s) URL, got {api_host!r}")

        raw_timeout = env.get("MODELCAPS_TIMEOUT", "").strip()
        timeout = cls.timeout
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError as exc:
                raise ConfigurationError(
                    f"MODELCAPS_TIMEOUT must be a number, got {raw_timeout!r}", cause=exc
                ) from exc
            if timeout <= 0:
                raise ConfigurationError(f"MODELCAPS_TIMEOUT must be positive, got {timeout}")

        return cls(api_host=api_host, timeout=timeout)
