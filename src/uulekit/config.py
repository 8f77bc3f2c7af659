"""Default field values for building UULE records."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from uulekit._constants import (
    DEFAULT_PROVENANCE,
    EXACT_POINT_RADIUS,
    LOGGED_IN_USER_SPECIFIED,
    USER_SPECIFIED_FOR_REQUEST,
    UULEV1_PRODUCER,
    UULEV1_ROLE,
)
from uulekit.exceptions import UuleConfigError

_ENV_CONFIG_MAP = {
    "UULE_V1_ROLE": "v1_role",
    "UULE_V1_PRODUCER": "v1_producer",
    "UULE_V2_ROLE": "v2_role",
    "UULE_V2_PRODUCER": "v2_producer",
    "UULE_V2_PROVENANCE": "v2_provenance",
    "UULE_V2_RADIUS": "v2_radius",
}


@dataclasses.dataclass(frozen=True)
class UuleDefaults:
    """Field values used when a caller does not supply them.

    Parameters
    ----------
    v1_role : int
        UULEv1 ``role``. Defaults to 2.
    v1_producer : int
        UULEv1 ``producer``. Defaults to 32.
    v2_role : int
        UULEv2 ``role``. Defaults to 1 (``USER_SPECIFIED_FOR_REQUEST``).
    v2_producer : int
        UULEv2 ``producer``. Defaults to 12 (``LOGGED_IN_USER_SPECIFIED``).
    v2_provenance : int
        UULEv2 ``provenance``. Defaults to 0.
    v2_radius : int
        UULEv2 ``radius`` in encoded units. Defaults to -1 (exact point).
    """

    v1_role: int = UULEV1_ROLE
    v1_producer: int = UULEV1_PRODUCER
    v2_role: int = USER_SPECIFIED_FOR_REQUEST
    v2_producer: int = LOGGED_IN_USER_SPECIFIED
    v2_provenance: int = DEFAULT_PROVENANCE
    v2_radius: int = EXACT_POINT_RADIUS

    @classmethod
    def from_env(cls, **overrides: Any) -> UuleDefaults:
        """Create defaults from ``UULE_*`` environment variables.

        Explicit keyword arguments override environment values.

        Raises
        ------
        UuleConfigError
            If an environment variable is not an integer.
        """
        env = os.environ

        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is None or field_name in overrides:
                continue
            try:
                config_kwargs[field_name] = int(val.strip())
            except ValueError as exc:
                raise UuleConfigError(f"{env_key} must be an integer, got {val!r}") from exc

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
