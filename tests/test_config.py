from __future__ import annotations

import pytest

from uulekit.config import UuleDefaults
from uulekit.exceptions import UuleConfigError

_ENV_KEYS = (
    "UULE_V1_ROLE",
    "UULE_V1_PRODUCER",
    "UULE_V2_ROLE",
    "UULE_V2_PRODUCER",
    "UULE_V2_PROVENANCE",
    "UULE_V2_RADIUS",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in _ENV_KEYS:
        monkeypatch.delenv(key, raising=False)


def test_defaults_match_observed_values() -> None:
    defaults = UuleDefaults.from_env()
    assert defaults == UuleDefaults(
        v1_role=2,
        v1_producer=32,
        v2_role=1,
        v2_producer=12,
        v2_provenance=0,
        v2_radius=-1,
    )


def test_from_env_reads_integers(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UULE_V2_PROVENANCE", " 6 ")
    monkeypatch.setenv("UULE_V2_RADIUS", "6200")
    defaults = UuleDefaults.from_env()
    assert defaults.v2_provenance == 6
    assert defaults.v2_radius == 6200


def test_overrides_take_precedence(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UULE_V1_ROLE", "not-a-number")
    defaults = UuleDefaults.from_env(v1_role=4)
    assert defaults.v1_role == 4


def test_from_env_rejects_non_integer(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("UULE_V1_PRODUCER", "thirty-two")
    with pytest.raises(UuleConfigError, match="UULE_V1_PRODUCER"):
        UuleDefaults.from_env()
