"""Intent prefixes that scope what a signature is for."""

from __future__ import annotations

from enum import IntEnum


class AppId(IntEnum):
    SUI = 0


class IntentVersion(IntEnum):
    V0 = 0


class IntentScope(IntEnum):
    TRANSACTION_DATA = 0
    TRANSACTION_EFFECTS = 1
    CHECKPOINT_SUMMARY = 2
    PERSONAL_MESSAGE = 3


def intent_with_scope(scope: IntentScope) -> list[int]:
    """Return the intent triple ``[scope, version, app]`` for ``scope``."""
    return [int(scope), int(IntentVersion.V0), int(AppId.SUI)]