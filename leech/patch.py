"""Creation and validation of patch documents.

A patch is a JSON object holding a format ``version``, the identifier of
the last known block (``lastknown``), a creation ``timestamp`` and a list
of ``blocks``.
"""

from __future__ import annotations

import math
import time
from typing import Any, Optional, Union

from .logger import Severity, log
from .parse import parse
from .values import JsonError, JsonType, member

PATCH_VERSION = 1
"""Highest patch format version this package understands and produces."""


class PatchError(JsonError):
    """Raised when a patch is malformed or unsupported."""


def create_patch(lastknown: str, timestamp: Optional[float] = None) -> dict:
    """Return a new, empty patch based on block ``lastknown``.

    The timestamp defaults to the current time in whole seconds.
    """
    if timestamp is None:
        timestamp = int(time.time())
    return {
        "version": float(PATCH_VERSION),
        "lastknown": lastknown,
        "timestamp": float(timestamp),
        "blocks": [],
    }


def patch_version(patch: dict) -> int:
    """Return the format version of a patch as a non-negative integer."""
    try:
        value = member(patch, "version", JsonType.NUMBER)
    except JsonError as exc:
        raise PatchError(str(exc)) from exc
    if not math.isfinite(value) or value < 0 or value != int(value):
        raise PatchError(f"Patch version {value!r} is not a valid size")
    return int(value)


def parse_patch(raw: Union[str, bytes, bytearray]) -> dict:
    """Parse a patch and check that its version is supported."""
    try:
        patch = parse(raw)
    except JsonError as exc:
        raise PatchError(str(exc)) from exc
    version = patch_version(patch)
    if version > PATCH_VERSION:
        raise PatchError(f"Unsupported patch version {version}")
    log(Severity.DEBUG, f"Patch version number is {version}")
    return patch


def append_block(patch: dict, block: Any) -> None:
    """Append a block to the patch's list of blocks."""
    try:
        blocks = member(patch, "blocks", JsonType.ARRAY)
    except JsonError as exc:
        raise PatchError(str(exc)) from exc
    blocks.append(block)