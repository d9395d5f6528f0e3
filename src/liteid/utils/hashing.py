"""Digest and entropy primitives used to build identifiers."""

from __future__ import annotations

import hashlib
import uuid

# Hex digest width of SHA-256; encrypted identifiers never exceed it.
SHA256_HEX_LENGTH = 64


def sha256_hex(content: str) -> str:
    """Return the lowercase hexadecimal SHA-256 digest of ``content``."""
    return hashlib.sha256(content.encode("utf-8")).hexdigest()


def random_token() -> str:
    """Return 128 bits of OS-sourced randomness as 32 hex characters."""
    return uuid.uuid4().hex
