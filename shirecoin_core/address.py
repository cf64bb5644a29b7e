"""
Base58Check address decoding.

This is the authoritative "is this a spendable address" check that runs
after :func:`shirecoin_core.address_validator.validate_check` has accepted
a candidate string.  Only legacy pay-to-pubkey-hash and pay-to-script-hash
addresses are recognised.
"""

from __future__ import annotations

import hashlib
import logging
from dataclasses import dataclass
from typing import NamedTuple, Optional

logger = logging.getLogger(__name__)

B58_ALPHABET = "123456789ABCDEFGHJKLMNPQRSTUVWXYZabcdefghijkmnopqrstuvwxyz"
_B58_LOOKUP = {c: i for i, c in enumerate(B58_ALPHABET)}

# version byte + 20-byte hash
_PAYLOAD_SIZE = 21


class AddressError(ValueError):
    """Raised for strings that are not valid Base58Check."""


@dataclass(frozen=True)
class AddressParams:
    """Version bytes of the network's address types."""
    pubkey_prefix: int = 63
    script_prefix: int = 5


class Destination(NamedTuple):
    kind: str        # "pubkeyhash" or "scripthash"
    hash: bytes


def sha256d(data: bytes) -> bytes:
    """Double SHA-256."""
    return hashlib.sha256(hashlib.sha256(data).digest()).digest()


def b58encode(data: bytes) -> str:
    n = int.from_bytes(data, "big")
    out = ""
    while n > 0:
        n, r = divmod(n, 58)
        out = B58_ALPHABET[r] + out
    pad = len(data) - len(data.lstrip(b"\x00"))
    return "1" * pad + out


def b58encode_check(payload: bytes) -> str:
    return b58encode(payload + sha256d(payload)[:4])


def b58decode(s: str) -> bytes:
    n = 0
    for c in s:
        try:
            n = n * 58 + _B58_LOOKUP[c]
        except KeyError:
            raise AddressError(f"bad character {c!r} in base58 string") from None
    body = n.to_bytes((n.bit_length() + 7) // 8, "big") if n else b""
    pad = len(s) - len(s.lstrip("1"))
    return b"\x00" * pad + body


def b58decode_check(s: str) -> bytes:
    """Decode and verify the trailing 4-byte checksum; returns the payload."""
    data = b58decode(s)
    if len(data) < 4:
        raise AddressError("base58 string too short")
    payload, checksum = data[:-4], data[-4:]
    if sha256d(payload)[:4] != checksum:
        raise AddressError("invalid base58 checksum")
    return payload


def decode_destination(
    address: str, params: AddressParams = AddressParams(),
) -> Optional[Destination]:
    """Return the decoded destination, or None if *address* is not valid."""
    try:
        payload = b58decode_check(address)
    except AddressError as exc:
        logger.debug("Address %r rejected: %s", address, exc)
        return None
    if len(payload) != _PAYLOAD_SIZE:
        return None
    version, h = payload[0], payload[1:]
    if version == params.pubkey_prefix:
        return Destination("pubkeyhash", h)
    if version == params.script_prefix:
        return Destination("scripthash", h)
    return None


def is_valid_address(
    address: str, params: AddressParams = AddressParams(),
) -> bool:
    return decode_destination(address, params) is not None


def encode_destination(
    dest: Destination, params: AddressParams = AddressParams(),
) -> str:
    if len(dest.hash) != _PAYLOAD_SIZE - 1:
        raise AddressError("destination hash must be 20 bytes")
    if dest.kind == "pubkeyhash":
        version = params.pubkey_prefix
    elif dest.kind == "scripthash":
        version = params.script_prefix
    else:
        raise AddressError(f"unknown destination kind {dest.kind!r}")
    return b58encode_check(bytes([version]) + dest.hash)
