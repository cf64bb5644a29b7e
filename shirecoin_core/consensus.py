"""
Script verification contract of the native consensus library.

Only the stable interface is described here: the API version, the error
codes and the verification flag bits, plus the argument checks the
library performs before it touches the transaction.  The verification
itself lives in the native library and is reached through an object
implementing :class:`ScriptVerifier`.

Error codes are part of the ABI and must never be renumbered.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, IntFlag
from typing import Optional, Protocol

API_VERSION = 1


class ConsensusError(IntEnum):
    OK = 0
    TX_INDEX = 1
    TX_SIZE_MISMATCH = 2
    TX_DESERIALIZE = 3
    AMOUNT_REQUIRED = 4
    INVALID_FLAGS = 5


class ScriptFlags(IntFlag):
    NONE = 0
    P2SH = 1 << 0                   # evaluate P2SH (BIP16) subscripts
    DERSIG = 1 << 2                 # enforce strict DER (BIP66) compliance
    NULLDUMMY = 1 << 4              # enforce NULLDUMMY (BIP147)
    CHECKLOCKTIMEVERIFY = 1 << 9    # enable CHECKLOCKTIMEVERIFY (BIP65)
    CHECKSEQUENCEVERIFY = 1 << 10   # enable CHECKSEQUENCEVERIFY (BIP112)
    WITNESS = 1 << 11               # enable WITNESS (BIP141)
    ALL = (
        P2SH | DERSIG | NULLDUMMY
        | CHECKLOCKTIMEVERIFY | CHECKSEQUENCEVERIFY | WITNESS
    )


@dataclass(frozen=True)
class VerifyResult:
    ok: bool
    error: ConsensusError = ConsensusError.OK


class ScriptVerifier(Protocol):
    def verify_script(
        self,
        script_pubkey: bytes,
        tx_to: bytes,
        n_in: int,
        flags: int,
        amount: Optional[int] = None,
    ) -> VerifyResult:
        """Return whether input *n_in* of *tx_to* spends *script_pubkey*."""
        ...


def version() -> int:
    return API_VERSION


def check_request(
    flags: int,
    amount: Optional[int] = None,
    n_in: int = 0,
    input_count: Optional[int] = None,
) -> ConsensusError:
    """
    Argument checks that precede verification.

    *input_count* is the number of inputs of the deserialized transaction,
    when the caller knows it.
    """
    if flags & ~int(ScriptFlags.ALL):
        return ConsensusError.INVALID_FLAGS
    if flags & ScriptFlags.WITNESS and amount is None:
        return ConsensusError.AMOUNT_REQUIRED
    if input_count is not None and not 0 <= n_in < input_count:
        return ConsensusError.TX_INDEX
    return ConsensusError.OK


def verify(
    verifier: ScriptVerifier,
    script_pubkey: bytes,
    tx_to: bytes,
    n_in: int,
    flags: int,
    amount: Optional[int] = None,
) -> VerifyResult:
    """Run :func:`check_request` and hand the call on to *verifier*."""
    err = check_request(flags, amount, n_in)
    if err is not ConsensusError.OK:
        return VerifyResult(False, err)
    return verifier.verify_script(script_pubkey, tx_to, n_in, flags, amount)
