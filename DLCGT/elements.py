# ! /usr/bin/env python
# -*- coding: utf-8 -*-
# ===================================================================
# elements.py
#
# 18.10.2026
#
# @desc: Immutable values exchanged between players: keys, cards,
#        masked cards, reveal tokens, proofs and the records returned
#        by the toolbox.
# ===================================================================
from dataclasses import dataclass, field
from typing import Tuple

from DLCGT.eccwrapper import ShortPoint


@dataclass(frozen=True)
class PublicKey:
    """Public key of one player, or the sum of several (joint key)"""
    point: ShortPoint


@dataclass(frozen=True)
class PlayerSecretKey:
    """Secret key of one player, never leaves the player"""
    scalar: int = field(repr=False)


@dataclass(frozen=True)
class Card:
    """Card forced to the curve, see encoding.CardEncoding"""
    point: ShortPoint


@dataclass(frozen=True)
class MaskedCard:
    """ElGamal cipher of a card: (c1, c2) = (r*G, card + r*pk)"""
    c1: ShortPoint
    c2: ShortPoint

    def as_cipher(self):
        return self.c1, self.c2


@dataclass(frozen=True)
class RevealToken:
    """Decryption share sk*c1 of one player for one masked card"""
    point: ShortPoint


@dataclass(frozen=True)
class SigmaProof:
    """Non-interactive sigma protocol transcript (challenge, response)"""
    challenge: int
    response: int


@dataclass(frozen=True)
class KeyOwnershipProof(SigmaProof):
    """Knowledge of sk with pk = sk*G, bound to a player id"""


@dataclass(frozen=True)
class MaskingProof(SigmaProof):
    """log_G(c1) = log_pk(c2 - card)"""


@dataclass(frozen=True)
class RemaskingProof(SigmaProof):
    """log_G(c1' - c1) = log_pk(c2' - c2)"""


@dataclass(frozen=True)
class RevealProof(SigmaProof):
    """log_G(pk) = log_c1(token)"""


@dataclass(frozen=True)
class ShuffleProof:
    """Bayer-Groth shuffle argument, see bayergroth.py for the meaning
    of the fields. Commitments the verifier can compute itself are not
    part of the proof.
    """
    # shuffle
    c_A: Tuple[ShortPoint, ...]
    c_B: Tuple[ShortPoint, ...]
    # hadamard, multi-exponent and single value product commitments
    c_G: Tuple[ShortPoint, ...]
    c_B0: ShortPoint
    c_beta: Tuple[ShortPoint, ...]
    E: Tuple[Tuple[ShortPoint, ShortPoint], ...]
    c_gamma: ShortPoint
    c_delta: ShortPoint
    c_Delta: ShortPoint
    # zero argument commitments
    c_F_0: ShortPoint
    c_H_m: ShortPoint
    c_P: Tuple[ShortPoint, ...]
    # multi-exponent answers
    b: Tuple[int, ...]
    r_b: int
    beta_tilde: int
    r_beta_tilde: int
    tau: int
    # single value product answers
    gamma_tilde: Tuple[int, ...]
    alpha_tilde: Tuple[int, ...]
    r_gamma_tilde: int
    r_alpha_tilde: int
    # zero argument answers
    f: Tuple[int, ...]
    r_f: int
    h: Tuple[int, ...]
    r_h: int
    r_p: int


@dataclass(frozen=True)
class KeyPair:
    public_key: PublicKey
    secret_key: PlayerSecretKey


@dataclass(frozen=True)
class MaskingOutput:
    masked_card: MaskedCard
    proof: MaskingProof


@dataclass(frozen=True)
class RemaskingOutput:
    masked_card: MaskedCard
    proof: RemaskingProof


@dataclass(frozen=True)
class ShuffleOutput:
    shuffled_deck: Tuple[MaskedCard, ...]
    proof: ShuffleProof


@dataclass(frozen=True)
class RevealTokenWithProof:
    token: RevealToken
    proof: RevealProof
