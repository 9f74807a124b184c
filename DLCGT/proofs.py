# ! /usr/bin/env python
# -*- coding: utf-8 -*-
# ===================================================================
# proofs.py
#
# 18.10.2026
#
# @desc: Non-interactive sigma protocols. Proof of knowledge of a
#        discrete logarithm (Schnorr) and proof of equality of two
#        discrete logarithms (Chaum-Pedersen), made non-interactive
#        with the Fiat-Shamir transform.
# ===================================================================
from DLCGT.transcript import Transcript


class PokProver:
    """Prover for knowledge of x with A = x*G

    Attributes:
        curve (Curve): elliptic curve
        G (ShortPoint): base
        A (ShortPoint): x*G
        x (int): discrete logarithm of A
        context (bytes): data bound into the challenge, e.g. a player id
    """
    def __init__(self, curve, G, A, x, context=b""):
        self.curve = curve
        self.G = G
        self.A = A
        self.x = x
        self.context = context

    def pok_nizk(self, rand_gen):
        """Create the proof

        Args:
            rand_gen (RandomGenerator): randomness for the commitment

        Returns:
            [int, int]: challenge c and response s = k + c*x
        """
        k = rand_gen.get_random_value()
        T = self.curve.multiplication(k, self.G)
        c = _pok_challenge(self.curve, self.G, self.A, T, self.context)
        s = (k + c * self.x) % self.curve.order
        return c, s


class PokVerifier:
    """Verifier for knowledge of x with A = x*G"""
    def __init__(self, curve, G, A, context=b""):
        self.curve = curve
        self.G = G
        self.A = A
        self.context = context

    def pok_nizk(self, c, s):
        """Verify the proof, T = s*G - c*A must hash to c

        Args:
            c (int): challenge
            s (int): response

        Returns:
            bool: True if verification successful, False else
        """
        if not (0 < c < self.curve.order and 0 <= s < self.curve.order):
            return False
        T = self.curve.subtraction(self.curve.multiplication(s, self.G),
                                   self.curve.multiplication(c, self.A))
        return c == _pok_challenge(self.curve, self.G, self.A, T,
                                   self.context)


class PeqProver:
    """Prover for equality of discrete logarithms
    DLEQ(G1, A1, G2, A2): A1 = x*G1 and A2 = x*G2

    Attributes:
        curve (Curve): elliptic curve
        G1, A1, G2, A2 (ShortPoint): statement
        x (int): common discrete logarithm
        label (bytes): relation label, separates masking, remasking and
            reveal proofs
    """
    def __init__(self, curve, G1, A1, G2, A2, x, label=b"dleq"):
        self.curve = curve
        self.G1 = G1
        self.A1 = A1
        self.G2 = G2
        self.A2 = A2
        self.x = x
        self.label = label

    def peq_nizk(self, rand_gen):
        """Create the proof

        Args:
            rand_gen (RandomGenerator): randomness for the commitment

        Returns:
            [int, int]: challenge c and response s = k + c*x
        """
        k = rand_gen.get_random_value()
        T1 = self.curve.multiplication(k, self.G1)
        T2 = self.curve.multiplication(k, self.G2)
        c = _peq_challenge(self.curve, self.label, self.G1, self.A1,
                           self.G2, self.A2, T1, T2)
        s = (k + c * self.x) % self.curve.order
        return c, s


class PeqVerifier:
    """Verifier for equality of discrete logarithms"""
    def __init__(self, curve, G1, A1, G2, A2, label=b"dleq"):
        self.curve = curve
        self.G1 = G1
        self.A1 = A1
        self.G2 = G2
        self.A2 = A2
        self.label = label

    def peq_nizk(self, c, s):
        """Verify the proof, T1 = s*G1 - c*A1 and T2 = s*G2 - c*A2 must
        hash to c

        Args:
            c (int): challenge
            s (int): response

        Returns:
            bool: True if verification successful, False else
        """
        if not (0 < c < self.curve.order and 0 <= s < self.curve.order):
            return False
        curve = self.curve
        T1 = curve.subtraction(curve.multiplication(s, self.G1),
                               curve.multiplication(c, self.A1))
        T2 = curve.subtraction(curve.multiplication(s, self.G2),
                               curve.multiplication(c, self.A2))
        return c == _peq_challenge(curve, self.label, self.G1, self.A1,
                                   self.G2, self.A2, T1, T2)


def _pok_challenge(curve, G, A, T, context):
    transcript = Transcript(curve, b"pok")
    transcript.append_point(b"G", G)
    transcript.append_point(b"A", A)
    transcript.append_message(b"context", context)
    transcript.append_point(b"T", T)
    return transcript.challenge_scalar(b"c")


def _peq_challenge(curve, label, G1, A1, G2, A2, T1, T2):
    transcript = Transcript(curve, label)
    for name, point in ((b"G1", G1), (b"A1", A1), (b"G2", G2), (b"A2", A2),
                        (b"T1", T1), (b"T2", T2)):
        transcript.append_point(name, point)
    return transcript.challenge_scalar(b"c")
