# ! /usr/bin/env python
# -*- coding: utf-8 -*-
# ===================================================================
# transcript.py
#
# 18.10.2026
#
# @desc: Fiat-Shamir transcript. Prover and verifier absorb the same
#        labelled messages in the same order and derive the same
#        challenges from the hash of everything absorbed so far.
# ===================================================================
import hashlib


class Transcript:
    """SHA3-256 based Fiat-Shamir transcript.

    Attributes:
        curve (Curve): curve used to serialize points and scalars
    """

    def __init__(self, curve, label):
        """
        Args:
            curve (Curve): elliptic curve
            label (bytes): protocol label for domain separation
        """
        self.curve = curve
        self._hash = hashlib.sha3_256()
        self.append_message(b"DLCGT/transcript", label)
        self.append_message(b"curve", curve.name.encode())

    def append_message(self, label, message):
        """Absorb a length prefixed label and message

        Args:
            label (bytes): message label
            message (bytes): message
        """
        for part in (label, message):
            self._hash.update(len(part).to_bytes(4, "big"))
            self._hash.update(part)

    def append_point(self, label, point):
        self.append_message(label, self.curve.point_to_bytes(point))

    def append_points(self, label, points):
        self.append_message(label, len(points).to_bytes(4, "big"))
        for point in points:
            self.append_point(label, point)

    def append_scalar(self, label, k):
        self.append_message(label, self.curve.scalar_to_bytes(k))

    def append_scalars(self, label, scalars):
        self.append_message(label, len(scalars).to_bytes(4, "big"))
        for k in scalars:
            self.append_scalar(label, k)

    def append_ciphers(self, label, ciphers):
        """Absorb a list of ElGamal ciphers (c1, c2)"""
        self.append_message(label, len(ciphers).to_bytes(4, "big"))
        for c1, c2 in ciphers:
            self.append_point(label, c1)
            self.append_point(label, c2)

    def challenge_scalar(self, label):
        """Derive a challenge in range 1 to order-1 and absorb it

        Args:
            label (bytes): challenge label

        Returns:
            int: challenge
        """
        self.append_message(b"challenge", label)
        size = self.curve.scalar_size + 16
        digest = hashlib.shake_256(self._hash.copy().digest()).digest(size)
        challenge = 1 + int.from_bytes(digest, "big") % (self.curve.order - 1)
        self.append_scalar(label, challenge)
        return challenge

    def challenge_scalars(self, label, number):
        """Derive number challenges, see challenge_scalar"""
        return [self.challenge_scalar(label + b"/%d" % i)
                for i in range(number)]
