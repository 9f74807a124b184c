# ! /usr/bin/env python
# -*- coding: utf-8 -*-
# ===================================================================
# wire.py
#
# 18.10.2026
#
# @desc: Canonical binary encoding of all values exchanged between
#        players. Points are SEC1 uncompressed (the point at infinity is
#        all zero bytes), scalars are fixed width big endian, records are
#        fixed layout concatenations.
# ===================================================================
from DLCGT.eccwrapper import Fastecdsa
from DLCGT.elements import (Card, KeyOwnershipProof, KeyPair, MaskedCard,
                            MaskingOutput, MaskingProof, PlayerSecretKey,
                            PublicKey, RemaskingOutput, RemaskingProof,
                            RevealProof, RevealToken, RevealTokenWithProof,
                            ShuffleOutput, ShuffleProof)
from DLCGT.errors import (ConfigurationError, DeserializationError,
                          MalformedInputError)
from DLCGT.parameters import Parameters


class _Reader:
    """Consume a byte string front to back"""

    def __init__(self, curve, data):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise DeserializationError("expected bytes, got %s"
                                       % type(data).__name__)
        self.curve = curve
        self.data = bytes(data)
        self.pos = 0

    def take(self, size):
        if self.pos + size > len(self.data):
            raise DeserializationError("unexpected end of data")
        out = self.data[self.pos:self.pos + size]
        self.pos += size
        return out

    def uint(self, size):
        return int.from_bytes(self.take(size), "big")

    def point(self):
        return self.curve.bytes_to_point(self.take(self.curve.point_size))

    def points(self, number):
        return tuple(self.point() for _ in range(number))

    def scalar(self):
        return self.curve.bytes_to_scalar(self.take(self.curve.scalar_size))

    def scalars(self, number):
        return tuple(self.scalar() for _ in range(number))

    def finish(self, value):
        if self.pos != len(self.data):
            raise DeserializationError("%d trailing bytes"
                                       % (len(self.data) - self.pos))
        return value


class WireCodec:
    """Encoder and decoder for one game

    Attributes:
        params (Parameters): game parameters, fix curve and proof sizes
    """

    KINDS = ("parameters", "public_key", "secret_key", "card", "masked_card",
             "reveal_token", "key_ownership_proof", "masking_proof",
             "remasking_proof", "reveal_proof", "shuffle_proof", "key_pair",
             "masking_output", "remasking_output", "shuffle_output",
             "reveal_token_with_proof")

    def __init__(self, params):
        self.params = params
        self.curve = params.curve

    # encode ------------------------------------------------------------------
    def _point(self, P):
        return self.curve.point_to_bytes(P)

    def _scalar(self, k):
        if not isinstance(k, int) or not 0 <= k < self.curve.order:
            raise MalformedInputError("scalar out of range")
        return self.curve.scalar_to_bytes(k)

    def serialize(self, value):
        """Encode any value of elements.py or Parameters

        Args:
            value: value to encode

        Returns:
            bytes: canonical encoding

        Raises:
            MalformedInputError: value has an unknown type or a scalar out
                of range
        """
        if isinstance(value, Parameters):
            return self.encode_parameters(value)
        if isinstance(value, (PublicKey, Card, RevealToken)):
            return self._point(value.point)
        if isinstance(value, PlayerSecretKey):
            if value.scalar == 0:
                raise MalformedInputError("secret key must not be zero")
            return self._scalar(value.scalar)
        if isinstance(value, MaskedCard):
            return self._point(value.c1) + self._point(value.c2)
        if isinstance(value, (KeyOwnershipProof, MaskingProof,
                              RemaskingProof, RevealProof)):
            return self._scalar(value.challenge) + \
                self._scalar(value.response)
        if isinstance(value, ShuffleProof):
            return self._shuffle_proof(value)
        if isinstance(value, KeyPair):
            return self.serialize(value.public_key) + \
                self.serialize(value.secret_key)
        if isinstance(value, (MaskingOutput, RemaskingOutput)):
            return self.serialize(value.masked_card) + \
                self.serialize(value.proof)
        if isinstance(value, ShuffleOutput):
            data = len(value.shuffled_deck).to_bytes(4, "big")
            for card in value.shuffled_deck:
                data += self.serialize(card)
            return data + self.serialize(value.proof)
        if isinstance(value, RevealTokenWithProof):
            return self.serialize(value.token) + self.serialize(value.proof)
        raise MalformedInputError("cannot serialize %s"
                                  % type(value).__name__)

    @staticmethod
    def encode_parameters(params):
        """u8 name length, curve name, u32 m, u32 n"""
        name = params.curve.name.encode()
        return len(name).to_bytes(1, "big") + name + \
            params.m.to_bytes(4, "big") + params.n.to_bytes(4, "big")

    def _shuffle_proof(self, proof):
        data = b"".join(self._point(P) for P in proof.c_A + proof.c_B +
                        proof.c_G + (proof.c_B0,) + proof.c_beta)
        for c1, c2 in proof.E:
            data += self._point(c1) + self._point(c2)
        data += b"".join(self._point(P) for P in (
            proof.c_gamma, proof.c_delta, proof.c_Delta, proof.c_F_0,
            proof.c_H_m) + proof.c_P)
        scalars = proof.b + (proof.r_b, proof.beta_tilde,
                             proof.r_beta_tilde, proof.tau) + \
            proof.gamma_tilde + proof.alpha_tilde + \
            (proof.r_gamma_tilde, proof.r_alpha_tilde) + \
            proof.f + (proof.r_f,) + proof.h + (proof.r_h, proof.r_p)
        return data + b"".join(self._scalar(k) for k in scalars)

    # decode ------------------------------------------------------------------
    def deserialize(self, kind, data):
        """Decode data as value of the given kind, see KINDS

        Args:
            kind (str): value kind
            data (bytes): canonical encoding

        Returns:
            decoded value

        Raises:
            DeserializationError: data is not a canonical encoding
            MalformedInputError: kind is unknown
        """
        if kind not in self.KINDS:
            raise MalformedInputError("unknown kind %r" % kind)
        return getattr(self, "decode_" + kind)(data)

    @staticmethod
    def decode_parameters(data):
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise DeserializationError("expected bytes")
        data = bytes(data)
        if len(data) < 1:
            raise DeserializationError("unexpected end of data")
        size = data[0]
        if len(data) != 1 + size + 8:
            raise DeserializationError("parameters must be %d bytes, got %d"
                                       % (1 + size + 8, len(data)))
        try:
            name = data[1:1 + size].decode("ascii")
            m = int.from_bytes(data[1 + size:5 + size], "big")
            n = int.from_bytes(data[5 + size:], "big")
            return Parameters(Fastecdsa.from_name(name), m, n)
        except (UnicodeDecodeError, ConfigurationError) as e:
            raise DeserializationError("invalid parameters: %s" % e) from e

    def _reader(self, data):
        return _Reader(self.curve, data)

    def decode_public_key(self, data):
        r = self._reader(data)
        return r.finish(PublicKey(r.point()))

    def decode_card(self, data):
        r = self._reader(data)
        return r.finish(Card(r.point()))

    def decode_reveal_token(self, data):
        r = self._reader(data)
        return r.finish(RevealToken(r.point()))

    def decode_secret_key(self, data):
        r = self._reader(data)
        return r.finish(self._read_secret_key(r))

    def decode_masked_card(self, data):
        r = self._reader(data)
        return r.finish(MaskedCard(r.point(), r.point()))

    def decode_key_ownership_proof(self, data):
        r = self._reader(data)
        return r.finish(KeyOwnershipProof(r.scalar(), r.scalar()))

    def decode_masking_proof(self, data):
        r = self._reader(data)
        return r.finish(MaskingProof(r.scalar(), r.scalar()))

    def decode_remasking_proof(self, data):
        r = self._reader(data)
        return r.finish(RemaskingProof(r.scalar(), r.scalar()))

    def decode_reveal_proof(self, data):
        r = self._reader(data)
        return r.finish(RevealProof(r.scalar(), r.scalar()))

    def decode_shuffle_proof(self, data):
        r = self._reader(data)
        return r.finish(self._read_shuffle_proof(r))

    def decode_key_pair(self, data):
        r = self._reader(data)
        pk = PublicKey(r.point())
        return r.finish(KeyPair(pk, self._read_secret_key(r)))

    def decode_masking_output(self, data):
        r = self._reader(data)
        card = MaskedCard(r.point(), r.point())
        return r.finish(MaskingOutput(card,
                                      MaskingProof(r.scalar(), r.scalar())))

    def decode_remasking_output(self, data):
        r = self._reader(data)
        card = MaskedCard(r.point(), r.point())
        return r.finish(RemaskingOutput(
            card, RemaskingProof(r.scalar(), r.scalar())))

    def decode_shuffle_output(self, data):
        r = self._reader(data)
        number = r.uint(4)
        if number != self.params.N:
            raise DeserializationError("shuffle output has %d cards, "
                                       "expected %d" % (number,
                                                        self.params.N))
        deck = tuple(MaskedCard(r.point(), r.point()) for _ in range(number))
        return r.finish(ShuffleOutput(deck, self._read_shuffle_proof(r)))

    def decode_reveal_token_with_proof(self, data):
        r = self._reader(data)
        token = RevealToken(r.point())
        return r.finish(RevealTokenWithProof(
            token, RevealProof(r.scalar(), r.scalar())))

    @staticmethod
    def _read_secret_key(r):
        k = r.scalar()
        if k == 0:
            raise DeserializationError("secret key must not be zero")
        return PlayerSecretKey(k)

    def _read_shuffle_proof(self, r):
        m, n = self.params.m, self.params.n
        c_A = r.points(m)
        c_B = r.points(m)
        c_G = r.points(m - 1)
        c_B0 = r.point()
        c_beta = r.points(2 * m - 1)
        E = tuple((r.point(), r.point()) for _ in range(2 * m - 1))
        c_gamma, c_delta, c_Delta, c_F_0, c_H_m = r.points(5)
        c_P = r.points(2 * m)
        b = r.scalars(n)
        r_b, beta_tilde, r_beta_tilde, tau = r.scalars(4)
        gamma_tilde = r.scalars(n)
        alpha_tilde = r.scalars(n)
        r_gamma_tilde, r_alpha_tilde = r.scalars(2)
        f = r.scalars(n)
        r_f = r.scalar()
        h = r.scalars(n)
        r_h, r_p = r.scalars(2)
        return ShuffleProof(
            c_A=c_A, c_B=c_B, c_G=c_G, c_B0=c_B0, c_beta=c_beta, E=E,
            c_gamma=c_gamma, c_delta=c_delta, c_Delta=c_Delta, c_F_0=c_F_0,
            c_H_m=c_H_m, c_P=c_P, b=b, r_b=r_b, beta_tilde=beta_tilde,
            r_beta_tilde=r_beta_tilde, tau=tau, gamma_tilde=gamma_tilde,
            alpha_tilde=alpha_tilde, r_gamma_tilde=r_gamma_tilde,
            r_alpha_tilde=r_alpha_tilde, f=f, r_f=r_f, h=h, r_h=r_h,
            r_p=r_p)
