# ! /usr/bin/env python
# -*- coding: utf-8 -*-
# ===================================================================
# parameters.py
#
# 18.10.2026
#
# @desc: Public parameters of a game: the curve, the deck size and the
#        commitment key of the shuffle argument.
# ===================================================================
from DLCGT.eccwrapper import DEFAULT_CURVE, Fastecdsa
from DLCGT.errors import ConfigurationError

# largest deck accepted, also for parameters read from the wire
MAX_CARDS = 1 << 12


class Parameters:
    """Game parameters, fixed for the lifetime of a game.

    The deck of N = m*n cards is arranged as a m x n matrix in the
    shuffle argument. The n+1 commitment generators are hashed to the
    curve, so no player knows a discrete logarithm between them.

    Attributes:
        curve (Curve): elliptic curve
        m (int): rows for shuffle proof
        n (int): columns for shuffle proof
        N (int): number of cards
        commitment_generators (Tuple[ShortPoint]): g_1,...,g_n,h
    """

    def __init__(self, curve, m, n):
        """
        Args:
            curve (Curve): elliptic curve
            m (int): rows for shuffle proof, at least 2
            n (int): columns for shuffle proof, at least 2, m*n must not
                exceed MAX_CARDS
        """
        for name, value in (("m", m), ("n", n)):
            if not isinstance(value, int) or isinstance(value, bool):
                raise ConfigurationError("%s must be an integer" % name)
            if value < 2:
                raise ConfigurationError("%s must be at least 2, got %d"
                                         % (name, value))
        if m * n > MAX_CARDS:
            raise ConfigurationError("deck of %d x %d cards exceeds %d"
                                     % (m, n, MAX_CARDS))
        self.curve = curve
        self.m = m
        self.n = n
        self.N = m * n
        self.commitment_generators = tuple(
            curve.hash_to_point(b"commitment-key/%d" % i)
            for i in range(n + 1))

    @classmethod
    def setup(cls, m, n, curve_name=DEFAULT_CURVE):
        """Create parameters for a deck of m*n cards

        Args:
            m (int): rows for shuffle proof
            n (int): columns for shuffle proof
            curve_name (str): curve from the registry

        Returns:
            Parameters: new parameters
        """
        return cls(Fastecdsa.from_name(curve_name), m, n)

    @property
    def generator(self):
        return self.curve.generator

    def num_cards(self):
        return self.N

    def __eq__(self, other):
        if not isinstance(other, Parameters):
            return NotImplemented
        return (self.curve.name, self.m, self.n) == \
            (other.curve.name, other.m, other.n)

    def __hash__(self):
        return hash((self.curve.name, self.m, self.n))

    def __repr__(self):
        return "Parameters(curve=%s, m=%d, n=%d)" % (self.curve.name, self.m,
                                                     self.n)
