# ! /usr/bin/env python
# -*- coding: utf-8 -*-
# ===================================================================
# random_generator.py
#
# 18.10.2026
#
# @desc: Random numbers and permutations used for elliptic curve
#        cryptography and zero-knowledge proofs. All randomness is
#        expanded from a caller supplied seed of at least 32 bytes.
# ===================================================================
import hashlib
import secrets

from DLCGT.errors import InvalidSeedError

# extra bits drawn before reducing, keeps the modulo bias negligible
_SECURITY_MARGIN = 128


class Seed:
    """Caller supplied entropy, at least MIN_LENGTH bytes.

    A seed must never be used for two prove/mask/shuffle calls, reuse
    leaks secrets through linear relations between the transcripts.
    """
    MIN_LENGTH = 32

    __slots__ = ("_data",)

    def __init__(self, data):
        """
        Args:
            data (bytes): entropy, at least 32 bytes

        Raises:
            InvalidSeedError: data is not bytes or too short
        """
        if not isinstance(data, (bytes, bytearray, memoryview)):
            raise InvalidSeedError("seed must be bytes, got %s"
                                   % type(data).__name__)
        data = bytes(data)
        if len(data) < self.MIN_LENGTH:
            raise InvalidSeedError(
                "seed must be at least %d bytes, got %d" % (self.MIN_LENGTH,
                                                            len(data)))
        self._data = data

    @classmethod
    def generate(cls, size=MIN_LENGTH):
        """Fresh seed from the operating system CSPRNG

        Args:
            size (int): number of bytes

        Returns:
            Seed: new seed
        """
        return cls(secrets.token_bytes(size))

    def __bytes__(self):
        return self._data

    def __len__(self):
        return len(self._data)

    def __eq__(self, other):
        if not isinstance(other, Seed):
            return NotImplemented
        return secrets.compare_digest(self._data, other._data)

    def __hash__(self):
        return hash(self._data)

    def __repr__(self):
        return "Seed(<%d bytes>)" % len(self._data)


class RandomGenerator:
    """Deterministic random stream expanded from a seed with SHA3-256 in
    counter mode.

    Attributes:
        order (int): order of the elliptic curve subgroup
    """

    def __init__(self, order, seed, label=b""):
        """
        Args:
            order (int): order of the elliptic curve subgroup
            seed (Seed): entropy for this stream
            label (bytes): operation the stream is drawn for, streams
                with different labels are independent
        """
        if not isinstance(seed, Seed):
            seed = Seed(seed)
        self.order = order
        self._key = hashlib.sha3_256(
            b"DLCGT/rng" + len(label).to_bytes(4, "big") + label +
            bytes(seed)).digest()
        self._counter = 0
        self._buffer = b""

    def _next_bytes(self, size):
        while len(self._buffer) < size:
            block = hashlib.sha3_256(
                self._key + self._counter.to_bytes(8, "big")).digest()
            self._counter += 1
            self._buffer += block
        out, self._buffer = self._buffer[:size], self._buffer[size:]
        return out

    def _below(self, bound):
        nbytes = (bound.bit_length() + _SECURITY_MARGIN + 7) // 8
        return int.from_bytes(self._next_bytes(nbytes), "big") % bound

    def get_random_value(self):
        """Get one random value in range 1 to order- 1

        Returns:
            int: random value in range 1 to order - 1
        """
        return 1 + self._below(self.order - 1)

    def get_random_value_range(self, x, y):
        """Get one random value in range x to y-1

        Args:
            x (int): lower bound
            y (int): upper bound

        Returns:
            int: value from [x,y)
        """
        return x + self._below(y - x)

    def get_random_array(self, size):
        """Get a list with size random values between 1 and order-1

        Args:
            size (int): number of random values

        Returns:
            List[int]: list with random value
        """
        return [self.get_random_value() for _ in range(size)]

    def get_random_permutation(self, size, array=None):
        """Permute an array randomly with fisher-yates algorithm,
        if no array is given as argument, array = [0,1,...,size-1]

        Args:
            size (int): number of elements
            array (List): array to be permuted

        Returns:
            List: permuted array
        """
        if array is None:
            array = list(range(0, size))
        else:
            array = list(array)

        for i in range(size-1):
            j = self.get_random_value_range(i, size)
            array[i], array[j] = array[j], array[i]

        return array
