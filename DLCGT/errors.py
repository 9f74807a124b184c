# ! /usr/bin/env python
# -*- coding: utf-8 -*-
# ===================================================================
# errors.py
#
# 18.10.2026
#
# @desc: Exceptions raised by the toolbox. Malformed input is rejected
#        before any cryptographic work, failed proofs and failed
#        decodings are reported with their own types.
# ===================================================================


class ToolboxError(Exception):
    """Base class for all toolbox errors"""


class MalformedInputError(ToolboxError, ValueError):
    """Input is structurally invalid (length, range, type)"""


class InvalidSeedError(MalformedInputError):
    """Seed is shorter than the required minimum length"""


class DeserializationError(MalformedInputError):
    """Byte encoding does not describe a valid value"""


class DeckSizeError(MalformedInputError):
    """Number of cards does not match the parameters"""


class ConfigurationError(ToolboxError, ValueError):
    """Unsupported curve or shuffle matrix shape"""


class VerificationError(ToolboxError):
    """A zero-knowledge proof was rejected.

    Attributes:
        index (int): position of the failing entry, if any
        public_key (PublicKey): key of the player who sent the entry, if
            known
    """

    def __init__(self, message, index=None, public_key=None):
        super().__init__(message)
        self.index = index
        self.public_key = public_key


class IncompleteRevealError(ToolboxError):
    """Reveal tokens do not cover every contributor of the joint key"""


class DecodingError(ToolboxError):
    """Unmasked group element is not part of the card encoding table"""
