# ! /usr/bin/env python
# -*- coding: utf-8 -*-
# ===================================================================
# __init__.py
#
# 18.10.2026
#
# @desc: Toolbox for mental card games over discrete logarithm groups.
# ===================================================================
from DLCGT.elements import (Card, KeyOwnershipProof, KeyPair, MaskedCard,
                            MaskingOutput, MaskingProof, PlayerSecretKey,
                            PublicKey, RemaskingOutput, RemaskingProof,
                            RevealProof, RevealToken, RevealTokenWithProof,
                            ShuffleOutput, ShuffleProof)
from DLCGT.errors import (ConfigurationError, DecodingError, DeckSizeError,
                          DeserializationError, IncompleteRevealError,
                          InvalidSeedError, MalformedInputError,
                          ToolboxError, VerificationError)
from DLCGT.parameters import Parameters
from DLCGT.random_generator import Seed
from DLCGT.reveal import CardReveal, RevealState
from DLCGT.toolbox import Toolbox
from DLCGT.wire import WireCodec

__version__ = "0.2.0"
