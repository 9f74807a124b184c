# ! /usr/bin/env python
# -*- coding: utf-8 -*-
# ===================================================================
# reveal.py
#
# 18.10.2026
#
# @desc: Reveal of a single masked card. Reveal tokens are collected and
#        verified one by one until they cover the joint key.
# ===================================================================
import logging
from enum import Enum, auto

from DLCGT.errors import (DecodingError, MalformedInputError,
                          VerificationError)

logger = logging.getLogger(__name__)


class RevealState(Enum):
    """Reveal states of a masked card"""
    DEALT = auto()      # no token received
    REVEALING = auto()  # some tokens received
    REVEALED = auto()   # card unmasked
    ABORTED = auto()    # invalid token or unmasked point is not a card


class CardReveal:
    """Collect reveal tokens for one masked card.

    DEALT -> REVEALING -> REVEALED or ABORTED. An invalid token or a
    failed decoding aborts the reveal, a missing token keeps it in
    REVEALING.

    Attributes:
        state (RevealState): current state
        card (Card): unmasked card once REVEALED
    """

    def __init__(self, toolbox, masked_card, joint_key,
                 require_unanimous=True):
        """
        Args:
            toolbox (Toolbox): toolbox of the game
            masked_card (MaskedCard): card to reveal
            joint_key (PublicKey): aggregate public key of all players
            require_unanimous (bool): tokens of all players are required
        """
        self.toolbox = toolbox
        self.masked_card = masked_card
        self.joint_key = joint_key
        self.require_unanimous = require_unanimous
        self.state = RevealState.DEALT
        self.card = None
        self._tokens = []

    @property
    def finished(self):
        return self.state in (RevealState.REVEALED, RevealState.ABORTED)

    def is_complete(self):
        """Tokens cover the joint key"""
        curve = self.toolbox.curve
        return curve.sum(pk.point for _, _, pk in self._tokens) \
            == self.joint_key.point

    def add_token(self, token, proof, pk):
        """Verify and store a reveal token, unmask the card as soon as the
        tokens cover the joint key

        Args:
            token (RevealToken): reveal token
            proof (RevealProof): proof for the token
            pk (PublicKey): public key of the player who sent the token

        Returns:
            RevealState: state after adding the token

        Raises:
            VerificationError: token is invalid, the reveal is aborted
        """
        if self.finished:
            raise MalformedInputError("reveal is already %s"
                                      % self.state.name.lower())
        if any(pk.point == other.point for _, _, other in self._tokens):
            raise MalformedInputError("duplicate reveal token")

        if not self.toolbox.verify_reveal_token(pk, self.masked_card, token,
                                                proof):
            self.state = RevealState.ABORTED
            logger.warning(f"reveal token {len(self._tokens)} rejected, "
                           f"reveal aborted")
            raise VerificationError("reveal token is invalid",
                                    index=len(self._tokens), public_key=pk)

        self._tokens.append((token, proof, pk))
        self.state = RevealState.REVEALING
        if self.is_complete():
            self.reveal()
        return self.state

    def reveal(self):
        """Unmask the card with the tokens received so far

        Returns:
            Card: unmasked card

        Raises:
            IncompleteRevealError: unanimous reveal and tokens missing
            DecodingError: unmasked point is not a card, the reveal is
                aborted
        """
        if self.state is RevealState.REVEALED:
            return self.card
        if self.state is not RevealState.REVEALING:
            raise MalformedInputError("cannot reveal in state %s"
                                      % self.state.name)
        try:
            self.card = self.toolbox.unmask(
                self._tokens, self.masked_card, self.joint_key,
                self.require_unanimous)
        except DecodingError:
            self.state = RevealState.ABORTED
            raise
        self.state = RevealState.REVEALED
        return self.card
