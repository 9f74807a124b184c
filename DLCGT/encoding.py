# ! /usr/bin/env python
# -*- coding: utf-8 -*-
# ===================================================================
# encoding.py
#
# 18.10.2026
#
# @desc: Cards forced to the curve. Card i is the point 2^i*G, an
#        unmasked point is mapped back to its card by table lookup.
# ===================================================================
from DLCGT.elements import Card
from DLCGT.errors import DecodingError, MalformedInputError


class CardEncoding:
    """Bijection between card indices 0,...,N-1 and curve points

    Attributes:
        cards (Tuple[Card]): card points, cards[i] encodes card i
    """

    def __init__(self, curve, N):
        """
        Args:
            curve (Curve): elliptic curve
            N (int): number of cards
        """
        cards = []
        point = curve.generator
        for _ in range(N):
            cards.append(Card(point))
            point = curve.addition(point, point)
        self.cards = tuple(cards)
        self._index = {card.point: i for i, card in enumerate(self.cards)}

    def __len__(self):
        return len(self.cards)

    def encode(self, index):
        """Get the card point for a card index

        Args:
            index (int): card index in range 0,...,N-1

        Returns:
            Card: card forced to the curve
        """
        if not isinstance(index, int) or not 0 <= index < len(self.cards):
            raise MalformedInputError("card index %r out of range 0..%d"
                                      % (index, len(self.cards) - 1))
        return self.cards[index]

    def decode(self, card):
        """Get index of card in the table

        Args:
            card (Card): unmasked card

        Returns:
            int: card index

        Raises:
            DecodingError: point is not a card
        """
        try:
            return self._index[card.point]
        except KeyError:
            raise DecodingError("unmasked point is not a card of this "
                                "deck") from None

    def __contains__(self, card):
        return card.point in self._index
