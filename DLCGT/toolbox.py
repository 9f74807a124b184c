# ! /usr/bin/env python
# -*- coding: utf-8 -*-
# ===================================================================
# toolbox.py
#
# 18.10.2026
#
# @desc: Toolbox for mental card games using the elliptic curve encryption
#        scheme. Functions for key generation and key ownership proofs,
#        masking, re-masking, verifiable shuffling and unmasking cards with
#        reveal tokens are implemented. Every function is a pure function
#        of its arguments, randomness is drawn from the caller's seed.
# ===================================================================
import logging

import DLCGT.proofs as proofs
from DLCGT.bayergroth import BayGroProver, BayGroVerifier
from DLCGT.eccwrapper import ShortPoint
from DLCGT.elements import (Card, KeyOwnershipProof, KeyPair, MaskedCard,
                            MaskingOutput, MaskingProof, PlayerSecretKey,
                            PublicKey, RemaskingOutput, RemaskingProof,
                            RevealProof, RevealToken, RevealTokenWithProof,
                            ShuffleOutput)
from DLCGT.encoding import CardEncoding
from DLCGT.errors import (DeckSizeError, IncompleteRevealError,
                          MalformedInputError, VerificationError)
from DLCGT.random_generator import RandomGenerator

logger = logging.getLogger(__name__)


class Toolbox:
    """Toolbox for Mental Card Games

    A toolbox holds only immutable state: the game parameters and the card
    encoding table. Players keep their own secret keys and seeds and pass
    them to the functions that need them.

    Attributes:
        params (Parameters): curve, deck size N = m*n, commitment key
        curve (Curve): elliptic curve
        N (int): number of cards
        encoding (CardEncoding): card points
    """
    def __init__(self, params):
        """
        Args:
            params (Parameters): game parameters
        """
        self.params = params
        self.curve = params.curve
        self.N = params.N
        self.encoding = CardEncoding(self.curve, self.N)

    def _rand_gen(self, seed, label):
        return RandomGenerator(self.curve.order, seed, label)

    def _context(self, player_id):
        """Key ownership proofs are bound to the parameters and the player"""
        if isinstance(player_id, str):
            player_id = player_id.encode()
        if not isinstance(player_id, (bytes, bytearray)):
            raise MalformedInputError("player id must be str or bytes")
        params = b"%s/%d/%d/" % (self.curve.name.encode(), self.params.m,
                                 self.params.n)
        return params + bytes(player_id)

    def _check_scalar(self, k, name):
        if not isinstance(k, int) or isinstance(k, bool) \
                or not 0 < k < self.curve.order:
            raise MalformedInputError("%s must be in range 1 to order-1"
                                      % name)

    def _check_point(self, P, name):
        if not isinstance(P, ShortPoint) or not self.curve.isoncurve(P):
            raise MalformedInputError("%s is not a point on %s"
                                      % (name, self.curve.name))

    def _check_masked_card(self, card, name="masked card"):
        if not isinstance(card, MaskedCard):
            raise MalformedInputError("%s must be a MaskedCard" % name)
        self._check_point(card.c1, name)
        self._check_point(card.c2, name)

    def _check_deck(self, deck, name="deck"):
        deck = tuple(deck)
        if len(deck) != self.N:
            raise DeckSizeError("%s has %d cards, expected %d"
                                % (name, len(deck), self.N))
        for card in deck:
            self._check_masked_card(card, name)
        return deck

    # init --------------------------------------------------------------------
    def init_cards_to_curve(self):
        """Force card values to curve: card i = 2^i*G for i = 0,...,N-1

        Returns:
            List[Card]: forced card values
        """
        return list(self.encoding.cards)

    def card_index(self, card):
        """Get index of card in the encoding table

        Args:
            card (Card): unmasked card

        Returns:
            int: card index
        """
        return self.encoding.decode(card)

    def init_mask(self, joint_key, card):
        """Mask forced card value with randomness 1, the initial deck is
        public, everybody can check it

        Args:
            joint_key (PublicKey): aggregate public key
            card (Card): forced card value

        Returns:
            MaskedCard: masked card
        """
        return self._encrypt(joint_key.point, card.point, 1)

    def init_mask_deck(self, joint_key):
        """Mask all forced card values with randomness 1

        Args:
            joint_key (PublicKey): aggregate public key

        Returns:
            List[MaskedCard]: masked cards in card order
        """
        return [self.init_mask(joint_key, card)
                for card in self.encoding.cards]

    # keygen ------------------------------------------------------------------
    def player_keygen(self, seed):
        """Generate secret key and public key

        Args:
            seed (Seed): entropy

        Returns:
            KeyPair: public key sk*G and secret key sk
        """
        sk = self._rand_gen(seed, b"keygen").get_random_value()
        pk = self.curve.multiplication(sk, self.curve.generator)
        return KeyPair(PublicKey(pk), PlayerSecretKey(sk))

    def prove_key_ownership(self, seed, pk, sk, player_id):
        """Generate a proof that pk = sk*G, bound to player_id

        Args:
            seed (Seed): entropy
            pk (PublicKey): public key
            sk (PlayerSecretKey): secret key
            player_id (Union[str, bytes]): player identity

        Returns:
            KeyOwnershipProof: proof
        """
        self._check_point(pk.point, "public key")
        self._check_scalar(sk.scalar, "secret key")
        if self.curve.multiplication(sk.scalar, self.curve.generator) \
                != pk.point:
            raise MalformedInputError("secret key does not match public key")
        prover = proofs.PokProver(self.curve, self.curve.generator, pk.point,
                                  sk.scalar, self._context(player_id))
        c, s = prover.pok_nizk(self._rand_gen(seed, b"pok"))
        return KeyOwnershipProof(c, s)

    def verify_key_ownership(self, pk, proof, player_id):
        """Check proof that the owner of pk is player_id

        Args:
            pk (PublicKey): public key
            proof (KeyOwnershipProof): proof
            player_id (Union[str, bytes]): player identity

        Returns:
            bool: True if verification successful, False else
        """
        if not self.curve.isoncurve(pk.point) or pk.point.is_infinity:
            return False
        verifier = proofs.PokVerifier(self.curve, self.curve.generator,
                                      pk.point, self._context(player_id))
        return verifier.pok_nizk(proof.challenge, proof.response)

    def aggregate_public_keys(self, pks):
        """Combine all public keys to the joint key K = sum(pk_i)

        Args:
            pks (List[PublicKey]): public keys

        Returns:
            PublicKey: joint key
        """
        return PublicKey(self.curve.sum(pk.point for pk in pks))

    def compute_aggregate_key(self, keys_with_proofs):
        """Check proofs from all players, if all proofs are correct,
        combine all public keys to one joint key

        Args:
            keys_with_proofs (List[Tuple[PublicKey, KeyOwnershipProof,
                Union[str, bytes]]]): public key, proof and player id of
                every player

        Returns:
            PublicKey: joint key

        Raises:
            VerificationError: a proof is invalid
        """
        keys_with_proofs = list(keys_with_proofs)
        if not keys_with_proofs:
            raise MalformedInputError("no public keys to aggregate")
        for i, (pk, proof, player_id) in enumerate(keys_with_proofs):
            if not self.verify_key_ownership(pk, proof, player_id):
                logger.warning(f"key ownership proof {i} of player "
                               f"{player_id!r} rejected")
                raise VerificationError(
                    "key ownership proof of player %r is invalid"
                    % (player_id,), index=i, public_key=pk)
        return self.aggregate_public_keys(pk for pk, _, _ in keys_with_proofs)

    # enc ---------------------------------------------------------------------
    def _encrypt(self, pubkey, message, k):
        """Enc(message; k) = (k*G, message + k*pubkey)"""
        enc_a = self.curve.multiplication(k, self.curve.generator)
        enc_b = self.curve.addition(message,
                                    self.curve.multiplication(k, pubkey))
        return MaskedCard(enc_a, enc_b)

    def _reencrypt(self, pubkey, card, k):
        """card + Enc(O; k)"""
        zero = self._encrypt(pubkey, ShortPoint.infinity(), k)
        return MaskedCard(self.curve.addition(card.c1, zero.c1),
                          self.curve.addition(card.c2, zero.c2))

    def mask(self, seed, joint_key, card, randomness=None):
        """Mask a card, (c1, c2) = (r*G, card + r*K), and prove
        DLEQ(G, c1, K, c2 - card)

        Args:
            seed (Seed): entropy
            joint_key (PublicKey): aggregate public key K
            card (Card): forced card value
            randomness (int): masking value r, chosen randomly if None

        Returns:
            MaskingOutput: masked card and proof
        """
        self._check_point(joint_key.point, "joint key")
        self._check_point(card.point, "card")
        rand_gen = self._rand_gen(seed, b"mask")
        if randomness is None:
            randomness = rand_gen.get_random_value()
        self._check_scalar(randomness, "masking value")

        masked = self._encrypt(joint_key.point, card.point, randomness)
        prover = proofs.PeqProver(
            self.curve, self.curve.generator, masked.c1, joint_key.point,
            self.curve.subtraction(masked.c2, card.point), randomness,
            b"masking")
        c, s = prover.peq_nizk(rand_gen)
        return MaskingOutput(masked, MaskingProof(c, s))

    def verify_mask(self, joint_key, card, masked_card, proof):
        """Check that masked_card is an encryption of card under joint_key

        Returns:
            bool: True if verification successful, False else
        """
        if not all(self.curve.isoncurve(P) for P in (
                joint_key.point, card.point, masked_card.c1,
                masked_card.c2)):
            return False
        verifier = proofs.PeqVerifier(
            self.curve, self.curve.generator, masked_card.c1,
            joint_key.point,
            self.curve.subtraction(masked_card.c2, card.point), b"masking")
        return verifier.peq_nizk(proof.challenge, proof.response)

    # reenc -------------------------------------------------------------------
    def remask(self, seed, joint_key, masked_card, randomness=None):
        """Re-mask card cipher, c' = c + Enc(O; delta), and prove
        DLEQ(G, c1' - c1, K, c2' - c2)

        Args:
            seed (Seed): entropy
            joint_key (PublicKey): aggregate public key K
            masked_card (MaskedCard): masked card
            randomness (int): re-masking value delta, chosen randomly if
                None

        Returns:
            RemaskingOutput: re-masked card and proof
        """
        self._check_point(joint_key.point, "joint key")
        self._check_masked_card(masked_card)
        rand_gen = self._rand_gen(seed, b"remask")
        if randomness is None:
            randomness = rand_gen.get_random_value()
        self._check_scalar(randomness, "re-masking value")

        remasked = self._reencrypt(joint_key.point, masked_card, randomness)
        prover = proofs.PeqProver(
            self.curve, self.curve.generator,
            self.curve.subtraction(remasked.c1, masked_card.c1),
            joint_key.point,
            self.curve.subtraction(remasked.c2, masked_card.c2),
            randomness, b"remasking")
        c, s = prover.peq_nizk(rand_gen)
        return RemaskingOutput(remasked, RemaskingProof(c, s))

    def verify_remask(self, joint_key, original, remasked, proof):
        """Check that remasked = original + Enc(O; delta) for some delta

        Returns:
            bool: True if verification successful, False else
        """
        if not all(self.curve.isoncurve(P) for P in (
                joint_key.point, original.c1, original.c2, remasked.c1,
                remasked.c2)):
            return False
        verifier = proofs.PeqVerifier(
            self.curve, self.curve.generator,
            self.curve.subtraction(remasked.c1, original.c1),
            joint_key.point,
            self.curve.subtraction(remasked.c2, original.c2), b"remasking")
        return verifier.peq_nizk(proof.challenge, proof.response)

    # shuffle -----------------------------------------------------------------
    def shuffle_and_remask(self, seed, joint_key, deck, masking_factors=None,
                           permutation=None):
        """Re-mask all cards with masking_factors, permute them and
        generate the shuffle proof: deck_out[i] = deck[pi[i]] +
        Enc(O; masking_factors[pi[i]])

        Args:
            seed (Seed): entropy
            joint_key (PublicKey): aggregate public key
            deck (List[MaskedCard]): N masked cards
            masking_factors (List[int]): N re-masking values, chosen
                randomly if None
            permutation (List[int]): permutation of 0,...,N-1, chosen
                randomly if None

        Returns:
            ShuffleOutput: shuffled and re-masked cards, shuffle proof
        """
        self._check_point(joint_key.point, "joint key")
        deck = self._check_deck(deck)
        rand_gen = self._rand_gen(seed, b"shuffle")

        if masking_factors is None:
            masking_factors = rand_gen.get_random_array(self.N)
        masking_factors = list(masking_factors)
        if len(masking_factors) != self.N:
            raise MalformedInputError("expected %d masking factors, got %d"
                                      % (self.N, len(masking_factors)))
        for k in masking_factors:
            self._check_scalar(k, "masking factor")

        if permutation is None:
            permutation = rand_gen.get_random_permutation(self.N)
        permutation = list(permutation)
        if sorted(permutation) != list(range(self.N)):
            raise MalformedInputError("not a permutation of 0..%d"
                                      % (self.N - 1))

        remasked = [self._reencrypt(joint_key.point, deck[j],
                                    masking_factors[j])
                    for j in range(self.N)]
        shuffled = tuple(remasked[permutation[i]] for i in range(self.N))
        rho = [masking_factors[permutation[i]] for i in range(self.N)]

        prover = BayGroProver(self.params, joint_key.point,
                              [card.as_cipher() for card in deck],
                              [card.as_cipher() for card in shuffled],
                              permutation, rho, rand_gen)
        proof = prover.nizk_prover()
        logger.debug(f"shuffled {self.N} cards")
        return ShuffleOutput(shuffled, proof)

    def verify_shuffle(self, joint_key, deck_before, deck_after, proof):
        """Verify non-interactive shuffle proof

        Args:
            joint_key (PublicKey): aggregate public key
            deck_before (List[MaskedCard]): masked cards
            deck_after (List[MaskedCard]): shuffled and re-masked cards
            proof (ShuffleProof): shuffle proof

        Returns:
            bool: True if verification successful, False else

        Raises:
            DeckSizeError: a deck does not hold N cards
        """
        deck_before = tuple(deck_before)
        deck_after = tuple(deck_after)
        for name, deck in (("input deck", deck_before),
                           ("shuffled deck", deck_after)):
            if len(deck) != self.N:
                raise DeckSizeError("%s has %d cards, expected %d"
                                    % (name, len(deck), self.N))
        points = [joint_key.point]
        for card in deck_before + deck_after:
            if not isinstance(card, MaskedCard):
                return False
            points.extend(card.as_cipher())
        if not all(isinstance(P, ShortPoint) and self.curve.isoncurve(P)
                   for P in points):
            return False

        verifier = BayGroVerifier(self.params, joint_key.point,
                                  [card.as_cipher() for card in deck_before],
                                  [card.as_cipher() for card in deck_after])
        return all(verifier.nizk_verifier(proof))

    # dec ---------------------------------------------------------------------
    def compute_reveal_token(self, seed, sk, pk, masked_card):
        """Generate reveal token sk*c1 and DLEQ(G, pk, c1, token)

        Args:
            seed (Seed): entropy
            sk (PlayerSecretKey): own secret key
            pk (PublicKey): own public key
            masked_card (MaskedCard): card cipher which should be unmasked

        Returns:
            RevealTokenWithProof: reveal token and proof
        """
        self._check_scalar(sk.scalar, "secret key")
        self._check_point(pk.point, "public key")
        self._check_masked_card(masked_card)
        token = self.curve.multiplication(sk.scalar, masked_card.c1)
        prover = proofs.PeqProver(self.curve, self.curve.generator, pk.point,
                                  masked_card.c1, token, sk.scalar, b"reveal")
        c, s = prover.peq_nizk(self._rand_gen(seed, b"reveal"))
        return RevealTokenWithProof(RevealToken(token), RevealProof(c, s))

    def verify_reveal_token(self, pk, masked_card, token, proof):
        """Check that token = sk*c1 for the secret key sk of pk

        Returns:
            bool: True if verification successful, False else
        """
        if not all(self.curve.isoncurve(P) for P in (
                pk.point, masked_card.c1, masked_card.c2, token.point)):
            return False
        verifier = proofs.PeqVerifier(self.curve, self.curve.generator,
                                      pk.point, masked_card.c1, token.point,
                                      b"reveal")
        return verifier.peq_nizk(proof.challenge, proof.response)

    def unmask(self, decryption_key, masked_card, joint_key=None,
               require_unanimous=True):
        """Verify reveal tokens from all players and combine them to unmask
        card, Dec(c) = c_2 - sum(tokens)

        Args:
            decryption_key (List[Tuple[RevealToken, RevealProof,
                PublicKey]]): reveal tokens with proofs and the public key
                of the player who computed them
            masked_card (MaskedCard): card cipher which should be unmasked
            joint_key (PublicKey): aggregate public key, needed if
                require_unanimous is set
            require_unanimous (bool): tokens of all contributors of
                joint_key are required

        Returns:
            Card: unmasked card

        Raises:
            VerificationError: a reveal token is invalid
            IncompleteRevealError: tokens do not cover joint_key
            DecodingError: unmasked point is not a card
        """
        decryption_key = list(decryption_key)
        self._check_masked_card(masked_card)
        if not decryption_key:
            raise MalformedInputError("no reveal tokens")
        if require_unanimous and joint_key is None:
            raise MalformedInputError("joint key is required for an "
                                      "unanimous reveal")

        pks = [pk.point for _, _, pk in decryption_key]
        if len(set(pks)) != len(pks):
            raise MalformedInputError("duplicate public key in reveal tokens")

        for i, (token, proof, pk) in enumerate(decryption_key):
            if not self.verify_reveal_token(pk, masked_card, token, proof):
                logger.warning(f"reveal token {i} rejected")
                raise VerificationError("reveal token %d is invalid" % i,
                                        index=i, public_key=pk)

        if require_unanimous and self.curve.sum(pks) != joint_key.point:
            raise IncompleteRevealError(
                "reveal tokens of %d players do not cover the joint key"
                % len(pks))

        var0 = self.curve.sum(token.point for token, _, _ in decryption_key)
        card = Card(self.curve.subtraction(masked_card.c2, var0))
        self.encoding.decode(card)
        return card
