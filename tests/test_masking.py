"""
Tests for card encoding, masking and re-masking.
"""
import pytest

from DLCGT import Card, MaskedCard, MaskingProof
from DLCGT.eccwrapper import ShortPoint
from DLCGT.errors import DecodingError, MalformedInputError


class TestEncoding:

    def test_cards_are_doubling_chain(self, toolbox):
        cards = toolbox.init_cards_to_curve()
        curve = toolbox.curve
        assert len(cards) == toolbox.N
        for i, card in enumerate(cards):
            assert card.point == curve.multiplication(2 ** i,
                                                      curve.generator)

    def test_card_index(self, toolbox):
        for i, card in enumerate(toolbox.init_cards_to_curve()):
            assert toolbox.card_index(card) == i

    def test_unknown_point(self, toolbox):
        curve = toolbox.curve
        with pytest.raises(DecodingError):
            toolbox.card_index(Card(curve.multiplication(3,
                                                         curve.generator)))

    def test_encode_out_of_range(self, toolbox):
        with pytest.raises(MalformedInputError):
            toolbox.encoding.encode(toolbox.N)


class TestMasking:

    def test_round_trip(self, toolbox, joint_key, seed, reveal_tokens):
        for card in toolbox.init_cards_to_curve():
            masked = toolbox.mask(seed("mask", card.point.x), joint_key,
                                  card).masked_card
            assert toolbox.unmask(reveal_tokens(masked), masked,
                                  joint_key) == card

    def test_verify_mask(self, toolbox, joint_key, seed):
        card = toolbox.init_cards_to_curve()[1]
        out = toolbox.mask(seed("mask"), joint_key, card)
        assert toolbox.verify_mask(joint_key, card, out.masked_card,
                                   out.proof)

    def test_verify_mask_wrong_card(self, toolbox, joint_key, seed):
        cards = toolbox.init_cards_to_curve()
        out = toolbox.mask(seed("mask"), joint_key, cards[1])
        assert not toolbox.verify_mask(joint_key, cards[2], out.masked_card,
                                       out.proof)

    def test_verify_mask_tampered_proof(self, toolbox, joint_key, seed):
        card = toolbox.init_cards_to_curve()[0]
        out = toolbox.mask(seed("mask"), joint_key, card)
        proof = MaskingProof(out.proof.challenge,
                             (out.proof.response + 1) % toolbox.curve.order)
        assert not toolbox.verify_mask(joint_key, card, out.masked_card,
                                       proof)

    def test_explicit_randomness(self, toolbox, joint_key, seed):
        card = toolbox.init_cards_to_curve()[0]
        out = toolbox.mask(seed("mask"), joint_key, card, randomness=1)
        assert out.masked_card == toolbox.init_mask(joint_key, card)
        assert toolbox.verify_mask(joint_key, card, out.masked_card,
                                   out.proof)

    @pytest.mark.parametrize("randomness", [0, -1, "1"])
    def test_invalid_randomness(self, toolbox, joint_key, seed, randomness):
        card = toolbox.init_cards_to_curve()[0]
        with pytest.raises(MalformedInputError):
            toolbox.mask(seed("mask"), joint_key, card,
                         randomness=randomness)

    def test_same_seed_same_output(self, toolbox, joint_key, seed):
        card = toolbox.init_cards_to_curve()[0]
        assert toolbox.mask(seed("mask"), joint_key, card) == \
            toolbox.mask(seed("mask"), joint_key, card)

    def test_initial_deck(self, toolbox, joint_key, deck):
        curve = toolbox.curve
        assert len(deck) == toolbox.N
        for card, masked in zip(toolbox.init_cards_to_curve(), deck):
            assert masked.c1 == curve.generator
            assert masked.c2 == curve.addition(card.point, joint_key.point)


class TestRemasking:

    def test_remask_changes_cipher(self, toolbox, joint_key, deck, seed,
                                   reveal_tokens):
        out = toolbox.remask(seed("remask"), joint_key, deck[2])
        assert out.masked_card != deck[2]
        assert out.masked_card.c1 != deck[2].c1
        assert out.masked_card.c2 != deck[2].c2
        assert toolbox.unmask(reveal_tokens(out.masked_card),
                              out.masked_card, joint_key) == \
            toolbox.unmask(reveal_tokens(deck[2]), deck[2], joint_key)

    def test_remasks_unlinkable(self, toolbox, joint_key, deck, seed,
                                reveal_tokens):
        card = toolbox.init_cards_to_curve()[2]
        ciphers = [
            toolbox.remask(seed("remask", 1), joint_key, deck[2]).masked_card,
            toolbox.remask(seed("remask", 2), joint_key, deck[2]).masked_card,
            toolbox.mask(seed("mask", 3), joint_key, card).masked_card,
        ]
        assert len({c.c1 for c in ciphers}) == 3
        assert len({c.c2 for c in ciphers}) == 3
        for masked in ciphers:
            assert toolbox.unmask(reveal_tokens(masked), masked,
                                  joint_key) == card

    def test_verify_remask(self, toolbox, joint_key, deck, seed):
        out = toolbox.remask(seed("remask"), joint_key, deck[0])
        assert toolbox.verify_remask(joint_key, deck[0], out.masked_card,
                                     out.proof)

    def test_verify_remask_other_card(self, toolbox, joint_key, deck, seed):
        out = toolbox.remask(seed("remask"), joint_key, deck[0])
        assert not toolbox.verify_remask(joint_key, deck[1], out.masked_card,
                                         out.proof)

    def test_mask_proof_is_not_remask_proof(self, toolbox, joint_key, deck,
                                            seed):
        out = toolbox.remask(seed("remask"), joint_key, deck[0])
        proof = MaskingProof(out.proof.challenge, out.proof.response)
        assert not toolbox.verify_mask(
            joint_key, toolbox.init_cards_to_curve()[0], out.masked_card,
            proof)

    def test_reject_off_curve(self, toolbox, joint_key, deck, seed):
        bad = MaskedCard(ShortPoint(1, 1), deck[0].c2)
        with pytest.raises(MalformedInputError):
            toolbox.remask(seed("remask"), joint_key, bad)
