"""
Tests for the canonical binary encoding.
"""
import pytest

from DLCGT import (Card, KeyOwnershipProof, MaskedCard, Parameters,
                   PlayerSecretKey, PublicKey, WireCodec)
from DLCGT.eccwrapper import ShortPoint
from DLCGT.errors import DeserializationError, MalformedInputError


@pytest.fixture(scope="module")
def values(toolbox, players, joint_key, deck, seed):
    """One value of every kind."""
    player_id, keys, proof = players[0]
    card = toolbox.init_cards_to_curve()[1]
    masking = toolbox.mask(seed("wire mask"), joint_key, card)
    remasking = toolbox.remask(seed("wire remask"), joint_key, deck[0])
    reveal = toolbox.compute_reveal_token(seed("wire reveal"),
                                          keys.secret_key, keys.public_key,
                                          deck[0])
    shuffle = toolbox.shuffle_and_remask(seed("wire shuffle"), joint_key,
                                         deck)
    return {
        "parameters": toolbox.params,
        "public_key": keys.public_key,
        "secret_key": keys.secret_key,
        "card": card,
        "masked_card": masking.masked_card,
        "reveal_token": reveal.token,
        "key_ownership_proof": proof,
        "masking_proof": masking.proof,
        "remasking_proof": remasking.proof,
        "reveal_proof": reveal.proof,
        "shuffle_proof": shuffle.proof,
        "key_pair": keys,
        "masking_output": masking,
        "remasking_output": remasking,
        "shuffle_output": shuffle,
        "reveal_token_with_proof": reveal,
    }


@pytest.mark.parametrize("kind", WireCodec.KINDS)
class TestRoundTrip:

    def test_round_trip(self, codec, values, kind):
        data = codec.serialize(values[kind])
        assert codec.deserialize(kind, data) == values[kind]

    def test_canonical(self, codec, values, kind):
        data = codec.serialize(values[kind])
        assert codec.serialize(codec.deserialize(kind, data)) == data

    def test_trailing_byte(self, codec, values, kind):
        data = codec.serialize(values[kind])
        with pytest.raises(DeserializationError):
            codec.deserialize(kind, data + b"\x00")

    def test_truncated(self, codec, values, kind):
        data = codec.serialize(values[kind])
        with pytest.raises(DeserializationError):
            codec.deserialize(kind, data[:-1])


class TestLayout:

    def test_sizes(self, codec, toolbox, values):
        curve = toolbox.curve
        assert len(codec.serialize(values["public_key"])) == 65
        assert len(codec.serialize(values["masked_card"])) == 130
        assert len(codec.serialize(values["reveal_proof"])) == \
            2 * curve.scalar_size

    def test_parameters(self):
        data = WireCodec.encode_parameters(Parameters.setup(4, 13))
        assert data == b"\x09secp256k1" + (4).to_bytes(4, "big") + \
            (13).to_bytes(4, "big")

    def test_shuffle_output_card_count(self, codec, values):
        data = codec.serialize(values["shuffle_output"])
        assert data[:4] == (4).to_bytes(4, "big")


class TestReject:

    def test_off_curve_point(self, codec, values):
        data = bytearray(codec.serialize(values["card"]))
        data[-1] ^= 1
        with pytest.raises(DeserializationError):
            codec.decode_card(bytes(data))

    def test_unreduced_scalar(self, codec, toolbox):
        order = toolbox.curve.order.to_bytes(32, "big")
        with pytest.raises(DeserializationError):
            codec.decode_key_ownership_proof(order + bytes(32))

    def test_zero_secret_key(self, codec):
        with pytest.raises(DeserializationError):
            codec.decode_secret_key(bytes(32))
        with pytest.raises(MalformedInputError):
            codec.serialize(PlayerSecretKey(0))

    def test_unknown_curve(self):
        data = b"\x07curve25" + (2).to_bytes(4, "big") + \
            (2).to_bytes(4, "big")
        with pytest.raises(DeserializationError):
            WireCodec.decode_parameters(data)

    def test_invalid_shape(self):
        data = b"\x09secp256k1" + (1).to_bytes(4, "big") + \
            (2).to_bytes(4, "big")
        with pytest.raises(DeserializationError):
            WireCodec.decode_parameters(data)

    @pytest.mark.parametrize("m, n", [(2, 0xFFFFFFFF), (0xFFFFFFFF, 2),
                                      (0x10000, 0x10000)])
    def test_oversized_deck(self, m, n):
        data = b"\x09secp256k1" + m.to_bytes(4, "big") + n.to_bytes(4, "big")
        with pytest.raises(DeserializationError):
            WireCodec.decode_parameters(data)

    def test_shuffle_output_wrong_count(self, codec, values):
        data = bytearray(codec.serialize(values["shuffle_output"]))
        data[3] = 3
        with pytest.raises(DeserializationError):
            codec.decode_shuffle_output(bytes(data))

    def test_unknown_kind(self, codec):
        with pytest.raises(MalformedInputError):
            codec.deserialize("deck", b"")

    def test_not_bytes(self, codec):
        with pytest.raises(DeserializationError):
            codec.decode_public_key("04")

    def test_serialize_unknown_type(self, codec):
        with pytest.raises(MalformedInputError):
            codec.serialize(42)

    def test_infinity(self, codec, toolbox):
        data = codec.serialize(PublicKey(ShortPoint.infinity()))
        assert data == bytes(toolbox.curve.point_size)
        assert codec.decode_public_key(data).point.is_infinity

    def test_scalar_out_of_range(self, codec, toolbox):
        with pytest.raises(MalformedInputError):
            codec.serialize(KeyOwnershipProof(toolbox.curve.order, 1))

    def test_masked_card_with_bad_prefix(self, codec, values):
        data = bytearray(codec.serialize(values["masked_card"]))
        data[65] = 3
        with pytest.raises(DeserializationError):
            codec.decode_masked_card(bytes(data))

    def test_card_encoding_matches_curve(self, codec, toolbox):
        card = Card(toolbox.curve.generator)
        assert codec.serialize(card) == \
            toolbox.curve.point_to_bytes(toolbox.curve.generator)
        assert isinstance(codec.decode_masked_card(
            codec.serialize(MaskedCard(card.point, card.point))), MaskedCard)
