"""
Tests for key generation, key ownership proofs and the joint key.
"""
import pytest

from DLCGT import KeyOwnershipProof, Parameters, PublicKey, Toolbox
from DLCGT.eccwrapper import ShortPoint
from DLCGT.errors import (ConfigurationError, MalformedInputError,
                          VerificationError)
from DLCGT.parameters import MAX_CARDS


class TestParameters:

    def test_deck_size(self, params):
        assert params.num_cards() == params.N == 4

    def test_commitment_generators(self, params):
        generators = params.commitment_generators
        assert len(generators) == params.n + 1
        assert len(set(generators)) == len(generators)
        assert params.generator not in generators
        assert all(params.curve.isoncurve(g) for g in generators)

    def test_equality(self, params):
        assert Parameters.setup(2, 2) == params
        assert Parameters.setup(2, 3) != params

    @pytest.mark.parametrize("m, n", [(1, 4), (4, 1), (0, 0), (2.0, 2)])
    def test_reject_shape(self, m, n):
        with pytest.raises(ConfigurationError):
            Parameters.setup(m, n)

    def test_reject_oversized_deck(self):
        with pytest.raises(ConfigurationError):
            Parameters.setup(2, MAX_CARDS // 2 + 1)
        with pytest.raises(ConfigurationError):
            Parameters.setup(2, 0xFFFFFFFF)


class TestKeyOwnership:

    def test_keygen(self, toolbox, seed):
        keys = toolbox.player_keygen(seed("keygen"))
        curve = toolbox.curve
        assert 0 < keys.secret_key.scalar < curve.order
        assert keys.public_key.point == curve.multiplication(
            keys.secret_key.scalar, curve.generator)

    def test_secret_key_not_in_repr(self, toolbox, seed):
        keys = toolbox.player_keygen(seed("keygen"))
        assert str(keys.secret_key.scalar) not in repr(keys)

    def test_valid_proof(self, toolbox, players):
        for player_id, keys, proof in players:
            assert toolbox.verify_key_ownership(keys.public_key, proof,
                                                player_id)

    def test_proof_bound_to_player_id(self, toolbox, players):
        _, keys, proof = players[0]
        assert not toolbox.verify_key_ownership(keys.public_key, proof,
                                                "bob")

    def test_proof_bound_to_key(self, toolbox, players):
        _, alice, proof = players[0]
        _, bob, _ = players[1]
        assert not toolbox.verify_key_ownership(bob.public_key, proof,
                                                "alice")

    def test_proof_bound_to_parameters(self, players):
        player_id, keys, proof = players[0]
        other = Toolbox(Parameters.setup(2, 3))
        assert not other.verify_key_ownership(keys.public_key, proof,
                                              player_id)

    def test_tampered_proof(self, toolbox, players):
        player_id, keys, proof = players[0]
        tampered = KeyOwnershipProof(proof.challenge, proof.response + 1)
        assert not toolbox.verify_key_ownership(keys.public_key, tampered,
                                                player_id)

    def test_wrong_secret_key(self, toolbox, players, seed):
        _, alice, _ = players[0]
        _, bob, _ = players[1]
        with pytest.raises(MalformedInputError):
            toolbox.prove_key_ownership(seed("pok"), alice.public_key,
                                        bob.secret_key, "alice")

    def test_keygen_seed_reused_for_proof(self, toolbox, seed):
        keys = toolbox.player_keygen(seed("shared"))
        proof = toolbox.prove_key_ownership(seed("shared"), keys.public_key,
                                            keys.secret_key, "alice")
        assert toolbox.verify_key_ownership(keys.public_key, proof, "alice")
        order = toolbox.curve.order
        # nonce equal to sk would give s = sk*(1+c)
        guess = proof.response * pow(1 + proof.challenge, -1, order) % order
        assert guess != keys.secret_key.scalar


class TestAggregateKey:

    def test_sum_of_keys(self, toolbox, players, joint_key):
        curve = toolbox.curve
        assert joint_key.point == curve.addition(
            players[0][1].public_key.point, players[1][1].public_key.point)

    def test_order_independent(self, toolbox, players):
        pks = [keys.public_key for _, keys, _ in players]
        assert toolbox.aggregate_public_keys(pks) == \
            toolbox.aggregate_public_keys(pks[::-1])

    def test_invalid_proof_names_entry(self, toolbox, players):
        entries = [(keys.public_key, proof, player_id)
                   for player_id, keys, proof in players]
        entries[1] = (entries[1][0], entries[0][1], "bob")
        with pytest.raises(VerificationError) as excinfo:
            toolbox.compute_aggregate_key(entries)
        assert excinfo.value.index == 1
        assert excinfo.value.public_key == entries[1][0]

    def test_infinity_key_rejected(self, toolbox, players):
        _, _, proof = players[0]
        assert not toolbox.verify_key_ownership(
            PublicKey(ShortPoint.infinity()), proof, "alice")
