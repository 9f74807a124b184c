"""
Pytest configuration and shared fixtures for DLCGT tests.
"""
import hashlib

import pytest

from DLCGT import Parameters, Seed, Toolbox, WireCodec


def make_seed(*labels):
    """Deterministic 32 byte seed for reproducible tests."""
    return Seed(hashlib.sha3_256(repr(labels).encode()).digest())


@pytest.fixture(scope="session")
def params():
    """Small 2x2 deck, enough to exercise every row and column path."""
    return Parameters.setup(2, 2)


@pytest.fixture(scope="session")
def toolbox(params):
    return Toolbox(params)


@pytest.fixture(scope="session")
def codec(params):
    return WireCodec(params)


@pytest.fixture(scope="session")
def seed():
    """Factory for deterministic seeds."""
    return make_seed


@pytest.fixture(scope="session")
def players(toolbox):
    """Two players with key pairs and ownership proofs."""
    players = []
    for player_id in ("alice", "bob"):
        keys = toolbox.player_keygen(make_seed("keygen", player_id))
        proof = toolbox.prove_key_ownership(
            make_seed("pok", player_id), keys.public_key, keys.secret_key,
            player_id)
        players.append((player_id, keys, proof))
    return players


@pytest.fixture(scope="session")
def joint_key(toolbox, players):
    return toolbox.compute_aggregate_key(
        (keys.public_key, proof, player_id)
        for player_id, keys, proof in players)


@pytest.fixture(scope="session")
def deck(toolbox, joint_key):
    """Initial deck, every card masked with randomness 1."""
    return toolbox.init_mask_deck(joint_key)


@pytest.fixture(scope="session")
def reveal_tokens(toolbox, players):
    """Factory: reveal tokens of the given players for a masked card."""
    def _reveal_tokens(masked_card, names=None):
        tokens = []
        for player_id, keys, _ in players:
            if names is not None and player_id not in names:
                continue
            out = toolbox.compute_reveal_token(
                make_seed("reveal", player_id, masked_card.c1.x),
                keys.secret_key, keys.public_key, masked_card)
            tokens.append((out.token, out.proof, keys.public_key))
        return tokens
    return _reveal_tokens
