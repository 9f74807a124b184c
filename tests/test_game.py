"""
End to end: two players shuffle a 52 card deck and deal cards.
"""
import pytest

from DLCGT import CardReveal, Parameters, RevealState, Toolbox, WireCodec
from DLCGT.random_generator import RandomGenerator


@pytest.fixture(scope="module")
def game(seed):
    toolbox = Toolbox(Parameters.setup(4, 13))
    codec = WireCodec(toolbox.params)
    players = {}
    for player_id in ("alice", "bob"):
        keys = toolbox.player_keygen(seed("game keygen", player_id))
        proof = toolbox.prove_key_ownership(seed("game pok", player_id),
                                            keys.public_key, keys.secret_key,
                                            player_id)
        players[player_id] = (keys, proof)
    return toolbox, codec, players


def test_two_player_game(game, seed):
    toolbox, codec, players = game
    assert toolbox.N == 52

    # every player checks every key over the wire
    received = [(codec.decode_public_key(codec.serialize(keys.public_key)),
                 codec.decode_key_ownership_proof(codec.serialize(proof)),
                 player_id)
                for player_id, (keys, proof) in players.items()]
    joint_key = toolbox.compute_aggregate_key(received)

    deck = toolbox.init_mask_deck(joint_key)
    order = list(range(52))

    # each player shuffles with a secret permutation, the other one verifies
    for player_id in players:
        permutation = RandomGenerator(toolbox.curve.order,
                                      seed("game permutation", player_id)) \
            .get_random_permutation(52)
        out = toolbox.shuffle_and_remask(seed("game shuffle", player_id),
                                         joint_key, deck,
                                         permutation=permutation)
        out = codec.decode_shuffle_output(codec.serialize(out))
        assert toolbox.verify_shuffle(joint_key, deck, out.shuffled_deck,
                                      out.proof)
        deck = out.shuffled_deck
        order = [order[i] for i in permutation]

    # alice gets the first two cards: bob sends his tokens, alice adds hers
    alice_keys, _ = players["alice"]
    bob_keys, _ = players["bob"]
    hand = []
    for i, masked in enumerate(deck[:2]):
        reveal = CardReveal(toolbox, masked, joint_key)
        bob = toolbox.compute_reveal_token(seed("game bob", i),
                                           bob_keys.secret_key,
                                           bob_keys.public_key, masked)
        bob = codec.decode_reveal_token_with_proof(codec.serialize(bob))
        reveal.add_token(bob.token, bob.proof, bob_keys.public_key)
        assert reveal.state is RevealState.REVEALING

        alice = toolbox.compute_reveal_token(seed("game alice", i),
                                             alice_keys.secret_key,
                                             alice_keys.public_key, masked)
        assert reveal.add_token(alice.token, alice.proof,
                                alice_keys.public_key) is RevealState.REVEALED
        hand.append(toolbox.card_index(reveal.card))

    assert hand == order[:2]

    # every other position reveals the card the shuffles moved there
    rest = []
    for i, masked in enumerate(deck[2:]):
        tokens = []
        for player_id, (keys, _) in players.items():
            out = toolbox.compute_reveal_token(seed("game rest", player_id, i),
                                               keys.secret_key,
                                               keys.public_key, masked)
            tokens.append((out.token, out.proof, keys.public_key))
        rest.append(toolbox.card_index(toolbox.unmask(tokens, masked,
                                                      joint_key)))
    assert rest == order[2:]
    assert sorted(hand + rest) == list(range(52))
