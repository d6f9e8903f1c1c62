import pytest

from flip7.models import Decision, GameConfig, Player
from flip7.session import GameSession

from .helpers import make_players


def stay_at(threshold: int):
    def decide(player: Player) -> Decision:
        return Decision.STAY if player.hand.provisional_score() >= threshold else Decision.DRAW

    return decide


def test_session_plays_until_target_reached():
    session = GameSession(make_players("A", "B", "C"), stay_at(15), config=GameConfig(target_score=60, seed=5))
    winner = session.play()

    assert session.is_over()
    assert winner.total_score >= 60
    assert winner is session.standings()[0]
    assert session.round_number == len(session.journal.data["rounds"])


def test_same_seed_replays_identically():
    def totals(seed: int):
        session = GameSession(make_players(), stay_at(20), config=GameConfig(target_score=100, seed=seed))
        session.play()
        return [player.total_score for player in session.players], session.round_number

    assert totals(11) == totals(11)


def test_winner_tie_breaks_on_seating_order():
    players = make_players("A", "B", "C")
    players[0].total_score = 150
    players[1].total_score = 210
    players[2].total_score = 210
    session = GameSession(players, stay_at(10))

    assert session.is_over()
    assert session.winner().name == "B"
    assert [player.name for player in session.standings()] == ["B", "C", "A"]


def test_play_round_refuses_finished_game():
    players = make_players()
    players[0].total_score = 200
    session = GameSession(players, stay_at(10))
    with pytest.raises(RuntimeError, match="already over"):
        session.play_round()


def test_each_round_gets_a_fresh_full_deck():
    session = GameSession(make_players(), stay_at(10), config=GameConfig(seed=1))
    first = session.new_deck()
    second = session.new_deck()
    assert len(first) == len(second) == 97
    assert first.cards != second.cards


def test_session_requires_players():
    with pytest.raises(ValueError, match="At least one player"):
        GameSession([], stay_at(10))
