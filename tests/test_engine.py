"""Tests for dealing and showdown.

Tests cover:
- Deck construction, seeded shuffling and drawing
- Deck exhaustion
- Round configuration validation
- Dealing community and hole cards
- Winner selection, split pots and ranking
- Table validation (card counts, duplicates)
- Batch winners agree with scalar winners
- The dealing script
"""

import sys

import pytest

from holdem_eval.rules import (
    HandCategory,
    InvalidInputSize,
    DuplicateCard,
    make_cards_from_string,
)
from holdem_eval.engine import (
    Deck,
    DeckExhausted,
    PlayerHand,
    RoundConfig,
    COMMUNITY_CARDS,
    HOLE_CARDS,
    deal_round,
    find_winners,
    find_winners_batch,
)
from holdem_eval import set_seed
from holdem_eval.scripts import deal as deal_script


def player(player_id: int, cards: str) -> PlayerHand:
    return PlayerHand(player_id=player_id, hole_cards=tuple(make_cards_from_string(cards)))


class TestDeck:
    """Tests for the Deck value."""

    def test_new_deck_is_full(self):
        assert len(Deck()) == 52
        assert len(Deck(extended=True)) == 65

    def test_shuffled_deck_has_unique_cards(self):
        deck = Deck.new_shuffled(seed=1)
        assert len(set(deck.cards)) == 52

    def test_same_seed_same_order(self):
        """Same seed should produce the same deal."""
        deck1 = Deck.new_shuffled(seed=12345)
        deck2 = Deck.new_shuffled(seed=12345)
        assert deck1.draw_many(10) == deck2.draw_many(10)

    def test_decks_do_not_share_state(self):
        deck1 = Deck.new_shuffled(seed=5)
        deck2 = Deck.new_shuffled(seed=5)
        deck1.draw_many(3)
        deck1.shuffle()
        assert len(deck2) == 52
        assert deck2.draw_many(3) == Deck.new_shuffled(seed=5).draw_many(3)

    def test_draw_removes_card(self):
        deck = Deck.new_shuffled(seed=2)
        top = deck.cards[-1]
        assert deck.draw() == top
        assert len(deck) == 51
        assert top not in deck.cards

    def test_draw_from_empty_deck_raises(self):
        deck = Deck.new_shuffled(seed=3)
        deck.draw_many(52)
        with pytest.raises(DeckExhausted):
            deck.draw()

    def test_draw_many_too_many_raises(self):
        deck = Deck.new_shuffled(seed=4)
        with pytest.raises(DeckExhausted):
            deck.draw_many(53)
        assert len(deck) == 52


class TestRoundConfig:
    """Tests for dealing configuration."""

    def test_default_fits_extended_deck(self):
        config = RoundConfig()
        assert config.num_players == 30
        assert config.extended_deck

    def test_too_many_players_for_standard_deck(self):
        with pytest.raises(ValueError):
            RoundConfig(num_players=24, extended_deck=False)

    def test_max_players_for_standard_deck(self):
        config = RoundConfig(num_players=23, extended_deck=False)
        assert config.num_players == 23

    def test_no_players_rejected(self):
        with pytest.raises(ValueError):
            RoundConfig(num_players=0)


class TestDealRound:
    """Tests for dealing one round."""

    def test_deal_counts(self):
        community, players = deal_round(RoundConfig(num_players=6, extended_deck=False, seed=42))
        assert len(community) == COMMUNITY_CARDS
        assert len(players) == 6
        assert all(len(p.hole_cards) == HOLE_CARDS for p in players)
        assert [p.player_id for p in players] == list(range(6))

    def test_all_dealt_cards_unique(self):
        community, players = deal_round(RoundConfig(seed=7))
        dealt = list(community) + [c for p in players for c in p.hole_cards]
        assert len(dealt) == 65
        assert len(set(dealt)) == 65

    def test_deal_deterministic_with_seed(self):
        config = RoundConfig(num_players=4, extended_deck=False, seed=99)
        assert deal_round(config) == deal_round(config)


class TestShowdown:
    """Tests for winner selection."""

    def test_full_house_beats_flush(self):
        community = make_cards_from_string("KH KS 7H 9H 2C")
        players = [player(0, "KD 2S"), player(1, "3H 4H")]
        result = find_winners(players, community)

        assert result.best_hands[0].category == HandCategory.FULL_HOUSE
        assert result.best_hands[1].category == HandCategory.FLUSH
        assert result.winners == [0]
        assert not result.is_split

    def test_four_of_a_kind_beats_straight(self):
        community = make_cards_from_string("9S 9H 5D 6C 7S")
        players = [player(0, "8H 10D"), player(1, "9D 9C")]
        result = find_winners(players, community)

        assert result.best_hands[0].category == HandCategory.STRAIGHT
        assert result.best_hands[1].category == HandCategory.FOUR_OF_A_KIND
        assert result.winners == [1]

    def test_board_plays_split_pot(self):
        community = make_cards_from_string("10S JH QD KC AS")
        players = [player(0, "2C 3D"), player(1, "4H 6D"), player(2, "2H 7C")]
        result = find_winners(players, community)

        assert result.winners == [0, 1, 2]
        assert result.is_split

    def test_kicker_breaks_tie(self):
        community = make_cards_from_string("AS AH 7D 4C 2S")
        players = [player(0, "KD 3C"), player(1, "QD JC")]
        result = find_winners(players, community)
        assert result.winners == [0]

    def test_single_player_wins(self):
        community = make_cards_from_string("2S 5H 9D JC KS")
        result = find_winners([player(3, "3C 4D")], community)
        assert result.winners == [3]

    def test_ranking_strongest_first(self):
        community = make_cards_from_string("9S 9H 5D 6C 7S")
        players = [player(0, "2H 3D"), player(1, "9D 9C"), player(2, "8H 10D")]
        result = find_winners(players, community)
        assert result.ranking() == [1, 2, 0]

    def test_no_players_rejected(self):
        with pytest.raises(InvalidInputSize):
            find_winners([], make_cards_from_string("2S 5H 9D JC KS"))

    def test_wrong_community_size_rejected(self):
        with pytest.raises(InvalidInputSize):
            find_winners([player(0, "3C 4D")], make_cards_from_string("2S 5H 9D JC"))

    def test_wrong_hole_count_rejected(self):
        with pytest.raises(InvalidInputSize):
            find_winners([player(0, "3C 4D 6H")], make_cards_from_string("2S 5H 9D JC KS"))

    def test_card_dealt_twice_rejected(self):
        community = make_cards_from_string("2S 5H 9D JC KS")
        with pytest.raises(DuplicateCard):
            find_winners([player(0, "3C 4D"), player(1, "4D 8H")], community)
        with pytest.raises(DuplicateCard):
            find_winners([player(0, "2S 4D")], community)

    @pytest.mark.parametrize("extended", [False, True])
    def test_batch_winners_match(self, extended):
        num_players = 30 if extended else 23
        for seed in range(15):
            community, players = deal_round(
                RoundConfig(num_players=num_players, extended_deck=extended, seed=seed)
            )
            assert find_winners_batch(players, community) == find_winners(players, community).winners


class TestDealScript:
    """Tests for the command-line dealer."""

    def test_run_round_prints_results(self, capsys):
        winners = deal_script.run_round(
            RoundConfig(num_players=5, extended_deck=False, seed=1), vectorized=True
        )
        out = capsys.readouterr().out

        assert "Community:" in out
        assert "OK: batch evaluator agrees" in out
        assert winners
        for pid in winners:
            assert f"Player {pid:2d}" in out

    def test_main(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["deal", "--players", "4", "--seed", "8", "--standard"])
        deal_script.main()
        out = capsys.readouterr().out
        assert "Seed: 8" in out
        assert "Community:" in out
        assert "Winner" in out or "Split pot" in out

    def test_main_without_seed_reports_one(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["deal", "--players", "3"])
        deal_script.main()
        out = capsys.readouterr().out
        assert "Seed: " in out

    def test_main_rejects_too_many_players(self, monkeypatch, capsys):
        monkeypatch.setattr(sys, "argv", ["deal", "--players", "30", "--standard"])
        with pytest.raises(SystemExit) as exc:
            deal_script.main()
        assert exc.value.code == 1
        assert "Error" in capsys.readouterr().out


class TestSeeding:
    """Tests for global seeding."""

    def test_set_seed_returns_given_seed(self):
        assert set_seed(42) == 42

    def test_set_seed_generates_seed(self):
        seed = set_seed()
        assert 0 <= seed < 2**32
