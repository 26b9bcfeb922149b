"""Tests for Hand evaluation and winner selection."""

import pytest

from blackjack.cards import Card, Deck, Rank, Suit
from blackjack.exceptions import DealError, EmptyDeckError
from blackjack.hand import Hand, Winner, determine_winner, evaluate_hands


class TestHand:
    """Tests for the Hand class."""

    def test_empty_hand(self, empty_hand):
        """Test empty hand properties."""
        assert len(empty_hand) == 0
        assert empty_hand.value == 0
        assert not empty_hand.is_soft
        assert not empty_hand.is_blackjack
        assert not empty_hand.is_busted

    def test_add_card(self, empty_hand):
        """Test adding cards appends in order."""
        first = Card(Rank.TEN, Suit.SPADES)
        second = Card(Rank.TWO, Suit.HEARTS)
        empty_hand.add_card(first)
        empty_hand.add_card(second)
        assert list(empty_hand) == [first, second]
        assert empty_hand.value == 12

    def test_add_missing_card_raises(self, empty_hand):
        """Test a None card from an empty deck fails loudly."""
        with pytest.raises(EmptyDeckError):
            empty_hand.add_card(None)
        assert len(empty_hand) == 0

    def test_empty_deck_error_is_deal_error(self):
        """Test the exception hierarchy."""
        assert issubclass(EmptyDeckError, DealError)

    def test_add_non_card_raises(self, empty_hand):
        """Test non-card values are rejected."""
        with pytest.raises(TypeError):
            empty_hand.add_card("A♥")

    def test_ace_king(self, blackjack_hand):
        """Test A-K scores 21 with no reduction."""
        assert blackjack_hand.value == 21
        assert blackjack_hand.is_blackjack
        assert blackjack_hand.is_soft

    def test_two_aces(self, hand_of):
        """Test A-A scores 12: one ace drops to 1."""
        hand = hand_of(Rank.ACE, Rank.ACE)
        assert hand.value == 12
        assert hand.is_soft

    def test_four_aces(self, hand_of):
        """Test A-A-A-A scores 14: three aces drop to 1."""
        hand = hand_of(Rank.ACE, Rank.ACE, Rank.ACE, Rank.ACE)
        assert hand.value == 14
        assert hand.is_soft

    def test_bust_is_not_capped(self, bust_hand):
        """Test K-Q-2 stays at 22."""
        assert bust_hand.value == 22
        assert bust_hand.is_busted
        assert not bust_hand.is_soft

    def test_single_card(self, hand_of):
        """Test a lone five scores 5."""
        assert hand_of(Rank.FIVE).value == 5

    def test_soft_17(self, soft_17_hand):
        """Test soft hand value calculation."""
        assert soft_17_hand.value == 17
        assert soft_17_hand.is_soft

    def test_face_cards_score_ten(self, hand_of):
        """Test ten, jack, queen and king all score 10."""
        for rank in (Rank.TEN, Rank.JACK, Rank.QUEEN, Rank.KING):
            assert hand_of(rank).value == 10

    def test_soft_to_hard_transition(self, hand_of):
        """Test ace switching from 11 to 1."""
        hand = hand_of(Rank.ACE)
        assert hand.value == 11
        assert hand.is_soft

        hand.add_card(Card(Rank.FIVE, Suit.HEARTS))
        assert hand.value == 16
        assert hand.is_soft

        hand.add_card(Card(Rank.EIGHT, Suit.CLUBS))
        # Ace now counts as 1
        assert hand.value == 14
        assert not hand.is_soft

    @pytest.mark.parametrize(
        "ranks, expected",
        [
            ([Rank.KING, Rank.NINE], 19),
            ([Rank.ACE, Rank.NINE], 20),
            ([Rank.ACE, Rank.ACE, Rank.NINE], 21),
            ([Rank.ACE, Rank.ACE, Rank.ACE, Rank.NINE], 12),
            ([Rank.ACE, Rank.ACE, Rank.ACE, Rank.ACE, Rank.SEVEN], 21),
            ([Rank.ACE, Rank.ACE, Rank.ACE, Rank.ACE, Rank.KING, Rank.NINE], 23),
            ([Rank.ACE, Rank.KING, Rank.QUEEN], 21),
        ],
    )
    def test_ace_reduction(self, hand_of, ranks, expected):
        """Test hands with zero to four aces."""
        assert hand_of(*ranks).value == expected

    def test_matches_best_total_for_every_ace_count(self, hand_of):
        """Test the reduction picks the largest total not over 21 when one exists."""
        for aces in range(5):
            for extra in [0, *range(2, 21)]:
                ranks = [Rank.ACE] * aces + _ranks_summing_to(extra)
                hard = aces + extra
                best = hard + 10 if aces and hard + 10 <= 21 else hard
                assert hand_of(*ranks).value == best

    def test_three_card_21_is_not_blackjack(self, hand_of):
        """Test that 21 with 3 cards is not blackjack."""
        hand = hand_of(Rank.SEVEN, Rank.SEVEN, Rank.SEVEN)
        assert hand.value == 21
        assert not hand.is_blackjack

    def test_whole_deck_in_one_hand(self):
        """Test dealing all 52 cards into a hand reproduces the deck."""
        deck = Deck()
        original = set(deck)
        hand = Hand()
        while (card := deck.draw()) is not None:
            hand.add_card(card)

        assert len(hand) == 52
        assert set(hand) == original
        assert len(deck) == 0

    def test_str_and_repr(self, bust_hand, soft_17_hand):
        """Test string representations."""
        assert str(soft_17_hand) == "A♥ 6♦ (soft 17)"
        assert str(bust_hand) == "K♥ Q♦ 2♣ (BUST 22)"
        assert "value=22" in repr(bust_hand)


def _ranks_summing_to(total: int) -> list[Rank]:
    """Non-ace ranks worth the given total (never 1)."""
    tens, rest = divmod(total, 10)
    if rest == 1:
        # 11 has to be made as 9 + 2
        return [Rank.KING] * (tens - 1) + [Rank.NINE, Rank.TWO]
    return [Rank.KING] * tens + ([Rank(rest)] if rest else [])


class TestDetermineWinner:
    """Tests for the winner rule."""

    def test_player_higher_wins(self):
        """Test player wins with higher value."""
        assert determine_winner(19, 18) == Winner.PLAYER

    def test_dealer_higher_wins(self):
        """Test dealer wins with higher value."""
        assert determine_winner(17, 19) == Winner.DEALER

    def test_tie_goes_to_player(self):
        """Test the dealer must beat the player outright."""
        assert determine_winner(18, 18) == Winner.PLAYER
        assert determine_winner(21, 21) == Winner.PLAYER

    def test_mutual_bust_tie_goes_to_player(self):
        """Test equal bust totals still go to the player."""
        assert determine_winner(22, 22) == Winner.PLAYER

    def test_busts_are_not_special(self):
        """Test a higher total wins even over 21."""
        assert determine_winner(20, 22) == Winner.DEALER
        assert determine_winner(24, 20) == Winner.PLAYER

    def test_deterministic(self):
        """Test the same inputs always give the same outcome."""
        results = {determine_winner(a, b) for a, b in [(15, 15)] * 20}
        assert results == {Winner.PLAYER}


class TestEvaluateHands:
    """Tests for hand comparison."""

    def test_dealer_wins_higher_value(self, hand_of):
        """Test dealer wins with higher value."""
        player = hand_of(Rank.TEN, Rank.SEVEN)  # 17
        dealer = hand_of(Rank.TEN, Rank.NINE)  # 19
        assert evaluate_hands(player, dealer) == Winner.DEALER

    def test_push_goes_to_player(self, hand_of):
        """Test an equal total is a player win."""
        player = hand_of(Rank.TEN, Rank.EIGHT)
        dealer = hand_of(Rank.KING, Rank.EIGHT)
        assert evaluate_hands(player, dealer) == Winner.PLAYER

    def test_blackjack_against_blackjack(self, blackjack_hand, hand_of):
        """Test two naturals tie in the player's favour."""
        dealer = hand_of(Rank.ACE, Rank.QUEEN)
        assert evaluate_hands(blackjack_hand, dealer) == Winner.PLAYER
