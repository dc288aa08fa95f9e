"""Tests for the match loop and the console front-end."""

import numpy as np
import pytest

from tictac.board import EMPTY_BOARD, Mark, Outcome, board_from_string, game_over
from tictac.console import (
    COORD_TO_NUMBER,
    NUMBER_TO_COORD,
    ConsolePlayer,
    ConsoleReferee,
    glyph,
    render_board,
)
from tictac.players import FormidableComputer, Player, RandomPlayer
from tictac.referee import IllegalMove, Referee, begin, run_match


class ScriptedPlayer(Player):
    def __init__(self, name, mark, moves):
        super().__init__(name, mark)
        self.moves = list(moves)

    def ask_for_move(self, board, turn):
        return self.moves.pop(0)


class RecordingReferee(Referee):
    def __init__(self):
        self.events = []

    def nudge(self, player):
        self.events.append(("nudge", player.name))

    def announce(self, player, move):
        self.events.append(("announce", player.name, move))

    def conclude(self, outcome, match_up):
        self.events.append(("conclude", outcome))

    def display(self, board, turn, match_up):
        self.events.append(("display", turn))


def scripted_input(responses):
    responses = list(responses)
    return lambda prompt="": responses.pop(0)


class TestRunMatch:
    def test_scripted_win(self):
        match_up = {
            Mark.P1: ScriptedPlayer("Ann", "X", [(0, 0), (0, 1), (0, 2)]),
            Mark.P2: ScriptedPlayer("Bob", "O", [(1, 0), (1, 1)]),
        }
        referee = RecordingReferee()
        result = begin(referee, match_up)
        assert result.outcome is Outcome.P1_WINS
        assert len(result.moves) == 5
        assert result.moves[0] == (Mark.P1, (0, 0))
        assert referee.events[-1] == ("conclude", Outcome.P1_WINS)
        assert referee.events.count(("display", Mark.P1)) == 3
        assert ("announce", "Bob", (1, 1)) in referee.events

    def test_already_finished_board(self):
        board = board_from_string("XXX|OO.|...")
        result = run_match(Referee(), {}, board, Mark.P2)
        assert result.outcome is Outcome.P1_WINS
        assert result.moves == []

    def test_occupied_choice_is_illegal(self):
        match_up = {
            Mark.P1: ScriptedPlayer("Ann", "X", [(0, 0)]),
            Mark.P2: ScriptedPlayer("Bob", "O", [(0, 0)]),
        }
        with pytest.raises(IllegalMove):
            begin(Referee(), match_up)

    def test_off_board_choice_is_illegal(self):
        match_up = {Mark.P1: ScriptedPlayer("Ann", "X", [(3, 3)])}
        with pytest.raises(IllegalMove):
            begin(Referee(), match_up)

    @pytest.mark.parametrize("seed", range(5))
    def test_formidable_self_play_ties(self, seed):
        rng = np.random.default_rng(seed)
        match_up = {
            Mark.P1: FormidableComputer("Hal", "X", rng=rng),
            Mark.P2: FormidableComputer("Ava", "O", rng=rng),
        }
        result = begin(Referee(), match_up)
        assert result.outcome is Outcome.TIE
        assert game_over(result.board) is Outcome.TIE

    def test_formidable_never_loses_to_random(self):
        rng = np.random.default_rng(11)
        hal = FormidableComputer("Hal", "X", rng=rng)
        rand = RandomPlayer(rng=rng)
        for g in range(30):
            if g % 2 == 0:
                result = begin(Referee(), {Mark.P1: hal, Mark.P2: rand})
                assert result.outcome is not Outcome.P2_WINS
            else:
                result = begin(Referee(), {Mark.P1: rand, Mark.P2: hal})
                assert result.outcome is not Outcome.P1_WINS


class TestConsoleRendering:
    def test_cell_numbers(self):
        assert COORD_TO_NUMBER[(0, 0)] == "1"
        assert COORD_TO_NUMBER[(2, 2)] == "9"
        assert NUMBER_TO_COORD["5"] == (1, 1)

    def test_render(self):
        match_up = {Mark.P1: Player("Ann", "X"), Mark.P2: Player("Bob", "O")}
        board = board_from_string("X..|.O.|...")
        assert glyph(board, match_up, (0, 0)) == "X"
        assert glyph(board, match_up, (0, 1)) == "2"
        assert render_board(board, match_up) == (
            " X | 2 | 3\n===+===+===\n 4 | O | 6\n===+===+===\n 7 | 8 | 9\n"
        )


class TestConsolePlayer:
    def test_reasks_until_valid(self):
        out = []
        board = board_from_string("X..|...|...")
        player = ConsolePlayer("Ann", "O", scripted_input(["hello", "1", "5"]), out.append)
        assert player.ask_for_move(board, Mark.P2) == (1, 1)
        assert "only numbers are valid moves" in out[0]
        assert "occupied" in out[1]


class TestConsoleReferee:
    def test_computer_vs_computer_game(self):
        out = []
        referee = ConsoleReferee(scripted_input(["", "", "", ""]), out.append, seed=0, explain=True)
        match_up = referee.introduce({})
        assert match_up[Mark.P1].name == "Hal the Computer"
        assert match_up[Mark.P2].name == "Ava the Robot"
        assert match_up[Mark.P1].mark == "X"

        result = begin(referee, match_up)
        assert result.outcome is Outcome.TIE
        assert out[-1] == "It's a draw!"
        assert "Hal the Computer plays X at 5:" in out
        assert "  (center)" in out

    def test_human_name_and_mark(self):
        out = []
        referee = ConsoleReferee(scripted_input(["Ann", "#", "", ""]), out.append, seed=0)
        match_up = referee.introduce({})
        assert isinstance(match_up[Mark.P1], ConsolePlayer)
        assert match_up[Mark.P1].name == "Ann"
        assert match_up[Mark.P1].mark == "#"
        assert match_up[Mark.P2].mark == "O"

    def test_announces_winner(self):
        out = []
        referee = ConsoleReferee(scripted_input([]), out.append)
        match_up = {Mark.P1: Player("Ann", "X"), Mark.P2: Player("Bob", "O")}
        run_match(referee, match_up, board_from_string("OOO|XX.|X.."), Mark.P1)
        assert out[-1] == "Bob wins!"
