"""
Tests for the console UI: board drawing, the move prompt and messages.
"""

from tictactoe.ai_player import CpuPlayer
from tictactoe.board import Board
from tictactoe.players import HumanPlayer
from ui import ConsoleUI, FetchMove, describe_player, render_board

X, O, _ = "X", "O", None


def test_render_empty_board():
    expected = (
        " 0 │ 1 │ 2 \n"
        "───┼───┼───\n"
        " 3 │ 4 │ 5 \n"
        "───┼───┼───\n"
        " 6 │ 7 │ 8 \n"
    )
    assert render_board(Board()) == expected


def test_render_shows_marks_in_place_of_indices():
    board = Board.from_list([X, _, _, _, O, _, _, _, X])
    lines = render_board(board).splitlines()
    assert lines[0] == " X │ 1 │ 2 "
    assert lines[2] == " 3 │ O │ 5 "
    assert lines[4] == " 6 │ 7 │ X "


def test_render_larger_board_keeps_columns_aligned():
    board = Board(4)
    lines = render_board(board).splitlines()

    assert len(lines) == 7
    assert len({len(line) for line in lines}) == 1
    assert "15" in lines[-1]


class ScriptedInput:
    def __init__(self, answers):
        self.answers = list(answers)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        return self.answers.pop(0)


def test_fetch_move_returns_valid_answer():
    answers = ScriptedInput(["4"])
    fetch = FetchMove("X", input_func=answers, output=lambda line: None)

    assert fetch(Board()) == 4
    assert answers.prompts == ["X's move [0-8] > "]


def test_fetch_move_asks_again_until_valid():
    board = Board.from_list([X, _, _, _, _, _, _, _, _])
    answers = ScriptedInput(["abc", "9", "0", " 4 "])
    printed = []
    fetch = FetchMove("O", input_func=answers, output=printed.append)

    assert fetch(board) == 4
    assert len(answers.prompts) == 4
    assert len(printed) == 3
    assert "`abc` is not a number" in printed[0]
    assert "Must be 0-8" in printed[1]
    assert printed[2].startswith("Please select an open square.")
    assert "taken by X" in printed[2]


def test_describe_player():
    assert describe_player(HumanPlayer("X")) == "Human"
    assert describe_player(CpuPlayer("O", difficulty=3)) == "CPU, HARD"
    assert describe_player(CpuPlayer("O", difficulty=1)) == "CPU, EASY"


def test_show_welcome():
    printed = []
    ConsoleUI(output=printed.append).show_welcome(
        [HumanPlayer("X"), CpuPlayer("O", difficulty=2)]
    )
    assert "Welcome to Tic-Tac-Toe" in printed
    assert "  P1: X (Human)" in printed
    assert "  P2: O (CPU, MEDIUM)" in printed


def test_show_turn_and_move(empty_game):
    printed = []
    ui = ConsoleUI(output=printed.append)

    ui.show_turn(empty_game)
    ui.show_move(empty_game.next_player, 4)

    assert "=" * 21 in printed
    assert "X's turn" in printed
    assert render_board(Board()) in printed
    assert printed[-1] == "X plays at 4."


def test_show_result_for_a_win(make_game):
    game = make_game([X, X, X, O, O, _, _, _, _])
    printed = []

    ConsoleUI(output=printed.append).show_result(game, game.game_over())

    assert "Game over: X wins!" in printed
    assert "Winning line: 0, 1, 2" in printed
    assert printed[-1] == render_board(game.official_board())


def test_show_result_for_a_tie(make_game):
    game = make_game([X, O, X, X, O, O, O, X, X])
    printed = []

    ConsoleUI(output=printed.append).show_result(game, game.game_over())

    assert "Game over: Cat's game." in printed
    assert not any(line.startswith("Winning line") for line in printed)
