import itertools

from flip7.models import Decision, Player
from table.__main__ import parse_args, run
from table.prompt import ConsolePrompt


class FakeConsole:
    def __init__(self, answers):
        self.answers = iter(answers)
        self.prompts: list[str] = []
        self.printed: list[str] = []

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        return next(self.answers)

    def prompt(self) -> ConsolePrompt:
        return ConsolePrompt(input_fn=self.input, print_fn=self.printed.append)


def playing(name: str = "Alpha") -> Player:
    player = Player(name)
    player.hand.reset()
    return player


def test_prompt_reasks_until_answer_is_understood():
    console = FakeConsole(["maybe", "", " D "])
    assert console.prompt()(playing()) == Decision.DRAW
    assert len(console.prompts) == 3
    assert console.printed == ["Please answer d (draw) or s (stay)."] * 2


def test_prompt_accepts_short_and_long_forms():
    console = FakeConsole(["s", "STAY", "p", "draw"])
    prompt = console.prompt()
    assert [prompt(playing()) for _ in range(4)] == [Decision.STAY, Decision.STAY, Decision.DRAW, Decision.DRAW]


def test_prompt_shows_hand_summary():
    player = playing("Beta")
    player.hand.try_add_number(9)
    player.hand.try_add_number(3)
    player.hand.bonuses.append(4)
    player.hand.has_multiplier = True
    console = FakeConsole(["s"])
    console.prompt()(player)
    assert "Beta [3, 9] +4 x2" in console.prompts[0]


def test_ask_int_and_names_validate_input():
    console = FakeConsole(["two", "0", "2", "", "Ann", "Ann", "Bob"])
    prompt = console.prompt()
    assert prompt.ask_int("Number of players: ") == 2
    assert prompt.ask_names(2) == ["Ann", "Bob"]
    assert "Enter a valid integer" in console.printed
    assert "Name cannot be empty" in console.printed
    assert "Ann is already playing" in console.printed


def test_console_game_runs_to_a_winner():
    console = FakeConsole(itertools.cycle(["d", "s"]))
    args = parse_args(["--names", "Ann", "Bob", "--seed", "4", "--target", "20", "--no-journal"])

    winner = run(args, console.prompt())

    assert winner.total_score >= 20
    assert console.printed[-1] == f"\nWinner: {winner.name} with {winner.total_score}"
    assert any(line.startswith("\n===== Round 1") for line in console.printed)


def test_cli_shows_rule_outcomes_by_default():
    args = parse_args([])
    assert args.log_level == "INFO"
    assert args.names == []
