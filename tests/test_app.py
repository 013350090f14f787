import io
import re

import pytest

from coinflip import app
from coinflip.app import FAREWELL, MENU_LINES, AppState, MenuChoice, MenuLoop
from coinflip.config import SimulatorConfig
from coinflip.console import Console, InputClosedError
from coinflip.core.rng import make_rng
from coinflip.core.types import FlipSequence

ROW_RE = re.compile(r"^\s*\d+  \|   [01]   \| (HEADS|TAILS)$", re.MULTILINE)


def make_loop(script: str, config: SimulatorConfig = None):
    out = io.StringIO()
    console = Console(stdin=io.StringIO(script), stdout=out, clear_screen=False)
    return MenuLoop(console, config, rng=make_rng(11)), out


def test_menu_text() -> None:
    loop, out = make_loop("0\n")
    assert loop.step() is MenuChoice.EXIT
    expected = "\n".join(MENU_LINES) + "\nEnter your choice (0-3): \n" + FAREWELL + "\n"
    assert out.getvalue() == expected


def test_invalid_choice_is_reprompted() -> None:
    loop, out = make_loop("9\nfoo\n0\n")
    assert loop.step() is MenuChoice.EXIT
    assert out.getvalue().count("Please enter a number between 0 and 3: ") == 2


def test_generate_reports_success() -> None:
    loop, out = make_loop("1\n12\n\n")
    assert loop.step() is MenuChoice.GENERATE
    text = out.getvalue()
    assert "How many coin flips would you like to generate?\n(Range: 1 - 100000): " in text
    assert "\nSuccessfully generated 12 coin flips!\n" in text
    assert "Press Enter to continue..." in text
    assert loop.state.num_flips == 12


def test_generate_range_is_enforced() -> None:
    loop, out = make_loop("1\n0\n100001\n5\n\n")
    loop.step()
    assert out.getvalue().count("Please enter a number between 1 and 100000: ") == 2
    assert loop.state.num_flips == 5


def test_second_generation_replaces_first() -> None:
    loop, out = make_loop("1\n5\n\n1\n3\n\n2\n\n0\n")
    loop.run()
    text = out.getvalue()
    assert loop.state.num_flips == 3
    assert len(ROW_RE.findall(text)) == 3
    assert "Total flips displayed: 3" in text
    assert text.endswith(FAREWELL + "\n")


def test_list_and_stats_before_generation() -> None:
    loop, out = make_loop("2\n\n3\n\n0\n")
    loop.run()
    text = out.getvalue()
    assert text.count("No flips have been generated yet.") == 2
    assert "Please use option 1 to generate flips first." in text


def test_stats_after_generation() -> None:
    loop, out = make_loop("1\n1000\n\n3\n\n0\n")
    loop.run()
    text = out.getvalue()
    assert "FLIP DISTRIBUTION:" in text
    assert "CONSECUTIVE SEQUENCE ANALYSIS:" in text
    heads = int(re.search(r"Total Heads: (\d+)", text).group(1))
    tails = int(re.search(r"Total Tails: (\d+)", text).group(1))
    assert heads + tails == 1000


def test_config_drives_limits_and_paging() -> None:
    config = SimulatorConfig(max_flips=50, page_size=5)
    loop, out = make_loop("1\n51\n12\n\n2\n\n\n\n0\n", config)
    loop.run()
    text = out.getvalue()
    assert "(Range: 1 - 50): " in text
    assert "Please enter a number between 1 and 50: " in text
    # generate pause, two gates for 12 rows at 5 per page, list pause
    assert text.count("Press Enter to continue...") == 4


def test_closed_input_stops_loop() -> None:
    loop, _ = make_loop("1\n")
    with pytest.raises(InputClosedError):
        loop.run()


def test_allocation_failure_propagates(monkeypatch) -> None:
    def fail(n, rng):
        raise MemoryError

    monkeypatch.setattr(app, "generate", fail)
    loop, _ = make_loop("1\n5\n\n")
    with pytest.raises(MemoryError):
        loop.step()


def test_app_state_replace() -> None:
    state = AppState()
    assert state.num_flips == 0
    state.replace(FlipSequence.from_outcomes([0, 1]))
    assert state.num_flips == 2
    state.replace(FlipSequence.from_outcomes([1]))
    assert state.flips.to_list() == [1]
