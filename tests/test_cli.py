import pytest

from cinema_registry import cli
from cinema_registry.cli import ConsoleUI, book_seats_interactive, render_seat_map
from cinema_registry.seed import seed_demo


@pytest.fixture
def answers(monkeypatch):
    """Feed scripted answers to ``input``; EOF once they run out."""
    queue = []

    def fake_input(message=""):
        if not queue:
            raise EOFError
        return queue.pop(0)

    monkeypatch.setattr("builtins.input", fake_input)
    return queue


def test_render_small_seat_map(registry, small_show):
    registry.book_seats(small_show.id, ["A1", "B2"])
    text = render_seat_map(registry, small_show.id)
    lines = text.splitlines()

    assert "SCREEN" in text
    assert "Legend: [ ] available   [X] booked" in text
    assert " A [X][ ]" in lines
    assert " B [ ][X]" in lines
    assert "Available seats: 2" in text
    assert "Examples: A2, B1" in text


def test_render_wide_seat_map_has_aisle(registry, show):
    registry.book_seats(show.id, ["A6"])
    lines = render_seat_map(registry, show.id).splitlines()
    row_a = next(line for line in lines if line.startswith(" A "))
    assert row_a == " A " + "[ ]" * 5 + "  " + "[X]" + "[ ]" * 4
    assert any(line.endswith(", ...") for line in lines)


def test_render_unknown_show_raises(registry):
    with pytest.raises(LookupError):
        render_seat_map(registry, "missing")


def test_parse_seat_list():
    assert cli.parse_seat_list(" a1, A2 ,a2,, ") == ["A1", "A2"]
    assert cli.parse_seat_list("") == []


def test_prompt_int_retries_then_gives_up(answers, capsys):
    answers.extend(["zero", "9", "2"])
    assert cli.prompt_int("#: ", 1, 3) == 2
    answers.extend(["x", "y", "z"])
    assert cli.prompt_int("#: ", 1, 3) is None
    assert "between 1 and 3" in capsys.readouterr().out


def test_interactive_booking_retries_after_failure(registry, small_show, answers, capsys):
    answers.extend(["A1,Z9", "a1", ""])
    booking_id = book_seats_interactive(registry, small_show, user_name="bob")

    assert booking_id == "B001"
    assert registry.get_booking("B001").seat_ids == ("A1",)
    out = capsys.readouterr().out
    assert "already booked or invalid" in out
    assert "Booking ID: B001" in out


def test_interactive_booking_double_blank_cancels(registry, small_show, answers):
    answers.extend(["", ""])
    assert book_seats_interactive(registry, small_show) is None
    assert len(registry.ledger) == 0


def test_console_book_then_cancel(registry, answers, capsys):
    seed_demo(registry)
    answers.extend([
        "1", "1", "1", "A1,A2", "",     # book Inception, first show
        "2", "B001", "",                # cancel it
        "",                             # exit
    ])
    ConsoleUI(registry).run()

    out = capsys.readouterr().out
    assert "Booking ID: B001" in out
    assert "Booking canceled and seats freed." in out
    assert registry.get_booking("B001") is None
    show = registry.list_showtimes("Inception")[0]
    assert len(registry.available_seats(show.id)) == 100


def test_console_search_then_book(registry, answers, capsys):
    seed_demo(registry)
    answers.extend(["1", "up", "1", "1", "B1", "", ""])
    ConsoleUI(registry).run()

    booking = registry.get_booking("B001")
    assert booking.seat_ids == ("B1",)
    assert booking.show_id == registry.list_showtimes("Up")[0].id
    assert "Matches for 'Up'" in capsys.readouterr().out


def test_console_cancel_unknown_id(registry, answers, capsys):
    answers.extend(["2", "B404", "", ""])
    ConsoleUI(registry).run()
    assert "booking id not found" in capsys.readouterr().out
