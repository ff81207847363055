import contextlib
from datetime import date
from io import StringIO

import pytest
from prompt_toolkit import PromptSession
from prompt_toolkit.input import create_pipe_input
from prompt_toolkit.output import DummyOutput
from rich.console import Console

from ledgerconv.term_ui import parse_amount_input, prompt_amount, prompt_text, render_transaction
from tests.helpers.builders import make_txn


@contextlib.contextmanager
def pipe_session():
    with create_pipe_input() as pipe:
        sess = PromptSession(input=pipe, output=DummyOutput())
        yield pipe, sess


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", 0.0),
        ("  ", 0.0),
        ("-600", -600.0),
        ("1,500.25", 1500.25),
        ("abc", None),
        ("nan", None),
    ],
)
def test_parse_amount_input(text, expected):
    assert parse_amount_input(text) == expected


def test_prompt_amount_accepts_number():
    with pipe_session() as (pipe, sess):
        pipe.send_text("-250.5\r")
        assert prompt_amount("Essentials component?", session=sess) == -250.5


def test_prompt_amount_empty_means_zero():
    with pipe_session() as (pipe, sess):
        pipe.send_text("\r")
        assert prompt_amount("Luxury component?", session=sess) == 0.0


def test_prompt_amount_rejects_text_inline():
    with pipe_session() as (pipe, sess):
        # Invalid entry stays in the buffer; clear it (Ctrl-A, Ctrl-K) and retype.
        pipe.send_text("ten\r\x01\x0b10\r")
        assert prompt_amount("Savings component?", session=sess) == 10.0


def test_prompt_text_strips():
    with pipe_session() as (pipe, sess):
        pipe.send_text("  Food, Travel  \r")
        assert prompt_text("Labels: ", session=sess) == "Food, Travel"


def test_render_transaction_shows_fields():
    buf = StringIO()
    console = Console(file=buf, width=100, color_system=None)
    txn = make_txn(
        -1234.5, date(2023, 2, 3), "UPI/Swiggy", account_name="ICICI Savings", mode="UPI"
    )

    render_transaction(txn, console)

    out = buf.getvalue()
    assert "ICICI Savings" in out
    assert "2023-02-03" in out
    assert "-1,234.50" in out
    assert "debit" in out
    assert "UPI/Swiggy" in out
