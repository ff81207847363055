from io import StringIO

import pytest
from rich.console import Console

from ledgerconv.auto_enhance import auto_enhance
from ledgerconv.manual_enhance import buckets_for, manual_enhance, parse_labels
from ledgerconv.models import AmountPerCategory, AutoEnhanceRule
from tests.helpers.builders import ScriptedAsk, make_txn


def _console() -> tuple[Console, StringIO]:
    buf = StringIO()
    return Console(file=buf, width=100, color_system=None), buf


def _rule(keywords, categories, *, for_credit=False, labels=(), summary=""):
    return AutoEnhanceRule(
        for_credit=for_credit,
        remarks_keywords=tuple(keywords),
        categories=AmountPerCategory(**categories),
        labels=tuple(labels),
        summary=summary,
    )


# ---------------------------------------------------------------------------
# Auto enhancement
# ---------------------------------------------------------------------------


def test_auto_enhance_scales_percentages():
    rule = _rule(["rent"], {"essentials": 60, "investments": 40}, labels=["Home"], summary="Rent")
    result = auto_enhance(make_txn(-1000, remarks="RENT FEB"), [rule])

    assert result is not None
    assert result.categories == AmountPerCategory(essentials=-600, investments=-400)
    assert result.labels == ("Home",)
    assert result.summary == "Rent"
    assert result.auto_enhanced is True


def test_auto_enhance_first_matching_rule_wins():
    first = _rule(["upi"], {"luxury": 100}, summary="first")
    second = _rule(["swiggy"], {"essentials": 100}, summary="second")
    result = auto_enhance(make_txn(-50, remarks="UPI/Swiggy"), [first, second])
    assert result is not None and result.summary == "first"


def test_auto_enhance_respects_polarity():
    credit_rule = _rule(["salary"], {"salary": 100}, for_credit=True)
    assert auto_enhance(make_txn(-10, remarks="salary reversal"), [credit_rule]) is None
    result = auto_enhance(make_txn(5000, remarks="SALARY FEB"), [credit_rule])
    assert result is not None
    assert result.categories.salary == 5000


def test_auto_enhance_without_rules():
    assert auto_enhance(make_txn(-1, remarks="x"), []) is None


# ---------------------------------------------------------------------------
# Manual enhancement
# ---------------------------------------------------------------------------


def test_buckets_follow_polarity():
    assert buckets_for(make_txn(-1)) == (
        "essentials",
        "investments",
        "savings",
        "luxury",
        "ignorable",
    )
    assert buckets_for(make_txn(1)) == ("salary", "returns", "misc", "ignorable")


def test_parse_labels_normalizes_and_dedupes():
    assert parse_labels(" Food, travel,,FOOD , ") == ("food", "travel")
    assert parse_labels("") == ()


def test_manual_enhance_debit():
    ask = ScriptedAsk([-70.0, 0.0, 0.0, -30.0, 0.0, "Food, Dinner", "  dinner out "])
    console, buf = _console()

    result = manual_enhance(make_txn(-100, remarks="Restaurant"), ask=ask, console=console)

    assert result.categories == AmountPerCategory(essentials=-70, luxury=-30)
    assert result.labels == ("food", "dinner")
    assert result.summary == "dinner out"
    assert result.auto_enhanced is False
    assert [label for kind, label in ask.calls if kind == "amount"] == [
        "Essentials component?",
        "Investments component?",
        "Savings component?",
        "Luxury component?",
        "Ignorable component?",
    ]
    assert "Restaurant" in buf.getvalue()


def test_manual_enhance_reprompts_until_sum_matches():
    ask = ScriptedAsk(
        [
            # First round adds up to 900, not 1000.
            900.0, 0.0, 0.0, 0.0,
            # Second round is correct.
            800.0, 150.0, 50.0, 0.0,
            "",
            "",
        ]
    )  # fmt: skip
    console, buf = _console()

    result = manual_enhance(make_txn(1000, remarks="Salary"), ask=ask, console=console)

    assert result.categories == AmountPerCategory(salary=800, returns=150, misc=50)
    assert result.labels == ()
    assert result.summary == ""
    assert len([c for c in ask.calls if c[0] == "amount"]) == 8
    assert "Enter them again" in buf.getvalue()


def test_manual_enhance_propagates_interrupt():
    def ask(kind, label):
        raise KeyboardInterrupt

    console, _ = _console()
    with pytest.raises(KeyboardInterrupt):
        manual_enhance(make_txn(-1), ask=ask, console=console)
