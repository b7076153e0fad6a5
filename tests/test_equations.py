import pytest

from latexgen.equations import Align, Equation


def test_new_equation_defaults():
    eq = Equation("y &= mx + c")
    assert eq.text == "y &= mx + c"
    assert eq.label is None
    assert eq.is_numbered() is True


def test_with_label_sets_label_and_text():
    eq = Equation.with_label("quadratic", "y &= a x^2 + bx + c")
    assert eq.label == "quadratic"
    assert eq.text == "y &= a x^2 + bx + c"
    assert eq.is_numbered()


def test_not_numbered_returns_self():
    eq = Equation("E &= m c^2")
    assert eq.not_numbered() is eq
    assert eq.is_numbered() is False


def test_align_push_string_converts_to_equation():
    align = Align()
    align.push("y &= mx + c")
    assert list(align) == [Equation("y &= mx + c")]


def test_align_push_equation_kept_and_chained():
    labelled = Equation.with_label("emc2", "E &= m c^2")
    align = Align()
    result = align.push("y &= mx + c").push(labelled)
    assert result is align
    assert len(align) == 2
    assert align.equations[1] is labelled


def test_align_from_text_holds_one_equation():
    align = Align.from_text("y &= mx + c")
    assert len(align) == 1
    assert align.equations[0].text == "y &= mx + c"


def test_empty_align():
    assert len(Align()) == 0
    assert list(Align()) == []


def test_align_push_rejects_other_types():
    with pytest.raises(TypeError):
        Align().push(1)


def test_align_equality():
    assert Align.from_text("a &= b") == Align().push(Equation("a &= b"))