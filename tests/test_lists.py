import pytest

from latexgen.lists import List, ListKind


def test_push_item_to_list():
    lst = List(ListKind.ITEMIZE)
    assert len(lst.items) == 0
    lst.push("Hello World")
    assert len(lst.items) == 1


def test_environment_names():
    assert ListKind.ENUMERATE.environment_name() == "enumerate"
    assert ListKind.ITEMIZE.environment_name() == "itemize"


def test_list_kind_from_environment_name():
    assert ListKind("itemize") is ListKind.ITEMIZE


def test_push_chains_and_keeps_order():
    lst = List(ListKind.ITEMIZE)
    result = lst.push("Hello").push("From").push("Some").push("Dot-points")
    assert result is lst
    assert list(lst) == ["Hello", "From", "Some", "Dot-points"]


def test_push_rejects_non_string():
    with pytest.raises(TypeError):
        List(ListKind.ENUMERATE).push(5)


def test_lists_compare_by_kind_and_items():
    a = List(ListKind.ENUMERATE).push("x")
    b = List(ListKind.ITEMIZE).push("x")
    assert a != b
    assert a == List(ListKind.ENUMERATE).push("x")