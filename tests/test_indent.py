import pytest

from baobao.indent import Indent


def test_indent_as_str():
    assert Indent.spaces(2).as_str() == "  "
    assert Indent.spaces(4).as_str() == "    "
    assert Indent.spaces(8).as_str() == "        "
    assert Indent.tab().as_str() == "\t"


def test_unusual_width_falls_back_to_four_spaces():
    assert Indent.spaces(3).as_str() == "    "
    assert Indent.spaces(0).as_str() == "    "


def test_indent_constants():
    assert Indent.RUST == Indent.spaces(4)
    assert Indent.TYPESCRIPT == Indent.spaces(2)
    assert Indent.GO == Indent.tab()


def test_default():
    assert Indent() == Indent.RUST


def test_tab_is_not_spaces():
    assert Indent.tab().is_tab is True
    assert Indent.spaces(4).is_tab is False


def test_negative_width_rejected():
    with pytest.raises(ValueError):
        Indent.spaces(-1)