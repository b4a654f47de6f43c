from history import History


def test_append_and_pop_keep_order() -> None:
    history = History()
    history.append("line 0 0 1 1")
    history.append("chpen #")
    assert len(history) == 2
    assert list(history) == ["line 0 0 1 1", "chpen #"]
    assert history.pop() == "chpen #"
    assert history.entries == ("line 0 0 1 1",)


def test_clear_and_equality() -> None:
    history = History(["rect 0 0 2 2"])
    assert history == History(["rect 0 0 2 2"])
    history.clear()
    assert len(history) == 0
    assert history == History()
