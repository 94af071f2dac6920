import pytest

from patternbook.memento import Caretaker, Originator, main


def test_restore_round_trip():
    caretaker = Caretaker()
    originator = Originator("A")
    for state in ("A", "B", "C"):
        originator.state = state
        caretaker.add_memento(originator.create_memento())

    originator.restore_memento(caretaker.get_memento(1))
    assert originator.state == "B"
    originator.restore_memento(caretaker.get_memento(0))
    assert originator.state == "A"


def test_memento_is_a_snapshot():
    originator = Originator("first")
    memento = originator.create_memento()
    originator.state = "second"
    assert memento.state == "first"


def test_get_memento_out_of_range():
    with pytest.raises(IndexError):
        Caretaker().get_memento(0)


def test_main_output(capsys):
    main()
    lines = capsys.readouterr().out.splitlines()
    assert lines[-2:] == ["Restored to State: B", "Restored to State: A"]
    assert lines[:3] == [f"Originator Current State: {s}" for s in "ABC"]