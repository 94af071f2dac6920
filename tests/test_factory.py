import pytest

from patternbook.factory import Ak47, Musket, describe, get_gun, main


def test_get_ak47():
    gun = get_gun("ak47")
    assert isinstance(gun, Ak47)
    assert gun.name == "AK47 gun"
    assert gun.power == 4


def test_get_musket():
    gun = get_gun("musket")
    assert isinstance(gun, Musket)
    assert gun.name == "Musket gun"
    assert gun.power == 1


def test_unknown_gun_type():
    with pytest.raises(ValueError, match="Wrong gun type passed"):
        get_gun("bazooka")


def test_each_call_returns_new_gun():
    first = get_gun("ak47")
    second = get_gun("ak47")
    first.power = 9
    assert second.power == Ak47().power


def test_describe_reflects_changes():
    gun = get_gun("musket")
    gun.name = "Old musket"
    gun.power = 7
    assert describe(gun) == "Gun: Old musket\nPower: 7"


def test_main_prints_both(capsys):
    main()
    out = capsys.readouterr().out
    assert describe(get_gun("ak47")) in out
    assert describe(get_gun("musket")) in out