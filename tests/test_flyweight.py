import pytest

from patternbook.flyweight import (
    COUNTER_TERRORIST_DRESS_TYPE,
    TERRORIST_DRESS_TYPE,
    DressFactory,
    Game,
    get_dress_factory,
    main,
    new_player,
)


def test_dress_colors():
    factory = DressFactory()
    assert factory.get_dress_by_type(TERRORIST_DRESS_TYPE).color == "red"
    assert factory.get_dress_by_type(COUNTER_TERRORIST_DRESS_TYPE).color == "green"


def test_dress_is_shared():
    factory = DressFactory()
    first = factory.get_dress_by_type(TERRORIST_DRESS_TYPE)
    second = factory.get_dress_by_type(TERRORIST_DRESS_TYPE)
    assert first is second
    assert list(factory.dress_map) == [TERRORIST_DRESS_TYPE]


def test_unknown_dress_type():
    factory = DressFactory()
    with pytest.raises(ValueError, match="Wrong dress type passed"):
        factory.get_dress_by_type("hat")
    assert factory.dress_map == {}


def test_factory_is_singleton():
    dress = get_dress_factory().get_dress_by_type(TERRORIST_DRESS_TYPE)
    assert dress.color == "red"
    assert get_dress_factory().dress_map[TERRORIST_DRESS_TYPE] is dress


def test_players_share_dress():
    a = new_player("T", TERRORIST_DRESS_TYPE)
    b = new_player("T", TERRORIST_DRESS_TYPE)
    assert a.dress is b.dress
    assert a is not b


def test_player_location():
    player = new_player("CT", COUNTER_TERRORIST_DRESS_TYPE)
    player.new_location(12, 34)
    assert (player.lat, player.long) == (12, 34)


def test_game_adds_players():
    game = Game()
    for _ in range(3):
        game.add_terrorist(TERRORIST_DRESS_TYPE)
    game.add_counter_terrorist(COUNTER_TERRORIST_DRESS_TYPE)
    assert len(game.terrorists) == 3
    assert len(game.counter_terrorists) == 1
    assert {p.player_type for p in game.terrorists} == {"T"}
    assert len({id(p.dress) for p in game.terrorists}) == 1


def test_main_prints_each_dress(capsys):
    main()
    out = capsys.readouterr().out
    assert "DressColorType: tDress\nDressColor: red" in out
    assert "DressColorType: ctDress\nDressColor: green" in out