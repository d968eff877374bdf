import builtins

import pytest

from estruturas.records import (
    PHONE_MAX,
    RANKING_SIZE,
    Band,
    BandRanking,
    GymMember,
    main,
    parse_member,
)


@pytest.fixture
def ranking():
    return BandRanking(
        [
            Band("Alfa", "rock", 4, 2),
            Band("Beta", "pop", 3, 1),
            Band("Gama", "rock", 5, 3),
            Band("Delta", "jazz", 2, 5),
            Band("Epsilon", "pop", 1, 4),
        ]
    )


def feed(monkeypatch, answers):
    items = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(items)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr(builtins, "input", fake_input)


def test_by_position(ranking):
    assert ranking.by_position(1) == [Band("Beta", "pop", 3, 1)]
    assert [band.name for band in ranking.by_position(5)] == ["Delta"]


@pytest.mark.parametrize("position", [0, -1, RANKING_SIZE + 1])
def test_by_position_out_of_range(ranking, position):
    with pytest.raises(ValueError, match="Posição informada inválida"):
        ranking.by_position(position)


def test_every_position_matches_ranking(ranking):
    for position in range(1, RANKING_SIZE + 1):
        assert all(band.ranking == position for band in ranking.by_position(position))


def test_by_genre(ranking):
    assert [band.name for band in ranking.by_genre("rock")] == ["Alfa", "Gama"]
    assert ranking.by_genre("samba") == []


def test_find(ranking):
    assert ranking.find("Gama") == Band("Gama", "rock", 5, 3)
    assert ranking.find("Zeta") is None


def test_genres_first_appearance_order(ranking):
    assert ranking.genres() == ["rock", "pop", "jazz"]


def test_parse_member_round_trip():
    member = parse_member(["Ana", "30", "1.65", "60.5", "Rua", "555"])
    assert member == GymMember("Ana", 30, 1.65, 60.5, "Rua", "555")


def test_parse_member_wrong_count():
    with pytest.raises(ValueError):
        parse_member(["Ana", "30"])


def test_parse_member_bad_number():
    with pytest.raises(ValueError):
        parse_member(["Ana", "trinta", "1.65", "60", "Rua", "555"])


def test_parse_member_phone_too_long():
    with pytest.raises(ValueError):
        parse_member(["Ana", "30", "1.65", "60", "Rua", "x" * (PHONE_MAX + 1)])


def test_main_band_menu(monkeypatch, capsys):
    answers = ["1"]
    for number, name in enumerate(["A", "B", "C", "D", "E"], start=1):
        answers += [name, "rock", "4", str(number)]
    answers += ["2", "3", "4", "Zeta", "2", "9", "5"]
    feed(monkeypatch, answers)
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Nome da Banda: C" in out
    assert "Banda não encontrada!" in out
    assert "Posição informada inválida" in out


def test_main_gym_form(monkeypatch, capsys):
    feed(monkeypatch, ["Ana", "30", "1.65", "60.5", "Rua", "555"])
    assert main(["--gym", "1"]) == 0
    assert "Ana, 30 anos" in capsys.readouterr().out