"""Record exercises: a favourite-band ranking and gym member data."""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

RANKING_SIZE = 5
"""How many bands the ranking holds."""

NAME_MAX = 29
ADDRESS_MAX = 49
PHONE_MAX = 10


@dataclass(frozen=True)
class Band:
    """A band, the kind of music it plays, its size and its ranking position."""

    name: str
    genre: str
    members: int
    ranking: int


class BandRanking:
    """A set of favourite bands that can be looked up several ways."""

    def __init__(self, bands: Iterable[Band] = ()) -> None:
        self._bands = list(bands)

    def by_position(self, position: int) -> list[Band]:
        """Return the bands at this ranking position (1 to RANKING_SIZE)."""
        if not 1 <= position <= RANKING_SIZE:
            raise ValueError("Posição informada inválida")
        return [band for band in self._bands if band.ranking == position]

    def by_genre(self, genre: str) -> list[Band]:
        """Return the bands that play this kind of music."""
        return [band for band in self._bands if band.genre == genre]

    def find(self, name: str) -> Band | None:
        """Return the first band with this name, or None."""
        return next((band for band in self._bands if band.name == name), None)

    def genres(self) -> list[str]:
        """Return each kind of music once, in order of first appearance."""
        return list(dict.fromkeys(band.genre for band in self._bands))

    def __iter__(self):
        return iter(self._bands)

    def __len__(self) -> int:
        return len(self._bands)


@dataclass(frozen=True)
class GymMember:
    """Personal data of a gym member."""

    name: str
    age: int
    height: float
    weight: float
    address: str
    phone: str


def parse_member(fields: Sequence[str]) -> GymMember:
    """Build a member from name, age, height, weight, address and phone texts."""
    if len(fields) != 6:
        raise ValueError(f"expected 6 fields, got {len(fields)}")
    name, age, height, weight, address, phone = (text.strip() for text in fields)
    for label, text, limit in (
        ("name", name, NAME_MAX),
        ("address", address, ADDRESS_MAX),
        ("phone", phone, PHONE_MAX),
    ):
        if len(text) > limit:
            raise ValueError(f"{label} longer than {limit} characters")
    return GymMember(name, int(age), float(height), float(weight), address, phone)


def _read_int(prompt: str) -> int:
    while True:
        try:
            return int(input(prompt).strip())
        except ValueError:
            print("Entrada inválida.")


def _print_band(band: Band, *, genre: bool, ranking: bool) -> None:
    print(f"Nome da Banda: {band.name}")
    if genre:
        print(f"Tipo de Música: {band.genre}")
    print(f"Qtde de integrantes: {band.members}")
    if ranking:
        print(f"Posição Ranking: {band.ranking}")


def _fill_ranking() -> BandRanking:
    print("Informe os dados das bandas:")
    bands = []
    for number in range(1, RANKING_SIZE + 1):
        name = input(f"Nome da Banda {number}: ").strip()
        genre = input("Tipo de Música: ").strip()
        members = _read_int("Qtde de integrantes: ")
        ranking = _read_int("Ranking: ")
        bands.append(Band(name, genre, members, ranking))
    return BandRanking(bands)


def _band_menu() -> None:
    ranking = BandRanking()
    while True:
        print("----------------------------------")
        print("    Escolha uma das opções abaixo:")
        print("1 - Preencher Ranking de Bandas   ")
        print("2 - Buscar pela posição no Ranking")
        print("3 - Buscar pelo tipo de música    ")
        print("4 - Buscar pelo nome da banda     ")
        print("5 - Sair do programa              ")
        print("----------------------------------")
        option = _read_int("")
        if option == 5:
            return
        if option == 1:
            ranking = _fill_ranking()
        elif option == 2:
            position = _read_int("Informe a posição do ranking desejada:\n")
            try:
                found = ranking.by_position(position)
            except ValueError as error:
                print(error)
                continue
            for band in found:
                _print_band(band, genre=True, ranking=False)
        elif option == 3:
            if ranking.genres():
                print("Opções: " + ", ".join(ranking.genres()))
            genre = input("Informe o tipo da música desejada:\n").strip()
            for band in ranking.by_genre(genre):
                _print_band(band, genre=False, ranking=True)
        elif option == 4:
            name = input("Informe o nome da banda desejada:\n").strip()
            band = ranking.find(name)
            if band is None:
                print("Banda não encontrada!")
            else:
                _print_band(band, genre=False, ranking=True)


def _gym_form(count: int) -> None:
    labels = ("o nome", "a idade", "a altura", "o peso", "o endereço", "o telefone")
    for number in range(1, count + 1):
        while True:
            fields = [input(f"Informe {label} da {number}ª pessoa: ") for label in labels]
            try:
                member = parse_member(fields)
            except ValueError as error:
                print(f"Dados inválidos: {error}")
                continue
            print(
                f"{member.name}, {member.age} anos, {member.height:.2f} m, "
                f"{member.weight:.1f} kg"
            )
            break


def main(argv: list[str] | None = None) -> int:
    """Run the band ranking menu, or the gym member form with --gym."""
    parser = argparse.ArgumentParser(description="Band ranking and gym records.")
    parser.add_argument(
        "--gym",
        type=int,
        metavar="N",
        help="read the data of N gym members instead of the band menu",
    )
    args = parser.parse_args(argv)
    try:
        if args.gym is not None:
            _gym_form(args.gym)
        else:
            _band_menu()
    except (EOFError, KeyboardInterrupt):
        print()
    return 0