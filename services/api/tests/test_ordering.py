import random

from app.services.availability.ordering import order_matches
from app.services.availability.types import HomeMatch


def _m(home_id: str, name: str) -> HomeMatch:
    return HomeMatch(home_id=home_id, home_name=name, available_slots=())


def test_orders_by_name_ignoring_case():
    ordered = order_matches([_m("1", "zeta"), _m("2", "Alpha"), _m("3", "beta")])
    assert [m.home_name for m in ordered] == ["Alpha", "beta", "zeta"]


def test_equal_names_fall_back_to_id():
    ordered = order_matches([_m("B", "Alpha"), _m("A", "alpha"), _m("C", "ALPHA")])
    assert [m.home_id for m in ordered] == ["A", "B", "C"]


def test_id_tiebreak_is_ordinal():
    # Ordinal comparison puts upper case before lower case and "10" before "9".
    ordered = order_matches([_m("b", "Same"), _m("B", "Same"), _m("9", "Same"), _m("10", "Same")])
    assert [m.home_id for m in ordered] == ["10", "9", "B", "b"]


def test_independent_of_input_order_and_idempotent():
    matches = [_m(str(i), f"Home {i % 7}") for i in range(50)]
    expected = order_matches(matches)

    rng = random.Random(3)
    for _ in range(5):
        shuffled = matches[:]
        rng.shuffle(shuffled)
        assert order_matches(shuffled) == expected

    assert order_matches(expected) == expected


def test_dotless_i_sorts_as_capital_i():
    # "ı".upper() == "I", which comes before "U".
    ordered = order_matches([_m("1", "Baku Loft"), _m("2", "Bakı Loft")])
    assert [m.home_name for m in ordered] == ["Bakı Loft", "Baku Loft"]


def test_letters_compare_upper_cased_against_punctuation():
    # "A" (0x41) sorts before "_" (0x5F); lower-casing would reverse them.
    ordered = order_matches([_m("1", "_x"), _m("2", "ax")])
    assert [m.home_name for m in ordered] == ["ax", "_x"]


def test_expanding_upper_case_is_left_alone():
    ordered = order_matches([_m("1", "ßa"), _m("2", "Sz")])
    assert [m.home_name for m in ordered] == ["Sz", "ßa"]
