import pytest

from errwhat.domain.collection import InfoCollection
from errwhat.domain.info import int_info, str_info, str_list_info


def test_flatten_keeps_first_position_and_last_value() -> None:
    infos = InfoCollection(
        [int_info("one", 3), int_info("two", 2), int_info("one", 1)]
    )
    assert infos.flatten() == InfoCollection([int_info("one", 1), int_info("two", 2)])


def test_flatten_without_duplicates_is_unchanged() -> None:
    infos = InfoCollection([str_info("a", "1"), str_info("b", "2"), str_info("c", "3")])
    assert infos.flatten() == infos


def test_flatten_empty() -> None:
    flattened = InfoCollection().flatten()
    assert flattened == InfoCollection()
    assert isinstance(flattened, InfoCollection)


@pytest.mark.parametrize(
    "infos",
    [
        [],
        [str_info("a", "1")],
        [str_info("a", "1"), str_info("a", "2"), str_info("a", "3")],
        [str_info("a", "1"), str_info("b", "2"), str_info("a", "3"), str_info("c", "4"), str_info("b", "5")],
    ],
)
def test_flatten_is_idempotent(infos: list) -> None:
    once = InfoCollection(infos).flatten()
    assert once.flatten() == once
    assert len({info.key for info in once}) == len(once)


def test_flatten_order_law() -> None:
    infos = InfoCollection(
        [
            str_info("a", "1"),
            str_info("b", "2"),
            str_info("a", "3"),
            str_info("c", "4"),
            str_info("b", "5"),
        ]
    )
    assert [(i.key, i.value) for i in infos.flatten()] == [
        ("a", "3"),
        ("b", "5"),
        ("c", "4"),
    ]


def test_flatten_allows_kind_change_for_key() -> None:
    infos = InfoCollection([str_info("k", "v"), int_info("k", 1)])
    assert infos.flatten() == InfoCollection([int_info("k", 1)])


def test_to_json_last_write_wins() -> None:
    infos = InfoCollection([str_info("k", "v1"), str_info("k", "v2")])
    assert infos.to_json() == {"k": "v2"}


def test_to_json_keeps_sequence_values() -> None:
    infos = InfoCollection([str_list_info("tags", ["x", "y"]), int_info("n", 2)])
    assert infos.to_json() == {"tags": ("x", "y"), "n": 2}


def test_concatenation_stays_collection() -> None:
    left = InfoCollection([str_info("a", "1")])
    joined = left + (str_info("b", "2"),)
    assert isinstance(joined, InfoCollection)
    assert [i.key for i in joined] == ["a", "b"]
    assert repr(left).startswith("InfoCollection(")
