"""Algorithm registry and selector parsing."""

import pytest

from algorithms import (
    REGISTRY,
    STRUCTURE_INFO,
    AlgorithmKind,
    UnknownAlgorithmError,
    find_algorithm,
    get_algorithm,
    list_algorithms,
)
from algorithms.registry import LANGUAGES


def test_registry_is_exhaustive():
    assert set(REGISTRY) == set(AlgorithmKind)
    for kind, info in REGISTRY.items():
        assert info.kind is kind
        assert callable(info.fn)
        assert info.pseudocode


@pytest.mark.parametrize("selector", [AlgorithmKind.QUICK_SORT, "Quick Sort", "QUICK_SORT"])
def test_selectors(selector):
    assert get_algorithm(selector).kind is AlgorithmKind.QUICK_SORT


def test_unknown_selector():
    with pytest.raises(UnknownAlgorithmError):
        get_algorithm("quick sort")
    with pytest.raises(UnknownAlgorithmError):
        AlgorithmKind.parse(None)
    assert find_algorithm("Heap Sort") is None


def test_stability_flags():
    stable = {k for k, info in REGISTRY.items() if k.is_sorting and info.stable}
    assert stable == {
        AlgorithmKind.BUBBLE_SORT,
        AlgorithmKind.INSERTION_SORT,
        AlgorithmKind.MERGE_SORT,
    }


def test_list_is_in_enum_order():
    assert [info.kind for info in list_algorithms()] == list(AlgorithmKind)


def test_card_serialises_to_camel_case():
    card = get_algorithm("Merge Sort").to_dict()
    assert card["key"] == "MERGE_SORT"
    assert card["label"] == "Merge Sort"
    assert card["sorting"] is True
    assert card["stable"] is True
    assert card["timeComplexity"]
    assert isinstance(card["pseudocode"], list)


def test_every_card_has_descriptive_lists_and_code():
    cards = list_algorithms() + list(STRUCTURE_INFO.values())
    for card in cards:
        assert card.advantages and card.disadvantages and card.use_cases, card.key
        assert set(card.code_implementations) == set(LANGUAGES), card.key


def test_structure_cards_are_not_dispatchable():
    assert set(STRUCTURE_INFO) == {"BST", "GRAPH"}
    assert find_algorithm("BST") is None
    graph = STRUCTURE_INFO["GRAPH"].to_dict()
    assert graph["spaceComplexity"] == "O(V + E)"
    assert "sorting" not in graph
    assert "def dfs(node):" in graph["pseudocode"]


def test_code_samples_are_real_source():
    samples = get_algorithm("Quick Sort").code_implementations
    assert "def " in samples["python"]
    assert "int partition(" in samples["c"]
