import pytest
from core.category_tree import Branch, CategoryTree, Leaf
from core.config_store import default_category_tree
from exceptions.custom_errors import BookingValidationError


def test_seed_catalog_paths():
    tree = default_category_tree()
    paths = tree.paths()
    assert paths[0] == ("HOTELES", "Hotel de Playa", "Todo Incluido")
    assert ("RESTAURANTES", "Comida Rápida", "Hamburguesas / Pizza") in paths
    assert all(len(p) <= 5 for p in paths)
    assert ("HOTELES",) not in paths
    assert ("HOTELES",) in tree.paths(include_branches=True)


def test_contains():
    tree = default_category_tree()
    assert tree.contains(["HOTELES", "Hotel Ciudad"])
    assert tree.contains(["HOTELES", "Hotel Ciudad", "Pasadía"])
    assert not tree.contains(["HOTELES", "Hotel Ciudad", "Pasadía", "Extra"])
    assert not tree.contains(["OTROS"])


def test_mixed_object_and_array_nodes():
    tree = CategoryTree.from_raw({"A": {"B": ["x", "y"], "C": None}, "D": []})
    assert tree.paths() == [("A", "B", "x"), ("A", "B", "y"), ("A", "C"), ("D",)]
    assert isinstance(tree.roots["A"], Branch)
    assert isinstance(tree.roots["A"].children["C"], Leaf)


def test_depth_limit():
    CategoryTree.from_raw({"A": {"B": {"C": {"D": ["E"]}}}})
    with pytest.raises(BookingValidationError):
        CategoryTree.from_raw({"A": {"B": {"C": {"D": {"E": ["F"]}}}}})


@pytest.mark.parametrize(
    "raw",
    [
        ["HOTELES"],
        {"A": ["x", "x"]},
        {"A": ["x", 3]},
        {"A": 7},
        {"": None},
    ],
)
def test_invalid_catalogs(raw):
    with pytest.raises(BookingValidationError):
        CategoryTree.from_raw(raw)


def test_nodes_validate_on_construction():
    with pytest.raises(BookingValidationError):
        Leaf("  ")
    with pytest.raises(BookingValidationError):
        Branch("A", {"x": Leaf("y")})
    with pytest.raises(BookingValidationError):
        Branch("A", {"x": "x"})


def test_default_durations():
    durations = default_category_tree().default_durations(["HOTELES"], 7, 5)
    assert durations["HOTELES"] == 7
    assert durations["HOTELES:Hotel Ciudad:Pasadía"] == 7
    assert durations["SERVICIOS:Hogar"] == 5
