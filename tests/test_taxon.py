import gc
import pickle

import pytest
from taxopath import Taxon, TaxopathParser


def test_add_child() -> None:
    root = Taxon("root")
    child = root.add_child("Bacteria", rank="domain")
    assert child.parent is root
    assert child.rank == "domain"
    assert "Bacteria" in root
    assert root["Bacteria"] is child
    assert len(root) == 1
    assert list(root) == [child]


def test_add_existing_child() -> None:
    root = Taxon("root")
    child = root.add_child("Bacteria", rank="domain")
    assert root.add_child("Bacteria", rank="superkingdom") is child
    assert child.rank == "domain", "Existing child should keep its rank."
    assert len(root) == 1


def test_depth() -> None:
    root = Taxon("root")
    leaf = root.add_child("A").add_child("B").add_child("C")
    assert root.is_root
    assert root.depth == 0
    assert not leaf.is_root
    assert leaf.depth == 3


def test_empty_name() -> None:
    with pytest.raises(ValueError):
        Taxon("")
    with pytest.raises(ValueError):
        Taxon("root").add_child("")


def _build_lineage(*names: str) -> Taxon:
    node = Taxon(names[0])
    for name in names[1:]:
        node = node.add_child(name)
    return node


def test_leaf_keeps_ancestors() -> None:
    leaf = _build_lineage("Life", "Bacteria", "Pseudomonadota")
    gc.collect()
    assert leaf.depth == 2
    assert leaf.parent is not None and leaf.parent.name == "Bacteria"
    assert list(TaxopathParser().from_taxon(leaf)) == ["Life", "Bacteria", "Pseudomonadota"]


def test_pickle() -> None:
    root = Taxon("Life")
    root.add_child("Bacteria", rank="domain").add_child("Pseudomonadota", rank="phylum")
    root2: Taxon = pickle.loads(pickle.dumps(root))
    leaf = root2["Bacteria"]["Pseudomonadota"]
    assert leaf.rank == "phylum"
    assert leaf.parent is root2["Bacteria"]
    assert list(TaxopathParser()(leaf)) == ["Life", "Bacteria", "Pseudomonadota"]


def test_str() -> None:
    assert str(Taxon("Homo sapiens", rank="species")) == "species: Homo sapiens"
    assert str(Taxon("root")) == "root"
    assert repr(Taxon("root")) == 'Taxon("root")'
