import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.trees.structures.bst import BinarySearchTree
from src.trees.models.node import compute_height

def test_bst_insertion_and_order():
    print("--- Iniciando Teste da BST ---")

    bst = BinarySearchTree()
    assert bst.height() == -1
    assert bst.size() == 0

    for key in [50, 30, 70, 20, 40, 60, 80]:
        bst.insert(key)

    print(f"Em ordem: {bst}")
    assert bst.keys() == [20, 30, 40, 50, 60, 70, 80]
    assert str(bst) == "20, 30, 40, 50, 60, 70, 80"
    assert bst.root.key == 50, "A primeira chave deve continuar na raiz"
    assert bst.height() == 2
    assert bst.size() == 7
    assert len(bst) == 7
    bst.check_invariants()

    print(">> SUCESSO: BST manteve a ordem.")

def test_bst_degenerates_with_sorted_keys():
    print("--- Teste: Inserção crescente (pior caso) ---")

    bst = BinarySearchTree()
    n = 1500  # Mais fundo que o limite de recursão padrão
    for key in range(n):
        bst.insert(key)

    print(f"Altura com {n} chaves crescentes: {bst.height()}")
    assert bst.height() == n - 1
    assert compute_height(bst.root) == n - 1
    bst.check_invariants()

def test_bst_duplicates_are_ignored():
    bst = BinarySearchTree()
    first = bst.insert(1)
    assert first is not None
    assert bst.insert(1) is None
    assert bst.insert(1) is None

    assert bst.size() == 1
    assert bst.root is first
    assert bst.root.is_leaf

def test_bst_search_and_parents():
    bst = BinarySearchTree()
    for key in [8, 4, 12, 2, 6]:
        bst.insert(key)

    node = bst.search(6)
    assert node is not None and node.key == 6
    assert node.parent.key == 4
    assert node.parent.parent is bst.root
    assert bst.root.is_root
    assert bst.search(7) is None
    assert 12 in bst
    assert 13 not in bst

def test_bst_incremental_heights():
    bst = BinarySearchTree()
    for key in [10, 5, 15, 3, 1]:
        bst.insert(key)

    # Só a cadeia 10 -> 5 -> 3 -> 1 cresceu
    assert bst.search(1).height == 0
    assert bst.search(3).height == 1
    assert bst.search(5).height == 2
    assert bst.search(15).height == 0
    assert bst.root.height == 3
    bst.check_invariants()

def test_bst_iteration_is_restartable():
    bst = BinarySearchTree()
    for key in [3, 1, 2]:
        bst.insert(key)

    iterator = iter(bst)
    assert next(iterator) == 1
    assert list(bst) == [1, 2, 3]
    assert list(bst) == [1, 2, 3]
    assert list(iterator) == [2, 3]

def test_bst_clear_releases_every_node():
    bst = BinarySearchTree()
    for key in [5, 2, 8, 1, 9, 3]:
        bst.insert(key)

    released = bst.clear()
    print(f"Nós liberados: {released}")
    assert released == 6
    assert bst.root is None
    assert bst.size() == 0
    assert bst.height() == -1
    assert list(bst) == []

    bst.insert(4)
    assert bst.keys() == [4]

if __name__ == "__main__":
    test_bst_insertion_and_order()
    test_bst_degenerates_with_sorted_keys()
    test_bst_duplicates_are_ignored()
    test_bst_search_and_parents()
    test_bst_incremental_heights()
    test_bst_iteration_is_restartable()
    test_bst_clear_releases_every_node()
