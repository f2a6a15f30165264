import sys
import os
import random
import pytest

# Setup de importação
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from src.core.structures import avl_tree
from src.core.structures.avl_tree import AVLNode, AVLTree
from src.core.models.direction import PopBias, RotationDirection, TreeInvariantError
from src.core.algorithms.tree_validation import (
    check_avl, count_nodes, heights_consistent, in_order_values, is_balanced, is_ordered
)

BASE_VALUES = [10, 5, 15, 3, 8, 20]

def build(values):
    root = None
    for value in values:
        root = avl_tree.insert(root, value)
    return root

def test_avl_base_tree():
    print("--- Teste: árvore base ---")
    root = build(BASE_VALUES)

    assert root.value == 10
    assert avl_tree.height(root) == 3
    assert root.left.value == 5 and root.right.value == 15
    assert avl_tree.balance_factor(root) == 0
    assert avl_tree.balance_factor(root.right) == 1
    assert check_avl(root)
    print(">> SUCESSO: Raiz 10, altura 3.")

def test_avl_insert_propagates_height_and_rotates_above_insertion_point():
    root = build(BASE_VALUES)
    root = avl_tree.insert(root, 24)

    # O nó 20 (ponto de inserção) não gira, mas o 15 fica com fator +2 e sobe o 20
    assert root.value == 10
    assert root.right.value == 20
    assert root.right.left.value == 15
    assert root.right.right.value == 24
    assert avl_tree.height(root) == 3
    assert check_avl(root)

def test_avl_delete_value():
    root = avl_tree.insert(build(BASE_VALUES), 24)
    root = avl_tree.delete(root, 20)

    assert count_nodes(root) == 6
    assert avl_tree.search(root, 20) is None
    assert in_order_values(root) == [3, 5, 8, 10, 15, 24]
    assert root.right.value == 15 and root.right.right.value == 24
    assert avl_tree.balance_factor(avl_tree.search(root, 10)) == 0
    assert check_avl(root)

def test_avl_left_right_rotation():
    print("--- Teste: rotação LR ---")
    root = avl_tree.delete(avl_tree.insert(build(BASE_VALUES), 24), 20)
    root = avl_tree.insert(root, 6)
    assert avl_tree.balance_factor(avl_tree.search(root, 8)) == -1

    root = avl_tree.insert(root, 7)
    promoted = avl_tree.search(root, 7)
    assert promoted.left.value == 6
    assert promoted.right.value == 8
    assert avl_tree.search(root, 5).right is promoted
    assert avl_tree.height(root) == 4
    assert check_avl(root)
    print(">> SUCESSO: 7 promovido com filhos 6 e 8.")

def test_avl_right_left_rotation():
    root = build(BASE_VALUES + [24])
    root = avl_tree.delete(root, 20)
    for value in (6, 7, 23):
        root = avl_tree.insert(root, value)

    promoted = avl_tree.search(root, 23)
    assert root.right is promoted
    assert promoted.left.value == 15
    assert promoted.right.value == 24
    assert check_avl(root)

def test_rebalance_moves_factor_back_into_range():
    # 8 -> 6 -> 7 montado à mão: fator -2 no 8, filho esquerdo pendendo para a direita
    top, middle, bottom = AVLNode(8), AVLNode(6), AVLNode(7)
    top.left = middle
    middle.right = bottom
    avl_tree.update_height(middle)
    avl_tree.update_height(top)
    assert avl_tree.balance_factor(top) == -2

    parent = AVLNode(20)
    parent.left = top
    promoted = avl_tree.rebalance(top, parent)

    assert promoted is bottom
    assert parent.left is bottom
    assert avl_tree.balance_factor(promoted) == 0
    assert promoted.left is middle and promoted.right is top
    assert heights_consistent(promoted)

def test_rebalance_without_rotation_returns_none():
    root = build([2, 1, 3])
    assert avl_tree.rebalance(root) is None
    assert root.value == 2

def test_rotate_keeps_order_and_heights():
    root = AVLNode(1)
    root.right = AVLNode(2)
    root.right.right = AVLNode(3)
    avl_tree.update_height(root.right)
    avl_tree.update_height(root)

    promoted = avl_tree.rotate(root, RotationDirection.LEFT)
    assert promoted.value == 2
    assert in_order_values(promoted) == [1, 2, 3]
    assert promoted.height == 2 and root.height == 1

    back = avl_tree.rotate(promoted, RotationDirection.RIGHT)
    assert back is root
    assert in_order_values(back) == [1, 2, 3]
    assert heights_consistent(back)

def test_delete_root_returns_new_root():
    root = build(BASE_VALUES + [24])
    root = avl_tree.delete(root, 20)
    for value in (6, 7, 23):
        root = avl_tree.insert(root, value)

    root = avl_tree.delete(root, 10)
    assert root.value == 8
    assert in_order_values(root) == [3, 5, 6, 7, 8, 15, 23, 24]
    assert avl_tree.search(root, 10) is None
    assert check_avl(root)

    root = avl_tree.delete(root, 3)
    assert root.left.value == 6
    assert root.left.left.value == 5 and root.left.right.value == 7
    assert check_avl(root)

def test_delete_when_replacement_is_direct_child():
    root = build([5, 3, 8])
    root = avl_tree.delete(root, 5)

    assert root.value == 3
    assert root.left is None
    assert root.right.value == 8
    assert check_avl(root)

def test_delete_keeps_order_when_extreme_node_has_inner_child():
    # O maior da subárvore esquerda (4) tem um filho esquerdo (3)
    root = build([5, 2, 8, 1, 4, 9, 3])
    root = avl_tree.delete(root, 5)

    assert root.value == 4
    assert in_order_values(root) == [1, 2, 3, 4, 8, 9]
    assert check_avl(root)

def test_delete_single_node_and_absent_value():
    root = avl_tree.new_node(42)
    assert avl_tree.delete(root, 7) is root
    assert avl_tree.delete(root, 42) is None
    assert avl_tree.delete(None, 1) is None

def test_insert_duplicate_is_ignored():
    root = build(BASE_VALUES)
    same = avl_tree.insert(root, 8)
    assert same is root
    assert count_nodes(same) == len(BASE_VALUES)

def test_height_and_balance_of_empty_tree():
    assert avl_tree.height(None) == 0
    assert avl_tree.balance_factor(None) == 0
    assert avl_tree.search(None, 1) is None
    assert avl_tree.insert(None, 1).height == 1

def test_invalid_selectors_are_fatal():
    root = build([2, 1, 3])
    with pytest.raises(TreeInvariantError):
        avl_tree.pop_leaf(root, "MEIO")
    with pytest.raises(TreeInvariantError):
        avl_tree.rotate(root, "CIMA")
    assert issubclass(TreeInvariantError, AssertionError)

def test_pop_leaf_biggest_detaches_from_parent():
    root = build([10, 5, 15, 3, 8, 20])
    leaf = avl_tree.pop_leaf(root.left, PopBias.BIGGEST, root)

    assert leaf.value == 8
    assert leaf.left is None and leaf.right is None
    assert root.left.right is None
    assert root.left.height == 2

def test_sorted_insertion_stays_logarithmic():
    root = build(range(1, 128))
    assert avl_tree.height(root) == 7
    assert check_avl(root)

def test_random_operations_keep_invariants():
    print("--- Teste: operações aleatórias ---")
    rng = random.Random(2024)
    root = None
    present = set()

    for _ in range(600):
        value = rng.randint(0, 150)
        before = count_nodes(root)
        if rng.random() < 0.6:
            root = avl_tree.insert(root, value)
            expected = before if value in present else before + 1
            present.add(value)
            assert avl_tree.search(root, value) is not None
        else:
            root = avl_tree.delete(root, value)
            expected = before - 1 if value in present else before
            present.discard(value)
            assert avl_tree.search(root, value) is None

        assert count_nodes(root) == expected
        assert is_ordered(root)
        assert heights_consistent(root)
        assert is_balanced(root)

    assert in_order_values(root) == sorted(present)
    print(">> SUCESSO: invariantes mantidas em 600 operações.")

def test_avl_tree_wrapper(capsys):
    tree = AVLTree(verbose=True)
    for value in [10, 20, 30, 40, 50, 25]:
        tree.insert(value)

    # A raiz não pode ser 10: a árvore girou para balancear
    assert tree.root.value == 30
    assert tree.height == 3
    assert len(tree) == 6
    assert 40 in tree and 35 not in tree
    assert tree.in_order() == [10, 20, 25, 30, 40, 50]
    assert tree.balance_factor() == 0
    assert tree.balance_factor(20) == 0

    with pytest.raises(ValueError):
        tree.balance_factor(99)

    tree.delete(30)
    assert 30 not in tree
    assert check_avl(tree.root)

    out = capsys.readouterr().out
    assert "[AVL] Inserido 25" in out
    assert "[AVL] Removido 30" in out

    tree.clear()
    assert tree.root is None
    assert len(tree) == 0
    assert tree.render() == ""

if __name__ == "__main__":
    sys.exit(pytest.main([__file__, "-v"]))
