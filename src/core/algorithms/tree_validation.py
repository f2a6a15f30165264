"""
Percursos e verificações de invariantes para as árvores de busca.
Funcionam com qualquer nó que tenha 'value', 'left' e 'right'
(e 'height', no caso das verificações específicas da AVL).
Os percursos usam pilha explícita: a BST degenerada pode ter milhares de níveis.
"""
from typing import Any, List

def in_order_values(node) -> List[Any]:
    """Retorna os valores em ordem (in-order traversal)."""
    values: List[Any] = []
    stack = []
    current = node
    while stack or current:
        while current:
            stack.append(current)
            current = current.left
        current = stack.pop()
        values.append(current.value)
        current = current.right
    return values

def count_nodes(node) -> int:
    count = 0
    stack = [node] if node else []
    while stack:
        current = stack.pop()
        count += 1
        if current.left:
            stack.append(current.left)
        if current.right:
            stack.append(current.right)
    return count

def measure_height(node) -> int:
    """Altura real, recalculada percorrendo a subárvore (ignora alturas em cache)."""
    tallest = 0
    stack = [(node, 1)] if node else []
    while stack:
        current, depth = stack.pop()
        tallest = max(tallest, depth)
        if current.left:
            stack.append((current.left, depth + 1))
        if current.right:
            stack.append((current.right, depth + 1))
    return tallest

def is_ordered(node) -> bool:
    """Valores em ordem estritamente crescente: vale a propriedade de BST e não há duplicatas."""
    values = in_order_values(node)
    return all(a < b for a, b in zip(values, values[1:]))

def heights_consistent(node) -> bool:
    """Toda altura em cache bate com a altura real da subárvore."""
    if node is None:
        return True
    if node.height != measure_height(node):
        return False
    return heights_consistent(node.left) and heights_consistent(node.right)

def is_balanced(node) -> bool:
    """Para todo nó, |altura(direita) - altura(esquerda)| <= 1."""
    if node is None:
        return True
    if abs(measure_height(node.right) - measure_height(node.left)) > 1:
        return False
    return is_balanced(node.left) and is_balanced(node.right)

def check_avl(node) -> bool:
    """Ordem, alturas e balanceamento de uma vez."""
    return is_ordered(node) and heights_consistent(node) and is_balanced(node)
