from typing import List, Optional
from src.core.models.direction import PopBias, biased_child, inner_child, relink
from src.core.algorithms.tree_validation import count_nodes, in_order_values, measure_height
from src.core.io.tree_printer import render_tree

class BSTNode:
    """Nó da árvore binária de busca simples (sem altura, sem rotação)."""
    def __init__(self, value: int):
        self.value = value
        self.left: Optional["BSTNode"] = None
        self.right: Optional["BSTNode"] = None

    def __repr__(self):
        return f"BSTNode({self.value})"

# Sem balanceamento a árvore pode virar uma lista com milhares de níveis,
# então as operações descem em laço em vez de recursão.

def new_node(value: int) -> BSTNode:
    return BSTNode(value)

def search(node: Optional[BSTNode], value: int) -> Optional[BSTNode]:
    current = node
    while current:
        if value == current.value:
            return current
        elif value < current.value:
            current = current.left
        else:
            current = current.right
    return None

def insert(root: Optional[BSTNode], value: int) -> BSTNode:
    """
    Insere sem balancear. A raiz só muda quando a árvore estava vazia.
    Inserções em ordem degeneram a árvore numa lista ligada (O(n)).
    """
    if root is None:
        return new_node(value)

    current = root
    while True:
        if value == current.value:
            # Duplicatas são ignoradas
            return root
        if value < current.value:
            if current.left is None:
                current.left = new_node(value)
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = new_node(value)
                return root
            current = current.right

def pop_leaf(node: Optional[BSTNode], bias: str, parent: Optional[BSTNode] = None) -> Optional[BSTNode]:
    """
    Desce seguindo o viés até o nó extremo e o desliga do pai.
    O filho interno do nó extremo sobe para o lugar dele.
    """
    if node is None:
        return None

    following = biased_child(node, bias)
    while following is not None:
        parent, node = node, following
        following = biased_child(node, bias)

    relink(parent, node, inner_child(node, bias))
    node.left = node.right = None
    return node

def _replace_node(node: BSTNode, parent: Optional[BSTNode]) -> Optional[BSTNode]:
    if node.left is not None:
        replacement = pop_leaf(node.left, PopBias.BIGGEST, node)
    else:
        replacement = pop_leaf(node.right, PopBias.SMALLEST, node)

    if replacement is not None:
        # Se a folha era filha direta de 'node', o pop já liberou aquele lado
        replacement.left = node.left if node.left is not replacement else None
        replacement.right = node.right if node.right is not replacement else None

    relink(parent, node, replacement)
    node.left = node.right = None
    return replacement

def delete(root: Optional[BSTNode], value: int) -> Optional[BSTNode]:
    """Remove o valor. Retorna a raiz, que só muda quando a própria raiz é removida."""
    parent, current = None, root
    while current:
        if value == current.value:
            replacement = _replace_node(current, parent)
            return replacement if parent is None else root
        parent = current
        current = current.left if value < current.value else current.right
    return root

def release(node: Optional[BSTNode]):
    stack = [node] if node else []
    while stack:
        current = stack.pop()
        if current.left:
            stack.append(current.left)
        if current.right:
            stack.append(current.right)
        current.left = current.right = None


class BinarySearchTree:
    """
    Árvore binária de busca sem balanceamento.
    Mesmo contrato da AVLTree; serve de comparação nos benchmarks.
    """
    def __init__(self, verbose: bool = False):
        self.root: Optional[BSTNode] = None
        self.verbose = verbose

    def insert(self, value: int):
        self.root = insert(self.root, value)
        if self.verbose:
            print(f"[BST] Inserido {value} | raiz: {self.root.value}")

    def delete(self, value: int):
        self.root = delete(self.root, value)
        if self.verbose:
            root_value = self.root.value if self.root else None
            print(f"[BST] Removido {value} | raiz: {root_value}")

    def search(self, value: int) -> Optional[BSTNode]:
        return search(self.root, value)

    @property
    def depth(self) -> int:
        """Profundidade real (calculada percorrendo a árvore inteira)."""
        return measure_height(self.root)

    def clear(self):
        release(self.root)
        self.root = None

    def in_order(self) -> List[int]:
        return in_order_values(self.root)

    def render(self) -> str:
        return render_tree(self.root)

    def __contains__(self, value: int) -> bool:
        return self.search(value) is not None

    def __len__(self) -> int:
        return count_nodes(self.root)

    def __repr__(self):
        return f"BinarySearchTree(size={len(self)}, depth={self.depth})"
