from typing import List, Optional
from src.core.models.direction import (
    PopBias, RotationDirection, TreeInvariantError, biased_child, inner_child, relink
)
from src.core.algorithms.tree_validation import count_nodes, in_order_values
from src.core.io.tree_printer import render_tree

class AVLNode:
    """
    Nó interno da Árvore AVL.
    Armazena o valor e a altura da subárvore que ele enraíza.
    """
    def __init__(self, value: int):
        self.value = value
        self.left: Optional["AVLNode"] = None
        self.right: Optional["AVLNode"] = None
        self.height = 1         # Altura inicial do nó é 1

    def __repr__(self):
        return f"AVLNode({self.value}, h={self.height})"

# --- API funcional: toda operação que muda a árvore devolve a nova raiz ---

def new_node(value: int) -> AVLNode:
    return AVLNode(value)

def height(node: Optional[AVLNode]) -> int:
    if not node:
        return 0
    return node.height

def balance_factor(node: Optional[AVLNode]) -> int:
    """Fator de balanceamento: altura(direita) - altura(esquerda). Subárvore vazia vale 0."""
    if not node:
        return 0
    return height(node.right) - height(node.left)

def update_height(node: AVLNode):
    node.height = 1 + max(height(node.left), height(node.right))

def search(node: Optional[AVLNode], value: int) -> Optional[AVLNode]:
    """Busca recursiva em O(log n). Retorna o nó que guarda o valor ou None."""
    if node is None:
        return None
    if value == node.value:
        return node
    if value < node.value:
        return search(node.left, value)
    return search(node.right, value)

def rotate(node: AVLNode, direction: str) -> AVLNode:
    """
    Rotação simples. Devolve o nó promovido, que ocupa o lugar de 'node'.
    LEFT promove o filho direito (caso Right-Right);
    RIGHT promove o filho esquerdo (caso Left-Left).
    """
    if direction == RotationDirection.LEFT:
        promoted = node.right
        node.right = promoted.left
        promoted.left = node
    elif direction == RotationDirection.RIGHT:
        promoted = node.left
        node.left = promoted.right
        promoted.right = node
    else:
        raise TreeInvariantError(f"Erro de lógica: direção de rotação inválida ({direction!r})")

    # O nó rebaixado primeiro, pois agora é filho do promovido
    update_height(node)
    update_height(promoted)
    return promoted

def rebalance(node: AVLNode, parent: Optional[AVLNode] = None) -> Optional[AVLNode]:
    """
    Aplica a rotação necessária em 'node' e religa o resultado no pai.
    Retorna o nó que tomou o lugar de 'node', ou None se nenhuma rotação foi feita.
    Sem pai (node era a raiz), cabe a quem chamou trocar a referência da raiz.
    """
    factor = balance_factor(node)

    if factor > 1:
        # Caso Right-Left: o filho direito pende para a esquerda
        if balance_factor(node.right) < 0:
            node.right = rotate(node.right, RotationDirection.RIGHT)
        # Caso Right-Right
        promoted = rotate(node, RotationDirection.LEFT)
    elif factor < -1:
        # Caso Left-Right: o filho esquerdo pende para a direita
        if balance_factor(node.left) > 0:
            node.left = rotate(node.left, RotationDirection.LEFT)
        # Caso Left-Left
        promoted = rotate(node, RotationDirection.RIGHT)
    else:
        return None

    relink(parent, node, promoted)
    return promoted

def _insert_inner(node: AVLNode, parent: Optional[AVLNode], value: int) -> AVLNode:
    if value == node.value:
        # Duplicatas são ignoradas
        return node

    if value < node.value:
        if node.left is None:
            node.left = new_node(value)
        else:
            _insert_inner(node.left, node, value)
    else:
        if node.right is None:
            node.right = new_node(value)
        else:
            _insert_inner(node.right, node, value)

    update_height(node)
    promoted = rebalance(node, parent)
    return promoted if promoted else node

def insert(root: Optional[AVLNode], value: int) -> AVLNode:
    """Insere o valor e rebalanceia na volta da recursão. Retorna a (possivelmente nova) raiz."""
    if root is None:
        return new_node(value)
    return _insert_inner(root, None, value)

def pop_leaf(node: Optional[AVLNode], bias: str, parent: Optional[AVLNode] = None) -> Optional[AVLNode]:
    """
    Estoura a folha extrema da subárvore de 'node' seguindo o viés.

    Desce sempre para o lado do viés até achar o nó sem filho naquele lado.
    Esse nó é desligado do pai e o seu filho interno (no máximo uma folha numa AVL)
    sobe para o lugar dele, mantendo a ordem. Os nós percorridos têm a altura
    recalculada e são rebalanceados na volta.
    """
    if node is None:
        return None

    following = biased_child(node, bias)
    if following is None:
        relink(parent, node, inner_child(node, bias))
        node.left = node.right = None
        update_height(node)
        return node

    leaf = pop_leaf(following, bias, node)
    update_height(node)
    rebalance(node, parent)
    return leaf

def _replace_node(node: AVLNode, parent: Optional[AVLNode]) -> Optional[AVLNode]:
    """Substitui 'node' por uma folha estourada de uma das suas subárvores."""
    if node.left is not None:
        replacement = pop_leaf(node.left, PopBias.BIGGEST, node)
    else:
        replacement = pop_leaf(node.right, PopBias.SMALLEST, node)

    # O pop já religou os filhos de 'node', então a folha nunca aparece como filha de si mesma
    if replacement is not None:
        replacement.left = node.left if node.left is not replacement else None
        replacement.right = node.right if node.right is not replacement else None
        update_height(replacement)

    relink(parent, node, replacement)
    node.left = node.right = None
    return replacement

def _delete_inner(node: Optional[AVLNode], parent: Optional[AVLNode], value: int) -> Optional[AVLNode]:
    if node is None:
        return None

    if value == node.value:
        node = _replace_node(node, parent)
    elif value < node.value:
        _delete_inner(node.left, node, value)
    else:
        _delete_inner(node.right, node, value)

    # O nó removido era uma folha: nada a rebalancear neste nível
    if node is None:
        return None

    update_height(node)
    promoted = rebalance(node, parent)
    return promoted if promoted else node

def delete(root: Optional[AVLNode], value: int) -> Optional[AVLNode]:
    """Remove o valor (se existir) e rebalanceia até a raiz. Retorna a nova raiz."""
    return _delete_inner(root, None, value)

def release(node: Optional[AVLNode]):
    """Desliga recursivamente todos os nós da árvore."""
    if node is None:
        return
    release(node.left)
    release(node.right)
    node.left = node.right = None


class AVLTree:
    """
    Árvore AVL sobre a API funcional acima.
    Guarda a raiz e sempre a troca pelo retorno das operações de escrita.
    """
    def __init__(self, verbose: bool = False):
        self.root: Optional[AVLNode] = None
        self.verbose = verbose

    def insert(self, value: int):
        """Insere um novo valor e rebalanceia a árvore automaticamente."""
        self.root = insert(self.root, value)
        if self.verbose:
            print(f"[AVL] Inserido {value} | raiz: {self.root.value} | altura: {self.height}")

    def delete(self, value: int):
        """Remove um valor; valores ausentes deixam a árvore intacta."""
        self.root = delete(self.root, value)
        if self.verbose:
            root_value = self.root.value if self.root else None
            print(f"[AVL] Removido {value} | raiz: {root_value} | altura: {self.height}")

    def search(self, value: int) -> Optional[AVLNode]:
        return search(self.root, value)

    @property
    def height(self) -> int:
        return height(self.root)

    def balance_factor(self, value: Optional[int] = None) -> int:
        """Fator da raiz, ou do nó que guarda 'value'."""
        if value is None:
            return balance_factor(self.root)
        node = self.search(value)
        if node is None:
            raise ValueError(f"Valor {value} não está na árvore.")
        return balance_factor(node)

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
        return f"AVLTree(size={len(self)}, height={self.height})"
