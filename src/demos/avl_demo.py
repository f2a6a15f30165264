import sys
import os

# Permite rodar o arquivo direto (python src/demos/avl_demo.py)
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..')))

from src.core.structures import avl_tree
from src.core.io.tree_printer import print_tree

BASE_VALUES = [10, 5, 15, 3, 8, 20]
RULE = "=" * 80

def main() -> int:
    print(" Iniciando ".center(80, "="))

    root = avl_tree.new_node(BASE_VALUES[0])
    for value in BASE_VALUES[1:]:
        root = avl_tree.insert(root, value)

    print("Árvore base:")
    print_tree(root)
    print(RULE)

    print("Inserindo o nó 24:")
    root = avl_tree.insert(root, 24)
    print_tree(root)
    print(RULE)

    print("Removendo o nó 20:")
    root = avl_tree.delete(root, 20)
    print_tree(root)
    print(RULE)

    print("Busca por um elemento existente:")
    print_tree(avl_tree.search(root, 5))
    print(RULE)

    print("Busca por um elemento removido:")
    print_tree(avl_tree.search(root, 20))
    print(RULE)

    print(f"Fator de balanceamento do nó 10: {avl_tree.balance_factor(avl_tree.search(root, 10))}")
    print(RULE)

    print(f"Altura da árvore: {avl_tree.height(root)}")
    print(RULE)

    print("Inserindo 6 e 7 para forçar uma rotação LR:")
    root = avl_tree.insert(root, 6)
    root = avl_tree.insert(root, 7)
    print_tree(root)
    print(RULE)

    print("Inserindo 23 para forçar uma rotação RL:")
    root = avl_tree.insert(root, 23)
    print_tree(root)
    print(RULE)

    print("Removendo a raiz da árvore:")
    root = avl_tree.delete(root, root.value)
    print_tree(root)
    print(RULE)

    print("Removendo uma folha da árvore:")
    root = avl_tree.delete(root, 3)
    print_tree(root)
    print(RULE)

    avl_tree.release(root)
    return 0

if __name__ == "__main__":
    sys.exit(main())
