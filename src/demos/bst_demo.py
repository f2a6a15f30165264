import sys
import os

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..')))

from src.core.structures import binary_tree
from src.core.io.tree_printer import print_tree

BASE_VALUES = [8, 3, 10, 1, 6, 4, 7, 14, 13, 20]
RULE = "=" * 80

def main() -> int:
    print(" Iniciando ".center(80, "="))

    root = None
    for value in BASE_VALUES:
        root = binary_tree.insert(root, value)

    print("Árvore base:")
    print_tree(root)
    print(RULE)

    print("Inserindo os nós 24 e 5:")
    root = binary_tree.insert(root, 24)
    root = binary_tree.insert(root, 5)
    print_tree(root)
    print(RULE)

    print("Removendo os nós 6 e 10:")
    root = binary_tree.delete(root, 6)
    root = binary_tree.delete(root, 10)
    print_tree(root)
    print(RULE)

    print("Removendo a raiz da árvore:")
    root = binary_tree.delete(root, 8)
    print_tree(root)
    print(RULE)

    print("Busca por um elemento existente:")
    print_tree(binary_tree.search(root, 5))
    print(RULE)

    print("Busca por um elemento removido:")
    print_tree(binary_tree.search(root, 10))
    print(RULE)

    binary_tree.release(root)
    return 0

if __name__ == "__main__":
    sys.exit(main())
