from typing import List

class TreePrinter:
    """
    Desenha uma árvore binária como um esboço indentado.
    O filho esquerdo aparece com '|-> ' e o direito com '┗-> '.
    Um filho ausente ainda imprime o conector, para deixar claro de que lado falta o nó.
    """
    LEFT_CONNECTOR = "|-> "
    RIGHT_CONNECTOR = "┗-> "
    LEFT_PADDING = "|   "
    RIGHT_PADDING = "    "

    def __init__(self):
        self.lines: List[str] = []

    def render(self, node) -> str:
        """
        Percorre com pilha explícita (sem limite de profundidade).
        Cada item pendente carrega a própria indentação; None marca um filho ausente.
        """
        self.lines = []
        if node is None:
            return ""

        pending = [(node, "", "")]
        while pending:
            current, pointy, padding = pending.pop()
            if current is None:
                self.lines.append(pointy)
                continue

            self.lines.append(f"{pointy}{current.value}")
            if current.left is None and current.right is None:
                continue

            # Direita entra primeiro na pilha para sair depois da esquerda
            pending.append((current.right, padding + self.RIGHT_CONNECTOR, padding + self.RIGHT_PADDING))
            pending.append((current.left, padding + self.LEFT_CONNECTOR, padding + self.LEFT_PADDING))
        return "\n".join(self.lines)

def render_tree(node) -> str:
    return TreePrinter().render(node)

def print_tree(node):
    """Imprime a árvore no console (nada para árvore vazia)."""
    text = render_tree(node)
    if text:
        print(text)
