class TreeInvariantError(AssertionError):
    """
    Erro de lógica interna das árvores.
    Nunca é tratado pela biblioteca: indica bug no próprio código, não entrada inválida.
    """
    pass

class PopBias:
    """
    Viés usado para "estourar" uma folha durante a remoção.
    SMALLEST desce sempre pela esquerda, BIGGEST sempre pela direita.
    """
    SMALLEST = "MENOR"
    BIGGEST = "MAIOR"

class RotationDirection:
    """
    Sentido de uma rotação simples.
    LEFT promove o filho direito; RIGHT promove o filho esquerdo.
    """
    LEFT = "ESQUERDA"
    RIGHT = "DIREITA"

def biased_child(node, bias: str):
    """Filho para onde o viés manda descer."""
    if bias == PopBias.SMALLEST:
        return node.left
    if bias == PopBias.BIGGEST:
        return node.right
    raise TreeInvariantError(f"Erro de lógica: viés de remoção inválido ({bias!r})")

def inner_child(node, bias: str):
    """Filho do lado oposto ao viés (o que sobe quando o nó é estourado)."""
    if bias == PopBias.SMALLEST:
        return node.right
    if bias == PopBias.BIGGEST:
        return node.left
    raise TreeInvariantError(f"Erro de lógica: viés de remoção inválido ({bias!r})")

def relink(parent, old, new):
    """
    Troca 'old' por 'new' no pai.
    O lado é descoberto por identidade; sem pai não há nada a religar.
    """
    if parent is None:
        return
    if parent.left is old:
        parent.left = new
    else:
        parent.right = new
