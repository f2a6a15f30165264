import math
from typing import Dict, List
import numpy as np

def node_depths(root) -> np.ndarray:
    """Profundidade de cada nó (raiz = 1), em ordem de visita pré-ordem."""
    depths: List[int] = []
    stack = [(root, 1)] if root else []
    while stack:
        node, depth = stack.pop()
        depths.append(depth)
        if node.right:
            stack.append((node.right, depth + 1))
        if node.left:
            stack.append((node.left, depth + 1))
    return np.array(depths, dtype=int)

def depth_summary(root) -> Dict[str, float]:
    """
    Resumo das profundidades da árvore.
    'ideal' é a altura mínima possível para aquela quantidade de nós: ceil(log2(n + 1)).
    """
    depths = node_depths(root)
    if depths.size == 0:
        return {'nodes': 0, 'max_depth': 0, 'mean_depth': 0.0, 'ideal': 0}

    n = int(depths.size)
    return {
        'nodes': n,
        'max_depth': int(depths.max()),
        'mean_depth': float(np.mean(depths)),
        'ideal': int(math.ceil(math.log2(n + 1)))
    }
