"""
Bateria fixa de casos para a busca ternária.
O código de saída do processo é a quantidade de casos que falharam (0 = tudo certo).
"""
import sys
import os
from dataclasses import dataclass
from typing import List, Optional, Sequence

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..')))

from src.core.algorithms.ternary_search import ternary_search

HAYSTACK = [-28, -10, -4, 0, 5, 10, 20, 140, 1000]

@dataclass
class SearchCase:
    needle: int
    index: int
    haystack: Optional[Sequence[int]] = None

def build_cases() -> List[SearchCase]:
    cases = [SearchCase(value, i, HAYSTACK) for i, value in enumerate(HAYSTACK)]
    cases += [SearchCase(value, -1, HAYSTACK) for value in (-20, -5, -2, 2, 8, 15, 50, 500, -243)]
    cases.append(SearchCase(-10, -1, None))
    cases.append(SearchCase(20, -1, []))
    return cases

def execute_case(case: SearchCase) -> int:
    """Roda um caso. Retorna 0 se passou, 1 caso contrário."""
    size = len(case.haystack) if case.haystack is not None else 0
    print(f"Esperado needle '{case.needle}' em '{case.index}' - haystack de tamanho '{size}': ", end="")

    index = ternary_search(case.haystack, case.needle)
    if index != case.index:
        print(f"Error!!\n\tÍndice obtido: '{index}'")
        return 1

    print("OK")
    return 0

def main() -> int:
    print("Iniciando testes...")
    cases = build_cases()
    failures = sum(execute_case(case) for case in cases)
    print(f"{failures} de {len(cases)} testes falharam")
    return failures

if __name__ == "__main__":
    sys.exit(main())
