from typing import Optional, Sequence

NOT_FOUND = -1

def ternary_search(haystack: Optional[Sequence[int]], needle: int, verbose: bool = False) -> int:
    """
    Procura 'needle' numa sequência ordenada (lista, tupla ou array numpy).
    Divide o intervalo em três partes a cada passo.
    Retorna o índice encontrado, ou -1 se não achar ou se a sequência for vazia/None.
    """
    if haystack is None or len(haystack) == 0:
        if verbose: print("[TERNÁRIA] Sequência vazia, nada a procurar.")
        return NOT_FOUND

    return _ternary_search(haystack, needle, 0, len(haystack) - 1, verbose)

def _ternary_search(haystack: Sequence[int], needle: int, lower_bound: int, upper_bound: int, verbose: bool) -> int:
    if lower_bound == upper_bound:
        return lower_bound if haystack[lower_bound] == needle else NOT_FOUND
    if lower_bound > upper_bound:
        return NOT_FOUND

    chunk_size = (upper_bound - lower_bound) // 3
    lower_pivot = lower_bound + chunk_size
    upper_pivot = upper_bound - chunk_size

    if verbose:
        print(f"[TERNÁRIA] Intervalo [{lower_bound}, {upper_bound}] | pivôs {lower_pivot} e {upper_pivot}")

    if needle == haystack[lower_pivot]:
        return lower_pivot
    if needle == haystack[upper_pivot]:
        return upper_pivot
    if needle < haystack[lower_pivot]:
        return _ternary_search(haystack, needle, lower_bound, lower_pivot - 1, verbose)
    if needle > haystack[upper_pivot]:
        return _ternary_search(haystack, needle, upper_pivot + 1, upper_bound, verbose)
    return _ternary_search(haystack, needle, lower_pivot + 1, upper_pivot - 1, verbose)
