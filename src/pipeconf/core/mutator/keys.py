# src/pipeconf/core/mutator/keys.py
"""
Geração de chaves livres para recursos indexados.

Sequência de candidatas (v1), com prefixo `example` e limite 10000:

    example, example1, example2, ..., example9999

A primeira candidata ausente do mapeamento é escolhida. A unicidade é
derivada do estado atual do mapeamento a cada chamada: não há contador
global nem aleatoriedade, e chaves adicionadas ou removidas externamente
entre chamadas são respeitadas.
"""

from __future__ import annotations

from typing import Container, Iterator, Optional


def candidate_keys(prefix: str, limit: int) -> Iterator[str]:
    """Gera as `limit` candidatas; a primeira é o prefixo sem sufixo."""
    for i in range(limit):
        yield prefix if i == 0 else f"{prefix}{i}"


def find_free_key(existing: Container[str], *, prefix: str, limit: int) -> Optional[str]:
    """Retorna a primeira candidata livre, ou None se todas estiverem ocupadas."""
    for candidate in candidate_keys(prefix, limit):
        if candidate not in existing:
            return candidate
    return None
