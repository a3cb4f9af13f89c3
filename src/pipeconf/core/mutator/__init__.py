# src/pipeconf/core/mutator/__init__.py
"""
Mutator do Pipeconf.

Este pacote insere componentes default em uma `ConfigTree` preservando
suas invariantes estruturais.

## Componentes

- **endpoint**: inputs/outputs com promoção a broker
- **processors**: append de processors e de conditions (via `filter_parts`)
- **keyed**: caches/rate limits sob chave livre gerada
- **keys**: sequência determinística de chaves candidatas
- **mutator**: `Mutator`, as seis operações públicas

## Invariantes

- Toda validação ocorre antes de qualquer mutação
- Nenhuma entrada existente é removida, renomeada ou sobrescrita
"""

from .endpoint import insert_endpoint
from .keyed import insert_keyed
from .keys import candidate_keys, find_free_key
from .mutator import Mutator
from .processors import append_condition, append_processor
from .types import Insertion

__all__ = [
    "Insertion",
    "Mutator",
    "append_condition",
    "append_processor",
    "candidate_keys",
    "find_free_key",
    "insert_endpoint",
    "insert_keyed",
]
