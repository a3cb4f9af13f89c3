# src/pipeconf/core/mutator/types.py
"""
Resultado de uma inserção bem-sucedida.

`Insertion` descreve o que o Mutator fez na árvore, para que o chamador
(CLI, testes, journal) possa reportar sem reinspecionar a árvore:

    - key: chave gerada (apenas caches e rate limits)
    - promoted: o slot de input/output foi promovido a broker nesta chamada
    - appended: uma nova declaração foi efetivamente acrescentada
      (False apenas quando `broker` foi pedido e a promoção bastou)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..tree.types import ComponentCategory


@dataclass(frozen=True)
class Insertion:
    category: ComponentCategory
    type_name: str
    key: Optional[str] = None
    promoted: bool = False
    appended: bool = True
