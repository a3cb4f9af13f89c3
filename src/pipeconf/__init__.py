# src/pipeconf/__init__.py
"""
Pipeconf — motor de mutação de árvores de configuração de pipelines.

Este pacote raiz define o namespace público do Pipeconf: operações que
recebem uma configuração de pipeline já validada (inputs, outputs,
processors, conditions, caches e rate limits) e inserem nela um novo
componente default, preservando as invariantes estruturais da árvore.

Políticas centrais:
    - Promoção a broker: o primeiro endpoint extra transforma o slot de
      input/output em um broker, sem alterar o endpoint original
    - Chaves livres: caches e rate limits recebem chaves determinísticas
      (`example`, `example1`, ...) com limite explícito

Limites explícitos:
    - Não executa pipelines
    - Não valida semântica dos componentes inseridos
    - Não oferece desfazer/transações nem suporte a mutação concorrente
"""
from .core.exceptions import KeySpaceExhausted, PipeconfException, UnrecognisedType
from .core.mutator import Insertion, Mutator
from .core.tree import ComponentCategory, ConfigTree, tree_from_dict, tree_to_dict

__version__ = "0.1.0"

__all__ = [
    "ComponentCategory",
    "ConfigTree",
    "Insertion",
    "KeySpaceExhausted",
    "Mutator",
    "PipeconfException",
    "UnrecognisedType",
    "tree_from_dict",
    "tree_to_dict",
]
