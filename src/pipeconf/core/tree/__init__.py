# src/pipeconf/core/tree/__init__.py
"""
Árvore de configuração do Pipeconf.

- **types**
  - `ComponentCategory`: categorias de componentes
  - `Component`, `Broker`, `FilterParts`: variantes de `Declaration`
  - `Pipeline`, `Manager`, `ConfigTree`: agregados da árvore

- **codec**
  - `tree_from_dict` / `tree_to_dict`: conversão documento ↔ árvore
  - `tree_fingerprint`: hash canônico da árvore

A árvore não conhece registries, factory nem Mutator.
"""

from .codec import (
    declaration_from_dict,
    declaration_to_dict,
    tree_fingerprint,
    tree_from_dict,
    tree_to_dict,
)
from .types import (
    TYPE_BROKER,
    TYPE_FILTER_PARTS,
    Broker,
    Component,
    ComponentCategory,
    ConfigTree,
    Declaration,
    FilterParts,
    Manager,
    Pipeline,
)

__all__ = [
    "TYPE_BROKER",
    "TYPE_FILTER_PARTS",
    "Broker",
    "Component",
    "ComponentCategory",
    "ConfigTree",
    "Declaration",
    "FilterParts",
    "Manager",
    "Pipeline",
    "declaration_from_dict",
    "declaration_to_dict",
    "tree_fingerprint",
    "tree_from_dict",
    "tree_to_dict",
]
