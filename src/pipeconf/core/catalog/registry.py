# src/pipeconf/core/catalog/registry.py
"""
Registries de nomes de tipo por categoria de componente.

O Mutator não conhece tabelas globais de tipos: ele recebe, por injeção,
um oráculo por categoria capaz de responder "este tipo existe?".

Componentes:
    - TypeOracle   → protocolo mínimo (`contains`)
    - TypeRegistry → implementação explícita baseada em registro
    - RegistrySet  → um oráculo por `ComponentCategory`

Invariantes:
    - Nomes registrados são strings não vazias e únicas por registry
    - `list_ids()` é determinístico (ordenado)

Limites explícitos:
    - Não constrói configurações default (ver `defaults`)
    - Não há discovery automático de tipos
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Optional, Protocol, runtime_checkable

from ..tree.types import ComponentCategory


class DuplicateTypeError(ValueError):
    """Nome de tipo registrado duas vezes no mesmo registry."""


@runtime_checkable
class TypeOracle(Protocol):
    """
    Contrato mínimo de um registry de tipos.

    Qualquer objeto com `contains(type_name) -> bool` satisfaz o protocolo,
    o que permite injetar registries falsos em testes.
    """

    def contains(self, type_name: str) -> bool:
        ...


class TypeRegistry:
    """Registry determinístico de nomes de tipo de uma categoria.

    Extensibilidade é explícita: novos tipos são adicionados via `register()`.
    """

    def __init__(self, category: ComponentCategory, type_names: Optional[Iterable[str]] = None):
        self.category = ComponentCategory(category)
        self._names: Dict[str, None] = {}
        for name in type_names or ():
            self.register(name)

    def register(self, type_name: str) -> None:
        if not isinstance(type_name, str) or not type_name.strip():
            raise ValueError("type_name must be a non-empty string")
        if type_name in self._names:
            raise DuplicateTypeError(
                f"{self.category.value} type already registered: {type_name}"
            )
        self._names[type_name] = None

    def contains(self, type_name: str) -> bool:
        return type_name in self._names

    def list_ids(self) -> List[str]:
        return sorted(self._names)

    def __contains__(self, type_name: object) -> bool:
        return type_name in self._names

    def __len__(self) -> int:
        return len(self._names)


@dataclass(frozen=True)
class RegistrySet:
    """
    Conjunto de oráculos, um por categoria de componente.

    Decisões arquiteturais:
        - Cada categoria possui seu próprio oráculo, sem fallback entre elas
        - Qualquer `TypeOracle` é aceito (registries reais ou falsos)
    """

    input: TypeOracle
    output: TypeOracle
    processor: TypeOracle
    condition: TypeOracle
    cache: TypeOracle
    rate_limit: TypeOracle

    def for_category(self, category: ComponentCategory) -> TypeOracle:
        return getattr(self, ComponentCategory(category).value)

    @classmethod
    def from_names(cls, names: Dict[ComponentCategory, Iterable[str]]) -> "RegistrySet":
        """Constrói um `TypeRegistry` por categoria; categorias ausentes ficam vazias."""
        registries = {
            category.value: TypeRegistry(category, names.get(category, ()))
            for category in ComponentCategory
        }
        return cls(**registries)
