# src/pipeconf/core/catalog/defaults.py
"""
Factory de declarações default.

No Pipeconf, payloads default de cada tipo são centralizados e explícitos,
sem inferência dinâmica. Este módulo fornece:

- DefaultFactory: protocolo `build(category, type_name) -> Declaration`
- ComponentSpec: payload default de um tipo de uma categoria
- CatalogDefaults: factory baseada em specs registradas

Regras:
- A factory é total: um tipo sem spec produz uma declaração com payload vazio
  (a validação de nomes é responsabilidade dos registries)
- Cada chamada devolve estruturas novas; nada é compartilhado entre declarações
"""

from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Optional, Protocol, Tuple, runtime_checkable

from ..tree.types import (
    TYPE_BROKER,
    TYPE_FILTER_PARTS,
    Broker,
    Component,
    ComponentCategory,
    Declaration,
    FilterParts,
)


@runtime_checkable
class DefaultFactory(Protocol):
    """Produz a declaração default de um tipo; sem efeitos colaterais."""

    def build(self, category: ComponentCategory, type_name: str) -> Declaration:
        ...


@dataclass(frozen=True)
class ComponentSpec:
    """Especificação do payload default de um tipo."""

    category: ComponentCategory
    type_name: str
    default_payload: Dict[str, Any] = field(default_factory=dict)


class CatalogDefaults:
    """Factory determinística de declarações default.

    `default_condition` é o tipo de condition embutido em um `filter_parts`
    recém-construído, antes que o chamador o substitua.
    """

    def __init__(
        self,
        specs: Optional[Iterable[ComponentSpec]] = None,
        *,
        default_condition: str = "text",
    ):
        self._specs: Dict[Tuple[ComponentCategory, str], ComponentSpec] = {}
        self.default_condition = default_condition
        for s in specs or ():
            self.register(s)

    def register(self, spec: ComponentSpec) -> None:
        if not isinstance(spec, ComponentSpec):
            raise TypeError("spec must be a ComponentSpec")
        if not isinstance(spec.type_name, str) or not spec.type_name.strip():
            raise ValueError("type_name must be a non-empty string")
        key = (ComponentCategory(spec.category), spec.type_name)
        if key in self._specs:
            raise ValueError(f"spec already registered: {key[0].value}.{key[1]}")
        self._specs[key] = spec

    def default_payload(self, category: ComponentCategory, type_name: str) -> Dict[str, Any]:
        spec = self._specs.get((ComponentCategory(category), type_name))
        if spec is None:
            return {}
        return deepcopy(spec.default_payload)

    def build(self, category: ComponentCategory, type_name: str) -> Declaration:
        """Constrói a declaração default de `type_name`.

        `broker` (input/output) e `filter_parts` (processor) são construídos
        como suas variantes; os demais tipos como `Component`.
        """
        category = ComponentCategory(category)
        payload = self.default_payload(category, type_name)

        if type_name == TYPE_BROKER and category in (ComponentCategory.INPUT, ComponentCategory.OUTPUT):
            return Broker(category=category, children=[], payload=payload)

        if type_name == TYPE_FILTER_PARTS and category is ComponentCategory.PROCESSOR:
            condition = self.build(ComponentCategory.CONDITION, self.default_condition)
            return FilterParts(condition=condition, payload=payload)

        return Component(type_name=type_name, payload=payload)
