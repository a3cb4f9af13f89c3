# src/pipeconf/core/tree/types.py
"""
Tipos canônicos da árvore de configuração do Pipeconf.

Este módulo define as estruturas que representam uma configuração de
pipeline já decodificada e estruturalmente válida:

    - ComponentCategory → enum das categorias de componentes
    - Declaration       → sum type com três variantes explícitas
        - Component   → declaração simples (tipo + payload)
        - Broker      → fan-in/fan-out com declarações aninhadas
        - FilterParts → processor que hospeda uma condition
    - Pipeline, Manager, ConfigTree → agregados da árvore

Decisões arquiteturais:
    - Cada variante é uma classe própria; o código despacha por classe,
      nunca por comparação de strings de "kind"
    - As estruturas são mutáveis: o Mutator altera a árvore in-place
    - Payloads específicos de tipo são dicionários puros
    - Chaves de uma declaração além de `type` e do payload (ex.: os
      `processors` de um input) ficam em `extras` da própria declaração

Invariantes:
    - `ConfigTree.input` e `ConfigTree.output` nunca são None
    - `Broker.children` preserva a ordem de inserção
    - `FilterParts.condition` está sempre presente

Limites explícitos:
    - Não valida nomes de tipo (responsabilidade dos registries)
    - Não constrói defaults (responsabilidade da factory)
    - Não lê nem escreve arquivos
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Union


TYPE_BROKER = "broker"
TYPE_FILTER_PARTS = "filter_parts"


class ComponentCategory(str, Enum):
    """
    Categorias de componentes de uma configuração de pipeline.

    Os valores são strings para facilitar:
        - serialização em YAML/JSON
        - mensagens de erro e eventos do journal
        - uso direto como argumento de CLI

    Invariantes:
        - Cada registry e cada nome de tipo pertencem a exatamente uma categoria
    """
    INPUT = "input"
    OUTPUT = "output"
    PROCESSOR = "processor"
    CONDITION = "condition"
    CACHE = "cache"
    RATE_LIMIT = "rate_limit"


@dataclass
class Component:
    """Declaração simples: nome do tipo e payload de configuração do tipo."""

    type_name: str
    payload: Dict[str, Any] = field(default_factory=dict)
    extras: Dict[str, Any] = field(default_factory=dict)


@dataclass
class Broker:
    """
    Declaração do tipo `broker` para inputs ou outputs.

    `children` contém declarações da mesma categoria do broker, na ordem
    em que foram adicionadas. `payload` guarda apenas opções do próprio
    broker (ex.: `copies`, `pattern`), nunca os filhos.

    `extras` guarda chaves irmãs de `type` e `broker` na declaração
    (ex.: `processors` de um input), reescritas sem alteração.
    """

    category: ComponentCategory
    children: List["Declaration"] = field(default_factory=list)
    payload: Dict[str, Any] = field(default_factory=dict)
    extras: Dict[str, Any] = field(default_factory=dict)

    @property
    def type_name(self) -> str:
        return TYPE_BROKER

    @property
    def children_key(self) -> str:
        """Nome do campo que guarda os filhos no documento (`inputs`/`outputs`)."""
        return f"{self.category.value}s"


@dataclass
class FilterParts:
    """Processor `filter_parts`, que executa uma condition como etapa do pipeline."""

    condition: Component
    payload: Dict[str, Any] = field(default_factory=dict)
    extras: Dict[str, Any] = field(default_factory=dict)

    @property
    def type_name(self) -> str:
        return TYPE_FILTER_PARTS


Declaration = Union[Component, Broker, FilterParts]


@dataclass
class Pipeline:
    processors: List[Declaration] = field(default_factory=list)
    threads: int = 1


@dataclass
class Manager:
    """Recursos auxiliares indexados por chave (caches e rate limits)."""

    caches: Dict[str, Declaration] = field(default_factory=dict)
    rate_limits: Dict[str, Declaration] = field(default_factory=dict)


@dataclass
class ConfigTree:
    """
    Raiz da configuração de um pipeline.

    A árvore é construída pelo chamador (diretamente ou via codec) e
    apenas cresce através do Mutator: nenhuma entrada existente é
    removida ou renomeada.

    `extras` guarda seções do documento que o Mutator não manipula
    (ex.: `http`, `logger`), para que sejam reescritas sem alteração.
    """

    input: Declaration
    output: Declaration
    pipeline: Pipeline = field(default_factory=Pipeline)
    manager: Manager = field(default_factory=Manager)
    extras: Dict[str, Any] = field(default_factory=dict)
