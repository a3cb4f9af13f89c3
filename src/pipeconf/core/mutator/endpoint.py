# src/pipeconf/core/mutator/endpoint.py
"""
Inserção de endpoints (inputs e outputs) com promoção a broker.

Política de promoção (v1):
    - Se o slot já é um `Broker`, o novo endpoint é acrescentado ao fim
      de `children`.
    - Caso contrário, o slot é promovido: um broker default é criado, a
      declaração atual vira seu primeiro (e único) filho, e o broker
      substitui o slot.
    - Se o tipo pedido é o próprio `broker` e a promoção acabou de
      ocorrer, nada mais é acrescentado (sem broker dentro de broker).

Invariantes:
    - A declaração original é reaproveitada como está (mesmo objeto)
    - O endpoint original é sempre o primeiro filho do broker
    - Apenas o slot selecionado é alterado
    - Validação e construção ocorrem antes de qualquer mutação
"""

from __future__ import annotations

from typing import Optional

from ..catalog.defaults import DefaultFactory
from ..catalog.registry import TypeOracle
from ..errors import unrecognised_type
from ..tree.types import TYPE_BROKER, Broker, ComponentCategory, ConfigTree
from .types import Insertion


ENDPOINT_CATEGORIES = (ComponentCategory.INPUT, ComponentCategory.OUTPUT)


def insert_endpoint(
    *,
    registry: TypeOracle,
    factory: DefaultFactory,
    category: ComponentCategory,
    type_name: str,
    tree: ConfigTree,
    passthrough_type: Optional[str] = None,
) -> Insertion:
    """
    Insere um endpoint default de `type_name` no slot de input ou output.

    `passthrough_type` é um nome reservado aceito sem consulta ao registry
    (a validação fica a cargo de uma ferramenta externa).

    Raises:
        UnrecognisedType: Se o tipo não está registrado e não é o passthrough.
        ValueError: Se `category` não é input nem output.
    """
    category = ComponentCategory(category)
    if category not in ENDPOINT_CATEGORIES:
        raise ValueError(f"Categoria sem slot de endpoint: {category.value}")

    is_passthrough = passthrough_type is not None and type_name == passthrough_type
    if not is_passthrough and not registry.contains(type_name):
        raise unrecognised_type(category=category.value, type_name=type_name)

    endpoint = factory.build(category, type_name)

    slot = category.value
    current = getattr(tree, slot)

    if isinstance(current, Broker):
        current.children.append(endpoint)
        return Insertion(category=category, type_name=type_name)

    broker = factory.build(category, TYPE_BROKER)
    if not isinstance(broker, Broker):
        raise TypeError(f"Factory deve construir Broker para {slot}.broker")

    broker.children.append(current)
    setattr(tree, slot, broker)

    if type_name == TYPE_BROKER:
        return Insertion(category=category, type_name=type_name, promoted=True, appended=False)

    broker.children.append(endpoint)
    return Insertion(category=category, type_name=type_name, promoted=True)
