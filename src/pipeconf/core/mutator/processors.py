# src/pipeconf/core/mutator/processors.py
"""
Inserção no pipeline de processors.

- `append_processor`: acrescenta um processor default ao fim do pipeline
- `append_condition`: embrulha uma condition default em um processor
  `filter_parts` e o acrescenta ao fim do pipeline

Não há reordenação nem deduplicação: inserir o mesmo tipo duas vezes
produz duas entradas.
"""

from __future__ import annotations

from ..catalog.defaults import DefaultFactory
from ..catalog.registry import TypeOracle
from ..errors import unrecognised_type
from ..tree.types import TYPE_FILTER_PARTS, Component, ComponentCategory, ConfigTree, Declaration, FilterParts
from .types import Insertion


def _append(tree: ConfigTree, processor: Declaration) -> None:
    tree.pipeline.processors.append(processor)


def append_processor(
    *,
    registry: TypeOracle,
    factory: DefaultFactory,
    type_name: str,
    tree: ConfigTree,
) -> Insertion:
    if not registry.contains(type_name):
        raise unrecognised_type(category=ComponentCategory.PROCESSOR.value, type_name=type_name)

    _append(tree, factory.build(ComponentCategory.PROCESSOR, type_name))
    return Insertion(category=ComponentCategory.PROCESSOR, type_name=type_name)


def append_condition(
    *,
    registry: TypeOracle,
    factory: DefaultFactory,
    type_name: str,
    tree: ConfigTree,
) -> Insertion:
    """
    Acrescenta um `filter_parts` cuja condition é o default de `type_name`.

    A condition construída substitui a condition default do `filter_parts`
    antes da inserção; o processor nunca entra na árvore sem ela.

    Raises:
        UnrecognisedType: Se o tipo não está registrado como condition.
    """
    if not registry.contains(type_name):
        raise unrecognised_type(category=ComponentCategory.CONDITION.value, type_name=type_name)

    condition = factory.build(ComponentCategory.CONDITION, type_name)
    if not isinstance(condition, Component):
        raise TypeError(f"Factory deve construir Component para condition.{type_name}")

    processor = factory.build(ComponentCategory.PROCESSOR, TYPE_FILTER_PARTS)
    if not isinstance(processor, FilterParts):
        raise TypeError("Factory deve construir FilterParts para processor.filter_parts")

    processor.condition = condition
    _append(tree, processor)
    return Insertion(category=ComponentCategory.CONDITION, type_name=type_name)
