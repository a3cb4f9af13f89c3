# src/pipeconf/core/mutator/keyed.py
"""
Inserção de recursos indexados por chave (caches e rate limits).

Ordem das etapas:
    1. validar o nome do tipo no registry da categoria
    2. encontrar uma chave livre (ver `keys`)
    3. construir a declaração default
    4. inserir no mapeamento

As etapas 1–3 não tocam a árvore; uma falha em qualquer uma delas deixa
o mapeamento exatamente como estava. Uma chave existente nunca é
sobrescrita.
"""

from __future__ import annotations

from typing import Dict

from ..catalog.defaults import DefaultFactory
from ..catalog.registry import TypeOracle
from ..errors import key_space_exhausted, unrecognised_type
from ..tree.types import ComponentCategory, ConfigTree, Declaration
from .keys import find_free_key
from .types import Insertion


def keyed_mapping(tree: ConfigTree, category: ComponentCategory) -> Dict[str, Declaration]:
    """Seleciona o mapeamento do manager correspondente à categoria."""
    if category is ComponentCategory.CACHE:
        return tree.manager.caches
    if category is ComponentCategory.RATE_LIMIT:
        return tree.manager.rate_limits
    raise ValueError(f"Categoria sem mapeamento indexado: {category.value}")


def insert_keyed(
    *,
    registry: TypeOracle,
    factory: DefaultFactory,
    category: ComponentCategory,
    type_name: str,
    tree: ConfigTree,
    prefix: str,
    limit: int,
) -> Insertion:
    """
    Insere um recurso default de `type_name` sob a primeira chave livre.

    Raises:
        UnrecognisedType: Se o tipo não está registrado.
        KeySpaceExhausted: Se as `limit` candidatas já estão ocupadas.
    """
    category = ComponentCategory(category)
    mapping = keyed_mapping(tree, category)

    if not registry.contains(type_name):
        raise unrecognised_type(category=category.value, type_name=type_name)

    key = find_free_key(mapping, prefix=prefix, limit=limit)
    if key is None:
        raise key_space_exhausted(category=category.value, prefix=prefix, limit=limit)

    mapping[key] = factory.build(category, type_name)
    return Insertion(category=category, type_name=type_name, key=key)
