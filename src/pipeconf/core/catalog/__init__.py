"""
Catálogo de tipos do Pipeconf.

Colaboradores externos do Mutator, consumidos apenas por contrato:
    - registries (`TypeOracle.contains`) → quais nomes de tipo existem
    - factory (`DefaultFactory.build`)    → declaração default de um tipo

O catálogo v1 (`builtin_catalog`) fornece implementações de ambos.
"""

from .builtin import builtin_catalog
from .defaults import CatalogDefaults, ComponentSpec, DefaultFactory
from .registry import DuplicateTypeError, RegistrySet, TypeOracle, TypeRegistry

__all__ = [
    "builtin_catalog",
    "CatalogDefaults",
    "ComponentSpec",
    "DefaultFactory",
    "DuplicateTypeError",
    "RegistrySet",
    "TypeOracle",
    "TypeRegistry",
]
