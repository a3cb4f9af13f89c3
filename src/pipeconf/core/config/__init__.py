# src/pipeconf/core/config/__init__.py

"""
Camada de configuração do Pipeconf.

Este pacote reúne o que fica em volta do Mutator:
    - leitura e escrita de documentos YAML/JSON
    - resolução de settings (defaults + overrides locais via deep-merge)
    - hashing canônico para comparar documentos
    - exceções tipadas de configuração

Invariantes:
    - Todo documento carregado é um dicionário puro (dict)
    - Conflitos estruturais são tratados como erro

Limites explícitos:
    - Não muta a árvore de configuração
    - Não valida nomes de tipo
"""

from .errors import (
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidSettingsError,
    InvalidTreeError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash
from .loader import dump_document, load_config, load_document
from .merge import deep_merge
from .settings import MutatorSettings

__all__ = [
    "ConfigError",
    "ConfigTypeConflictError",
    "DefaultsNotFoundError",
    "InvalidConfigRootTypeError",
    "InvalidSettingsError",
    "InvalidTreeError",
    "UnsupportedConfigFormatError",
    "compute_config_hash",
    "deep_merge",
    "dump_document",
    "load_config",
    "load_document",
    "MutatorSettings",
]
