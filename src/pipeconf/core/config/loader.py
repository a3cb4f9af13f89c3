# src/pipeconf/core/config/loader.py
"""
Loader canônico de documentos do Pipeconf.

Este módulo lê e escreve os documentos consumidos pelas camadas
externas ao Mutator:

    - o documento da árvore de configuração (lido, mutado e reescrito
      pela CLI)
    - os settings do Mutator, resolvidos a partir de um arquivo de
      defaults obrigatório e de um override local opcional

Formatos suportados (v1):
    - YAML (.yaml, .yml) via PyYAML
    - JSON (.json)

Invariantes:
    - Todo documento carregado é um dicionário puro (`dict`)
    - Arquivos vazios são interpretados como dicionários vazios
    - Overrides locais nunca mutam os defaults

Limites explícitos:
    - Não decodifica a árvore (ver `core.tree.codec`)
    - Não valida nomes de tipo
"""

from pathlib import Path
from typing import Any, Dict, Optional, Union
import json

import yaml  # PyYAML

from .merge import deep_merge
from .errors import (
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    UnsupportedConfigFormatError,
)


PathLike = Union[str, Path]

_YAML_SUFFIXES = {".yaml", ".yml"}


def _suffix(path: Path) -> str:
    suffix = path.suffix.lower()
    if suffix not in _YAML_SUFFIXES and suffix != ".json":
        raise UnsupportedConfigFormatError(f"Formato não suportado: {path.suffix}")
    return suffix


def load_document(path: PathLike) -> Dict[str, Any]:
    """
    Carrega um documento YAML/JSON e valida sua estrutura básica.

    Args:
        path (PathLike): Caminho para o documento.

    Returns:
        Dict[str, Any]: Conteúdo do arquivo carregado como dicionário.

    Raises:
        DefaultsNotFoundError: Se o arquivo não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo raiz não for um dicionário.
    """
    path = Path(path)
    if not path.exists():
        raise DefaultsNotFoundError(f"Arquivo não encontrado: {path}")

    suffix = _suffix(path)

    with path.open("r", encoding="utf-8") as f:
        if suffix in _YAML_SUFFIXES:
            data = yaml.safe_load(f)
        else:
            data = json.load(f)

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    return data


def dump_document(path: PathLike, data: Dict[str, Any]) -> Path:
    """
    Persiste um documento em YAML ou JSON, conforme a extensão do caminho.

    A ordem das chaves do documento é preservada para que diffs do
    arquivo reflitam apenas a mutação aplicada.
    """
    path = Path(path)
    suffix = _suffix(path)

    if not isinstance(data, dict):
        raise InvalidConfigRootTypeError(
            f"Config root deve ser dict, recebido: {type(data).__name__}"
        )

    with path.open("w", encoding="utf-8") as f:
        if suffix in _YAML_SUFFIXES:
            yaml.safe_dump(data, f, sort_keys=False, allow_unicode=True, default_flow_style=False)
        else:
            json.dump(data, f, ensure_ascii=False, indent=2)
            f.write("\n")

    return path


def load_config(
    *,
    defaults_path: PathLike,
    local_path: Optional[PathLike] = None,
) -> Dict[str, Any]:
    """
    Carrega e resolve a configuração efetiva (settings) do Pipeconf.

    Política de resolução:
        - O arquivo de defaults é obrigatório
        - O arquivo local é opcional; se o caminho não existir, é ignorado
        - Quando presente, o local sempre tem prioridade sobre defaults

    Raises:
        DefaultsNotFoundError: Se o arquivo de defaults não existir.
        UnsupportedConfigFormatError: Se o formato do arquivo não for suportado.
        InvalidConfigRootTypeError: Se o conteúdo não for um dicionário.
        ConfigTypeConflictError: Se ocorrer conflito estrutural durante o merge.
    """
    effective = load_document(defaults_path)

    if local_path is not None and Path(local_path).exists():
        effective = deep_merge(effective, load_document(local_path))

    return effective
