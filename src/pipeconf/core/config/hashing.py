# src/pipeconf/core/config/hashing.py
"""
Hashing canônico de documentos de configuração.

O hash representa a identidade estrutural de um documento e é usado
para comparar a árvore antes e depois de uma mutação (ex.: garantir que
uma operação rejeitada não alterou nada).

Política de hashing (v1):
    - Serialização JSON canônica (chaves ordenadas, separadores compactos)
    - Codificação UTF-8
    - SHA-256
"""

import json
import hashlib
from typing import Dict, Any


def compute_config_hash(config: Dict[str, Any]) -> str:
    """
    Gera um hash SHA-256 determinístico de um documento de configuração.

    Invariantes:
        - O valor retornado é uma string hexadecimal de 64 caracteres
        - Documentos estruturalmente equivalentes produzem o mesmo hash
        - Nenhuma mutação ocorre sobre o input

    Raises:
        TypeError: Se o objeto fornecido não for um dicionário.
    """

    if not isinstance(config, dict):
        raise TypeError(
            f"Config para hashing deve ser dict, recebido: {type(config).__name__}"
        )

    canonical_json = json.dumps(
        config,
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
