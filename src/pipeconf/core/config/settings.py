# src/pipeconf/core/config/settings.py
"""
Settings do Mutator.

Os settings controlam as políticas parametrizáveis do Mutator:

    - key_prefix: prefixo das chaves geradas para caches e rate limits
    - key_limit: quantidade de chaves candidatas antes de falhar
    - passthrough_type: nome reservado que dispensa validação de tipo
      para inputs e outputs (delegada a uma ferramenta externa)

Os valores default reproduzem a sequência `example`, `example1`, ...,
`example9999`. Settings são lidos da seção `mutator` de um documento
resolvido por `load_config`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import InvalidSettingsError


DEFAULT_KEY_PREFIX = "example"
DEFAULT_KEY_LIMIT = 10000
DEFAULT_PASSTHROUGH_TYPE = "benthos_lab"


@dataclass(frozen=True)
class MutatorSettings:
    """Políticas imutáveis do Mutator (v1)."""

    key_prefix: str = DEFAULT_KEY_PREFIX
    key_limit: int = DEFAULT_KEY_LIMIT
    passthrough_type: Optional[str] = DEFAULT_PASSTHROUGH_TYPE

    def __post_init__(self) -> None:
        if not isinstance(self.key_prefix, str) or not self.key_prefix.strip():
            raise InvalidSettingsError("mutator.key_prefix deve ser string não vazia")
        if isinstance(self.key_limit, bool) or not isinstance(self.key_limit, int) or self.key_limit < 1:
            raise InvalidSettingsError(
                f"mutator.key_limit deve ser inteiro positivo, recebido: {self.key_limit!r}"
            )
        if self.passthrough_type is not None and not isinstance(self.passthrough_type, str):
            raise InvalidSettingsError("mutator.passthrough_type deve ser string ou null")

    @classmethod
    def from_config(cls, config: Optional[Dict[str, Any]]) -> "MutatorSettings":
        """Constrói settings a partir da seção `mutator` de um documento.

        Chaves ausentes assumem os defaults. Chaves desconhecidas são
        rejeitadas para que erros de digitação não passem em silêncio.
        """
        section = (config or {}).get("mutator", {}) or {}
        if not isinstance(section, dict):
            raise InvalidSettingsError(
                f"Seção 'mutator' deve ser dict, recebido: {type(section).__name__}"
            )

        known = {"key_prefix", "key_limit", "passthrough_type"}
        unknown = sorted(set(section) - known)
        if unknown:
            raise InvalidSettingsError(f"Chaves desconhecidas em 'mutator': {unknown}")

        return cls(
            key_prefix=section.get("key_prefix", DEFAULT_KEY_PREFIX),
            key_limit=section.get("key_limit", DEFAULT_KEY_LIMIT),
            passthrough_type=section.get("passthrough_type", DEFAULT_PASSTHROUGH_TYPE),
        )
