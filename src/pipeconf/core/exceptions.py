"""
Pipeconf — Canonical Exceptions (v1)

Este módulo define exceções tipadas internas do Pipeconf.

Objetivo:
- Permitir que o Mutator levante exceções semânticas tipadas
- Facilitar o mapeamento determinístico para PipeconfErrorPayload
- Evitar ValueError/RuntimeError genéricos em guardrails críticos

Regras:
- Nenhuma exceção é levantada depois que a árvore foi mutada.
- Exceções devem carregar apenas dados estruturados (serializáveis).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class PipeconfException(Exception):
    """Base class para exceções internas do Pipeconf.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def __str__(self) -> str:  # pragma: no cover
        return self.message


# ---------------------------------------------------------------------------
# Catálogo de tipos
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class UnrecognisedType(PipeconfException):
    """Nome de tipo ausente do registry da categoria."""

    @property
    def category(self) -> str:
        return str(self.details.get("category"))

    @property
    def type_name(self) -> str:
        return str(self.details.get("type_name"))


# ---------------------------------------------------------------------------
# Recursos indexados por chave
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class KeySpaceExhausted(PipeconfException):
    """Todas as chaves candidatas já estão ocupadas no mapeamento alvo."""
