"""
Pipeconf — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros do Pipeconf.
Erros fazem parte do contrato operacional do mutator e devem ser:

- explícitos
- serializáveis
- acionáveis

Nenhuma falha é rebaixada para warning.
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional

from .exceptions import KeySpaceExhausted, PipeconfException, UnrecognisedType


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PipeconfErrorPayload:
    """
    Payload canônico de erro do Pipeconf.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

UNRECOGNISED_TYPE = "UNRECOGNISED_TYPE"
KEY_SPACE_EXHAUSTED = "KEY_SPACE_EXHAUSTED"
MUTATION_ERROR = "MUTATION_ERROR"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def unrecognised_type(
    *,
    category: str,
    type_name: str,
    hint: str = "Use um tipo registrado para a categoria (veja `pipeconf types <categoria>`).",
) -> UnrecognisedType:
    return UnrecognisedType(
        message=f"{category} type '{type_name}' not recognised",
        details={
            "category": category,
            "type_name": type_name,
        },
        hint=hint,
    )


def key_space_exhausted(
    *,
    category: str,
    prefix: str,
    limit: int,
    hint: str = "Remova ou renomeie recursos existentes antes de adicionar um novo.",
) -> KeySpaceExhausted:
    return KeySpaceExhausted(
        message=f"Nenhuma chave livre para {category}: {limit} candidatas '{prefix}*' ocupadas",
        details={
            "category": category,
            "prefix": prefix,
            "limit": limit,
        },
        hint=hint,
    )


def exception_to_payload(exc: Exception) -> PipeconfErrorPayload:
    """Converte exceções em PipeconfErrorPayload (serializável, acionável).

    Regras:
    - PipeconfException: já vem com message/details/hint.
    - Outras exceções: encapsular como MUTATION_ERROR sem expor stack trace.
    """
    if isinstance(exc, UnrecognisedType):
        code = UNRECOGNISED_TYPE
    elif isinstance(exc, KeySpaceExhausted):
        code = KEY_SPACE_EXHAUSTED
    elif isinstance(exc, PipeconfException):
        code = exc.__class__.__name__
    else:
        return PipeconfErrorPayload(
            type=MUTATION_ERROR,
            message=str(exc) or "Erro inesperado durante a mutação",
            details={"exception_class": exc.__class__.__name__},
            hint="Verifique o arquivo de configuração e o tipo solicitado",
        )

    return PipeconfErrorPayload(
        type=code,
        message=exc.message,
        details=dict(exc.details or {}),
        hint=exc.hint,
    )
