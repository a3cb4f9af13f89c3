# src/pipeconf/core/traceability/journal.py
"""
Journal estruturado de mutações.

Este módulo define o `MutationJournal`, o registro de eventos utilizado
pelo Mutator para reportar cada tentativa de inserção.

O journal pertence ao chamador: o Mutator apenas acrescenta eventos
quando um journal lhe é fornecido e não guarda estado entre chamadas.

Formato de um evento:
    - operation: nome da operação (`add_input`, `add_cache`, ...)
    - category: categoria do componente
    - type_name: tipo solicitado
    - status: `success` ou `failed`
    - level: `info` ou `error`
    - message: texto curto e humano
    - timestamp: ISO-8601 em UTC
    - campos extras (ex.: `key`, `promoted`, `error_type`)

Invariantes:
    - `events` reflete exatamente a ordem das chamadas
    - Eventos são dicionários serializáveis em JSON

Limites explícitos:
    - Não desfaz mutações (não é log de transação)
    - Não persiste eventos automaticamente
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


STATUS_SUCCESS = "success"
STATUS_FAILED = "failed"


@dataclass
class MutationJournal:
    """
    Registro ordenado de eventos de mutação de uma sessão do chamador.

    `meta` carrega metadados livres da sessão (ex.: caminho do arquivo
    editado pela CLI) e não participa dos eventos.
    """
    meta: Dict[str, Any] = field(default_factory=dict)
    events: List[Dict[str, Any]] = field(default_factory=list, init=False)

    def log(
        self,
        *,
        operation: str,
        category: str,
        type_name: str,
        status: str,
        message: str,
        level: Optional[str] = None,
        **extra: Any,
    ) -> Dict[str, Any]:
        event = {
            "operation": operation,
            "category": category,
            "type_name": type_name,
            "status": status,
            "level": level or ("error" if status == STATUS_FAILED else "info"),
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)
        return event

    def failures(self) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["status"] == STATUS_FAILED]
