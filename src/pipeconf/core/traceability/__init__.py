"""
Rastreabilidade das mutações do Pipeconf.

- `MutationJournal`: eventos estruturados, um por tentativa de inserção
"""

from .journal import STATUS_FAILED, STATUS_SUCCESS, MutationJournal

__all__ = ["MutationJournal", "STATUS_FAILED", "STATUS_SUCCESS"]
