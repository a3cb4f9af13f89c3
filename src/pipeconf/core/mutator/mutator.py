# src/pipeconf/core/mutator/mutator.py
"""
Mutator canônico do Pipeconf.

O Mutator expõe as seis operações de inserção sobre uma `ConfigTree`
já decodificada:

    add_input, add_output       → promoção a broker (ver `endpoint`)
    add_processor, add_condition → append no pipeline (ver `processors`)
    add_cache, add_rate_limit   → chave livre gerada (ver `keyed`)

Decisões arquiteturais:
    - Registries, factory e settings são injetados; não há tabelas globais
    - O Mutator não guarda estado entre chamadas (o journal é do chamador)
    - Exceções tipadas são registradas no journal e propagadas, nunca
      engolidas
    - Cada operação é síncrona e termina antes de retornar

Invariantes:
    - Uma operação que falha deixa a árvore inalterada
    - Apenas a parte da árvore correspondente à operação é alterada

Limites explícitos:
    - Não lê nem escreve arquivos
    - Não valida semântica dos componentes inseridos
    - Não é thread-safe: o chamador garante acesso exclusivo à árvore
"""

from __future__ import annotations

from typing import Callable, Optional

from ..catalog.builtin import builtin_catalog
from ..catalog.defaults import DefaultFactory
from ..catalog.registry import RegistrySet
from ..config.settings import MutatorSettings
from ..exceptions import PipeconfException
from ..traceability.journal import STATUS_FAILED, STATUS_SUCCESS, MutationJournal
from ..tree.types import ComponentCategory, ConfigTree
from .endpoint import insert_endpoint
from .keyed import insert_keyed
from .processors import append_condition, append_processor
from .types import Insertion


class Mutator:
    """Operações de inserção de componentes default em uma `ConfigTree`."""

    def __init__(
        self,
        *,
        registries: RegistrySet,
        factory: DefaultFactory,
        settings: Optional[MutatorSettings] = None,
        journal: Optional[MutationJournal] = None,
    ):
        self.registries = registries
        self.factory = factory
        self.settings = settings or MutatorSettings()
        self.journal = journal

    @classmethod
    def builtin(
        cls,
        *,
        settings: Optional[MutatorSettings] = None,
        journal: Optional[MutationJournal] = None,
    ) -> "Mutator":
        """Mutator ligado ao catálogo v1."""
        registries, factory = builtin_catalog()
        return cls(registries=registries, factory=factory, settings=settings, journal=journal)

    # ------------------------------------------------------------------
    # Inputs / outputs
    # ------------------------------------------------------------------
    def add_input(self, type_name: str, tree: ConfigTree) -> Insertion:
        return self._endpoint("add_input", ComponentCategory.INPUT, type_name, tree)

    def add_output(self, type_name: str, tree: ConfigTree) -> Insertion:
        return self._endpoint("add_output", ComponentCategory.OUTPUT, type_name, tree)

    # ------------------------------------------------------------------
    # Pipeline
    # ------------------------------------------------------------------
    def add_processor(self, type_name: str, tree: ConfigTree) -> Insertion:
        return self._run(
            "add_processor",
            ComponentCategory.PROCESSOR,
            type_name,
            lambda: append_processor(
                registry=self.registries.processor,
                factory=self.factory,
                type_name=type_name,
                tree=tree,
            ),
        )

    def add_condition(self, type_name: str, tree: ConfigTree) -> Insertion:
        return self._run(
            "add_condition",
            ComponentCategory.CONDITION,
            type_name,
            lambda: append_condition(
                registry=self.registries.condition,
                factory=self.factory,
                type_name=type_name,
                tree=tree,
            ),
        )

    # ------------------------------------------------------------------
    # Recursos indexados
    # ------------------------------------------------------------------
    def add_cache(self, type_name: str, tree: ConfigTree) -> Insertion:
        return self._keyed("add_cache", ComponentCategory.CACHE, type_name, tree)

    def add_rate_limit(self, type_name: str, tree: ConfigTree) -> Insertion:
        return self._keyed("add_rate_limit", ComponentCategory.RATE_LIMIT, type_name, tree)

    def add(self, category: ComponentCategory, type_name: str, tree: ConfigTree) -> Insertion:
        """Despacha para a operação da categoria (usado pela CLI)."""
        operations = {
            ComponentCategory.INPUT: self.add_input,
            ComponentCategory.OUTPUT: self.add_output,
            ComponentCategory.PROCESSOR: self.add_processor,
            ComponentCategory.CONDITION: self.add_condition,
            ComponentCategory.CACHE: self.add_cache,
            ComponentCategory.RATE_LIMIT: self.add_rate_limit,
        }
        return operations[ComponentCategory(category)](type_name, tree)

    # ------------------------------------------------------------------
    # Internos
    # ------------------------------------------------------------------
    def _endpoint(self, operation: str, category: ComponentCategory, type_name: str, tree: ConfigTree) -> Insertion:
        return self._run(
            operation,
            category,
            type_name,
            lambda: insert_endpoint(
                registry=self.registries.for_category(category),
                factory=self.factory,
                category=category,
                type_name=type_name,
                tree=tree,
                passthrough_type=self.settings.passthrough_type,
            ),
        )

    def _keyed(self, operation: str, category: ComponentCategory, type_name: str, tree: ConfigTree) -> Insertion:
        return self._run(
            operation,
            category,
            type_name,
            lambda: insert_keyed(
                registry=self.registries.for_category(category),
                factory=self.factory,
                category=category,
                type_name=type_name,
                tree=tree,
                prefix=self.settings.key_prefix,
                limit=self.settings.key_limit,
            ),
        )

    def _run(
        self,
        operation: str,
        category: ComponentCategory,
        type_name: str,
        insert: Callable[[], Insertion],
    ) -> Insertion:
        try:
            result = insert()
        except PipeconfException as e:
            if self.journal is not None:
                self.journal.log(
                    operation=operation,
                    category=category.value,
                    type_name=type_name,
                    status=STATUS_FAILED,
                    message=e.message,
                    error_type=e.__class__.__name__,
                )
            raise

        if self.journal is not None:
            self.journal.log(
                operation=operation,
                category=category.value,
                type_name=type_name,
                status=STATUS_SUCCESS,
                message=_describe(result),
                key=result.key,
                promoted=result.promoted,
            )
        return result


def _describe(result: Insertion) -> str:
    if result.key is not None:
        return f"{result.category.value} '{result.type_name}' adicionado como '{result.key}'"
    if result.promoted and not result.appended:
        return f"{result.category.value} promovido a broker"
    if result.promoted:
        return f"{result.category.value} promovido a broker e '{result.type_name}' adicionado"
    return f"{result.category.value} '{result.type_name}' adicionado"
