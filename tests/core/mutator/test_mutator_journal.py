# tests/core/mutator/test_mutator_journal.py
"""
Testes da integração entre Mutator e MutationJournal.

Os testes asseguram que:
- cada tentativa gera exatamente um evento estruturado
- sucessos registram chave gerada e promoção
- falhas registram o tipo da exceção e a exceção é propagada
- sem journal, o Mutator funciona normalmente
"""

import pytest

from pipeconf.core.exceptions import KeySpaceExhausted, UnrecognisedType
from pipeconf.core.mutator import Mutator
from pipeconf.core.traceability import MutationJournal
from pipeconf.core.config.settings import MutatorSettings


@pytest.fixture
def journal():
    return MutationJournal(meta={"source": "pytest"})


@pytest.fixture
def journaled(fake_registries, fake_factory, journal):
    return Mutator(registries=fake_registries, factory=fake_factory, journal=journal)


def test_success_events_carry_operation_details(journaled, journal, tree):
    journaled.add_input("kafka", tree)
    journaled.add_cache("memory", tree)

    assert [e["operation"] for e in journal.events] == ["add_input", "add_cache"]

    first, second = journal.events
    assert first["status"] == "success"
    assert first["level"] == "info"
    assert first["category"] == "input"
    assert first["type_name"] == "kafka"
    assert first["promoted"] is True
    assert first["key"] is None
    assert "promovido a broker" in first["message"]

    assert second["key"] == "example"
    assert second["promoted"] is False
    assert "timestamp" in second


def test_failure_event_is_logged_and_exception_propagates(journaled, journal, tree):
    with pytest.raises(UnrecognisedType):
        journaled.add_processor("nope", tree)

    assert len(journal.events) == 1
    event = journal.events[0]
    assert event["status"] == "failed"
    assert event["level"] == "error"
    assert event["error_type"] == "UnrecognisedType"
    assert journal.failures() == [event]


def test_exhaustion_is_logged(fake_registries, fake_factory, journal, tree):
    m = Mutator(
        registries=fake_registries,
        factory=fake_factory,
        settings=MutatorSettings(key_limit=1),
        journal=journal,
    )
    m.add_cache("memory", tree)

    with pytest.raises(KeySpaceExhausted):
        m.add_cache("memory", tree)

    assert [e["status"] for e in journal.events] == ["success", "failed"]
    assert journal.events[1]["error_type"] == "KeySpaceExhausted"


def test_mutator_without_journal(mutator, tree):
    assert mutator.journal is None
    mutator.add_condition("text", tree)
    assert len(tree.pipeline.processors) == 1


def test_add_dispatches_by_category(journaled, journal, tree):
    from pipeconf.core.tree.types import ComponentCategory

    journaled.add(ComponentCategory.RATE_LIMIT, "local", tree)
    journaled.add("output", "file", tree)

    assert [e["operation"] for e in journal.events] == ["add_rate_limit", "add_output"]
    assert "example" in tree.manager.rate_limits
