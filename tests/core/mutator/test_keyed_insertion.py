# tests/core/mutator/test_keyed_insertion.py
"""
Testes da inserção de caches e rate limits sob chave gerada.

Os testes asseguram que:
- o mapeamento vazio recebe a chave `example`
- chaves ocupadas são puladas na ordem `example`, `example1`, ...
- lacunas deixadas por remoções externas são reaproveitadas
- com as 10.000 candidatas ocupadas a operação falha sem alterar nada
- uma chave existente nunca é sobrescrita

Invariantes:
    - Chaves são não vazias e únicas no mapeamento
    - Apenas o mapeamento da categoria é alterado
"""

import pytest

from pipeconf.core.config.settings import MutatorSettings
from pipeconf.core.exceptions import KeySpaceExhausted
from pipeconf.core.mutator import Mutator
from pipeconf.core.tree.codec import tree_fingerprint
from pipeconf.core.tree.types import Component, Manager


def test_empty_caches_get_example_key(mutator, tree):
    result = mutator.add_cache("memory", tree)

    assert result.key == "example"
    assert tree.manager.caches == {"example": Component("memory", {"ttl": 300})}


def test_next_free_key_after_example_and_example1(mutator, make_tree):
    tree = make_tree(manager=Manager(caches={
        "example": Component("memory"),
        "example1": Component("redis"),
    }))

    result = mutator.add_cache("redis", tree)

    assert result.key == "example2"
    assert sorted(tree.manager.caches) == ["example", "example1", "example2"]
    assert tree.manager.caches["example2"] == Component("redis", {"url": "tcp://localhost:6379"})


def test_gap_left_by_external_removal_is_reused(mutator, tree):
    for _ in range(3):
        mutator.add_cache("memory", tree)
    del tree.manager.caches["example1"]

    result = mutator.add_cache("redis", tree)

    assert result.key == "example1"
    assert tree.manager.caches["example1"].type_name == "redis"


def test_existing_entries_are_never_overwritten(mutator, make_tree):
    existing = Component("redis", {"url": "tcp://cache:6379"})
    tree = make_tree(manager=Manager(caches={"example": existing}))

    mutator.add_cache("memory", tree)

    assert tree.manager.caches["example"] is existing
    assert tree.manager.caches["example"].payload == {"url": "tcp://cache:6379"}


def test_exhausted_key_space_fails_and_leaves_mapping_unchanged(mutator, make_tree):
    """
    Verifica que, com todas as 10.000 candidatas ocupadas, a inserção falha.

    Decisões arquiteturais:
        - A condição é tratada como irrecuperável (`KeySpaceExhausted`)
        - Não há laço infinito nem sobrescrita de chave existente

    Invariantes:
        - O mapeamento mantém exatamente as mesmas 10.000 entradas
        - O restante da árvore não é alterado
    """
    caches = {"example": Component("memory")}
    caches.update({f"example{i}": Component("memory") for i in range(1, 10000)})
    tree = make_tree(manager=Manager(caches=caches))
    before = tree_fingerprint(tree)

    with pytest.raises(KeySpaceExhausted) as exc_info:
        mutator.add_cache("memory", tree)

    assert len(tree.manager.caches) == 10000
    assert tree_fingerprint(tree) == before
    assert exc_info.value.details == {"category": "cache", "prefix": "example", "limit": 10000}


def test_rate_limits_use_their_own_mapping(mutator, make_tree):
    tree = make_tree(manager=Manager(caches={"example": Component("memory")}))

    result = mutator.add_rate_limit("local", tree)

    assert result.key == "example"
    assert tree.manager.rate_limits == {"example": Component("local", {"count": 1000, "interval": "1s"})}
    assert list(tree.manager.caches) == ["example"]


def test_rate_limit_exhaustion_with_small_limit(fake_registries, fake_factory, tree):
    m = Mutator(
        registries=fake_registries,
        factory=fake_factory,
        settings=MutatorSettings(key_prefix="rl", key_limit=2),
    )

    assert m.add_rate_limit("local", tree).key == "rl"
    assert m.add_rate_limit("local", tree).key == "rl1"
    with pytest.raises(KeySpaceExhausted):
        m.add_rate_limit("local", tree)

    assert sorted(tree.manager.rate_limits) == ["rl", "rl1"]
