# tests/conftest.py
"""
Fixtures compartilhados para testes do Pipeconf.

Este módulo define fixtures reutilizáveis que fornecem:
- registries falsos e reduzidos, um por categoria
- uma factory de defaults com poucos tipos e payloads conhecidos
- árvores mínimas e determinísticas
- documentos YAML de árvore e de settings

O objetivo destas fixtures é permitir testes do core (tree, catalog,
mutator, config) sem depender do catálogo v1 completo.

Decisões arquiteturais:
    - Registries e factory são injetados explicitamente no Mutator
    - Árvores são construídas em memória, sem filesystem
    - Imports do core são realizados de forma lazy para
      melhorar a clareza de erros durante falhas

Invariantes:
    - Nenhuma fixture realiza I/O
    - Cada fixture devolve estruturas novas (sem estado compartilhado)

Limites explícitos:
    - Não substituir testes do catálogo v1
    - Não validar semântica de componentes
"""

import pytest


# =====================================================
# Catálogo reduzido (registries + factory)
# =====================================================

@pytest.fixture
def fake_registries():
    """
    Fixture que fornece um `RegistrySet` reduzido e determinístico.

    Tipos registrados:
        - input:      stdin, file, kafka, broker
        - output:     stdout, file, broker
        - processor:  noop, text, filter_parts
        - condition:  text, static
        - cache:      memory, redis
        - rate_limit: local

    Returns:
        RegistrySet: Um oráculo por categoria.
    """
    from pipeconf.core.catalog.registry import RegistrySet
    from pipeconf.core.tree.types import ComponentCategory as C

    return RegistrySet.from_names({
        C.INPUT: ["stdin", "file", "kafka", "broker"],
        C.OUTPUT: ["stdout", "file", "broker"],
        C.PROCESSOR: ["noop", "text", "filter_parts"],
        C.CONDITION: ["text", "static"],
        C.CACHE: ["memory", "redis"],
        C.RATE_LIMIT: ["local"],
    })


@pytest.fixture
def fake_factory():
    """
    Fixture que fornece uma `CatalogDefaults` com payloads conhecidos.

    Os payloads são pequenos e distintos por tipo, permitindo comparar
    declarações inseridas com o default esperado.
    """
    from pipeconf.core.catalog.defaults import CatalogDefaults, ComponentSpec
    from pipeconf.core.tree.types import ComponentCategory as C

    return CatalogDefaults([
        ComponentSpec(C.INPUT, "broker", {"copies": 1}),
        ComponentSpec(C.INPUT, "file", {"path": "", "multipart": False}),
        ComponentSpec(C.INPUT, "kafka", {"addresses": ["localhost:9092"], "topic": "stream"}),
        ComponentSpec(C.OUTPUT, "broker", {"copies": 1, "pattern": "fan_out"}),
        ComponentSpec(C.OUTPUT, "file", {"path": ""}),
        ComponentSpec(C.PROCESSOR, "text", {"operator": "trim_space", "arg": ""}),
        ComponentSpec(C.CONDITION, "text", {"operator": "equals_cs", "arg": ""}),
        ComponentSpec(C.CONDITION, "static", {"value": True}),
        ComponentSpec(C.CACHE, "memory", {"ttl": 300}),
        ComponentSpec(C.CACHE, "redis", {"url": "tcp://localhost:6379"}),
        ComponentSpec(C.RATE_LIMIT, "local", {"count": 1000, "interval": "1s"}),
    ])


@pytest.fixture
def mutator(fake_registries, fake_factory):
    """Mutator ligado ao catálogo reduzido e aos settings default."""
    from pipeconf.core.mutator import Mutator

    return Mutator(registries=fake_registries, factory=fake_factory)


# =====================================================
# Árvores
# =====================================================

@pytest.fixture
def make_tree():
    """
    Fixture factory que constrói árvores mínimas.

    Por padrão:
        - input:  stdin com delimiter customizado (não-default)
        - output: stdout
        - pipeline vazio, manager vazio

    Returns:
        callable: `make_tree(**overrides) -> ConfigTree`.
    """
    from pipeconf.core.tree.types import Component, ConfigTree

    def _make_tree(**overrides):
        fields = {
            "input": Component("stdin", {"delimiter": "\n", "max_buffer": 42}),
            "output": Component("stdout", {"delimiter": ""}),
        }
        fields.update(overrides)
        return ConfigTree(**fields)

    return _make_tree


@pytest.fixture
def tree(make_tree):
    return make_tree()


# =====================================================
# Documentos YAML
# =====================================================

@pytest.fixture
def pipeline_yaml() -> str:
    """
    YAML de uma configuração de pipeline semelhante ao uso real.

    Inclui um broker de outputs, um filter_parts, um cache já ocupando a
    chave `example` e uma seção extra (`http`) que deve ser preservada.
    """
    return """\
http:
  address: 0.0.0.0:4195
input:
  type: kafka
  kafka:
    addresses:
      - localhost:9092
    topic: orders
output:
  type: broker
  broker:
    copies: 1
    pattern: fan_out
    outputs:
      - type: stdout
        stdout:
          delimiter: ""
      - type: file
        file:
          path: /tmp/out.log
pipeline:
  threads: 2
  processors:
    - type: text
      text:
        operator: to_upper
    - type: filter_parts
      filter_parts:
        condition:
          type: static
          static:
            value: false
resources:
  caches:
    example:
      type: memory
      memory:
        ttl: 60
  rate_limits: {}
"""


@pytest.fixture
def settings_defaults_yaml() -> str:
    """YAML de settings defaults do Mutator."""
    return """\
mutator:
  key_prefix: example
  key_limit: 10000
  passthrough_type: benthos_lab
"""


@pytest.fixture
def settings_local_yaml() -> str:
    """YAML de override local: muda o prefixo e reduz o limite."""
    return """\
mutator:
  key_prefix: res
  key_limit: 3
"""
