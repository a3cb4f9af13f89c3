# src/pipeconf/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Pipeconf.

Este módulo define a hierarquia de exceções utilizadas durante o
carregamento de documentos, a resolução de settings do Mutator e a
decodificação estrutural da árvore de configuração.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais são tratados como falhas fatais
    - Mensagens de erro são claras e direcionadas ao usuário

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção aqui representa falha de mutação (ver `core.exceptions`)

Limites explícitos:
    - Não realiza fallback ou recovery
    - Não depende do Mutator nem da CLI
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do Pipeconf.

    Permite captura genérica de falhas de leitura, merge, settings e
    decodificação, separando-as das falhas de mutação da árvore.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Exceção levantada quando um arquivo obrigatório não é encontrado.

    Usada tanto para o arquivo de defaults de settings quanto para o
    documento da árvore passado à CLI.

    Limites explícitos:
        - Não tenta criar o arquivo automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo não é suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)

    Limites explícitos:
        - Não tenta inferir formato por conteúdo
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz de um documento
    não é um dicionário (`dict`).
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"mutator": {"key_limit": 10000}}
        - override: {"mutator": "grande"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class InvalidSettingsError(ConfigError):
    """
    Exceção levantada quando a seção `mutator` contém valores inválidos
    (prefixo vazio, limite não positivo, tipos incorretos).
    """


class InvalidTreeError(ConfigError):
    """
    Exceção levantada quando um documento não pode ser decodificado
    em uma `ConfigTree` estruturalmente válida.

    Exemplos:
        - ausência das seções `input` ou `output`
        - declaração sem campo `type`
        - broker cujos filhos não formam uma lista

    Limites explícitos:
        - Não valida se os nomes de tipo estão registrados
    """
