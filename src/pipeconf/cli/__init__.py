"""
CLI do Pipeconf (adapter sobre o Mutator).
"""
