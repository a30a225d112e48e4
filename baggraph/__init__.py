"""
Bag Containment Graph — Production Package
===========================================
Parses luggage containment rules into a weighted DAG and answers two
questions about it: how many bags are reachable from a colour, and how many
bags one bag of a colour holds in total.

Layer map
─────────────────────────────────────────────────────
  config/       Tuneable settings (env / .env driven)
  domain/       Pure business objects (models, exceptions) — no I/O
  ports/        Abstract interfaces (Python Protocols)
  adapters/     Concrete rule sources (file on disk, in-memory text)
  services/     Parser, graph builder, analyzers, orchestration
  interfaces/   Delivery layer: CLI
  tests/        Test suite: unit / e2e

Adding a new input source:
  1. Write a new adapter in adapters/ implementing RuleSourcePort
  2. Change the wiring in services/container.py
"""
__version__ = "1.0.0"
