"""
Test suite for the pursuit ledger.

Focus areas:
- Operation preconditions and their failure codes
- Store consistency (including orphaned annotations)
- Replay determinism and persistence
- Hash chain integrity
- CLI host behaviour
"""
