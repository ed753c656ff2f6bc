"""
Pursuit CLI - command-line host for the pursuit ledger

Commands:
- pursuit inscribe/classify/deadline/seed/modify/eliminate - Ledger writes
- pursuit status - Presence report for an identity
- pursuit log tail - Event log operations
- pursuit replay - Replay event log
"""

__version__ = "0.1.0"
