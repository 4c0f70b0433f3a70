"""
Runtime structures backing the state machine.
"""
