"""
Core package providing states, rules, transitions and the state machine engine.
"""
