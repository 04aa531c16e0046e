"""State/store layer.

Actions describe requested changes, the reducer turns a state and an
action into the next state, and the store owns the current snapshot and
publishes every new one to its subscribers.
"""
