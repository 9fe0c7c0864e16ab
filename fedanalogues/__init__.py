"""
fed-analogues: historical analogue search for multi-indicator economic data.

Finds the historical windows whose indicator shapes most resemble a target
window, ranks them with a temporal diversity policy and annotates each match
with the policy-rate decisions taken inside it.
"""

__version__ = "0.1.0"
