"""
Ranking layer (Flavor Pairer)

This package turns the ingredient tree into ranked pairing suggestions:
  - Level 1: direct pairings of an ingredient
  - Level 2+: pairings of pairings, scored by co-occurrence in the frontier

Ranking state (PairingRank records) is created per call and never stored on
the tree, so one tree can serve any number of sequential ranking requests.
"""
