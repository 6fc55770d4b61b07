"""
Flavor Pairer

Index an ingredient catalog in a height-balanced search tree and rank
transitively related ingredients by co-occurrence, level by level.

  catalog -> tree builder -> pairing ranker -> engine (levels 1-3)
"""
