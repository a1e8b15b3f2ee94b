"""
Quantity-takeoff calculation engine.

Pure Python math over read-only reference data.
Given a straight-pipe or bend specification, produce the fabrication
quantities (OD, WT, weights, pipe/flange/bolt/nut counts, weld counts and
lengths) used downstream for pricing and production planning.
"""
