"""Parametric CSG engine: augmented primitives and compound profiles.

`resolve` and `slots` are plain Python; every other module builds CadQuery
solids.
"""
