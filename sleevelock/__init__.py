"""Parametric CSG generator for a sliding-sleeve tool (body, sleeve, end cap, bolts).

Geometry modules need CadQuery; parameters and derivation do not, so they
are the only names imported here.
"""
__version__ = "0.1.0"

from .derivation import DEFINITIONS, Derived, resolve
from .errors import ConfigurationError, DerivationError, SleevelockError
from .params import Attachment, BoltType, ParameterSet, Parameters, describe

__all__ = [
    "Attachment",
    "BoltType",
    "ConfigurationError",
    "DEFINITIONS",
    "DerivationError",
    "Derived",
    "ParameterSet",
    "Parameters",
    "SleevelockError",
    "describe",
    "resolve",
]
