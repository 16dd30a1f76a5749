"""Pitch-class set analysis: normal form, prime form, interval-class vectors and Forte names."""

from .operations import mod, transpose, transpose_to, invert, invert_by_pair  # noqa: F401
from .normal_form import Algorithm, normal_form  # noqa: F401
from .prime_form import prime_form  # noqa: F401
from .analysis import interval_class_vector, subsets  # noqa: F401
from .catalog import CatalogError, load_catalog, sets, name  # noqa: F401
