from .errors import MalformedPathError
from .frame import parse_taxopaths, taxopaths_to_ranks
from .parser import DEFAULT_DELIMITERS, TaxopathParser
from .taxon import Taxon
from .taxopath import Taxopath

__all__ = [
    "DEFAULT_DELIMITERS",
    "MalformedPathError",
    "Taxon",
    "Taxopath",
    "TaxopathParser",
    "parse_taxopaths",
    "taxopaths_to_ranks",
]
