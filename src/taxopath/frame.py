"""Apply a :class:`TaxopathParser` to whole ``polars`` columns of taxonomic path strings.

Taxonomy tables, e.g. GTDB lineage files, keep one taxonomic path string per row:

    d__Bacteria;p__Pseudomonadota;c__Gammaproteobacteria;o__Enterobacterales;...

These helpers parse such a column row by row with the configured rules, and spread the parsed
paths into one column per rank.
"""

import logging
from typing import Sequence

import polars as pl

from .errors import MalformedPathError
from .parser import TaxopathParser

logger = logging.getLogger(__name__)


def parse_taxopaths(
    series: pl.Series,
    parser: TaxopathParser | None = None,
    strict: bool = True,
) -> pl.Series:
    """Parse every taxonomic path string of ``series`` into a list of taxon names.

    :param series: A string column. Null entries stay null.
    :param parser: The parser to use, by default one with the default configuration.
    :param strict: If true, the first malformed path string raises a
        :class:`~taxopath.errors.MalformedPathError`. Otherwise malformed entries are logged and
        become null.
    :return: A ``List(Utf8)`` column with the same name and length as ``series``.
    """
    if parser is None:
        parser = TaxopathParser()

    parsed: list[list[str] | None] = []
    malformed = 0
    for index, text in enumerate(series.cast(pl.Utf8).to_list()):
        if text is None:
            parsed.append(None)
            continue
        try:
            parsed.append(list(parser.from_string(text)))
        except MalformedPathError:
            if strict:
                raise
            logger.warning("Skipping malformed taxonomic path %r in row %d", text, index)
            parsed.append(None)
            malformed += 1

    if malformed > 0:
        logger.info("Parsed %d taxonomic paths, %d malformed", len(parsed), malformed)
    return pl.Series(series.name, parsed, dtype=pl.List(pl.Utf8))


def taxopaths_to_ranks(
    series: pl.Series,
    ranks: Sequence[str],
    parser: TaxopathParser | None = None,
) -> pl.DataFrame:
    """Parse ``series`` and spread the taxon names into one column per rank.

    The n-th name of each path goes to the column ``ranks[n]``; paths shorter than ``ranks``
    are padded with nulls. Parsing is strict, and rank names must be unique.
    """
    duplicates = sorted({rank for rank in ranks if ranks.count(rank) > 1})
    if duplicates:
        raise ValueError(f"Rank names must be unique, got duplicates {duplicates}.")
    parsed = parse_taxopaths(series, parser=parser, strict=True)

    longest = parsed.list.len().max()
    if longest is not None and longest > len(ranks):
        raise ValueError(
            f"Taxonomic paths of column {series.name!r} have up to {longest} elements, "
            f"but only {len(ranks)} ranks were given."
        )
    return pl.DataFrame(
        [parsed.list.get(i, null_on_oob=True).alias(rank) for i, rank in enumerate(ranks)]
    )
