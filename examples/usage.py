import pickle

import polars as pl

from taxopath import MalformedPathError, Taxon, TaxopathParser, taxopaths_to_ranks


def main():
    parser = TaxopathParser()

    print(f"Tax_1; Tax_2 ;;Tax_4; -> {parser('Tax_1; Tax_2 ;;Tax_4;')}")

    parser = pickle.loads(pickle.dumps(parser))

    try:
        parser(";Bacteria")
    except MalformedPathError as e:
        print(f"Rejected: {e}")

    # build a small tree from a path and walk back up again
    root = Taxon("root")
    node = root
    for name in parser("Bacteria;Pseudomonadota;Gammaproteobacteria"):
        node = node.add_child(name)
    print(f"Lineage of {node}: {parser(node)}")

    lineages = pl.Series(
        "lineage",
        [
            "d__Bacteria;p__Pseudomonadota;c__Gammaproteobacteria",
            "d__Archaea;p__Halobacteriota;",
            "d__Bacteria;;c__Bacilli",
        ],
    )
    print(taxopaths_to_ranks(lineages, ["domain", "phylum", "class"]))


if __name__ == "__main__":
    main()
