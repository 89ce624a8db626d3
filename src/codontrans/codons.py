"""
Codon table and its loader

The codon table is the one expensive piece of shared state in
codontrans. Load it once with `load_codon_table` and pass the
resulting `CodonTable` to every translation.
"""
import logging
from collections.abc import Mapping
from itertools import product
from typing import Iterable, Iterator, Optional, Tuple

import codontrans
from codontrans.exceptions import CodonTableError

log = logging.getLogger(__name__)  # pylint: disable=invalid-name

#: Column holding the codon in table files
CODON_COLUMN = "Codon"
#: Column holding the amino acid symbol in table files
AA_COLUMN = "AA"

#: Standard genetic code, codons enumerated in TCAG order
AA = 'FFLLSSSSYY**CC*WLLLLPPPPHHQQRRRRIIIMTTTTNNKKSSRRVVVVAAAADDEEGGGG'
NU = 'TCAG'
NUCLEOTIDES = frozenset(NU)
STOP = '*'


class CodonTable(Mapping):
    """Immutable mapping of codon to amino acid symbol

    Args:
      pairs: Iterable of (codon, symbol) tuples
      source: Where the table came from (for messages)
      strict: Only accept codons made of T, C, A and G (either case)

    Raises:
      CodonTableError: if a codon is not three characters long,
        a symbol is not a single character or a codon occurs twice
    """
    def __init__(self, pairs: Iterable[Tuple[str, str]],
                 source: Optional[str] = None, strict: bool = False) -> None:
        self.source = source
        lookup = {}
        for codon, aa in pairs:
            if not isinstance(codon, str) or len(codon) != 3:
                raise CodonTableError(f"Invalid codon {codon!r}", source)
            if strict and not set(codon.upper()) <= NUCLEOTIDES:
                raise CodonTableError(
                    f"Codon {codon!r} has letters other than {NU}", source)
            if not isinstance(aa, str) or len(aa) != 1:
                raise CodonTableError(
                    f"Invalid amino acid symbol {aa!r} for codon {codon}",
                    source)
            if codon in lookup:
                raise CodonTableError(f"Duplicate codon {codon}", source)
            lookup[codon] = aa
        if not lookup:
            raise CodonTableError("Codon table is empty", source)
        self._map = lookup

    @classmethod
    def from_pairs(cls, pairs, source=None, strict=False):
        return cls(pairs, source, strict)

    def __getitem__(self, codon: str) -> str:
        return self._map[codon]

    def __iter__(self) -> Iterator[str]:
        return iter(self._map)

    def __len__(self) -> int:
        return len(self._map)

    def __contains__(self, codon) -> bool:
        return codon in self._map

    def get(self, codon, default=None):
        return self._map.get(codon, default)

    def __eq__(self, other):
        if isinstance(other, CodonTable):
            return self._map == other._map
        return super().__eq__(other)

    def __hash__(self):
        return hash(frozenset(self._map.items()))

    def __repr__(self):
        return f"{self.__class__.__name__}({len(self)} codons, source={self.source!r})"

    @property
    def stop_codons(self):
        """Codons translating to the stop symbol"""
        return sorted(codon for codon, aa in self._map.items() if aa == STOP)


def standard_table() -> CodonTable:
    """Build the standard genetic code without touching the file system"""
    codons = (''.join(triplet) for triplet in product(NU, repeat=3))
    return CodonTable(zip(codons, AA), source="standard")


def load_codon_table(path: Optional[str] = None, strict: bool = False) -> CodonTable:
    """Load a codon table from a tab separated file

    The file must have the columns ``Codon`` and ``AA``; other columns
    are ignored. Call this once per session and reuse the result.

    Codons may use any three letters unless ``strict`` is set, so
    tables for other alphabets (e.g. RNA with U) load as well. Case
    is kept as given.

    Args:
      path: Path to the table file. If None, the standard genetic
        code shipped with codontrans is loaded.
      strict: Reject codons with letters other than T, C, A and G

    Returns:
      The loaded `CodonTable`

    Raises:
      CodonTableError: if the file is missing, unreadable or malformed
    """
    # Importing Pandas here to avoid long load time if we don't need it.
    # pylint: disable=import-outside-toplevel
    import pandas

    if path is None:
        path = codontrans._genetic_code_file
    path = str(path)
    log.debug("Loading codon table from %s", path)

    try:
        data = pandas.read_csv(path, sep='\t', dtype='str',
                               keep_default_na=False, na_values=[''])
    except FileNotFoundError:
        raise CodonTableError("Codon table file not found", path) from None
    except pandas.errors.EmptyDataError:
        raise CodonTableError("Codon table file is empty", path) from None
    except (OSError, UnicodeDecodeError, pandas.errors.ParserError) as exc:
        raise CodonTableError(f"Could not read codon table: {exc}", path) from exc

    missing = [col for col in (CODON_COLUMN, AA_COLUMN) if col not in data.columns]
    if missing:
        raise CodonTableError(
            "Codon table must have columns '{}' and '{}' (missing: {})"
            "".format(CODON_COLUMN, AA_COLUMN, ", ".join(missing)),
            path)

    data = data[[CODON_COLUMN, AA_COLUMN]]
    if data.isna().values.any():
        rows = data.index[data.isna().any(axis=1)].tolist()
        raise CodonTableError(
            "Codon table has empty cells in data rows {}"
            "".format(", ".join(str(row + 1) for row in rows)),
            path)

    table = CodonTable(zip(data[CODON_COLUMN], data[AA_COLUMN]), source=path,
                       strict=strict)
    log.debug("Loaded %i codons from %s", len(table), path)
    return table
