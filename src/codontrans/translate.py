"""
Frame 1 translation of nucleotide sequences

All functions take an already built `CodonTable`; none of them
loads or rebuilds it. Codons start at offset 0 and do not overlap.
One or two trailing nucleotides that do not form a full codon are
dropped.

Codons missing from the table are handled according to the
``unknown`` policy:

``mark``
  emit ``marker`` (default ``X``) at that position
``skip``
  drop the position
``raise``
  raise `UnresolvableCodonError`
"""
import logging
from concurrent.futures import ProcessPoolExecutor
from typing import Iterable, List, Optional, Tuple

from codontrans.codons import CodonTable
from codontrans.exceptions import CodonTransConfigError, UnresolvableCodonError

log = logging.getLogger(__name__)  # pylint: disable=invalid-name

UNKNOWN_POLICIES = ("mark", "skip", "raise")
DEFAULT_MARKER = "X"

Record = Tuple[str, str]


def check_policy(unknown: str, marker: str = DEFAULT_MARKER) -> None:
    """Validate unknown codon policy and marker

    Raises:
      CodonTransConfigError: if the policy is not one of `UNKNOWN_POLICIES`
        or the marker is not a single character
    """
    if unknown not in UNKNOWN_POLICIES:
        raise CodonTransConfigError(
            "Unknown codon policy must be one of {}, not '{}'"
            "".format(", ".join(UNKNOWN_POLICIES), unknown),
            key="translate.unknown")
    if not isinstance(marker, str) or len(marker) != 1:
        raise CodonTransConfigError(
            f"Marker must be a single character, not {marker!r}",
            key="translate.marker")


def codons(seq: str) -> List[str]:
    """Split sequence into frame 1 codons

    >>> codons("ATGGGGACCATGA")
    ['ATG', 'GGG', 'ACC', 'ATG']
    """
    return [seq[pos:pos+3] for pos in range(0, len(seq) - 2, 3)]


def _raise_unresolved(seq: str, table: CodonTable):
    for offset, codon in enumerate(codons(seq)):
        if codon not in table:
            raise UnresolvableCodonError(codon, offset * 3)


def translate(seq: str, table: CodonTable, unknown: str = "mark",
              marker: str = DEFAULT_MARKER) -> str:
    """Translate nucleotide sequence to protein in frame 1

    Args:
      seq: Nucleotide sequence
      table: Codon table, built once by the caller
      unknown: Policy for codons not in ``table`` (mark, skip or raise)
      marker: Symbol emitted for unknown codons under the ``mark`` policy

    Returns:
      Protein sequence, one symbol per complete codon (fewer
      under the ``skip`` policy)

    >>> translate("ATGGGGACCATGAAG", load_codon_table())
    'MGTMK'
    """
    check_policy(unknown, marker)
    lookup = table.get
    if unknown == "mark":
        return ''.join([lookup(codon, marker) for codon in codons(seq)])
    if unknown == "skip":
        return ''.join([lookup(codon, '') for codon in codons(seq)])
    try:
        return ''.join([table[codon] for codon in codons(seq)])
    except KeyError:
        _raise_unresolved(seq, table)
        raise


def _translate_record(name, seq, table, unknown, marker) -> str:
    if not isinstance(seq, str):
        log.warning("Record '%s' has no sequence (%r), emitting empty protein",
                    name, seq)
        return ''
    try:
        return translate(seq, table, unknown, marker)
    except UnresolvableCodonError as exc:
        log.warning("Record '%s': %s, emitting empty protein", name, exc)
        return ''


def _translate_chunk(chunk, table, unknown, marker) -> List[Record]:
    return [(name, _translate_record(name, seq, table, unknown, marker))
            for name, seq in chunk]


def _chunked(records: List[Record], nchunks: int) -> List[List[Record]]:
    size = -(-len(records) // nchunks)
    return [records[start:start+size] for start in range(0, len(records), size)]


def translate_batch(records: Iterable[Record], table: CodonTable,
                    unknown: str = "mark", marker: str = DEFAULT_MARKER,
                    workers: int = 1, progress: bool = False) -> List[Record]:
    """Translate a batch of named nucleotide sequences

    The output has one ``(name, protein)`` pair per input record, in
    input order. A failing record does not abort the batch: records
    without a sequence, and records with unknown codons under the
    ``raise`` policy, are logged and get an empty protein.

    Args:
      records: Iterable of ``(name, sequence)`` pairs
      table: Codon table shared by all records
      unknown: Policy for codons not in ``table``
      marker: Symbol for unknown codons under the ``mark`` policy
      workers: Number of processes to spread the records over
      progress: Show a progress bar
    """
    check_policy(unknown, marker)
    records = [(name, seq) for name, seq in records]

    if workers > 1 and len(records) > 1:
        chunks = _chunked(records, workers)
        log.debug("Translating %i records in %i chunks", len(records), len(chunks))
        with ProcessPoolExecutor(max_workers=workers) as executor:
            futures = [executor.submit(_translate_chunk, chunk, table, unknown, marker)
                       for chunk in chunks]
            if progress:
                # pylint: disable=import-outside-toplevel
                from tqdm import tqdm
                futures = tqdm(futures, unit="chunk", desc="Translating")
            results = [future.result() for future in futures]
        return [record for result in results for record in result]

    if progress:
        # pylint: disable=import-outside-toplevel
        from tqdm import tqdm
        records = tqdm(records, unit="seq", desc="Translating")
    return _translate_chunk(records, table, unknown, marker)


def translate_frame(data: 'pandas.DataFrame', table: CodonTable,
                    name_col: str = "name", seq_col: str = "seq",
                    unknown: str = "mark", marker: str = DEFAULT_MARKER,
                    workers: int = 1, progress: bool = False) -> 'pandas.DataFrame':
    """Translate sequences held in a data frame

    Args:
      data: Data frame with a name and a sequence column
      table: Codon table shared by all rows
      name_col: Column holding record names
      seq_col: Column holding nucleotide sequences

    Returns:
      New data frame with columns ``name`` and ``seq`` and one row per
      input row, in input order
    """
    # pylint: disable=import-outside-toplevel
    import pandas

    missing = [col for col in (name_col, seq_col) if col not in data.columns]
    if missing:
        raise CodonTransConfigError(
            "Data frame lacks column(s) {} (has: {})"
            "".format(", ".join(missing), ", ".join(map(str, data.columns))))

    result = translate_batch(
        zip(data[name_col].tolist(), data[seq_col].tolist()), table,
        unknown=unknown, marker=marker, workers=workers, progress=progress
    )
    return pandas.DataFrame(result, columns=["name", "seq"], dtype=object)


class Translator:
    """Frame 1 translator bound to one codon table

    Holds the table and the unknown codon policy so they can be handed
    around as one object.

    >>> tr = Translator(load_codon_table())
    >>> tr("ATGAAG")
    'MK'
    """
    def __init__(self, table: CodonTable, unknown: str = "mark",
                 marker: str = DEFAULT_MARKER, workers: int = 1,
                 name_col: str = "name", seq_col: str = "seq") -> None:
        check_policy(unknown, marker)
        self.table = table
        self.unknown = unknown
        self.marker = marker
        self.workers = workers
        self.name_col = name_col
        self.seq_col = seq_col

    @classmethod
    def from_config(cls, cfg: Optional['ConfigMgr'] = None) -> 'Translator':
        """Create translator as configured

        Loads the codon table named in the configuration (once).
        """
        # pylint: disable=import-outside-toplevel
        from codontrans import get_config
        from codontrans.codons import load_codon_table
        if cfg is None:
            cfg = get_config()
        return cls(load_codon_table(cfg.genetic_code),
                   unknown=cfg.unknown, marker=cfg.marker, workers=cfg.workers,
                   name_col=cfg.name_column, seq_col=cfg.seq_column)

    def __call__(self, seq: str) -> str:
        return translate(seq, self.table, self.unknown, self.marker)

    def translate_batch(self, records, progress=False):
        return translate_batch(records, self.table, self.unknown, self.marker,
                               workers=self.workers, progress=progress)

    def translate_frame(self, data, name_col=None, seq_col=None, progress=False):
        return translate_frame(data, self.table,
                               name_col or self.name_col, seq_col or self.seq_col,
                               self.unknown, self.marker,
                               workers=self.workers, progress=progress)
