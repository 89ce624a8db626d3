"""
Slow reference translations

These produce the same output as `codontrans.translate` for codons
present in the table (unknown codons are marked with ``X``), but do
everything the expensive way:

- `translate_reload` loads the codon table again for every codon,
- `translate_loop` grows its result by copying on every codon,
- the ``translate_frame_*`` variants grow the output data frame one
  row at a time.

They exist to measure what sharing the table and building outputs
in bulk buys. Don't use them for real work.
"""
import logging
from typing import Optional

from codontrans.codons import CodonTable, load_codon_table
from codontrans.translate import DEFAULT_MARKER, codons

log = logging.getLogger(__name__)  # pylint: disable=invalid-name


def translate_reload(seq: str, path: Optional[str] = None) -> str:
    """Translate, loading the codon table for each codon"""
    aa_seq = []
    for codon in codons(seq):
        table = load_codon_table(path)
        aa_seq = aa_seq + [table.get(codon, DEFAULT_MARKER)]
    return ''.join(aa_seq)


def translate_loop(seq: str, table: CodonTable) -> str:
    """Translate with a shared table, appending by copy"""
    aa_seq = []
    for codon in codons(seq):
        aa_seq = aa_seq + [table.get(codon, DEFAULT_MARKER)]
    return ''.join(aa_seq)


def _grow_frame(data, name_col, seq_col, translate_one):
    # pylint: disable=import-outside-toplevel
    import pandas

    result = None
    for name, seq in zip(data[name_col], data[seq_col]):
        row = pandas.DataFrame({"name": [name], "seq": [translate_one(seq)]},
                               dtype=object)
        if result is None:
            result = row
        else:
            result = pandas.concat([result, row], ignore_index=True)
    if result is None:
        return pandas.DataFrame({"name": [], "seq": []}, dtype=object)
    return result


def translate_frame_reload(data, path=None, name_col="name", seq_col="seq"):
    """Translate data frame, reloading the table for every codon"""
    return _grow_frame(data, name_col, seq_col,
                       lambda seq: translate_reload(seq, path))


def translate_frame_loop(data, table, name_col="name", seq_col="seq"):
    """Translate data frame with a shared table, growing the result per row"""
    return _grow_frame(data, name_col, seq_col,
                       lambda seq: translate_loop(seq, table))
