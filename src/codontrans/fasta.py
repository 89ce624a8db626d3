"""
Reading and writing FASTA files

Only what is needed to feed batches to the translator: names are
the header up to the first whitespace, sequence lines are joined.
"""
import gzip
import logging
from contextlib import contextmanager
from typing import IO, Iterable, Iterator, Tuple, Union

log = logging.getLogger(__name__)  # pylint: disable=invalid-name


@contextmanager
def open_fasta(source: Union[str, IO]) -> Iterator[IO]:
    """Open path for reading as text, transparently handling ``.gz``

    File objects are passed through (and not closed).
    """
    if not isinstance(source, str):
        yield source
        return
    if source.endswith(".gz"):
        handle = gzip.open(source, "rt")
    else:
        handle = open(source, "r")
    with handle:
        yield handle


def iter_fasta(lines: Iterable[str]) -> Iterator[Tuple[str, str]]:
    """Parse FASTA lines into (name, sequence) tuples"""
    name = None
    seq = []
    for line in lines:
        if line.startswith(">"):
            if name is not None:
                yield name, ''.join(seq)
            header = line[1:].strip()
            name = header.split(maxsplit=1)[0] if header else ""
            seq = []
        elif name is not None:
            seq.append(line.strip())
        elif line.strip():
            log.warning("Skipping sequence data before first FASTA header")
    if name is not None:
        yield name, ''.join(seq)


def read_fasta(source: Union[str, IO]) -> 'pandas.DataFrame':
    """Read FASTA into data frame with columns ``name`` and ``seq``

    Args:
      source: Path (optionally gzipped) or open text file
    """
    # pylint: disable=import-outside-toplevel
    import pandas

    with open_fasta(source) as handle:
        records = list(iter_fasta(handle))
    log.info("Read %i sequences from %s", len(records),
             getattr(source, "name", source))
    return pandas.DataFrame(records, columns=["name", "seq"], dtype=object)


def write_fasta(records: Iterable[Tuple[str, str]], outf: IO,
                line_width: int = 60) -> None:
    """Write (name, sequence) records as FASTA

    Args:
      records: Iterable of (name, sequence) tuples
      outf: Text file open for writing
      line_width: Wrap sequence lines at this width; 0 disables wrapping
    """
    for name, seq in records:
        outf.write(f">{name}\n")
        if not seq:
            continue
        if line_width > 0:
            outf.write('\n'.join(
                seq[s:s+line_width]
                for s in range(0, len(seq), line_width)
            ))
        else:
            outf.write(seq)
        outf.write('\n')
