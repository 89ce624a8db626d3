"Implements ``codontrans translate``"

import logging
import time

import click

import codontrans
from codontrans.cli.shared_options import command
from codontrans.codons import load_codon_table
from codontrans.exceptions import CodonTransUsageError
from codontrans.fasta import read_fasta, write_fasta
from codontrans.translate import UNKNOWN_POLICIES, Translator

log = logging.getLogger(__name__)  # pylint: disable=invalid-name


def write_tsv(records, outf):
    """Write (name, protein) records as two column TSV with header"""
    outf.write("name\tseq\n")
    for name, seq in records:
        outf.write(f"{name}\t{seq}\n")


@command()
@click.argument("input", type=click.File("r"))
@click.argument("output", type=click.File("w"), default="-")
@click.option(
    "--table", "-t", "table_path", type=click.Path(dir_okay=False),
    help="Codon table TSV with columns Codon and AA "
    "(default: configured or standard genetic code)"
)
@click.option(
    "--unknown", type=click.Choice(UNKNOWN_POLICIES),
    help="How to handle codons not in the table"
)
@click.option(
    "--marker", metavar="CHAR",
    help="Symbol for unknown codons with --unknown=mark"
)
@click.option(
    "--workers", "-j", type=click.IntRange(min=1),
    help="Number of worker processes"
)
@click.option(
    "--format", "-f", "out_format", type=click.Choice(("fasta", "tsv")),
    help="Output format"
)
@click.option(
    "--line-width", type=click.IntRange(min=0),
    help="Wrap FASTA output lines at this width (0: no wrapping)"
)
@click.option(
    "--progress/--no-progress", default=False,
    help="Show progress bar"
)
def translate(input, output, table_path, unknown, marker, workers,
              out_format, line_width, progress):
    """
    Translate nucleotide FASTA to protein in frame 1

    Reads INPUT (use - for stdin, .gz is decompressed), translates
    every record with one codon table and writes the proteins to
    OUTPUT (default stdout).
    """
    cfg = codontrans.get_config()
    unknown = unknown or cfg.unknown
    marker = marker if marker is not None else cfg.marker
    workers = workers or cfg.workers
    out_format = out_format or cfg.output_format
    line_width = line_width if line_width is not None else cfg.line_width

    if len(marker) != 1:
        raise CodonTransUsageError(f"--marker must be a single character, not '{marker}'")

    if input.name.endswith(".gz"):
        import gzip  # pylint: disable=import-outside-toplevel
        input = gzip.open(input.name, "rt")

    table = load_codon_table(table_path or cfg.genetic_code)
    translator = Translator(table, unknown=unknown, marker=marker, workers=workers)

    data = read_fasta(input)
    start = time.perf_counter()
    result = translator.translate_frame(data, progress=progress)
    log.info("Translated %i sequences in %.3fs", len(result),
             time.perf_counter() - start)

    if out_format == "tsv":
        write_tsv(result.itertuples(index=False), output)
    else:
        write_fasta(result.itertuples(index=False), output, line_width=line_width)
