import logging

import click
import pytest

import codontrans
from codontrans.exceptions import CodonTableError, CodonTransConfigError

log = logging.getLogger(__name__)  # pylint: disable=invalid-name


def test_version(invoker):
    res = invoker.call("--version")
    assert codontrans.__version__ in res.output


def test_translate_fasta(invoker, fasta_file):
    invoker.call("translate", fasta_file, "out.faa")
    with open("out.faa") as out:
        assert out.read() == ">seq1\nMGTMK\n>seq2\nMGTM\n>empty\n>seq3\nFX*\n"


def test_translate_stdout(invoker, fasta_file):
    res = invoker.call("translate", fasta_file, "--line-width", "2")
    assert res.stdout.startswith(">seq1\nMG\nTM\nK\n>seq2\n")


def test_translate_tsv(invoker, fasta_file):
    invoker.call("translate", "-f", "tsv", "--unknown", "skip", fasta_file, "out.tsv")
    with open("out.tsv") as out:
        lines = out.read().splitlines()
    assert lines == ["name\tseq", "seq1\tMGTMK", "seq2\tMGTM", "empty\t", "seq3\tF*"]


def test_translate_raise_keeps_going(invoker, fasta_file):
    invoker.call("translate", "--unknown", "raise", fasta_file, "out.faa")
    with open("out.faa") as out:
        assert out.read().endswith(">empty\n>seq3\n")


def test_translate_marker(invoker, fasta_file):
    invoker.call("translate", "--marker", "?", fasta_file, "out.faa")
    with open("out.faa") as out:
        assert "F?*" in out.read()
    with pytest.raises(click.ClickException):
        invoker.call("translate", "--marker", "??", fasta_file, "out.faa")


def test_translate_config(invoker, fasta_file, saved_cwd):
    (saved_cwd / "code.tsv").write_text("Codon\tAA\nATG\tm\n")
    (saved_cwd / "codontrans.yml").write_text(
        "translate:\n"
        "  genetic_code: code.tsv\n"
        "output:\n"
        "  format: tsv\n"
    )
    invoker.call("translate", fasta_file, "out.tsv")
    with open("out.tsv") as out:
        assert out.read().splitlines()[1] == "seq1\tmXXmX"


def test_translate_gz(invoker, saved_cwd):
    import gzip
    with gzip.open("in.fna.gz", "wt") as out:
        out.write(">a\nATGAAG\n")
    invoker.call("translate", "in.fna.gz", "out.faa")
    with open("out.faa") as out:
        assert out.read() == ">a\nMK\n"


@pytest.mark.timeout(120)
def test_translate_workers(invoker, fasta_file):
    invoker.call("translate", "-j", "2", fasta_file, "out.faa")
    with open("out.faa") as out:
        assert out.read() == ">seq1\nMGTMK\n>seq2\nMGTM\n>empty\n>seq3\nFX*\n"


def test_translate_bad_table(invoker, fasta_file, saved_cwd):
    (saved_cwd / "bad.tsv").write_text("Codon\tAA\nATG\tM\nATG\tM\n")
    with pytest.raises(CodonTableError):
        invoker.call("translate", "--table", "bad.tsv", fasta_file)
    res = invoker.call_raises("translate", "--table", "bad.tsv", fasta_file)
    assert res.exit_code == 1
    assert "Duplicate codon ATG" in res.output


def test_translate_bad_config(invoker, fasta_file, saved_cwd):
    (saved_cwd / "codontrans.yml").write_text("translate:\n  unknown: ignore\n")
    with pytest.raises(CodonTransConfigError):
        invoker.call("translate", fasta_file)


def test_table(invoker):
    res = invoker.call("table")
    lines = res.stdout.splitlines()
    assert lines[0] == "Codon\tAA"
    assert len(lines) == 65
    assert "ATG\tM" in lines


def test_table_custom(invoker, saved_cwd):
    (saved_cwd / "code.tsv").write_text("Codon\tAA\nAAA\tK\n")
    res = invoker.call("table", "-t", "code.tsv")
    assert res.stdout.splitlines() == ["Codon\tAA", "AAA\tK"]


def test_show(invoker, saved_cwd):
    (saved_cwd / "codontrans.yml").write_text("translate:\n  marker: '-'\n")
    res = invoker.call("show", "translate.marker")
    assert res.stdout.strip() == "-"
    res = invoker.call("show", "translate.genetic_code")
    assert res.stdout.strip() == "null"
    res = invoker.call("show", "output")
    assert res.stdout.strip() == "format: fasta\nline_width: 60"
    res = invoker.call("show")
    assert "translate:" in res.stdout
    res = invoker.call("show", "--files")
    assert res.stdout.strip().endswith("codontrans.yml")
    with pytest.raises(click.ClickException):
        invoker.call("show", "translate.nothere")


def test_verbosity(invoker, fasta_file):
    invoker.call("translate", "-vv", fasta_file, "out.faa")
    assert logging.getLogger("codontrans").getEffectiveLevel() == logging.DEBUG
    invoker.call("translate", "-q", fasta_file, "out.faa")
    assert logging.getLogger("codontrans").getEffectiveLevel() == logging.ERROR


def test_table_strict(invoker, saved_cwd):
    (saved_cwd / "rna.tsv").write_text("Codon\tAA\nAUG\tM\n")
    assert invoker.call("table", "-t", "rna.tsv").stdout.splitlines()[1] == "AUG\tM"
    with pytest.raises(CodonTableError):
        invoker.call("table", "-t", "rna.tsv", "--strict")


@pytest.mark.parametrize("args", [
    ("--help",),
    ("translate", "--help"),
    ("table", "--help"),
    ("show", "--help"),
], ids=["main", "translate", "table", "show"])
def test_log_options(invoker, args):
    res = invoker.call(*args)
    for option in ("--verbose", "--quiet", "--log-file", "--pdb"):
        assert option in res.output
