import logging
import os
import shlex

import pytest

import codontrans
import codontrans.config

log = logging.getLogger(__name__)


# Add pytest options
# ==================

def pytest_addoption(parser):
    parser.addoption("--run-slow", action="store_true",
                     default=False, help="Run slow timing tests")


def pytest_configure(config):
    config.addinivalue_line(
        "markers", "slow: timing test, only run with --run-slow")


# Add pytest.mark.slow
# ====================

def pytest_collection_modifyitems(config, items):
    if not config.getoption("--run-slow"):
        skip_slow = pytest.mark.skip(reason="Not running slow tests")
        for item in items:
            if "slow" in item.keywords:
                item.add_marker(skip_slow)


# Isolate configuration
# =====================

@pytest.fixture(autouse=True)
def unload_config(tmp_path_factory):
    # keep the user's ~/.codontrans out of the tests
    user_conf = codontrans.config.ConfigMgr.CONF_USER_FNAME
    codontrans.config.ConfigMgr.CONF_USER_FNAME = str(
        tmp_path_factory.getbasetemp() / "no_user_config.yml")
    codontrans.config.ConfigMgr.unload()
    yield
    codontrans.config.ConfigMgr.unload()
    codontrans.config.ConfigMgr.CONF_USER_FNAME = user_conf


@pytest.fixture()
def saved_cwd(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    yield tmp_path


# Shared data
# ===========

@pytest.fixture(scope="session")
def codon_table():
    from codontrans.codons import load_codon_table
    return load_codon_table()


@pytest.fixture()
def table_file(tmp_path):
    def write(content, name="table.tsv"):
        path = tmp_path / name
        path.write_text(content)
        return str(path)
    return write


@pytest.fixture()
def fasta_file(saved_cwd):
    path = saved_cwd / "genes.fna"
    path.write_text(
        ">seq1 first gene\n"
        "ATGGGGACC\n"
        "ATGAAG\n"
        ">seq2\n"
        "ATGGGGACCATGA\n"
        ">empty\n"
        ">seq3\n"
        "TTTNNNTAA\n"
    )
    return str(path)


class Invoker(object):
    """Wrap invoking the codontrans CLI

    Writes cmd.sh and out.log to the current directory and reloads
    the configuration on each call.
    """
    def __init__(self):
        from click.testing import CliRunner
        self.runner = CliRunner()
        from codontrans.cli import main
        self.main = main

    def call(self, *args, standalone_mode=False, **kwargs):
        """Call into codontrans CLI

        ``standalone_mode`` defaults to False so that exceptions are
        passed rather than caught.
        """
        codontrans.config.ConfigMgr.unload()

        argstr = " ".join(shlex.quote(arg) for arg in args)
        with open("cmd.sh", "w") as f:
            f.write(f"PATH={os.environ['PATH']} codontrans {argstr} \"$@\"\n")

        result = self.runner.invoke(self.main, args, **kwargs,
                                    standalone_mode=standalone_mode)

        with open("out.log", "w") as f:
            f.write(result.output)

        if result.exception and not standalone_mode:
            raise result.exception

        return result

    def call_raises(self, *args, **kwargs):
        return self.call(*args, standalone_mode=True, **kwargs)


@pytest.fixture()
def invoker(saved_cwd):
    yield Invoker()
