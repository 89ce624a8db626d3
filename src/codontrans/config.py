import logging
import os
from collections.abc import Mapping
from typing import List, Optional

from ruamel.yaml import YAML  # type: ignore
from ruamel.yaml.error import YAMLError  # type: ignore

import codontrans
from codontrans.common import AttrDict
from codontrans.exceptions import CodonTransConfigError
from codontrans.translate import UNKNOWN_POLICIES

log = logging.getLogger(__name__)  # pylint: disable=invalid-name


def merge(base: Mapping, override: Mapping) -> dict:
    """Recursively merge ``override`` into a copy of ``base``"""
    result = dict(base)
    for key, value in override.items():
        if isinstance(value, Mapping) and isinstance(result.get(key), Mapping):
            result[key] = merge(result[key], value)
        else:
            result[key] = value
    return result


def load(files: List[str]) -> dict:
    """Load and merge YAML config files, later files taking precedence"""
    yaml = YAML(typ="safe")
    config: dict = {}
    for fname in files:
        log.debug("Loading config file %s", fname)
        try:
            with open(fname, "r") as fdes:
                data = yaml.load(fdes)
        except (OSError, YAMLError) as exc:
            raise CodonTransConfigError(
                f"Failed to load config file {fname}: {exc}") from exc
        if data is None:
            continue
        if not isinstance(data, Mapping):
            raise CodonTransConfigError(
                f"Config file {fname} must contain a mapping at top level")
        config = merge(config, data)
    return config


class ConfigMgr(object):
    """Manages codontrans configuration

    This is a singleton object of which only one instance should be
    around at a given time. It is available via
    `codontrans.get_config()`.

    ConfigMgr loads and merges the configuration given in the
    ``codontrans.yml`` file located in the working directory (or a
    parent), the user config folder (``~/.codontrans``) and the
    installation ``etc`` folder.
    """
    KEY_TRANSLATE = 'translate'
    KEY_OUTPUT = 'output'
    CONF_FNAME = 'codontrans.yml'
    CONF_DEFAULT_FNAME = codontrans._defaults_file
    CONF_USER_FNAME = os.path.expanduser("~/.codontrans/codontrans.yml")

    __instance = None

    @classmethod
    def find_config(cls):
        """Locates config files and the project root

        The root directory is the first (parent) directory containing
        a file named ``ConfigMgr.CONF_FNAME``, or the CWD if there is
        none.

        The stack of config files comprises 1. the default config
        ``ConfigMgr.CONF_DEFAULT_FNAME``, 2. the user config
        ``ConfigMgr.CONF_USER_FNAME`` and 3. the ``codontrans.yml``
        in the root.

        Returns:
          root: Root working directory
          conffiles: list of active configuration files
        """
        # always include defaults
        conffiles = [cls.CONF_DEFAULT_FNAME]

        # include user config if present
        if os.path.exists(cls.CONF_USER_FNAME):
            conffiles.append(cls.CONF_USER_FNAME)

        filename = cls.CONF_FNAME
        log.debug("Locating '%s'", filename)
        try:
            curpath = os.path.abspath(os.getcwd())
        except FileNotFoundError:
            raise CodonTransConfigError(
                "The current work directory has been deleted?!") from None
        while not os.path.exists(os.path.join(curpath, filename)):
            log.debug("  not in '%s'", curpath)
            curpath, removed = os.path.split(curpath)
            if not removed:
                break
        if os.path.exists(os.path.join(curpath, filename)):
            root = curpath
            log.debug("  found in '%s'", root)
            conffiles.append(os.path.join(root, filename))
        else:
            root = os.path.abspath(os.getcwd())
            log.debug("  No '%s' found; using %s as root", filename, root)

        return root, conffiles

    @classmethod
    def instance(cls):
        """Returns the active ConfigMgr instance"""
        if cls.__instance is None:
            cls.__instance = cls(*cls.find_config())
        return cls.__instance

    @classmethod
    def unload(cls):
        log.debug("Unloading ConfigMgr")
        cls.__instance = None

    def __init__(self, root, conffiles):
        log.debug("Initializing ConfigMgr")
        self.root = root
        self.conffiles = conffiles
        self._config = AttrDict(load(conffiles))

    def get(self, key: str, default=None):
        """Look up dotted ``key`` (e.g. ``translate.unknown``)"""
        return self._config.lookup(key, default)

    def _section(self, name):
        section = self._config.get(name) or {}
        if not isinstance(section, Mapping):
            raise CodonTransConfigError("Expected a mapping", key=name)
        return section

    def _int(self, section, name, minimum):
        key = f"{section}.{name}"
        value = self._section(section).get(name)
        if isinstance(value, bool) or not isinstance(value, int) or value < minimum:
            raise CodonTransConfigError(
                f"Expected an integer >= {minimum}, got {value!r}", key=key)
        return value

    @property
    def dict(self):
        """The merged configuration"""
        return self._config

    @property
    def genetic_code(self) -> Optional[str]:
        """Path to the codon table (None for the packaged standard code)"""
        path = self._section(self.KEY_TRANSLATE).get("genetic_code")
        if not path:
            return None
        path = os.path.expanduser(str(path))
        if not os.path.isabs(path):
            path = os.path.join(self.root, path)
        return path

    @property
    def unknown(self) -> str:
        """Policy for codons not in the table"""
        value = self._section(self.KEY_TRANSLATE).get("unknown", "mark")
        if value not in UNKNOWN_POLICIES:
            raise CodonTransConfigError(
                "Expected one of {}, got {!r}".format(", ".join(UNKNOWN_POLICIES), value),
                key="translate.unknown")
        return value

    @property
    def marker(self) -> str:
        """Symbol emitted for unknown codons"""
        value = self._section(self.KEY_TRANSLATE).get("marker", "X")
        if not isinstance(value, str) or len(value) != 1:
            raise CodonTransConfigError(
                f"Expected a single character, got {value!r}",
                key="translate.marker")
        return value

    @property
    def workers(self) -> int:
        """Number of worker processes for batch translation"""
        return self._int(self.KEY_TRANSLATE, "workers", 1)

    @property
    def name_column(self) -> str:
        """Data frame column holding record names"""
        return str(self._section(self.KEY_TRANSLATE).get("name_column", "name"))

    @property
    def seq_column(self) -> str:
        """Data frame column holding nucleotide sequences"""
        return str(self._section(self.KEY_TRANSLATE).get("seq_column", "seq"))

    @property
    def output_format(self) -> str:
        """Output format of ``codontrans translate`` (fasta or tsv)"""
        value = self._section(self.KEY_OUTPUT).get("format", "fasta")
        if value not in ("fasta", "tsv"):
            raise CodonTransConfigError(
                f"Expected fasta or tsv, got {value!r}", key="output.format")
        return value

    @property
    def line_width(self) -> int:
        """FASTA line width (0 for no wrapping)"""
        return self._int(self.KEY_OUTPUT, "line_width", 0)
