import os

__version__ = "0.1.0"

# Paths of our distributed files
_rsc_dir = __path__[0]
_etc_dir = os.path.join(_rsc_dir, "etc")
_defaults_file = os.path.join(_etc_dir, "defaults.yml")
_genetic_code_file = os.path.join(_etc_dir, "genetic_code.tsv")


def get_config() -> 'config.ConfigMgr':
    """Access the current codontrans configuration object.

    The object is created on first access. During unit test
    execution it is unloaded between tests.
    """
    from codontrans.config import ConfigMgr
    return ConfigMgr.instance()
