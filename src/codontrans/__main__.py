"""This allows calling the codontrans cli via ``python -m``

>>> python -m codontrans translate genes.fna

"""

import sys
from codontrans.cli import main

if __name__ == "__main__":
    sys.argv[0] = "codontrans"
    sys.exit(main(prog_name="codontrans"))
