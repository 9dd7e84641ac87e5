"""Allow ``python -m myls``."""

from myls.cli import main


main()
