"""Allow running the solver with `python -m lightsout`."""

from lightsout import main

main()
