"""Allow running the solver with `python -m lettergroups`."""

from lettergroups import main

main()
