"""Interactive coverage runner.

Builds and executes the coverage command chain and drives the
line-oriented prompt that decides when to run it and with which
test path.
"""
