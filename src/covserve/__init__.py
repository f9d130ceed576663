"""covserve -- Serve HTML coverage reports and re-run coverage on demand.

This package runs a small static file server over the coverage report
directory while an interactive prompt in the foreground re-runs
``coverage run -m pytest`` followed by ``coverage html`` whenever the
user asks for it.
"""

__version__ = "0.1.0"
