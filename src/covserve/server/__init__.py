"""Static HTTP server for the coverage report directory.

The application is a FastAPI app mounting the report directory; the
background runner hosts it with uvicorn on a daemon thread.
"""
