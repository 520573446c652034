"""HTTP client and command line front end for the task API."""
