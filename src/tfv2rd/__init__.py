"""tfv2rd: convert terraform validate JSON output to Reviewdog Diagnostic Format."""

__version__ = "0.3.0"
