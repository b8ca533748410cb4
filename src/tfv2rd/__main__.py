"""Allow ``python -m tfv2rd``."""

from tfv2rd.cli import run

if __name__ == "__main__":
    run()
