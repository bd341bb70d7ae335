"""Allow ``python -m lambert_rtx``."""

from lambert_rtx.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
