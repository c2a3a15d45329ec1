"""Entry point for ``python -m copylist_view``."""

from copylist_view.app import main

if __name__ == "__main__":
    raise SystemExit(main())
