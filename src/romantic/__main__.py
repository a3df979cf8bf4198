"""Run the romantic CLI: python -m romantic [command] [args]"""
from .api.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
