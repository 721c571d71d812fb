"""Allows `python -m calculator_api`."""

from calculator_api.main import run

if __name__ == "__main__":
    run()
