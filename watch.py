#!/usr/bin/env python3

"""Run watch straight from a checkout, without installing the package."""

from watchrun.cli import app


if __name__ == "__main__":
    app(prog_name="watch")
