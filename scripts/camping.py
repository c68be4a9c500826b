#!/usr/bin/env python3

from campsearch.cli import app


if __name__ == "__main__":
    app()
