"""Module entry point: python -m datadip_mock serves until interrupted."""

from datadip_mock.server import run

run()
