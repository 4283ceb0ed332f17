"""Shared fixtures for core unit tests"""

import pytest


SAMPLE_RST = """\
Title
=====

First paragraph line.
Second paragraph line.

Intro line.::
    code line one
      code line two
"""

MIXED_RST = """\
==========
Overview
==========

Some text.

Details
-------

Example::

    def main():
        return 0

Closing words.
"""


@pytest.fixture(name="sample_rst")
def sample_rst_fixture():
    return SAMPLE_RST


@pytest.fixture(name="mixed_rst")
def mixed_rst_fixture():
    return MIXED_RST
