"""Shared fixtures for core unit tests"""

import pytest

from gbmigrate.core.directives import DirectiveRewriter
from gbmigrate.core.links import LinkRewriter
from gbmigrate.core.patterns import PatternCache
from gbmigrate.core.summary import build_order


SAMPLE_SUMMARY = """\
# Table of contents

* [Introduction](README.md)
* [Getting Started](start/README.md)
  * [Setup](start/setup.md)
  * [Upload](start/upload.md)
* [Concepts](concepts/README.md)
  * [Encryption](concepts/encryption.md)
"""


@pytest.fixture(name="patterns")
def patterns_fixture():
    return PatternCache()


@pytest.fixture(name="links")
def links_fixture(patterns):
    return LinkRewriter("dcs", patterns=patterns)


@pytest.fixture(name="directives")
def directives_fixture(links):
    return DirectiveRewriter(links)


@pytest.fixture(name="order")
def order_fixture():
    return build_order(SAMPLE_SUMMARY)
