"""Shared fixtures: a fixed clock and the demo field values of each document type."""

from datetime import date

import pytest

from docbuilder.contexts.documents import load_demo_fields

FIXED_DATE = date(2024, 6, 15)


@pytest.fixture
def fixed_clock():
    return lambda: FIXED_DATE


@pytest.fixture
def cv_fields():
    return load_demo_fields("cv")


@pytest.fixture
def letter_fields():
    return load_demo_fields("letter")


@pytest.fixture
def protocol_fields():
    return load_demo_fields("protocol")
