import sys
import os

import pytest

# samples.py lives next to this file and is imported by tests in subfolders
tests_root = os.path.dirname(os.path.abspath(__file__))
if tests_root not in sys.path:
    sys.path.insert(0, tests_root)

from chromapick import ColorConverter, ColorHolder, Updater


@pytest.fixture
def converter():
    """RGBA(83, 140, 181, 31), the color most tests start from."""
    return ColorConverter(r=83, g=140, b=181, a=31)


@pytest.fixture
def updater(converter):
    return Updater(converter, ColorHolder())
