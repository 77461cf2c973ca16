"""Shared test fixtures for the codepoint_codec test suite.

WHY: Several modules exercise the same sample buffers: text mixing ASCII,
BMP and supplementary characters, and its known UTF-16 code units.
Keeping them here means every test agrees on the expected encoding.

HOW: Constants hold the sample text and units; fixtures hand out fresh
copies so tests may mutate them freely.

RULES:
- SAMPLE_UNITS is the UTF-16 encoding of SAMPLE_TEXT, written out by hand
- Sample scalars: "A" (U+0041), "é" (U+00E9), "😀" (U+1F600),
  "€" (U+20AC), "𝄞" (U+1D11E)
"""

from typing import List

import pytest

SAMPLE_TEXT = "Aé\U0001F600€\U0001D11E"

SAMPLE_UNITS: List[int] = [
    0x0041,
    0x00E9,
    0xD83D, 0xDE00,
    0x20AC,
    0xD834, 0xDD1E,
]

SAMPLE_SCALARS: List[int] = [0x41, 0xE9, 0x1F600, 0x20AC, 0x1D11E]


@pytest.fixture
def sample_text():
    return SAMPLE_TEXT


@pytest.fixture
def sample_units():
    return list(SAMPLE_UNITS)


@pytest.fixture
def sample_scalars():
    return list(SAMPLE_SCALARS)
