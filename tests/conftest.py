"""
Pytest configuration and shared fixtures.
"""

import logging

import pytest


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests with no external inputs")


@pytest.fixture(scope="session")
def sample_fasta_text():
    """Three-record DNA dataset with indented, wrapped lines."""
    return """>Rosalind_1
    CCTGCGGAAG
    TCCCACTAAT
    >Rosalind_2
    CCATCGGTAG
    ATATCCATTT
    >Rosalind_3
    CCACCCTCGT
    TGGGAACCTG"""


@pytest.fixture(scope="function")
def fasta_file(tmp_path):
    """
    Write FASTA content to a temporary file.

    Returns a factory taking (name, text) and returning the path.
    """
    def _write(name, text):
        path = tmp_path / name
        path.write_text(text)
        return path
    return _write


@pytest.fixture(autouse=True)
def reset_codonkit_logger():
    """Drop handlers installed by CLI tests so they don't leak between tests."""
    yield
    logger = logging.getLogger("codonkit")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
