# tests/conftest.py
# This file is part of Kconfig-CNF - Boolean dependency expressions to DIMACS
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the CNF pipeline tests.

The configuration handles:
- Python path setup for module imports
- Test environment initialization
- Common fixtures and helpers shared by the test packages
"""

import itertools
import sys
from pathlib import Path

import pytest

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify the project packages are importable before running tests.

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import cnf
        import core
        import parser
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    yield


def all_assignments(names):
    """Yield every name -> bool assignment over ``names``."""
    names = sorted(names)
    for values in itertools.product([False, True], repeat=len(names)):
        yield dict(zip(names, values))


@pytest.fixture
def assignments():
    """Provide the exhaustive assignment generator."""
    return all_assignments


@pytest.fixture
def kconfig_expressions():
    """Provide dependency expressions in the style of real Kconfig files.

    Returns:
        List[str]: Raw expressions using && / || / ! syntax
    """
    return [
        "PCI&&!X86_32",
        "64BIT||(X86&&!X86_PAE)",
        "!(SMP||PREEMPT)&&MODULES",
        "NET&&(INET||IPV6)&&!(NETFILTER&&!NF_CONNTRACK)",
    ]
