"""Shared test fixtures for pzscript.

Fixtures defined here are available to all tests in the suite without
needing an explicit import. Add project-wide fixtures here; keep
grammar-specific fixtures close to the tests that use them.
"""
from __future__ import annotations

import pytest

RADISH_MODULE = """
module Base {
  item RedRadish {
    DisplayCategory = Food,
    Type            = Food,
    DisplayName     = Radish,
    Icon            = Radish,
  }
}
"""

MILDEW_RECIPE = """
recipe Make Mildew Cure
{
  GardeningSprayEmpty,
  Base.Milk,

  Result:GardeningSprayMilk,
  Time:40.0,
  Category:Farming,
  NeedToBeLearn:true,
}
"""

MIXED_SCRIPT = """
module Base {
  item RedRadish {
    DisplayCategory = Food,
    Type            = Food,
    DisplayName     = Radish,
    Icon            = Radish,
  }

  recipe Make Mildew Cure
  {
    GardeningSprayEmpty,
    Base.Milk,

    Result:GardeningSprayMilk,
    Time:40.0,
    Category:Farming,
    NeedToBeLearn:true,
  }
}

module Farming {
  item GardeningSprayMilk {
    DisplayCategory = Gardening,
    Type            = Drainable,
    DisplayName     = MildewSpray,
    Icon            = Base.MilkSpray,
  }
}
"""


@pytest.fixture()
def package_name() -> str:
    """Return the importable package name for assertions."""
    return "pzscript"


@pytest.fixture()
def expected_version() -> str:
    """Return the current expected version string.

    Update this fixture when cutting a release so that the version
    test immediately catches stale ``__version__`` values.
    """
    return "0.1.0"


@pytest.fixture()
def radish_module_source() -> str:
    """A module holding a single item definition."""
    return RADISH_MODULE


@pytest.fixture()
def mildew_recipe_source() -> str:
    """A complete recipe with a multi-word name and the brace on its own line."""
    return MILDEW_RECIPE


@pytest.fixture()
def mixed_script_source() -> str:
    """Two modules mixing item and recipe definitions."""
    return MIXED_SCRIPT
