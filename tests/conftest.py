import pytest

from voice_menu.menu import get_default_catalog
from voice_menu.schemas import MenuItemVariant


@pytest.fixture
def pav_bhaji():
    return MenuItemVariant(
        id="pav-bhaji",
        canonical_name="Pav Bhaji",
        category="Bhaji Pav",
        phonetic_variants=[
            "pav bhaji", "pow bhaji", "pao bhaji", "pav bhajee",
            "pow bhajee", "pao bhajee", "paav bhaji", "paav bhaaji",
        ],
    )


@pytest.fixture
def vada_pav():
    return MenuItemVariant(
        id="vada-pav",
        canonical_name="Vada Pav",
        category="Bhaji Pav",
        phonetic_variants=[
            "vada pav", "wada pav", "vada pow", "wada pow",
            "vadapav", "wadapav", "vada paav", "wada paav",
        ],
    )


@pytest.fixture
def medu_vada():
    return MenuItemVariant(
        id="medu-vada",
        canonical_name="Medu Vada",
        category="South Indian",
        phonetic_variants=["medu vada", "medu wada", "medhu vada", "medu vadai", "vada"],
    )


@pytest.fixture
def street_food_dictionary(pav_bhaji, vada_pav):
    """The two-item dictionary used for the pav bhaji / vada pav scenarios."""
    return [pav_bhaji, vada_pav]


@pytest.fixture
def catalog():
    """The packaged phonetic catalog."""
    return get_default_catalog()
