"""Package skeleton checks: documented modules and shipped data files."""

import importlib
import pkgutil
from importlib import resources

import yaml

import namecombo
from namecombo.config import ConfigModel


def test_root_package_has_docstring() -> None:
    assert namecombo.__doc__ and namecombo.__doc__.strip()


def test_all_modules_have_docstrings() -> None:
    for module_info in pkgutil.walk_packages(namecombo.__path__, namecombo.__name__ + "."):
        module = importlib.import_module(module_info.name)
        assert module.__doc__ and module.__doc__.strip(), f"Missing docstring in {module_info.name}"


def test_config_ships_defaults() -> None:
    defaults = resources.files("namecombo.config").joinpath("defaults.yml")
    assert defaults.is_file()
    data = yaml.safe_load(defaults.read_text(encoding="utf-8"))
    assert set(data) == set(ConfigModel.model_fields)
    ConfigModel.model_validate(data)
