# tests/shell/conftest.py
import json

import pytest

from seoscore_shell.core.managers.config_manager import ConfigManager
from seoscore_shell.core.utils.path_utils import PathUtils

# Een standaard, voorspelbare configuratie voor onze tests
MOCK_SETTINGS_CONTENT = {
    "debug": {
        "level": "WARNING"
    },
    "analyzer": {
        "locale": "fr",
        "disabled_rules": [],
        "override_weights": {},
        "local_seo_slugs": ["plombier-brive"],
        "local_seo_pattern": None,
        "max_recursion_depth": 50,
        "thresholds": {
            "title_length_max": 60,
            "flesch_score_pass": None
        }
    },
    "export": {
        "default_format": "csv",
        "output_dir": "exports"
    }
}


@pytest.fixture
def config_env(tmp_path, monkeypatch):
    """
    Een fixture die een geïsoleerde testomgeving opzet voor de ConfigManager:
    - Creëert een tijdelijke package root.
    - Plaatst daarin een nep 'settings.json' bestand.
    - Monkeypatched PathUtils om naar deze tijdelijke locatie te wijzen.
    - Zet de werkmap op tmp_path zodat exports daar terechtkomen.
    """
    package_root = tmp_path / "seoscore_shell"
    package_root.mkdir()
    settings_file = package_root / "settings.json"
    settings_file.write_text(json.dumps(MOCK_SETTINGS_CONTENT))

    monkeypatch.setattr(PathUtils, 'get_shell_package_root', lambda: package_root)
    monkeypatch.chdir(tmp_path)

    # De singleton bestaat al; herlaad hem vanuit ons nep-bestand
    manager = ConfigManager()
    manager.reset()

    yield manager

    # Terug naar de echte settings.json voor volgende tests
    monkeypatch.undo()
    manager.reset()


@pytest.fixture
def write_page(tmp_path):
    """Schrijft een pagina (of lijst van pagina's) als JSON-bestand in tmp_path/pages."""
    pages_dir = tmp_path / "pages"
    pages_dir.mkdir(exist_ok=True)

    def write(name, data):
        path = pages_dir / name
        path.write_text(json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path

    return write
